from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def make_fake_sequence_tree(tmp_path: Path):
    """
    Create a realistic fake image-sequence directory.

    Returns a helper:

        root, frames = make_fake_sequence_tree(prefix="shot01.", suffix=".dpx", count=10)

    Produces something like:

        tmp/shot01/shot01.0001.dpx
        tmp/shot01/shot01.0002.dpx
        ...
        tmp/shot01/shot01.0010.dpx
    """

    def _make_sequence(
        *,
        prefix: str = "shot.",
        suffix: str = ".dpx",
        count: int = 12,
        pad: int = 4,
        start: int = 1,
        holes: list[int] = (),
        dirname: str | None = None,
    ):
        root = tmp_path / (dirname or prefix.rstrip("._") or "seq")
        root.mkdir(parents=True, exist_ok=True)

        frames = []
        end = start + count - 1
        for frame in range(start, end + 1):
            if frame in holes:
                continue
            p = root / f"{prefix}{frame:0{pad}d}{suffix}"
            p.write_text("dummy", encoding="utf-8")
            frames.append(p)

        return root, frames

    return _make_sequence


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch):
    """Remove SEQLS_* overrides so config falls back to its defaults."""
    monkeypatch.delenv("SEQLS_FORMAT", raising=False)
    monkeypatch.delenv("SEQLS_SPLIT_PATTERN", raising=False)
    return monkeypatch
