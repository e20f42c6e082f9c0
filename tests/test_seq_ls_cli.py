from __future__ import annotations

import logging
from pathlib import Path

import pytest

import seq_ls


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in list(root.handlers):
        root.removeHandler(h)
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)


def test_main_lists_directory(
    make_fake_sequence_tree,
    capsys: pytest.CaptureFixture[str],
    clean_env,
) -> None:
    root, _ = make_fake_sequence_tree(prefix="img.", suffix=".exr", count=4)

    assert seq_ls.main([str(root), "--format", "dollarf", "--quiet"]) == 0
    assert capsys.readouterr().out == "img.$F4.exr 1-4\n"


def test_main_per_range_and_custom_pattern(
    make_fake_sequence_tree,
    capsys: pytest.CaptureFixture[str],
    clean_env,
) -> None:
    root, _ = make_fake_sequence_tree(
        prefix="img_v2.", suffix=".exr", count=6, holes=[3], dirname="plates"
    )
    (root / "img_v2_0001.exr").write_text("x", encoding="utf-8")

    rc = seq_ls.main(
        [
            str(root),
            "--per-range",
            "--pattern",
            r"^(.*\.)([0-9]+)(\.[^.]+)$",
            "--quiet",
        ]
    )

    assert rc == 0
    assert capsys.readouterr().out.splitlines() == [
        "img_v2.####.exr 1-2",
        "img_v2.####.exr 4-6",
    ]


def test_main_rejects_pattern_without_three_groups(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
    clean_env,
) -> None:
    with pytest.raises(SystemExit) as exc:
        seq_ls.main([str(tmp_path), "--pattern", r"([0-9]+)"])

    assert exc.value.code == 2
    assert "exactly 3 groups" in capsys.readouterr().err


def test_main_fails_for_missing_root(tmp_path: Path, clean_env) -> None:
    assert seq_ls.main([str(tmp_path / "missing"), "--quiet"]) == 1


def test_main_format_is_case_insensitive(
    make_fake_sequence_tree,
    capsys: pytest.CaptureFixture[str],
    clean_env,
) -> None:
    root, _ = make_fake_sequence_tree(prefix="img.", suffix=".exr", count=2)

    assert seq_ls.main([str(root), "--format", "DollarF", "--quiet"]) == 0
    assert capsys.readouterr().out == "img.$F4.exr 1-2\n"
