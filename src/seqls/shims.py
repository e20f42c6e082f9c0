from __future__ import annotations

import runpy
import sys
from pathlib import Path

# Resolve repo root regardless of site-packages install
PKG_DIR = Path(__file__).resolve().parent
REPO_ROOT = PKG_DIR.parent.parent  # repo root when installed in editable mode

SCRIPTS = {
    "seq-ls": "seq_ls.py",
    "seq-fake": "make_fake_seq.py",
}


def _run_script(command: str, argv: list[str] | None) -> int:
    script_path = (REPO_ROOT / SCRIPTS[command]).resolve()
    if not script_path.exists():
        print(f"[shim] Script not found: {script_path}", file=sys.stderr)
        return 2
    if argv is not None:
        sys.argv = [command, *argv]
    # The script calls SystemExit with its own code and never returns here
    # unless it has no exit call.
    runpy.run_path(str(script_path), run_name="__main__")
    return 0


def seq_ls(argv: list[str] | None = None) -> int:
    return _run_script("seq-ls", argv)


def fake_seq(argv: list[str] | None = None) -> int:
    return _run_script("seq-fake", argv)
