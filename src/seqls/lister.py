"""
Directory listing front-end for SequenceManager.

Reads file names from one or more directories, groups them into sequences
and prints the result. Everything that touches the file system or logs lives
here; the sequence core stays pure.
"""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Iterable, Iterator
from pathlib import Path

from seqls import config
from seqls.formatters import get_formatter
from seqls.manager import SequenceManager
from seqls.splitter import DEFAULT_SPLITTER, Splitter


def _raise_walk_error(err: OSError) -> None:
    raise err


def iter_names(
    root: Path,
    *,
    recursive: bool = False,
    include_hidden: bool = False,
) -> Iterator[str]:
    """
    Yield file names under root as POSIX paths relative to root.

    Hidden files and directories are skipped unless include_hidden is set.
    Order is whatever the file system returns; callers must not rely on it.
    Raises OSError when root or a visited directory cannot be read.
    """
    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise_walk_error):
        if not include_hidden:
            dirnames[:] = [d for d in dirnames if not d.startswith(".")]
        if not recursive:
            dirnames[:] = []
        for f in filenames:
            if not include_hidden and f.startswith("."):
                continue
            yield (Path(dirpath) / f).relative_to(root).as_posix()


def build_manager(
    fmt_name: str | None = None,
    pattern: str | None = None,
) -> SequenceManager:
    """
    Build a manager from explicit choices, falling back to config.

    Raises ValueError for an unknown formatter or a pattern without 3 groups,
    and re.error for a pattern that does not compile.
    """
    formatter = get_formatter(fmt_name or config.get_default_format())
    pattern = pattern or config.get_split_pattern()
    splitter = Splitter(pattern) if pattern else DEFAULT_SPLITTER
    return SequenceManager(splitter, formatter)


def collect(
    root: Path,
    manager: SequenceManager,
    *,
    recursive: bool = False,
    include_hidden: bool = False,
) -> tuple[int, int]:
    """
    Feed all file names under root into manager.

    Returns (files_seen, files_rejected). Rejected names are logged at DEBUG.
    """
    names = list(iter_names(root, recursive=recursive, include_hidden=include_hidden))
    rejected = manager.add_all(names)
    for fname, err in rejected:
        logging.debug("Skipping %s: %s", fname, err)
    return len(names), len(rejected)


def run(
    root: Path,
    *,
    fmt_name: str | None = None,
    pattern: str | None = None,
    per_range: bool = False,
    recursive: bool = False,
    include_hidden: bool = False,
) -> int:
    """List sequences for a single root and log a concise summary."""
    if not root.is_dir():
        logging.error("Not a directory: %s", root)
        return 1

    try:
        manager = build_manager(fmt_name, pattern)
    except (re.error, ValueError) as e:
        logging.error("Invalid configuration: %s", e)
        return 2

    try:
        seen, rejected = collect(
            root, manager, recursive=recursive, include_hidden=include_hidden
        )
    except OSError as e:
        logging.error("Failed to read %s: %s", root, e)
        return 1

    lines = manager.range_lines() if per_range else manager.sequence_lines()
    for line in lines:
        print(line)

    logging.info(
        "Sequence listing summary for %s: files=%d, sequences=%d, skipped=%d",
        root,
        seen,
        len(manager),
        rejected,
    )
    return 0


def run_many(
    roots: Iterable[Path],
    **kwargs,
) -> int:
    """
    Run the lister over multiple roots in a single invocation.

    Keyword arguments are passed to run() unchanged. Returns the highest exit
    code seen, so one bad root makes the whole invocation fail.
    """
    roots = list(roots)
    if not roots:
        logging.warning("No roots provided to run_many; nothing to do.")
        return 0

    worst = 0
    for root in roots:
        logging.info("Listing sequences in %s", root)
        worst = max(worst, run(root, **kwargs))
    return worst
