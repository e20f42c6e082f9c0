from __future__ import annotations

import os


# Tool identity / version (semver-compatible string)
TOOL_VERSION = "seqls/1.0.0"


def get_tool_version() -> str:
    """Return the tool version string used in logs and --version."""
    return TOOL_VERSION


def get_default_format() -> str:
    """
    Return the name of the formatter used for sequence names.

    Allows override via SEQLS_FORMAT in the environment.
    """
    return os.environ.get("SEQLS_FORMAT", "sharp")


def get_split_pattern() -> str | None:
    """
    Return a custom split pattern, or None for the default rule.

    Allows override via SEQLS_SPLIT_PATTERN in the environment.
    """
    return os.environ.get("SEQLS_SPLIT_PATTERN") or None
