from __future__ import annotations

import re

from seqls.errors import NotSequenceFile

# filename pattern:
#   prefix + digits + suffix
# digits is the right-most run of digits, e.g.
#   /a/b/c/img.0001.exr -> ("/a/b/c/img.", "0001", ".exr")
#   v2_img.0001.exr     -> ("v2_img.", "0001", ".exr")
DEFAULT_SPLIT_PATTERN = r"^(.*[^0-9])?([0-9]+)([^0-9]*)$"


class Splitter:
    """
    Split file names into (prefix, digits, suffix).

    The pattern must define exactly three groups, in that order. Names the
    pattern does not match are not sequence files. Groups that did not take
    part in a match are returned as empty strings.
    """

    def __init__(self, pattern: str | re.Pattern[str] = DEFAULT_SPLIT_PATTERN) -> None:
        regex = re.compile(pattern) if isinstance(pattern, str) else pattern
        if regex.groups != 3:
            raise ValueError(
                f"split pattern must have exactly 3 groups (prefix, digits, suffix), "
                f"got {regex.groups}: {regex.pattern!r}"
            )
        self._re = regex

    @property
    def pattern(self) -> str:
        return self._re.pattern

    def split(self, filename: str) -> tuple[str, str, str]:
        """Return (prefix, digits, suffix) or raise NotSequenceFile."""
        m = self._re.search(filename)
        if not m:
            raise NotSequenceFile(filename)
        prefix, digits, suffix = m.group(1, 2, 3)
        return prefix or "", digits or "", suffix or ""

    def __repr__(self) -> str:
        return f"Splitter({self._re.pattern!r})"


DEFAULT_SPLITTER = Splitter()
