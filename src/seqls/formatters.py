"""
Sequence name formatters.

A formatter turns the (prefix, digits, suffix) parts of a frame file name
into the name of its sequence. The name is both the grouping key and the
label shown to users, so it must be deterministic.

All built-in formatters encode the *width* of the digits, not their value:
``img.0001.exr`` and ``img.00001.exr`` belong to different sequences. A
custom formatter that drops the width will merge such files into one
sequence.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from types import MappingProxyType

Formatter = Callable[[str, str, str], str]


def fmt_sharp(prefix: str, digits: str, suffix: str) -> str:
    """img.0001.exr -> img.####.exr"""
    return prefix + "#" * len(digits) + suffix


def fmt_dollar_f(prefix: str, digits: str, suffix: str) -> str:
    """img.0001.exr -> img.$F4.exr (Houdini style)"""
    return f"{prefix}$F{len(digits)}{suffix}"


def fmt_percent_d(prefix: str, digits: str, suffix: str) -> str:
    """img.0001.exr -> img.%04d.exr (printf style)"""
    return f"{prefix}%0{len(digits)}d{suffix}"


FORMATTERS: Mapping[str, Formatter] = MappingProxyType(
    {
        "sharp": fmt_sharp,
        "dollarf": fmt_dollar_f,
        "percentd": fmt_percent_d,
    }
)


def get_formatter(name: str) -> Formatter:
    """Look up a built-in formatter by name (case-insensitive)."""
    try:
        return FORMATTERS[name.lower()]
    except KeyError:
        raise ValueError(
            f"unknown formatter {name!r}; expected one of: {', '.join(FORMATTERS)}"
        ) from None
