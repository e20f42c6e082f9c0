#!/usr/bin/env python3
"""
seq-ls
- Lists a directory as frame sequences instead of individual files
- img.0001.exr .. img.0004.exr -> img.####.exr 1-4
- Sharp (####), DollarF ($F4) and PercentD (%04d) naming
- Custom split rule via --pattern (3 groups: prefix, digits, suffix)
"""

import argparse
import json
import logging
import os
import re
import sys
from datetime import datetime, timezone

import dotenv
from pathlib import Path
from seqls import config, lister
from seqls.formatters import FORMATTERS
from seqls.splitter import Splitter

try:
    # Optional: nicer colours on Windows
    import colorama

    colorama.init()
except ImportError:
    colorama = None


def find_data_file(filename: str) -> str:
    if getattr(sys, "frozen", False):
        datadir = os.path.dirname(sys.executable)
    else:
        datadir = os.path.dirname(__file__)
    return os.path.join(datadir, filename)


dotenv.load_dotenv(find_data_file(".env"))


# ----------------- Logging helpers -----------------


class IgnoreEmptyMessageFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        return bool(record.getMessage().strip())


class ColourFormatter(logging.Formatter):
    """
    Simple ANSI colour formatter for console logs.

    Colours:
      DEBUG   -> cyan
      INFO    -> green
      WARNING -> yellow
      ERROR   -> red
      CRITICAL-> red background
    """

    COLOURS = {
        logging.DEBUG: "\033[96m",  # bright cyan
        logging.INFO: "\033[92m",  # bright green
        logging.WARNING: "\033[93m",  # bright yellow
        logging.ERROR: "\033[91m",  # bright red
        logging.CRITICAL: "\033[41m",  # red background
    }

    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        colour = self.COLOURS.get(record.levelno)
        if not colour:
            return base
        return f"{colour}{base}{self.RESET}"


class JsonFormatter(logging.Formatter):
    """
    Emit one JSON object per log line, suitable for ingestion by log tools.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "tool_version": config.get_tool_version(),
        }

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False)


def configure_logging(
    level_name: str,
    *,
    quiet: bool = False,
    json_logs: bool = False,
) -> None:
    """
    Configure global logging.

    Logs go to stderr so that the sequence listing on stdout can be piped.

    Args
    ----
    level_name:
        Base log level name from CLI (--log), e.g. "INFO", "DEBUG".
    quiet:
        If True, bump the level to WARNING for console output.
    json_logs:
        If True, emit machine-readable JSON log lines instead of coloured text.
    """
    # Clear any existing handlers (main() may run more than once in-process)
    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)

    level = getattr(logging, level_name.upper(), logging.WARNING)
    if quiet and level < logging.WARNING:
        level = logging.WARNING

    root.setLevel(level)

    handler = logging.StreamHandler(sys.stderr)

    if json_logs:
        fmt: logging.Formatter = JsonFormatter()
    else:
        fmt = ColourFormatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )
        fmt.datefmt = "%Y-%m-%d %H:%M:%S"

    handler.addFilter(IgnoreEmptyMessageFilter())

    handler.setFormatter(fmt)
    root.addHandler(handler)


# ----------------- CLI -----------------


def split_pattern(value: str) -> str:
    """argparse type: reject patterns that cannot split into 3 parts."""
    try:
        Splitter(value)
    except (re.error, ValueError) as e:
        raise argparse.ArgumentTypeError(str(e)) from None
    return value


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        description="List files in directories as frame sequences."
    )
    ap.add_argument(
        "root",
        nargs="+",
        help="Directory (or directories) to list.",
    )
    ap.add_argument(
        "--format",
        dest="fmt_name",
        type=str.lower,
        choices=sorted(FORMATTERS),
        default=config.get_default_format(),
        help="Sequence name style: sharp (####), dollarf ($F4), percentd (%%04d).",
    )
    ap.add_argument(
        "--pattern",
        type=split_pattern,
        default=config.get_split_pattern(),
        help=(
            "Regular expression with exactly 3 groups (prefix, digits, suffix). "
            "Default: right-most run of digits."
        ),
    )
    ap.add_argument(
        "--per-range",
        action="store_true",
        help="Print one line per contiguous range instead of one per sequence.",
    )
    ap.add_argument(
        "--recursive",
        action="store_true",
        help="Descend into sub-directories.",
    )
    ap.add_argument(
        "--hidden",
        action="store_true",
        help="Include hidden files and directories.",
    )
    ap.add_argument(
        "--log",
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR).",
    )
    ap.add_argument(
        "--quiet",
        action="store_true",
        help="Reduce log output (at least WARNING, regardless of --log).",
    )
    ap.add_argument(
        "--json-logs",
        action="store_true",
        help="Emit machine-readable JSON log lines instead of human-readable text.",
    )
    ap.add_argument(
        "--version",
        action="version",
        version=config.get_tool_version(),
    )
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    configure_logging(
        level_name=args.log,
        quiet=args.quiet,
        json_logs=args.json_logs,
    )

    roots = [Path(r).resolve() for r in args.root]

    return lister.run_many(
        roots,
        fmt_name=args.fmt_name,
        pattern=args.pattern,
        per_range=args.per_range,
        recursive=args.recursive,
        include_hidden=args.hidden,
    )


if __name__ == "__main__":
    raise SystemExit(main())
