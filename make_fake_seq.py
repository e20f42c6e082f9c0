#!/usr/bin/env python3
import argparse
from pathlib import Path

from seqls.splitter import DEFAULT_SPLITTER


def infer_from_sample(sample: str) -> tuple[str, int, str]:
    """
    Infer prefix, padding, and suffix from a filename like:
    'shotA_comp_v002.1001.exr'
    -> prefix='shotA_comp_v002.', pad=4, suffix='.exr'

    Uses the same split rule as seq-ls, so the generated files group into
    one sequence when listed.
    """
    prefix, digits, suffix = DEFAULT_SPLITTER.split(Path(sample).name)
    return prefix, len(digits), suffix


def build_filename(prefix: str, frame: int, pad: int, suffix: str) -> str:
    return f"{prefix}{str(frame).zfill(pad)}{suffix}"


def make_sequence(
    out_dir: Path,
    prefix: str,
    start: int,
    end: int,
    pad: int,
    suffix: str,
    step: int = 1,
    dry_run: bool = False,
    touch_existing: bool = False,
) -> tuple[int, int]:
    if start < 0 or end < start:
        raise ValueError(f"invalid frame range {start}-{end}")
    if not dry_run:
        out_dir.mkdir(parents=True, exist_ok=True)
    created, skipped = 0, 0
    for f in range(start, end + 1, step):
        path = out_dir / build_filename(prefix, f, pad, suffix)
        if dry_run:
            print("[DRY] ", path)
            continue
        if path.exists():
            if touch_existing:
                path.touch()  # update mtime
            skipped += 1
            continue
        # Create a 0-byte file
        path.touch()
        created += 1
    return created, skipped


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Create zero-byte fake frame sequences.")
    g = ap.add_mutually_exclusive_group(required=True)
    g.add_argument(
        "--like",
        help="Sample filename to infer prefix/padding/suffix (e.g. shotA.1001.exr)",
    )
    g.add_argument("--prefix", help="Everything before the frame number (e.g. shotA.)")

    ap.add_argument(
        "--suffix",
        default=".exr",
        help="Everything after the frame number (default: .exr). Ignored if --like used.",
    )
    ap.add_argument(
        "--pad",
        type=int,
        default=4,
        help="Frame padding width (default: 4). Ignored if --like used.",
    )
    ap.add_argument("--start", type=int, required=True, help="Start frame (inclusive)")
    ap.add_argument("--end", type=int, required=True, help="End frame (inclusive)")
    ap.add_argument("--step", type=int, default=1, help="Frame step (default: 1)")
    ap.add_argument(
        "--out", default=".", help="Output directory (default: current dir)"
    )
    ap.add_argument(
        "--dry-run", action="store_true", help="Print what would be created"
    )
    ap.add_argument(
        "--touch-existing",
        action="store_true",
        help="If file exists, just update mtime (otherwise skip)",
    )

    args = ap.parse_args(argv)

    if args.like:
        try:
            prefix, pad, suffix = infer_from_sample(args.like)
        except ValueError as e:
            ap.error(str(e))
    else:
        prefix, pad, suffix = args.prefix, args.pad, args.suffix

    try:
        created, skipped = make_sequence(
            out_dir=Path(args.out),
            prefix=prefix,
            start=args.start,
            end=args.end,
            pad=pad,
            suffix=suffix,
            step=args.step,
            dry_run=args.dry_run,
            touch_existing=args.touch_existing,
        )
    except ValueError as e:
        ap.error(str(e))

    if not args.dry_run:
        print(f"Created: {created}, Skipped: {skipped}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
