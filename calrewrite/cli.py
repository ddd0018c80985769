"""
CLI (Command Line Interface).

    calrewrite <calendar url>                  # rewritten calendar on stdout
    calrewrite <calendar url> -o schedule.ics  # ... or into a file
    calrewrite <calendar url> --config dvacd17.json -v

Note:
- This CLI is intentionally simple and prints plain text (no rich formatting)
- All pipeline failures end with a one-line message and exit code 1
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from calrewrite.config import load_config
from calrewrite.errors import RewriteError
from calrewrite.pipeline import run_pipeline


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argparse CLI parser.
    """
    parser = argparse.ArgumentParser(
        prog="calrewrite",
        description="Rewrite a TimeEdit calendar feed using its CSV export",
    )
    parser.add_argument("url", type=str, help="Calendar URL (e.g. https://se.timeedit.net/.../ri123.ics)")
    parser.add_argument("-o", "--out", type=Path, default=None, help="Output .ics path (default: stdout)")
    parser.add_argument("--config", type=Path, default=None, help="JSON file overriding labels and rules")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every pipeline stage")
    return parser


def main(argv: list[str] | None = None) -> None:
    """
    CLI entry point. Runs the pipeline and exits via SystemExit with a return code.
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(message)s",
    )

    try:
        config = load_config(args.config)
        ics = run_pipeline(args.url, config)
    except RewriteError as e:
        print(f"Error: {e}", file=sys.stderr)
        raise SystemExit(1)

    if args.out is None:
        sys.stdout.write(ics)
        raise SystemExit(0)

    args.out.parent.mkdir(parents=True, exist_ok=True)
    args.out.write_bytes(ics.encode("utf-8"))
    print(f"Calendar written to: {args.out}")
    raise SystemExit(0)
