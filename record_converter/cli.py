#!/usr/bin/env python3
"""Convert a person record document from the command line.

    python -m record_converter input.html -o output.html

Use "-" for stdin / stdout. Missing fields do not fail the run; they are
listed in the warnings block of the written document.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from record_converter.converters import get_default_pipeline
from record_converter.settings import LOG_LEVEL, OUTPUT_FILENAME
from record_converter.setup_logging import setup_logging

log = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_BAD_INPUT = 2


def _read_input(src: str) -> str:
    if src == "-":
        return sys.stdin.read()
    return Path(src).read_text(encoding="utf-8-sig")


def _write_output(dest: str, content: str) -> None:
    if dest == "-":
        sys.stdout.write(content)
        return
    path = Path(dest)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8", newline="\n")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="record_converter",
        description="Convert a person record HTML document to the canonical layout.",
    )
    ap.add_argument("input", help="Input HTML file, or - for stdin")
    ap.add_argument(
        "-o",
        "--output",
        default=OUTPUT_FILENAME,
        help=f"Where to write the converted document (default: {OUTPUT_FILENAME}; - for stdout)",
    )
    ap.add_argument("--log-level", default=LOG_LEVEL, help="Logging level (default: %(default)s)")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level, stream=sys.stderr)

    try:
        text = _read_input(args.input)
    except (OSError, UnicodeDecodeError) as e:
        log.error("Error reading file %s: %s", args.input, e)
        return EXIT_BAD_INPUT

    try:
        result = get_default_pipeline().run(text)
        _write_output(args.output, result.html)
    except Exception:
        log.exception("Error processing file %s", args.input)
        return EXIT_FAILED

    log.info(
        "wrote %s (%d warning(s), input_hash=%s)",
        args.output,
        len(result.warnings),
        result.input_hash,
    )
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
