#!/usr/bin/env python3
"""Command line front end: ROM file (or stdin) in, mnemonic listing out."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from .config import load_config
from .decode_map import FallbackStyle
from .disasm import run
from .errors import DisasmError

PROGNAME = "ch8disasm"
VERSION = "1.0.0"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROGNAME, description="Disassemble a CHIP-8 ROM into mnemonics"
    )
    parser.add_argument(
        "input_file", nargs="?", help="ROM image to read (default: stdin)"
    )
    parser.add_argument(
        "-o", "--output", help="Listing file to write (default: stdout)"
    )
    parser.add_argument(
        "--fallback",
        choices=[style.value for style in FallbackStyle],
        default=None,
        help="Rendering for words that are not instructions "
        "(default: $CH8DISASM_FALLBACK or 'err')",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", default=None, help="Debug logging"
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {VERSION}"
    )
    return parser


def _setup_logging(verbose: bool) -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(name)s: %(levelname)s: %(message)s"))
    root = logging.getLogger(__package__)
    root.handlers[:] = [handler]
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    config = load_config(
        input_file=args.input_file,
        output_file=args.output,
        fallback=FallbackStyle(args.fallback) if args.fallback else None,
        verbose=args.verbose,
    )
    _setup_logging(config.verbose)

    try:
        run(config)
    except DisasmError as e:
        print(e, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
