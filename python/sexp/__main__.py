"""Print every form of a file (or stdin) in canonical form, one per line."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from sexp.errors import DisplayError, ParseError
from sexp.parser import iter_read
from sexp.printer import display


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="python -m sexp",
        description="Read S-expressions and write them back in canonical form.",
    )
    parser.add_argument("file", nargs="?", help="source file (default: stdin)")
    parser.add_argument("--lenient", action="store_true",
                        help="keep lists whose nested elements fail to read")
    parser.add_argument("-v", "--verbose", action="store_true", help="log reader failures")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
    )

    if args.file is None:
        source = sys.stdin.buffer.read()
    else:
        with open(args.file, "rb") as f:
            source = f.read()

    out = sys.stdout.buffer
    try:
        for value in iter_read(source, strict=not args.lenient):
            out.write(display(value))
            out.write(b"\n")
    except (ParseError, DisplayError) as e:
        out.flush()
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
