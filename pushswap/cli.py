"""Command line: print the operations that sort the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.parsing import ParseError, parse_multiple, parse_single
from pushswap.solver import solve


def main(argv: Sequence[str] | None = None) -> int:
    """Read numbers from the arguments and print one operation per line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        values = parse_single(args[0]) if len(args) == 1 else parse_multiple(args)
    except ParseError:
        print("Error")
        return 0
    for move in solve(values):
        print(move)
    return 0


if __name__ == "__main__":
    sys.exit(main())