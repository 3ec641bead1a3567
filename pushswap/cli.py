"""Command-line entry point: print the operations that sort the arguments."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from pushswap.args import ArgumentError, parse_numbers
from pushswap.solver import sort_stacks

EXIT_ERROR = 255


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print one operation per line; print ``Error`` for invalid input."""
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        return 0
    try:
        values = parse_numbers(argv)
    except ArgumentError:
        sys.stdout.write("Error\n")
        return EXIT_ERROR
    if not values:
        return 0
    sys.stdout.write("".join(f"{op}\n" for op in sort_stacks(values)))
    return 0


if __name__ == "__main__":
    sys.exit(main())