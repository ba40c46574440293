"""The push_swap command: print the moves that sort the given integers."""

from __future__ import annotations

import sys
from typing import Iterable, Optional, Sequence

from .parsing import InputError, parse_arguments
from .sorting import sort_stacks
from .stacks import Stacks, has_duplicates, is_sorted


def push_swap(args: Iterable[str]) -> list[str]:
    """Return the moves that sort the numbers given by ``args``.

    Raises InputError for malformed input, for no numbers at all and for
    repeated numbers. Already sorted input needs no moves.
    """
    values = parse_arguments(args)
    if not values or has_duplicates(values):
        raise InputError("expected distinct integers")
    if is_sorted(values):
        return []
    stacks = Stacks(values)
    sort_stacks(stacks)
    return stacks.moves


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command and return its exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 1
    try:
        moves = push_swap(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 2
    sys.stdout.write("".join(f"{move}\n" for move in moves))
    return 0


if __name__ == "__main__":
    sys.exit(main())