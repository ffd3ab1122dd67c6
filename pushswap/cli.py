"""Command-line entry point: print the moves that sort the given numbers."""

import sys
from typing import List, Optional, Sequence

from .output import putendl
from .parse import PushSwapError, check_duplicates, parse_numbers, to_ranks, validate_args
from .sort import sort_stacks
from .stacks import Stacks


def solve(numbers: Sequence[int]) -> List[str]:
    """Return the moves that sort ``numbers`` in stack ``a``.

    Already sorted input needs no moves. Duplicates raise PushSwapError.
    """
    numbers = list(numbers)
    check_duplicates(numbers)
    if Stacks(list(numbers)).is_sorted():
        return []
    stacks = Stacks(to_ranks(numbers))
    sort_stacks(stacks)
    if not stacks.is_sorted():
        raise PushSwapError("Error")
    return stacks.moves


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the sorter on the arguments and print one move per line."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        validate_args(args)
        moves = solve(parse_numbers(args))
    except PushSwapError as exc:
        putendl(str(exc), sys.stderr)
        return 1
    for move in moves:
        putendl(move, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())