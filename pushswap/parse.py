"""Validating and reading the command-line numbers."""

from bisect import bisect_left
from typing import Iterable, List, Sequence

from .chars import isdigit
from .numbers import INT_MAX, INT_MIN
from .strings import split

_SPACES = " \t\n\v\f\r"


class PushSwapError(Exception):
    """Raised when the input cannot be sorted or is not acceptable."""


def validate_args(args: Sequence[str]) -> None:
    """Check that every argument holds only digits, spaces and well-placed signs."""
    if not args:
        raise PushSwapError("enter at least 2 arguments")
    for arg in args:
        if not arg or arg[0] == " ":
            raise PushSwapError("Argument not valid")
        for ch, following in zip(arg, arg[1:] + " "):
            if not (isdigit(ch) or ch in " -+"):
                raise PushSwapError("Argument not valid")
            if ch in "-+" and following == " ":
                raise PushSwapError("Argument not valid")


def join_args(args: Iterable[str]) -> str:
    """Join the arguments with single spaces."""
    return " ".join(args)


def parse_int(token: str) -> int:
    """Read a whole token as a signed 32-bit integer.

    Leading whitespace and one sign are allowed; anything else must be a digit.
    Values above 2147483647 in magnitude and tokens longer than 11 characters
    are rejected. A token with no digits reads as 0.
    """
    rest = token.lstrip(_SPACES)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    if not all(isdigit(ch) for ch in rest):
        raise PushSwapError("Atoi Error")
    value = int(rest) if rest else 0
    if value > INT_MAX or value * sign < INT_MIN or len(token) > 11:
        raise PushSwapError("Atoi Error")
    return value * sign


def parse_numbers(args: Sequence[str]) -> List[int]:
    """Read every space-separated number from all arguments, in order."""
    return [parse_int(token) for token in split(join_args(args), " ")]


def check_duplicates(numbers: Sequence[int]) -> None:
    """Raise if any number appears twice."""
    if len(set(numbers)) != len(numbers):
        raise PushSwapError("Two same argument")


def to_ranks(numbers: Sequence[int]) -> List[int]:
    """Replace each number with the count of numbers smaller than it."""
    ordered = sorted(numbers)
    return [bisect_left(ordered, value) for value in numbers]