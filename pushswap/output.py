"""Writing characters, strings and integers to a text stream."""

import sys
from typing import Optional, TextIO, Union


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def putchar(c: Union[str, int], stream: Optional[TextIO] = None) -> None:
    """Write one character, given as a one-character str or a code."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        ch = c
    elif isinstance(c, int) and not isinstance(c, bool):
        ch = chr(c)
    else:
        raise TypeError(f"expected a str or int, got {type(c).__name__}")
    _target(stream).write(ch)


def putstr(s: str, stream: Optional[TextIO] = None) -> None:
    """Write ``s`` without a trailing newline."""
    _target(stream).write(s)


def putendl(s: str, stream: Optional[TextIO] = None) -> None:
    """Write ``s`` followed by a newline."""
    out = _target(stream)
    out.write(s)
    out.write("\n")


def putnbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal form of the integer ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    _target(stream).write(str(n))