"""String helpers: length, search, comparison, copying, slicing and splitting."""

from typing import Callable, MutableSequence, Optional, Tuple, TypeVar

T = TypeVar("T")


def _single_char(c: str, what: str = "character") -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single {what}, got {c!r}")
    return c


def _as_char(c) -> str:
    """Accept a one-character str or a character code."""
    if isinstance(c, int) and not isinstance(c, bool):
        return chr(c & 0xFF)
    return _single_char(c)


def strlen(s: str) -> int:
    """Return the number of characters in ``s``."""
    return len(s)


def strchr(s: str, c) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for the NUL character finds the terminator position, ``len(s)``.
    """
    ch = _as_char(c)
    if ch == "\0":
        index = s.find(ch)
        return len(s) if index < 0 else index
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for the NUL character finds the terminator position, ``len(s)``.
    """
    ch = _as_char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; return the difference of the first mismatch.

    The end of a string compares as a character of code 0, and comparison stops there.
    """
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    for i in range(min(n, max(len(s1), len(s2)) + 1)):
        a = ord(s1[i]) if i < len(s1) else 0
        b = ord(s2[i]) if i < len(s2) else 0
        if a != b or a == 0:
            return a - b
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Return the index of ``little`` in the first ``length`` characters of ``big``, or None."""
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if not little:
        return 0
    needed = len(little)
    for start in range(len(big)):
        if start + needed > length:
            break
        if big.startswith(little, start):
            return start
    return None


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the terminator.

    Returns the copied text, truncated to ``size - 1`` characters (nothing when
    ``size`` is 0), and the full length of ``src``.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` in a buffer of ``size`` characters including the terminator.

    Returns the resulting text and the length the full concatenation would need,
    which is ``min(len(dst), size) + len(src)``.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    used = min(len(dst), size)
    if used < size:
        result = dst + src[:max(0, size - used - 1)]
    else:
        result = dst
    return result, used + len(src)


def strdup(s: str) -> str:
    """Return a copy of ``s``."""
    return "".join(s)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` from index ``start``.

    A start past the end gives the empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    if not isinstance(s1, str) or not isinstance(s2, str):
        raise TypeError("both arguments must be strings")
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    if not charset:
        return s
    return s.strip(charset)


def count_words(s: str, sep: str) -> int:
    """Count the non-empty runs of ``s`` between occurrences of ``sep``."""
    return len(split(s, sep))


def split(s: str, sep: str) -> list:
    """Split ``s`` on the character ``sep``, dropping empty pieces."""
    _single_char(sep, "separator character")
    return [word for word in s.split(sep) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a string from ``f(index, char)`` applied to each character of ``s``."""
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(s: MutableSequence[T], f: Callable[[int, MutableSequence[T]], None]) -> None:
    """Call ``f(index, s)`` for each index of ``s`` so ``f`` may change ``s[index]`` in place.

    The number of calls is fixed by the length of ``s`` before the first call.
    """
    for index in range(len(s)):
        f(index, s)