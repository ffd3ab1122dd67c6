"""Conversion between decimal text and 32-bit integers."""

INT_MIN = -2147483648
INT_MAX = 2147483647

_SPACES = " \f\n\r\t\v"


def _wrap32(value: int) -> int:
    """Reduce ``value`` to a signed 32-bit integer, wrapping around on overflow."""
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value > INT_MAX else value


def atoi(text: str) -> int:
    """Read a leading decimal integer from ``text``.

    Leading whitespace is skipped and one optional sign is accepted. Reading
    stops at the first non-digit. Text without digits gives 0. The result is a
    signed 32-bit integer and wraps around when the digits do not fit.
    """
    if not isinstance(text, str):
        raise TypeError(f"expected a str, got {type(text).__name__}")
    rest = text.lstrip(_SPACES)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    value = int("".join(digits)) if digits else 0
    return _wrap32(sign * value)


def itoa(n: int) -> str:
    """Return the decimal form of the signed 32-bit integer ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a signed 32-bit integer")
    return str(n)