"""Checking and converting the numbers given on the command line."""

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


class InvalidInputError(ValueError):
    """Raised when the command-line numbers cannot be accepted."""


def is_signed_digit(s):
    """Return True if ``s`` is an optional sign followed by ASCII digits."""
    if not s:
        return False
    body = s[1:] if s[0] in "+-" else s
    return bool(body) and all("0" <= ch <= "9" for ch in body)


def atol(s):
    """Convert ``s`` to an integer the way the command-line reader does.

    Every character, sign characters included, is folded into the
    accumulator as its offset from ``'0'``; a ``'-'`` anywhere makes the
    result negative.
    """
    result = 0
    sign = 1
    for ch in s:
        if ch == "-":
            sign = -1
        result = result * 10 + ord(ch) - ord("0")
    return result * sign


def parse_arguments(args):
    """Validate ``args`` and return their integer values in order.

    Raises InvalidInputError for a non-numeric argument, a value outside
    the 32-bit signed range, or a repeated value.
    """
    seen = set()
    values = []
    for arg in args:
        if not is_signed_digit(arg):
            raise InvalidInputError(f"not an integer: {arg!r}")
        num = atol(arg)
        if not INT_MIN <= num <= INT_MAX:
            raise InvalidInputError(f"out of range: {arg!r}")
        if num in seen:
            raise InvalidInputError(f"duplicate value: {arg!r}")
        seen.add(num)
        values.append(num)
    return values


def is_valid(args):
    """Return True if every argument is acceptable."""
    try:
        parse_arguments(args)
    except InvalidInputError:
        return False
    return True