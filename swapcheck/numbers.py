"""Integer parsing helpers shared by the tester and the checker."""

from __future__ import annotations

import itertools

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_SPACES = " \t\n\v\f\r"
_SIGNS = ("+", "-")


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _wrap_int32(value: int) -> int:
    return (value - INT_MIN) % 2**32 + INT_MIN


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping blanks and stopping at the first non-digit.

    Text without digits gives 0. Values beyond 32 bits wrap around.
    """
    rest = text.lstrip(_SPACES)
    negative = rest[:1] == "-"
    if rest[:1] in _SIGNS:
        rest = rest[1:]
    digits = "".join(itertools.takewhile(_is_digit, rest))
    value = int(digits) if digits else 0
    return _wrap_int32(-value if negative else value)


def digit_count(n: int) -> int:
    """Number of characters in the decimal form of ``n``, minus sign included."""
    return len(str(n))


def is_int(text: str) -> bool:
    """Whether ``text`` is an optional sign followed by digits that fit a 32-bit int.

    A bare sign or an empty string is accepted, as there is nothing out of range in it.
    """
    negative = text[:1] == "-"
    body = text[1:] if text[:1] in _SIGNS else text
    if not all(_is_digit(ch) for ch in body):
        return False
    if not body:
        return True
    value = -int(body) if negative else int(body)
    return INT_MIN <= value <= INT_MAX