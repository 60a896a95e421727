"""Reading the numbers to sort from command-line text."""

from __future__ import annotations

import re
from collections.abc import Iterable

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_LEADING_NUMBER = re.compile(r"[\t\n\v\f\r ]*([+-]?)([0-9]*)")
# An optional minus, then digits, each of which may follow one space.
_NUMBER_SHAPE = re.compile(r"-?(?: ?[0-9])*")


class ParseError(ValueError):
    """The arguments do not describe a valid set of numbers."""


def _leading_number(text: str) -> int:
    match = _LEADING_NUMBER.match(text)
    sign, digits = match.group(1), match.group(2)
    magnitude = int(digits) if digits else 0
    return -magnitude if sign == "-" else magnitude


def parse_int(text: str) -> int:
    """Read the leading integer of ``text``, wrapped to 32 bits.

    Leading whitespace and one sign are accepted; reading stops at the
    first non-digit, and text without digits reads as 0.
    """
    value = _leading_number(text)
    return (value - INT_MIN) % 2**32 + INT_MIN


def parse_long(text: str) -> int:
    """Read the leading integer of ``text``, which must fit in 32 bits.

    Raises ParseError when the value lies outside the 32-bit range.
    """
    value = _leading_number(text)
    if not INT_MIN <= value <= INT_MAX:
        raise ParseError(f"{text!r} does not fit in a 32-bit integer")
    return value


def split_words(text: str) -> list[str]:
    """Split ``text`` on spaces, dropping empty words."""
    return [word for word in text.split(" ") if word]


def is_number(token: str) -> bool:
    """Tell whether ``token`` is made of digits after an optional minus.

    A single space may stand before any digit.
    """
    return _NUMBER_SHAPE.fullmatch(token) is not None


def _out_of_range(word: str) -> bool:
    try:
        parse_long(word)
    except ParseError:
        return True
    return False


def has_error(tokens: Iterable[str]) -> bool:
    """Tell whether the tokens hold a duplicate, a non-number or an overflow.

    An empty sequence holds no error.
    """
    words = list(tokens)
    if not words:
        return False
    values = [parse_int(word) for word in words]
    if len(set(values)) != len(values):
        return True
    if not all(is_number(word) for word in words):
        return True
    return any(_out_of_range(word) for word in words)


def parse_single(text: str) -> list[int]:
    """Read space-separated numbers from one argument.

    Raises ParseError when the numbers are invalid.
    """
    words = split_words(text)
    if has_error(words):
        raise ParseError("invalid numbers")
    return [parse_long(word) for word in words]


def parse_multiple(args: Iterable[str]) -> list[int]:
    """Read one number from each argument.

    Raises ParseError when the numbers are invalid.
    """
    words = list(args)
    if has_error(words):
        raise ParseError("invalid numbers")
    return [parse_int(word) for word in words]