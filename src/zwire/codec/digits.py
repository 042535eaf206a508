"""Decimal digit strings for arbitrarily large integers.

CPython refuses int/str conversions beyond a process-wide digit limit (4300
by default). These helpers convert in chunks that stay under the limit, so
magnitudes of any size travel without touching interpreter settings.
"""

from __future__ import annotations

import re

CHUNK_DIGITS = 4000
_CHUNK = 10**CHUNK_DIGITS

_DIGITS = re.compile(r"[0-9]+")
_SIGNED = re.compile(r"([+-]?)([0-9]+)")


def is_digits(text: str) -> bool:
    """True for a non-empty string of ASCII digits only."""
    return _DIGITS.fullmatch(text) is not None


def int_to_digits(number: int) -> str:
    """Render a non-negative int as decimal digits.

    Example:
        >>> len(int_to_digits(10**5000))
        5001
    """
    if number < 0:
        raise ValueError("int_to_digits requires a non-negative value")
    if number < _CHUNK:
        return str(number)

    pieces = []
    while number:
        number, piece = divmod(number, _CHUNK)
        pieces.append(piece)

    head = str(pieces.pop())
    return head + "".join(str(piece).zfill(CHUNK_DIGITS) for piece in reversed(pieces))


def digits_to_int(text: str) -> int:
    """Parse a string of ASCII digits.

    Raises:
        ValueError: If text is not a non-empty digit string
    """
    if not is_digits(text):
        raise ValueError("expected a non-empty string of ASCII digits")

    number = 0
    for start in range(0, len(text), CHUNK_DIGITS):
        chunk = text[start : start + CHUNK_DIGITS]
        number = number * 10 ** len(chunk) + int(chunk)
    return number


def signed_text(number: int) -> str:
    """Render any int as decimal text with a leading ``-`` when negative."""
    return f"-{int_to_digits(-number)}" if number < 0 else int_to_digits(number)


def parse_signed(text: str) -> int:
    """Parse ``[+-]digits``; other int() spellings go through int() itself.

    Raises:
        ValueError: If text is not an integer literal
    """
    match = _SIGNED.fullmatch(text)
    if match is None:
        return int(text)

    number = digits_to_int(match.group(2))
    return -number if match.group(1) == "-" else number
