"""Type identifiers and wire variants for ZObjects.

This module names every ZID the codec reads or writes and provides the closed
set of variants the encoder and decoder dispatch on. Only Integer and Float64
have dedicated binary encodings; every other type identifier is GENERIC.
"""

from __future__ import annotations

import enum
import math

# Keys shared by every ZObject
TYPE_KEY = "Z1K1"

# Built-in types
STRING = "Z6"
FUNCTION_CALL = "Z7"
REFERENCE = "Z9"
MONOLINGUAL_TEXT = "Z11"
RESPONSE_ENVELOPE = "Z22"
ERROR = "Z24"

# Numeric types with dedicated encodings
NATURAL_NUMBER = "Z13518"
SIGN = "Z16659"
INTEGER = "Z16683"
FLOAT64_SPECIAL = "Z20825"
FLOAT64 = "Z20838"

# Value keys
STRING_VALUE = "Z6K1"
REFERENCE_VALUE = "Z9K1"
CALL_FUNCTION = "Z7K1"
RESPONSE_RESULT = "Z22K1"
NATURAL_NUMBER_VALUE = "Z13518K1"
SIGN_VALUE = "Z16659K1"
INTEGER_SIGN = "Z16683K1"
INTEGER_MAGNITUDE = "Z16683K2"
FLOAT64_SIGN = "Z20838K1"
FLOAT64_EXPONENT = "Z20838K2"
FLOAT64_MANTISSA = "Z20838K3"
FLOAT64_SPECIAL_KEY = "Z20838K4"
FLOAT64_SPECIAL_VALUE = "Z20825K1"

# Languages
ENGLISH = "Z1002"


def value_key(type_id: str) -> str:
    """Return the key holding the payload of a single-field ZObject.

    Example:
        >>> value_key("Z6")
        'Z6K1'
    """
    return f"{type_id}K1"


class Sign(enum.Enum):
    """Tri-state sign shared by Integer and the Float64 exponent."""

    POSITIVE = "Z16660"
    ZERO = "Z16661"
    NEGATIVE = "Z16662"

    @classmethod
    def of(cls, number: int | float) -> Sign:
        """Return the sign of a number (zero for both zeros)."""
        if number > 0:
            return cls.POSITIVE
        if number < 0:
            return cls.NEGATIVE
        return cls.ZERO

    @property
    def multiplier(self) -> int:
        return {Sign.POSITIVE: 1, Sign.ZERO: 0, Sign.NEGATIVE: -1}[self]


class SpecialMarker(enum.Enum):
    """Float64 class marker; anything but NORMAL fixes the value by itself."""

    POSITIVE_ZERO = "Z20829"
    NEGATIVE_ZERO = "Z20831"
    POSITIVE_INFINITY = "Z20832"
    NEGATIVE_INFINITY = "Z20833"
    NAN = "Z20834"
    NORMAL = "Z20837"

    @property
    def value_of(self) -> float | None:
        """Float denoted by the marker, or None for NORMAL."""
        return _SPECIAL_VALUES.get(self)


_SPECIAL_VALUES = {
    SpecialMarker.POSITIVE_ZERO: 0.0,
    SpecialMarker.NEGATIVE_ZERO: -0.0,
    SpecialMarker.POSITIVE_INFINITY: math.inf,
    SpecialMarker.NEGATIVE_INFINITY: -math.inf,
    SpecialMarker.NAN: math.nan,
}


class Variant(enum.Enum):
    """Closed set of wire shapes, selected by the type identifier."""

    INTEGER = INTEGER
    FLOAT64 = FLOAT64
    GENERIC = "*"

    @classmethod
    def of(cls, type_id: str) -> Variant:
        """Select the variant for a type identifier.

        Example:
            >>> Variant.of("Z16683")
            <Variant.INTEGER: 'Z16683'>
            >>> Variant.of("Z6")
            <Variant.GENERIC: '*'>
        """
        if type_id == INTEGER:
            return cls.INTEGER
        if type_id == FLOAT64:
            return cls.FLOAT64
        return cls.GENERIC
