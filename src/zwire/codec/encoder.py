"""ZObject encoder for native scalar values.

This module provides the encode() function that converts a Python value to the
ZObject wire object of a requested type. Integer and Float64 have dedicated
nested encodings; every other type identifier gets a single-field wrapper.
"""

from __future__ import annotations

import logging
import math
import operator
from typing import Any

from ..exceptions import EncodeError
from .binary64 import Float64Fields
from .digits import int_to_digits, parse_signed, signed_text
from .schema import (
    FLOAT64,
    FLOAT64_EXPONENT,
    FLOAT64_MANTISSA,
    FLOAT64_SIGN,
    FLOAT64_SPECIAL,
    FLOAT64_SPECIAL_KEY,
    FLOAT64_SPECIAL_VALUE,
    INTEGER,
    INTEGER_MAGNITUDE,
    INTEGER_SIGN,
    NATURAL_NUMBER,
    NATURAL_NUMBER_VALUE,
    REFERENCE,
    REFERENCE_VALUE,
    SIGN,
    SIGN_VALUE,
    STRING,
    STRING_VALUE,
    TYPE_KEY,
    Sign,
    SpecialMarker,
    Variant,
    value_key,
)

logger = logging.getLogger(__name__)


def encode(value: Any, type_id: str) -> dict[str, Any]:
    """Encode a Python value as a ZObject of the given type.

    The result is always a fresh dict. Encoding never raises: a value that
    cannot be coerced to the requested numeric type is wrapped as text under
    the requested type identifier instead.

    Args:
        value: Value to encode (int, float, str, or anything with a str())
        type_id: Required type identifier, e.g. ``"Z16683"`` for Integer

    Returns:
        Wire object whose ``Z1K1`` is ``type_id``

    Examples:
        ```python
        from zwire import encode

        # Integer: sign plus decimal magnitude
        encode(-5, "Z16683")

        # Float64: bit fields plus special marker
        encode(0.1, "Z20838")

        # Anything else: single-field wrapper
        encode("hello", "Z6")  # {"Z1K1": "Z6", "Z6K1": "hello"}
        ```
    """
    wire_object = _encode_variant(value, type_id)
    if wire_object is None:
        logger.warning(
            "Cannot coerce %s value to %s, wrapping it as text", type(value).__name__, type_id
        )
        return _generic_object(value, type_id)
    return wire_object


def encode_strict(value: Any, type_id: str) -> dict[str, Any]:
    """Encode a value, raising instead of falling back to a text wrapper.

    Raises:
        EncodeError: If value cannot be coerced to the Integer or Float64
            requested by type_id
    """
    wire_object = _encode_variant(value, type_id)
    if wire_object is None:
        raise EncodeError(
            f"Cannot encode {type(value).__name__} value as {Variant.of(type_id).name} ({type_id})"
        )
    return wire_object


def _encode_variant(value: Any, type_id: str) -> dict[str, Any] | None:
    variant = Variant.of(type_id)

    if variant is Variant.INTEGER:
        number = _coerce_int(value)
        return None if number is None else _integer_object(number)

    if variant is Variant.FLOAT64:
        real = _coerce_float(value)
        return None if real is None else _float64_object(real)

    return _generic_object(value, type_id)


def _coerce_int(value: Any) -> int | None:
    """Convert a value to an exact int, or None when that loses information."""
    if isinstance(value, float):
        return int(value) if value.is_integer() else None

    if isinstance(value, str):
        try:
            return parse_signed(value.strip())
        except ValueError:
            return None

    try:
        return operator.index(value)
    except TypeError:
        pass

    # Decimal, Fraction and friends: accept only integral values
    try:
        number = int(value)
    except (TypeError, ValueError, OverflowError):
        return None
    try:
        return number if number == value else None
    except TypeError:
        return None


def _coerce_float(value: Any) -> float | None:
    if isinstance(value, float):
        return value

    try:
        return float(value.strip() if isinstance(value, str) else value)
    except (TypeError, ValueError, OverflowError):
        return None


def _reference(zid: str) -> dict[str, str]:
    return {TYPE_KEY: REFERENCE, REFERENCE_VALUE: zid}


def _string(text: str) -> dict[str, str]:
    return {TYPE_KEY: STRING, STRING_VALUE: text}


def _sign_object(sign: Sign) -> dict[str, Any]:
    return {TYPE_KEY: SIGN, SIGN_VALUE: _reference(sign.value)}


def _natural_number_object(magnitude: int) -> dict[str, Any]:
    return {TYPE_KEY: NATURAL_NUMBER, NATURAL_NUMBER_VALUE: _string(int_to_digits(magnitude))}


def _integer_object(number: int) -> dict[str, Any]:
    """Sign-magnitude Integer; zero always carries the ZERO sign."""
    return {
        TYPE_KEY: INTEGER,
        INTEGER_SIGN: _sign_object(Sign.of(number)),
        INTEGER_MAGNITUDE: _natural_number_object(abs(number)),
    }


def _float64_object(real: float) -> dict[str, Any]:
    """Float64 object; specials carry zeroed exponent and mantissa.

    Every special is written with a positive sign except -0 and -Inf. The
    negative sign on -Inf matches the objects the remote service itself
    produces, although a strict reading of the wire contract would make it
    positive; decoders ignore the sign once the marker is known.
    """
    # Priority order matters: NaN first, then infinities, then the two zeros
    if math.isnan(real):
        return _float64_fields(False, 0, 0, SpecialMarker.NAN)
    if real == math.inf:
        return _float64_fields(False, 0, 0, SpecialMarker.POSITIVE_INFINITY)
    if real == -math.inf:
        return _float64_fields(True, 0, 0, SpecialMarker.NEGATIVE_INFINITY)
    if real == 0:
        if math.copysign(1.0, real) < 0:
            return _float64_fields(True, 0, 0, SpecialMarker.NEGATIVE_ZERO)
        return _float64_fields(False, 0, 0, SpecialMarker.POSITIVE_ZERO)

    fields = Float64Fields.from_float(real)
    return _float64_fields(fields.negative, fields.exponent, fields.mantissa, SpecialMarker.NORMAL)


def _float64_fields(
    negative: bool, exponent: int, mantissa: int, special: SpecialMarker
) -> dict[str, Any]:
    return {
        TYPE_KEY: FLOAT64,
        FLOAT64_SIGN: _sign_object(Sign.NEGATIVE if negative else Sign.POSITIVE),
        FLOAT64_EXPONENT: _integer_object(exponent),
        FLOAT64_MANTISSA: _natural_number_object(mantissa),
        FLOAT64_SPECIAL_KEY: {
            TYPE_KEY: FLOAT64_SPECIAL,
            FLOAT64_SPECIAL_VALUE: _reference(special.value),
        },
    }


def _generic_object(value: Any, type_id: str) -> dict[str, Any]:
    return {TYPE_KEY: type_id, value_key(type_id): _text(value)}


def _text(value: Any) -> str:
    # str() of a plain int is subject to the interpreter digit limit
    if type(value) is int:
        return signed_text(value)
    return str(value)
