"""ZObject decoder for native scalar values.

This module provides the decode() function that converts a ZObject wire object
back to a Python value. The type identifier is read from the object itself.
Malformed input is never an error: decode() hands the original object back
unchanged, and decode_strict() turns that outcome into a DecodeError.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, TypeVar, Union

from ..config import DEFAULT_CONFIG, CodecConfig
from ..exceptions import DecodeError
from .binary64 import Float64Fields
from .digits import digits_to_int, is_digits
from .schema import (
    FLOAT64_EXPONENT,
    FLOAT64_MANTISSA,
    FLOAT64_SIGN,
    FLOAT64_SPECIAL_KEY,
    FLOAT64_SPECIAL_VALUE,
    INTEGER_MAGNITUDE,
    INTEGER_SIGN,
    NATURAL_NUMBER_VALUE,
    REFERENCE_VALUE,
    SIGN_VALUE,
    STRING_VALUE,
    TYPE_KEY,
    Sign,
    SpecialMarker,
    Variant,
    value_key,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Wrapper keys followed when resolving a sign or marker to its terminal ZID
_WRAPPER_KEYS = (REFERENCE_VALUE, SIGN_VALUE, FLOAT64_SPECIAL_VALUE, STRING_VALUE)


class _DepthExceeded(Exception):
    """A sign, marker or digit string is wrapped deeper than the configured bound."""


def decode(wire_object: Any, *, config: Optional[CodecConfig] = None) -> Any:
    """Decode a ZObject to a Python value.

    Args:
        wire_object: Wire object, usually a dict parsed from JSON
        config: Optional codec configuration (unwrap depth)

    Returns:
        int for Integer, float for Float64, the ``<tag>K1`` payload for any other
        single-field object, or ``wire_object`` itself when it cannot be decoded

    Examples:
        ```python
        from zwire import decode, encode

        decode(encode(-5, "Z16683"))  # -5
        decode(encode(0.1, "Z20838"))  # 0.1
        decode({"Z1K1": "Z6", "Z6K1": "hello"})  # "hello"

        # Unrecognized structure comes back unchanged
        blob = {"Z1K1": "Z16683", "Z16683K2": "not a number"}
        assert decode(blob) is blob
        ```
    """
    config = config or DEFAULT_CONFIG

    if not isinstance(wire_object, dict):
        return wire_object

    type_id = wire_object.get(TYPE_KEY)
    if not isinstance(type_id, str):
        return wire_object

    variant = Variant.of(type_id)
    try:
        if variant is Variant.INTEGER:
            result = _decode_integer(wire_object, config)
        elif variant is Variant.FLOAT64:
            result = _decode_float64(wire_object, config)
        else:
            result = wire_object.get(value_key(type_id), wire_object)
    except _DepthExceeded:
        logger.debug(
            "%s object nests deeper than %d wrappers", type_id, config.max_unwrap_depth
        )
        return wire_object

    if result is wire_object:
        logger.debug("Returning %s object undecoded", type_id)
    return result


def decode_strict(
    wire_object: Any,
    expected: Union[type[T], tuple[type, ...]] = object,
    *,
    config: Optional[CodecConfig] = None,
) -> T:
    """Decode a ZObject, raising instead of falling back to the input.

    Args:
        wire_object: Wire object to decode
        expected: Type (or tuple of types) the decoded value must have
        config: Optional codec configuration

    Returns:
        Decoded value

    Raises:
        DecodeError: If the object could not be decoded or the result has the
            wrong type
    """
    value = decode(wire_object, config=config)

    if value is wire_object and isinstance(wire_object, dict):
        raise DecodeError(f"Could not decode object of type {wire_object.get(TYPE_KEY)!r}")

    if not isinstance(value, expected):
        raise DecodeError(
            f"Expected {getattr(expected, '__name__', expected)}, got {type(value).__name__}"
        )

    return value


def _resolve(node: Any, config: CodecConfig) -> Optional[str]:
    """Follow wrapper objects down to a terminal string.

    A sign may arrive as ``"Z16662"``, as a reference ``{Z9K1: "Z16662"}`` or
    behind a further ``Z16659`` wrapper. At most ``config.max_unwrap_depth``
    levels are followed so cyclic input terminates.

    Raises:
        _DepthExceeded: If the node is still a wrapper after the last level
    """
    for _ in range(config.max_unwrap_depth):
        if not isinstance(node, dict):
            break
        for key in _WRAPPER_KEYS:
            if key in node:
                node = node[key]
                break
        else:
            return None

    if isinstance(node, dict):
        raise _DepthExceeded

    return node if isinstance(node, str) else None


def _digits(node: Any, config: CodecConfig) -> Optional[int]:
    """Parse a natural number payload (digit string, possibly Z6-wrapped)."""
    if isinstance(node, dict) and NATURAL_NUMBER_VALUE in node:
        node = node[NATURAL_NUMBER_VALUE]

    text = _resolve(node, config)
    if text is None or not is_digits(text):
        return None
    return digits_to_int(text)


def _sign(node: Any, config: CodecConfig) -> Sign:
    try:
        return Sign(_resolve(node, config))
    except ValueError:
        # Unknown or missing signs count as positive
        return Sign.POSITIVE


def _decode_integer(wire_object: dict[str, Any], config: CodecConfig) -> Any:
    magnitude = _digits(wire_object.get(INTEGER_MAGNITUDE), config)
    if magnitude is None:
        return wire_object

    return _sign(wire_object.get(INTEGER_SIGN), config).multiplier * magnitude


def _decode_float64(wire_object: dict[str, Any], config: CodecConfig) -> Any:
    try:
        special = SpecialMarker(_resolve(wire_object.get(FLOAT64_SPECIAL_KEY), config))
    except ValueError:
        special = SpecialMarker.NORMAL

    if special is not SpecialMarker.NORMAL:
        return special.value_of

    exponent_object = wire_object.get(FLOAT64_EXPONENT)
    if not isinstance(exponent_object, dict):
        return wire_object

    exponent = _decode_integer(exponent_object, config)
    mantissa = _digits(wire_object.get(FLOAT64_MANTISSA), config)
    if exponent is exponent_object or mantissa is None:
        return wire_object

    fields = Float64Fields(
        negative=_sign(wire_object.get(FLOAT64_SIGN), config) is Sign.NEGATIVE,
        exponent=exponent,
        mantissa=mantissa,
    )
    try:
        return fields.to_float()
    except ValueError as e:
        logger.debug("Float64 fields out of range: %s", e)
        return wire_object
