"""Exception hierarchy for zwire.

The codec itself is fail-soft: ``encode`` and ``decode`` never raise. These
exceptions are raised by the opt-in strict helpers and by the call-template
layer. All of them inherit from ZwireError for easy catching of any
zwire-specific error.
"""

from __future__ import annotations


class ZwireError(Exception):
    """Base exception for all zwire errors."""

    pass


class EncodeError(ZwireError):
    """Raised when a value cannot be turned into the requested wire object.

    Examples:
        - Value cannot be coerced to an Integer or Float64
        - Strict encoding requested for an unsupported value
    """

    pass


class DecodeError(ZwireError):
    """Raised by strict decoding when a wire object could not be decoded.

    Examples:
        - Magnitude or mantissa is not a digit string
        - Float64 object is missing its exponent or mantissa
        - Decoded value has an unexpected Python type
    """

    pass


class TemplateError(ZwireError):
    """Raised when a function call template cannot be turned into a call.

    Examples:
        - Template is not an object or has no function id
        - An argument still carries its placeholder value
        - The required type of an argument cannot be determined
    """

    pass
