"""zwire: ZObject Wire Codec

A Python library for converting native scalar values to and from the tagged
"ZObject" wire format of a remote function-evaluation service. Every wire value
is a JSON object whose ``Z1K1`` field names its type.

Key Features:
- Arbitrary-precision Integer encoding in sign-magnitude form
- Bit-exact Float64 encoding, including NaN, infinities and signed zeros
- Fail-soft decoding: malformed objects come back unchanged
- Offline function call templates built on Pydantic models

Quick Start:
    >>> from zwire import decode, encode
    >>>
    >>> wire = encode(-5, "Z16683")
    >>> wire["Z16683K1"]["Z16659K1"]["Z9K1"]
    'Z16662'
    >>> decode(wire)
    -5
    >>> decode(encode(0.1, "Z20838"))
    0.1
"""

from __future__ import annotations

__version__ = "0.1.0"

from .calls import (
    build_call_template,
    build_function_call,
    english_label,
    extract_result,
    implementation_ids,
    is_error_result,
    is_zobject,
    parse_required_type,
)
from .codec import (
    Float64Fields,
    Sign,
    SpecialMarker,
    Variant,
    decode,
    decode_strict,
    encode,
    encode_strict,
)
from .config import DEFAULT_CONFIG, CodecConfig
from .exceptions import DecodeError, EncodeError, TemplateError, ZwireError
from .models import ArgumentSlot, CallTemplate

__all__ = [
    # Core API
    "encode",
    "decode",
    "decode_strict",
    "encode_strict",
    # Wire types
    "Float64Fields",
    "Sign",
    "SpecialMarker",
    "Variant",
    # Configuration
    "CodecConfig",
    "DEFAULT_CONFIG",
    # Exceptions
    "ZwireError",
    "EncodeError",
    "DecodeError",
    "TemplateError",
    # Call templates
    "ArgumentSlot",
    "CallTemplate",
    "build_call_template",
    "build_function_call",
    "english_label",
    "extract_result",
    "implementation_ids",
    "is_error_result",
    "is_zobject",
    "parse_required_type",
]
