"""ZObject codec for zwire.

This module provides encoding and decoding between native scalar values and
the tagged-object wire format, including bit-exact Float64 and
arbitrary-precision Integer encodings.
"""

from __future__ import annotations

from .binary64 import Float64Fields
from .decoder import decode, decode_strict
from .encoder import encode, encode_strict
from .schema import Sign, SpecialMarker, Variant

__all__ = [
    "encode",
    "encode_strict",
    "decode",
    "decode_strict",
    "Float64Fields",
    "Sign",
    "SpecialMarker",
    "Variant",
]
