"""IEEE-754 binary64 field decomposition.

This module splits a finite, non-zero double into its sign, unbiased exponent
and 52-bit stored mantissa, and rebuilds the double from those fields. All
byte-level conversions are big-endian.
"""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass

EXPONENT_BIAS = 1023
MANTISSA_BITS = 52
MAX_BIASED_EXPONENT = (1 << 11) - 1
MANTISSA_MODULUS = 1 << MANTISSA_BITS


def float_to_bits(value: float) -> int:
    """Reinterpret a double as its unsigned 64-bit pattern.

    Example:
        >>> hex(float_to_bits(1.0))
        '0x3ff0000000000000'
    """
    return struct.unpack(">Q", struct.pack(">d", value))[0]


def bits_to_float(bits: int) -> float:
    """Reinterpret an unsigned 64-bit pattern as a double.

    Raises:
        ValueError: If bits does not fit in 64 unsigned bits
    """
    if not 0 <= bits < (1 << 64):
        raise ValueError(f"bit pattern must fit in 64 unsigned bits, got {bits}")
    return struct.unpack(">d", struct.pack(">Q", bits))[0]


@dataclass(frozen=True)
class Float64Fields:
    """Sign, unbiased exponent and stored mantissa of a binary64 value.

    The exponent of a subnormal is ``-1023`` (biased field zero), so every
    finite non-zero double maps to exactly one set of fields.

    Attributes:
        negative: True when the sign bit is set
        exponent: Unbiased exponent, ``biased - 1023``
        mantissa: Low 52 bits (implicit leading 1 excluded)

    Example:
        >>> fields = Float64Fields.from_float(0.1)
        >>> fields.exponent, fields.mantissa
        (-4, 2702159776422298)
        >>> fields.to_float()
        0.1
    """

    negative: bool
    exponent: int
    mantissa: int

    @classmethod
    def from_float(cls, value: float) -> Float64Fields:
        """Decompose a finite, non-zero double.

        Raises:
            ValueError: If value is zero, infinite or NaN
        """
        if value == 0 or not math.isfinite(value):
            raise ValueError(f"only finite non-zero values have plain fields, got {value!r}")

        bits = float_to_bits(abs(value))
        return cls(
            negative=value < 0,
            exponent=(bits >> MANTISSA_BITS) - EXPONENT_BIAS,
            mantissa=bits % MANTISSA_MODULUS,
        )

    def to_bits(self) -> int:
        """Return the 64-bit pattern of the absolute value.

        Raises:
            ValueError: If exponent or mantissa is outside the binary64 range
        """
        biased = self.exponent + EXPONENT_BIAS
        if not 0 <= biased <= MAX_BIASED_EXPONENT:
            raise ValueError(
                f"exponent {self.exponent} out of range "
                f"[{-EXPONENT_BIAS}, {MAX_BIASED_EXPONENT - EXPONENT_BIAS}]"
            )
        if not 0 <= self.mantissa < MANTISSA_MODULUS:
            raise ValueError(f"mantissa {self.mantissa} requires more than {MANTISSA_BITS} bits")

        return (biased << MANTISSA_BITS) + self.mantissa

    def to_float(self) -> float:
        """Rebuild the double, negated when the sign is negative."""
        value = bits_to_float(self.to_bits())
        return -value if self.negative else value
