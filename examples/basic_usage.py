#!/usr/bin/env python3
"""Basic usage example for zwire.

This example demonstrates:
1. Encoding integers of any size
2. Encoding doubles bit for bit, including special values
3. Decoding back to Python values
4. Fail-soft decoding of malformed objects
"""

from __future__ import annotations

import json
import math

from zwire import decode, encode

INTEGER = "Z16683"
FLOAT64 = "Z20838"


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("zwire Basic Usage Example")
    print("=" * 60)
    print()

    # Integers
    print("1. Encoding an Integer...")
    big = -(2**80)
    wire = encode(big, INTEGER)
    print(json.dumps(wire, indent=2))
    print(f"   Decoded: {decode(wire)}")
    print()

    # Floats
    print("2. Encoding Float64 values...")
    for value in (0.1, -1536.25, 5e-324, -0.0, math.inf, math.nan):
        wire = encode(value, FLOAT64)
        special = wire["Z20838K4"]["Z20825K1"]["Z9K1"]
        mantissa = wire["Z20838K3"]["Z13518K1"]["Z6K1"]
        print(f"   {value!r:>12} -> marker {special}, mantissa {mantissa}, decoded {decode(wire)!r}")
    print()

    # Strings and other types
    print("3. Encoding a String...")
    print(f"   {encode('hello', 'Z6')}")
    print()

    # Fail-soft decoding
    print("4. Decoding a malformed Integer...")
    broken = {"Z1K1": INTEGER, "Z16683K2": {"Z1K1": "Z13518", "Z13518K1": "twelve"}}
    result = decode(broken)
    if result is broken:
        print("   ✓ Object returned unchanged (could not decode)")
    print()

    print("=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
