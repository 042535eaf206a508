"""Property-based tests using hypothesis."""

from __future__ import annotations

import json

from hypothesis import given
from hypothesis import strategies as st

from zwire import decode, encode
from zwire.codec.binary64 import Float64Fields, float_to_bits

INTEGER = "Z16683"
FLOAT64 = "Z20838"

json_scalars = st.none() | st.booleans() | st.integers() | st.text()


class TestIntegerProperties:
    """Property-based tests for Integer encoding."""

    @given(value=st.integers())
    def test_encode_decode_roundtrip(self, value: int) -> None:
        """Test encode/decode is invertible, far beyond 64 bits."""
        assert decode(encode(value, INTEGER)) == value

    @given(value=st.integers(min_value=10**30, max_value=10**60))
    def test_sign_magnitude(self, value: int) -> None:
        positive = encode(value, INTEGER)
        negative = encode(-value, INTEGER)

        assert positive["Z16683K2"] == negative["Z16683K2"]
        assert positive["Z16683K1"] != negative["Z16683K1"]

    @given(value=st.integers())
    def test_survives_json_transport(self, value: int) -> None:
        wire = json.loads(json.dumps(encode(value, INTEGER)))
        assert decode(wire) == value


class TestFloatProperties:
    """Property-based tests for Float64 encoding."""

    @given(value=st.floats(allow_nan=False, allow_infinity=False))
    def test_bit_exact_roundtrip(self, value: float) -> None:
        """Test every finite double survives bit for bit, signed zeros included."""
        assert float_to_bits(decode(encode(value, FLOAT64))) == float_to_bits(value)

    @given(value=st.floats(allow_nan=False, allow_infinity=False).filter(lambda x: x != 0))
    def test_fields_roundtrip(self, value: float) -> None:
        assert Float64Fields.from_float(value).to_float() == value

    @given(value=st.floats(allow_nan=False, allow_infinity=False))
    def test_digit_strings_only(self, value: float) -> None:
        wire = encode(value, FLOAT64)
        assert wire["Z20838K3"]["Z13518K1"]["Z6K1"].isdigit()
        assert wire["Z20838K2"]["Z16683K2"]["Z13518K1"]["Z6K1"].isdigit()

    @given(value=st.floats(allow_nan=True, allow_infinity=True))
    def test_encode_deterministic(self, value: float) -> None:
        assert encode(value, FLOAT64) == encode(value, FLOAT64)


class TestFallbackProperties:
    """Property-based tests for identity fallback."""

    @given(
        data=st.dictionaries(
            st.text().filter(lambda key: key != "Z1K1"), json_scalars, max_size=5
        )
    )
    def test_untagged_objects_unchanged(self, data: dict) -> None:
        assert decode(data) is data

    @given(type_id=st.from_regex(r"Z[1-9][0-9]{0,5}", fullmatch=True), text=st.text())
    def test_generic_roundtrip(self, type_id: str, text: str) -> None:
        if type_id in (INTEGER, FLOAT64):
            return
        assert decode(encode(text, type_id)) == text
