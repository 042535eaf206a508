"""Base model class and zwire-specific Pydantic configuration.

This module provides the WireModel class that the call-template models inherit
from.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class WireModel(BaseModel):
    """Base class for zwire models.

    Models should inherit from this class and declare their fields with
    ordinary Pydantic annotations. Unknown fields are rejected so that a
    mistyped key in a hand-edited template surfaces as an error.
    """

    model_config = ConfigDict(
        # from_wire() hands over raw JSON values; convert them where
        # pydantic can do so without loss
        strict=False,
        # Slot values hold whatever the caller will encode: Decimal,
        # Fraction, or a ready-made ZObject dict
        arbitrary_types_allowed=True,
        # Filling a slot after from_wire() is checked like construction
        validate_assignment=True,
        # A misspelled slot field such as "requried_type" is an error, not
        # a silently defaulted None
        extra="forbid",
    )
