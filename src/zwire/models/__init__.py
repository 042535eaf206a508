"""Pydantic models for zwire.

This module provides the WireModel base class and the call-template models.
"""

from __future__ import annotations

from .base import WireModel
from .template import ArgumentSlot, CallTemplate

__all__ = [
    "WireModel",
    "ArgumentSlot",
    "CallTemplate",
]
