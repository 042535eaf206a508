"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from typing import Any

import pytest


def _label(text: str, language: str = "Z1002") -> dict[str, Any]:
    return {"Z1K1": "Z11", "Z11K1": language, "Z11K2": text}


def _multilingual(*labels: dict[str, Any]) -> dict[str, Any]:
    return {"Z1K1": "Z12", "Z12K1": ["Z11", *labels]}


@pytest.fixture
def add_definition() -> dict[str, Any]:
    """Persisted definition of a two-argument Integer addition function."""
    return {
        "Z1K1": "Z2",
        "Z2K1": {"Z1K1": "Z6", "Z6K1": "Z16693"},
        "Z2K2": {
            "Z1K1": "Z8",
            "Z8K1": [
                "Z17",
                {
                    "Z1K1": "Z17",
                    "Z17K1": "Z16683",
                    "Z17K2": "Z16693K1",
                    "Z17K3": _multilingual(_label("first integer"), _label("erste Zahl", "Z1430")),
                },
                {
                    "Z1K1": "Z17",
                    "Z17K1": "Z16683",
                    "Z17K2": "Z16693K2",
                    "Z17K3": _multilingual(_label("second integer")),
                },
            ],
            "Z8K2": "Z16683",
            "Z8K4": ["Z14", "Z16694", {"Z1K1": "Z14", "Z14K1": "Z16695"}],
        },
        "Z2K3": _multilingual(_label("add integers")),
        "Z2K5": _multilingual(_label("adds two integers")),
    }


@pytest.fixture
def type_labels() -> dict[str, str]:
    """Display names of the types used by add_definition."""
    return {"Z16683": "Integer"}
