#!/usr/bin/env python3
"""Call template example for zwire.

This example demonstrates:
1. Building a call template from a function definition
2. Filling it with values to get a function call object
3. Extracting the result from a response envelope

The definition and the response are inlined; fetching them from the service
is left to the application.
"""

from __future__ import annotations

import json

from zwire import build_call_template, build_function_call, encode, extract_result


def label(text: str) -> dict:
    return {"Z1K1": "Z12", "Z12K1": ["Z11", {"Z1K1": "Z11", "Z11K1": "Z1002", "Z11K2": text}]}


DEFINITION = {
    "Z1K1": "Z2",
    "Z2K1": {"Z1K1": "Z6", "Z6K1": "Z16693"},
    "Z2K2": {
        "Z1K1": "Z8",
        "Z8K1": [
            "Z17",
            {"Z1K1": "Z17", "Z17K1": "Z16683", "Z17K2": "Z16693K1", "Z17K3": label("first integer")},
            {"Z1K1": "Z17", "Z17K1": "Z16683", "Z17K2": "Z16693K2", "Z17K3": label("second integer")},
        ],
        "Z8K2": "Z16683",
    },
    "Z2K3": label("add integers"),
}


def main() -> None:
    """Run the call template example."""
    print("1. Call template:")
    template = build_call_template(DEFINITION, {"Z16683": "Integer"})
    print(json.dumps(template.to_wire(), indent=2))
    print()

    print("2. Function call:")
    call = build_function_call(template, {"first integer": 5, "second integer": 7})
    print(json.dumps(call, indent=2))
    print()

    print("3. Result:")
    response = json.dumps({"Z1K1": "Z22", "Z22K1": encode(12, "Z16683")})
    print(f"   {extract_result(response)}")


if __name__ == "__main__":
    main()
