"""Conversion CLI commands."""

from __future__ import annotations

import json
import math
import sys
from pathlib import Path
from typing import Any, Optional, TextIO

from ..calls import build_function_call
from ..codec import decode, encode
from ..codec.digits import parse_signed, signed_text
from ..exceptions import TemplateError

# Float literals that JSON cannot express
_FLOAT_LITERALS = {
    "nan": math.nan,
    "inf": math.inf,
    "+inf": math.inf,
    "-inf": -math.inf,
    "infinity": math.inf,
    "-infinity": -math.inf,
}


def parse_value(text: str) -> Any:
    """Parse a command-line value.

    JSON scalars (``5``, ``0.1``, ``"text"``) are parsed, ``nan`` and the
    infinities become floats, and anything else is kept as text.
    """
    literal = _FLOAT_LITERALS.get(text.strip().lower())
    if literal is not None:
        return literal

    try:
        return json.loads(text, parse_int=parse_signed)
    except ValueError:
        return text


def read_json(source: str, stdin: Optional[TextIO] = None) -> Any:
    """Parse JSON given inline, or read it from stdin when source is ``-``."""
    if source == "-":
        source = (stdin or sys.stdin).read()
    return json.loads(source, parse_int=parse_signed)


def format_value(value: Any) -> str:
    """Render a decoded value; floats use repr so ``-0.0`` and ``nan`` survive."""
    if isinstance(value, float):
        return repr(value)
    if isinstance(value, (dict, list)):
        return json.dumps(value, indent=2)
    if type(value) is int:
        return signed_text(value)
    return str(value)


def encode_command(value: str, type_id: str) -> None:
    """Print the wire object for a value."""
    print(json.dumps(encode(parse_value(value), type_id), indent=2))


def decode_command(source: str) -> None:
    """Print the value of a wire object given inline or on stdin."""
    print(format_value(decode(read_json(source))))


def call_command(template_file: Path, values: Optional[str] = None) -> None:
    """Print the function call built from a template file."""
    template = json.loads(template_file.read_text(encoding="utf-8"))

    provided = read_json(values) if values else {}
    if not isinstance(provided, dict):
        raise TemplateError("--values must be a JSON object")

    print(json.dumps(build_function_call(template, provided), indent=2))
