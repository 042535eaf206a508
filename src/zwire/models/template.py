"""Function call template models.

A call template is the human-editable form of a function call: the function
id, its labels, and one slot per argument holding the argument name, the
required type and a value (initially a placeholder). This module provides the
Pydantic models for templates and their flat JSON rendering.
"""

from __future__ import annotations

import re
from typing import Any, Optional

from pydantic import Field, ValidationError

from ..codec.schema import CALL_FUNCTION, FUNCTION_CALL, TYPE_KEY
from ..exceptions import TemplateError
from .base import WireModel

ARGUMENT_KEY = re.compile(r"Z\d+K\d+")

_NAME_KEY = "_function_name"
_DESCRIPTION_KEY = "_function_description"
_OUTPUT_TYPE_KEY = "_output_type"


class ArgumentSlot(WireModel):
    """One argument of a call template.

    Attributes:
        name: Human-readable argument label
        required_type: ``"<ZID> (<TypeName>)"``, e.g. ``"Z16683 (Integer)"``
        value: Value to pass, a placeholder string, or an already-built ZObject
    """

    name: str = ""
    required_type: Optional[str] = None
    value: Any = None


class CallTemplate(WireModel):
    """A function call template.

    Example:
        >>> template = CallTemplate(
        ...     function_id="Z12345",
        ...     function_name="add",
        ...     arguments={
        ...         "Z12345K1": ArgumentSlot(name="first", required_type="Z16683 (Integer)", value=2),
        ...     },
        ... )
        >>> template.to_wire()["Z7K1"]
        'Z12345'
    """

    function_id: str = Field(min_length=1)
    function_name: str = "N/A"
    function_description: str = "N/A"
    output_type: Any = None
    arguments: dict[str, ArgumentSlot] = Field(default_factory=dict)

    def to_wire(self) -> dict[str, Any]:
        """Render the flat template dict exchanged with users."""
        template: dict[str, Any] = {
            _NAME_KEY: self.function_name,
            _DESCRIPTION_KEY: self.function_description,
            _OUTPUT_TYPE_KEY: self.output_type,
            TYPE_KEY: FUNCTION_CALL,
            CALL_FUNCTION: self.function_id,
        }
        for key, slot in self.arguments.items():
            template[key] = slot.model_dump()
        return template

    @classmethod
    def from_wire(cls, template: Any) -> CallTemplate:
        """Parse a flat template dict.

        Keys shaped like argument keys (``Z<n>K<m>``) whose value is an object
        become argument slots; other keys are ignored.

        Raises:
            TemplateError: If template is not an object, lacks a function id, or
                an argument slot is malformed
        """
        if not isinstance(template, dict):
            raise TemplateError(f"Invalid template object: {type(template).__name__}")

        arguments = {
            key: value
            for key, value in template.items()
            if ARGUMENT_KEY.fullmatch(key) and isinstance(value, dict)
        }

        try:
            return cls(
                function_id=template.get(CALL_FUNCTION) or "",
                function_name=template.get(_NAME_KEY) or "N/A",
                function_description=template.get(_DESCRIPTION_KEY) or "N/A",
                output_type=template.get(_OUTPUT_TYPE_KEY),
                arguments=arguments,
            )
        except ValidationError as e:
            raise TemplateError(f"Invalid template: {e}") from e
