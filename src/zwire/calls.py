"""Function call construction around the ZObject codec.

This module provides:
- Call templates built from a persisted function definition
- Function call objects built from a template and user-supplied values
- Result extraction from a response envelope

Nothing here touches the network. Fetching definitions and type labels, and
sending the call, belong to the caller.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any, Mapping, Optional

from .codec.decoder import decode
from .codec.encoder import encode
from .codec.schema import (
    CALL_FUNCTION,
    ENGLISH,
    ERROR,
    FUNCTION_CALL,
    RESPONSE_RESULT,
    STRING_VALUE,
    TYPE_KEY,
)
from .config import DEFAULT_CONFIG, CodecConfig
from .exceptions import TemplateError
from .models.template import ArgumentSlot, CallTemplate

logger = logging.getLogger(__name__)

_ZID_TOKEN = re.compile(r"Z\d+")


# ============================================================================
# Definitions
# ============================================================================


def english_label(labels: Any, language: str = ENGLISH) -> str:
    """Pick the text of a monolingual label list in the given language.

    Args:
        labels: List of monolingual texts (``Z11``), as found under ``Z12K1``
        language: Language ZID to look for

    Returns:
        The label text, ``"N/A"`` when labels is not a list, or a
        "not found" message when no entry matches

    Example:
        >>> english_label(["Z11", {"Z1K1": "Z11", "Z11K1": "Z1002", "Z11K2": "add"}])
        'add'
    """
    if not isinstance(labels, list):
        return "N/A"

    for item in labels:
        if isinstance(item, dict) and item.get("Z11K1") == language:
            return item.get("Z11K2") or "Label not found"

    return "English label not found" if language == ENGLISH else "Label not found"


def _labels(node: Any) -> Any:
    """Return the ``Z12K1`` list of a multilingual text, if any."""
    return node.get("Z12K1") if isinstance(node, dict) else None


def _dig(node: Any, *keys: str) -> Any:
    for key in keys:
        if not isinstance(node, dict):
            return None
        node = node.get(key)
    return node


def _typed_list_items(node: Any) -> list[Any]:
    """Items of a canonical typed list (first entry is the item type)."""
    return list(node[1:]) if isinstance(node, list) else []


def implementation_ids(function_definition: Mapping[str, Any]) -> list[str]:
    """List the implementation ZIDs declared by a function definition.

    Entries may be plain references or ``Z14`` objects carrying ``Z14K1``.
    """
    ids = []
    for entry in _typed_list_items(_dig(function_definition, "Z2K2", "Z8K4")):
        zid = entry if isinstance(entry, str) else _dig(entry, "Z14K1")
        if isinstance(zid, str) and zid:
            ids.append(zid)
    return ids


def build_call_template(
    function_definition: Mapping[str, Any],
    type_labels: Optional[Mapping[str, str]] = None,
    *,
    config: Optional[CodecConfig] = None,
) -> CallTemplate:
    """Build a call template from a persisted function definition.

    Args:
        function_definition: Persisted object (``Z2``) wrapping a function
            (``Z8``), as fetched from the service
        type_labels: Optional map from type ZID to its display name; missing
            types are shown as "Unknown"
        config: Optional configuration (label language)

    Returns:
        CallTemplate with one placeholder slot per declared argument

    Raises:
        TemplateError: If the definition has no function id

    Example:
        ```python
        template = build_call_template(definition, {"Z16683": "Integer"})
        print(json.dumps(template.to_wire(), indent=2))
        ```
    """
    config = config or DEFAULT_CONFIG
    type_labels = type_labels or {}
    language = config.label_language

    function_id = _dig(function_definition, "Z2K1", STRING_VALUE)
    if not isinstance(function_id, str) or not function_id:
        raise TemplateError("Function definition has no id (Z2K1)")

    arguments: dict[str, ArgumentSlot] = {}
    for declaration in _typed_list_items(_dig(function_definition, "Z2K2", "Z8K1")):
        if not isinstance(declaration, dict):
            continue

        key = declaration.get("Z17K2")
        if not isinstance(key, str) or not key:
            logger.debug("Skipping argument declaration without key in %s", function_id)
            continue

        type_id = declaration.get("Z17K1")
        name = english_label(_labels(declaration.get("Z17K3")), language)
        type_name = type_labels.get(type_id, "Unknown") if isinstance(type_id, str) else "Unknown"

        arguments[key] = ArgumentSlot(
            name=name,
            required_type=f"{type_id} ({type_name})",
            value=f"<Provide a value for '{name}'>",
        )

    return CallTemplate(
        function_id=function_id,
        function_name=english_label(_labels(function_definition.get("Z2K3")), language),
        function_description=english_label(_labels(function_definition.get("Z2K5")), language),
        output_type=_dig(function_definition, "Z2K2", "Z8K2"),
        arguments=arguments,
    )


# ============================================================================
# Calls
# ============================================================================


def parse_required_type(required_type: Any) -> Optional[str]:
    """Extract the type ZID from a ``"Z16683 (Integer)"`` style string.

    Example:
        >>> parse_required_type("Z16683 (Integer)")
        'Z16683'
        >>> parse_required_type("Integer") is None
        True
    """
    if not isinstance(required_type, str):
        return None
    match = _ZID_TOKEN.search(required_type)
    return match.group(0) if match else None


def is_zobject(value: Any) -> bool:
    """True for a dict whose ``Z1K1`` is a type identifier string."""
    return isinstance(value, dict) and isinstance(value.get(TYPE_KEY), str)


def _is_placeholder(value: Any, config: CodecConfig) -> bool:
    if not isinstance(value, str):
        return False
    word = re.escape(config.placeholder_prefix[1:].strip())
    return re.search(rf"<\s*{word}\b", value, re.IGNORECASE) is not None


def build_function_call(
    template: CallTemplate | Mapping[str, Any],
    values: Optional[Mapping[str, Any]] = None,
    *,
    config: Optional[CodecConfig] = None,
) -> dict[str, Any]:
    """Turn a call template into a function call object.

    Each argument value is looked up in ``values`` by argument key first, then
    by argument name, and finally taken from the template slot. ZObjects are
    passed through; plain values are encoded with the slot's required type.

    Args:
        template: CallTemplate or its flat dict rendering
        values: Optional map from argument key or name to value
        config: Optional configuration (placeholder detection)

    Returns:
        Function call object ``{Z1K1: Z7, Z7K1: <id>, <key>: <ZObject>, ...}``

    Raises:
        TemplateError: If the template is invalid, a value is missing, or an
            argument's required type cannot be determined

    Example:
        ```python
        call = build_function_call(template, {"first number": 5, "second number": 7})
        ```
    """
    config = config or DEFAULT_CONFIG
    values = values or {}

    if not isinstance(template, CallTemplate):
        template = CallTemplate.from_wire(template)

    call: dict[str, Any] = {TYPE_KEY: FUNCTION_CALL, CALL_FUNCTION: template.function_id}

    for key, slot in template.arguments.items():
        if key in values:
            provided = values[key]
        elif slot.name in values:
            provided = values[slot.name]
        else:
            provided = slot.value

        if is_zobject(provided):
            call[key] = provided
            continue

        if provided is None or _is_placeholder(provided, config):
            raise TemplateError(
                f"Missing value for argument '{key}' ({slot.name}). Please provide it in values."
            )

        type_id = parse_required_type(slot.required_type)
        if type_id is None:
            raise TemplateError(
                f"Could not determine required type for argument '{key}' ({slot.name}) "
                f"from the template."
            )

        call[key] = encode(provided, type_id)

    logger.debug("Built call to %s with %d argument(s)", template.function_id, len(call) - 2)
    return call


# ============================================================================
# Results
# ============================================================================


def _envelope(response: Any) -> Any:
    if isinstance(response, (str, bytes)):
        try:
            return json.loads(response)
        except ValueError:
            logger.debug("Response is not JSON, using it as is")
            return response
    return response


def extract_result(response: Any, *, config: Optional[CodecConfig] = None) -> Any:
    """Decode the result of a response envelope (``Z22``).

    Args:
        response: Envelope dict, or its JSON text
        config: Optional codec configuration

    Returns:
        Decoded ``Z22K1`` value, or the response itself when it carries no
        result field
    """
    envelope = _envelope(response)
    if isinstance(envelope, dict) and RESPONSE_RESULT in envelope:
        return decode(envelope[RESPONSE_RESULT], config=config)
    return decode(envelope, config=config)


def is_error_result(response: Any) -> bool:
    """True when the envelope's result is an error object (``Z24``)."""
    envelope = _envelope(response)
    result = envelope.get(RESPONSE_RESULT) if isinstance(envelope, dict) else None
    if isinstance(result, dict):
        return result.get(TYPE_KEY) == ERROR
    return result == ERROR
