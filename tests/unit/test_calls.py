"""Tests for call templates, function calls and result extraction."""

from __future__ import annotations

import json
from typing import Any

import pytest

from zwire import (
    CallTemplate,
    CodecConfig,
    TemplateError,
    build_call_template,
    build_function_call,
    encode,
    english_label,
    extract_result,
    implementation_ids,
    is_error_result,
    is_zobject,
    parse_required_type,
)


class TestLabels:
    """Test english_label()."""

    def test_matching_language(self) -> None:
        labels = ["Z11", {"Z1K1": "Z11", "Z11K1": "Z1002", "Z11K2": "add"}]
        assert english_label(labels) == "add"

    def test_not_a_list(self) -> None:
        assert english_label(None) == "N/A"
        assert english_label({"Z11K2": "x"}) == "N/A"

    def test_missing_language(self) -> None:
        labels = ["Z11", {"Z1K1": "Z11", "Z11K1": "Z1430", "Z11K2": "addieren"}]
        assert english_label(labels) == "English label not found"

    def test_other_language(self) -> None:
        labels = ["Z11", {"Z1K1": "Z11", "Z11K1": "Z1430", "Z11K2": "addieren"}]
        assert english_label(labels, "Z1430") == "addieren"


class TestDefinitions:
    """Test reading function definitions."""

    def test_implementation_ids(self, add_definition: dict[str, Any]) -> None:
        assert implementation_ids(add_definition) == ["Z16694", "Z16695"]

    def test_no_implementations(self) -> None:
        assert implementation_ids({"Z2K2": {"Z1K1": "Z8"}}) == []

    def test_build_template(
        self, add_definition: dict[str, Any], type_labels: dict[str, str]
    ) -> None:
        template = build_call_template(add_definition, type_labels)

        assert template.function_id == "Z16693"
        assert template.function_name == "add integers"
        assert template.function_description == "adds two integers"
        assert template.output_type == "Z16683"
        assert list(template.arguments) == ["Z16693K1", "Z16693K2"]

        first = template.arguments["Z16693K1"]
        assert first.name == "first integer"
        assert first.required_type == "Z16683 (Integer)"
        assert first.value == "<Provide a value for 'first integer'>"

    def test_unknown_type_label(self, add_definition: dict[str, Any]) -> None:
        template = build_call_template(add_definition)
        assert template.arguments["Z16693K2"].required_type == "Z16683 (Unknown)"

    def test_label_language_from_config(self, add_definition: dict[str, Any]) -> None:
        template = build_call_template(add_definition, config=CodecConfig(label_language="Z1430"))
        assert template.arguments["Z16693K1"].name == "erste Zahl"

    def test_template_wire_shape(
        self, add_definition: dict[str, Any], type_labels: dict[str, str]
    ) -> None:
        wire = build_call_template(add_definition, type_labels).to_wire()

        assert wire["_function_name"] == "add integers"
        assert wire["Z1K1"] == "Z7"
        assert wire["Z7K1"] == "Z16693"
        assert wire["Z16693K2"] == {
            "name": "second integer",
            "required_type": "Z16683 (Integer)",
            "value": "<Provide a value for 'second integer'>",
        }

    def test_missing_function_id(self) -> None:
        with pytest.raises(TemplateError, match="no id"):
            build_call_template({"Z1K1": "Z2", "Z2K2": {}})


class TestRequiredType:
    """Test parse_required_type() and is_zobject()."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("Z16683 (Integer)", "Z16683"),
            ("Z6", "Z6"),
            ("type Z20838", "Z20838"),
            ("Integer", None),
            (None, None),
        ],
    )
    def test_parse(self, text: Any, expected: Any) -> None:
        assert parse_required_type(text) == expected

    def test_is_zobject(self) -> None:
        assert is_zobject({"Z1K1": "Z6", "Z6K1": "x"})
        assert not is_zobject({"Z1K1": {"Z1K1": "Z7"}})
        assert not is_zobject("Z6")


class TestBuildFunctionCall:
    """Test build_function_call()."""

    @pytest.fixture
    def template(self, add_definition: dict[str, Any], type_labels: dict[str, str]) -> CallTemplate:
        return build_call_template(add_definition, type_labels)

    def test_values_by_name(self, template: CallTemplate) -> None:
        call = build_function_call(template, {"first integer": 5, "second integer": -7})

        assert call["Z1K1"] == "Z7"
        assert call["Z7K1"] == "Z16693"
        assert call["Z16693K1"] == encode(5, "Z16683")
        assert call["Z16693K2"] == encode(-7, "Z16683")

    def test_key_wins_over_name(self, template: CallTemplate) -> None:
        call = build_function_call(
            template,
            {"Z16693K1": 1, "first integer": 2, "second integer": 3},
        )
        assert call["Z16693K1"] == encode(1, "Z16683")

    def test_from_flat_dict(self, template: CallTemplate) -> None:
        wire = template.to_wire()
        wire["Z16693K1"]["value"] = 10
        wire["Z16693K2"]["value"] = "20"

        call = build_function_call(wire)
        assert call["Z16693K2"] == encode(20, "Z16683")

    def test_zobject_passes_through(self, template: CallTemplate) -> None:
        ready = {"Z1K1": "Z16683", "Z16683K1": "anything"}
        call = build_function_call(template, {"Z16693K1": ready, "Z16693K2": 0})
        assert call["Z16693K1"] is ready

    def test_placeholder_raises(self, template: CallTemplate) -> None:
        with pytest.raises(TemplateError, match="Missing value for argument 'Z16693K2'"):
            build_function_call(template, {"first integer": 1})

    def test_missing_type_raises(self, template: CallTemplate) -> None:
        template.arguments["Z16693K1"].required_type = "Integer"
        with pytest.raises(TemplateError, match="Could not determine required type"):
            build_function_call(template, {"first integer": 1, "second integer": 2})

    def test_not_a_template(self) -> None:
        with pytest.raises(TemplateError, match="Invalid template"):
            build_function_call(["Z7"])  # type: ignore[arg-type]

    def test_missing_function(self) -> None:
        with pytest.raises(TemplateError):
            build_function_call({"Z1K1": "Z7"})


class TestResults:
    """Test extract_result() and is_error_result()."""

    def test_integer_result(self) -> None:
        response = {"Z1K1": "Z22", "Z22K1": encode(12, "Z16683"), "Z22K2": {}}
        assert extract_result(response) == 12

    def test_json_text(self) -> None:
        response = json.dumps({"Z1K1": "Z22", "Z22K1": {"Z1K1": "Z6", "Z6K1": "hi"}})
        assert extract_result(response) == "hi"

    def test_not_json(self) -> None:
        assert extract_result("plain text") == "plain text"

    def test_error_result(self) -> None:
        assert is_error_result({"Z1K1": "Z22", "Z22K1": {"Z1K1": "Z24"}})
        assert is_error_result({"Z1K1": "Z22", "Z22K1": "Z24"})
        assert not is_error_result({"Z1K1": "Z22", "Z22K1": encode(1, "Z16683")})
        assert not is_error_result("not json")
