"""Schema loading and property classification tests."""

from __future__ import annotations

import json

import pytest
from kube_field_explainer.field_resolution import type_desc
from kube_field_explainer.schema_management import (
    ArrayNode,
    InlineObjectNode,
    PrimitiveNode,
    ReferenceNode,
    SchemaError,
    load_schema_document,
    parse_property_node,
)


def test_swagger_document_keeps_definitions_section() -> None:
    document = load_schema_document(
        json.dumps({"swagger": "2.0", "definitions": {"v1.Pod": {"properties": {}}}})
    )

    assert list(document.definitions) == ["v1.Pod"]
    assert document.root["swagger"] == "2.0"


def test_bare_definitions_are_wrapped() -> None:
    document = load_schema_document(json.dumps({"v1.Pod": {"properties": {}}}), source="pod.json")

    assert list(document.definitions) == ["v1.Pod"]
    assert document.source == "pod.json"


def test_invalid_json_raises_schema_error() -> None:
    with pytest.raises(SchemaError, match="Invalid API schema in broken.json"):
        load_schema_document("{not-valid-json}", source="broken.json")


def test_non_object_root_raises_schema_error() -> None:
    with pytest.raises(SchemaError, match="must be an object"):
        load_schema_document("[1, 2, 3]")


def test_reference_takes_precedence_over_properties() -> None:
    node = parse_property_node(
        {"$ref": "#/definitions/v1.ObjectMeta", "properties": {"x": {}}, "description": "d"}
    )

    assert node == ReferenceNode(ref="#/definitions/v1.ObjectMeta", description="d")


def test_array_of_references_is_classified_as_array() -> None:
    node = parse_property_node({"type": "array", "items": {"$ref": "#/definitions/v1.Volume"}})

    assert isinstance(node, ArrayNode)
    assert node.items == ReferenceNode(ref="#/definitions/v1.Volume")


def test_inline_properties_and_open_maps() -> None:
    inline = parse_property_node({"properties": {"name": {"type": "string"}}})
    open_map = parse_property_node({"type": "object", "additionalProperties": {"type": "string"}})

    assert isinstance(inline, InlineObjectNode)
    assert list(inline.properties) == ["name"]
    assert open_map == PrimitiveNode(type_name="object")


def test_non_mapping_definition_raises_schema_error() -> None:
    with pytest.raises(SchemaError):
        parse_property_node("string")


def test_type_desc_renders_nested_arrays() -> None:
    node = parse_property_node(
        {"type": "array", "items": {"type": "array", "items": {"type": "string"}}}
    )

    assert type_desc(node) == "string[][]"


def test_type_desc_defaults_to_object() -> None:
    assert type_desc(parse_property_node({"properties": {}})) == "object"
    assert type_desc(parse_property_node({"$ref": "#/definitions/v1.Time"})) == "object"
    assert type_desc(parse_property_node({"type": "array"})) == "object[]"
    assert type_desc(parse_property_node({"type": "boolean"})) == "boolean"
