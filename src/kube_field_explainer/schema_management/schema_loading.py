"""Schema loading and property classification service."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from .schema_models import (
    ArrayNode,
    InlineObjectNode,
    PrimitiveNode,
    PropertyNode,
    ReferenceNode,
    SchemaDocument,
)

_LOGGER = logging.getLogger("kube_field_explainer.schema")


class SchemaError(Exception):
    """Raised for schema parsing or classification failures."""


def load_schema_document(text: str, source: str | None = None) -> SchemaDocument:
    """Parse schema text into a document rooted at a `definitions` mapping.

    Swagger documents carry their type definitions under `definitions`; bare
    definition maps are wrapped so `#/definitions/<name>` pointers resolve the
    same way for both shapes.
    """
    try:
        parsed = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SchemaError(f"Invalid API schema{_describe_source(source)}: {exc}") from exc

    if not isinstance(parsed, Mapping):
        raise SchemaError(f"API schema root must be an object{_describe_source(source)}.")

    definitions = parsed.get("definitions")
    if isinstance(definitions, Mapping):
        root = parsed
    else:
        _LOGGER.debug("Schema%s has no definitions section; using root", _describe_source(source))
        root = {"definitions": parsed}

    return SchemaDocument(root=MappingProxyType(dict(root)), source=source)


def parse_property_node(raw: Any) -> PropertyNode:
    """Classify one raw property or type definition.

    Precedence follows the shape checks the resolver relies on: `$ref`, then
    an array whose items carry `$ref`, then inline `properties`, then a plain
    array, and finally a primitive.
    """
    if not isinstance(raw, Mapping):
        raise SchemaError("Schema property definitions must be objects.")

    description = _optional_text(raw.get("description"))
    raw_type = raw.get("type")
    type_name = raw_type if isinstance(raw_type, str) else None

    ref = raw.get("$ref")
    if isinstance(ref, str) and ref:
        return ReferenceNode(ref=ref, type_name=type_name, description=description)

    items = raw.get("items")
    if isinstance(items, Mapping) and isinstance(items.get("$ref"), str):
        return ArrayNode(items=parse_property_node(items), description=description)

    properties = raw.get("properties")
    if isinstance(properties, Mapping):
        return InlineObjectNode(
            properties=properties, type_name=type_name, description=description
        )

    if type_name == "array":
        item_node = parse_property_node(items) if isinstance(items, Mapping) else None
        return ArrayNode(items=item_node, description=description)

    return PrimitiveNode(type_name=type_name, description=description)


def _optional_text(value: Any) -> str | None:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


def _describe_source(source: str | None) -> str:
    return f" in {source}" if source else ""
