"""Resolve dotted field paths through an API schema into explanations."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Mapping, Sequence
from typing import Any

from kube_field_explainer.schema_management.name_matching import find_property
from kube_field_explainer.schema_management.schema_loading import (
    SchemaError,
    parse_property_node,
)
from kube_field_explainer.schema_management.schema_models import (
    ArrayNode,
    InlineObjectNode,
    PrimitiveNode,
    PropertyNode,
    ReferenceNode,
    SchemaDocument,
)

from .explanation_models import (
    ChildField,
    CompoundExplanation,
    ErrorExplanation,
    Explanation,
    ExplanationErrorKind,
    LeafExplanation,
)

_LOGGER = logging.getLogger("kube_field_explainer.field_resolution")

KIND_NAMESPACE_PREFIXES = ("v1.", "v1beta1.")


class UnresolvableTypeReferenceError(Exception):
    """Raised when a `$ref` path segment cannot be found in the schema."""

    def __init__(self, ref_path: Sequence[str], missing_segment: str) -> None:
        self.ref_path = tuple(ref_path)
        self.missing_segment = missing_segment
        super().__init__(
            f"Undefined type reference segment '{missing_segment}' in {'/'.join(ref_path)}"
        )


def resolve_field(schema: SchemaDocument, field_path: str) -> Explanation:
    """Explain the field named by `field_path` (`Kind.field.subfield`).

    The path is split on every dot; the first segment names the kind and the
    rest are property names. A primitive reached before the path is exhausted
    is explained as-is and the trailing segments are ignored, as kubectl
    explain does.
    """
    segments = deque(field_path.split("."))
    kind_name = segments.popleft()
    kind_definition = find_kind_model(schema, kind_name)
    if kind_definition is None:
        _LOGGER.debug("Kind %r not found under %s", kind_name, KIND_NAMESPACE_PREFIXES)
        return ErrorExplanation(ExplanationErrorKind.KIND_NOT_FOUND, kind_name, "kind not found")

    current = _as_node(kind_definition)
    current_name = kind_name
    while True:
        ref = _reference_of(current)
        if ref is not None:
            try:
                target = _as_node(find_type_definition(schema, _ref_path_segments(ref)))
            except UnresolvableTypeReferenceError as exc:
                _LOGGER.debug("%s", exc)
                return ErrorExplanation(
                    ExplanationErrorKind.UNRESOLVABLE_TYPE_REFERENCE,
                    ref,
                    "unresolvable type reference",
                )
            if not isinstance(target, InlineObjectNode):
                return LeafExplanation(current_name, type_desc(target), current.description)
            properties = target.properties
            referenced_description: str | None = target.description or ""
        elif isinstance(current, InlineObjectNode):
            properties = current.properties
            referenced_description = None
        else:
            return LeafExplanation(current_name, type_desc(current), current.description)

        if not segments:
            return CompoundExplanation(
                name=current_name,
                description=current.description,
                type_description=referenced_description,
                children=_child_fields(properties),
            )

        next_name = segments.popleft()
        next_definition = find_property(properties, next_name)
        if next_definition is None:
            return ErrorExplanation(
                ExplanationErrorKind.FIELD_DOES_NOT_EXIST, next_name, "field does not exist"
            )
        current = _as_node(next_definition)
        current_name = next_name


def find_kind_model(schema: SchemaDocument, kind_name: str) -> Any | None:
    """Return the raw definition of a kind, trying each namespace prefix in order."""
    for prefix in KIND_NAMESPACE_PREFIXES:
        definition = find_property(schema.definitions, prefix + kind_name)
        if definition:
            return definition
    return None


def find_type_definition(schema: SchemaDocument, ref_path: Sequence[str]) -> Any:
    """Follow `ref_path` segments from the document root.

    Raises:
      UnresolvableTypeReferenceError: If any segment is missing.
    """
    scope: Any = schema.root
    for segment in ref_path:
        scope = find_property(scope, segment)
        if scope is None:
            raise UnresolvableTypeReferenceError(ref_path, segment)
    return scope


def type_desc(node: PropertyNode | None) -> str:
    """Render a node's type, arrays as `element[]`, untyped nodes as `object`."""
    if isinstance(node, ArrayNode):
        return type_desc(node.items) + "[]"
    if node is None or node.type_name is None:
        return "object"
    return node.type_name


def _reference_of(node: PropertyNode) -> str | None:
    if isinstance(node, ReferenceNode):
        return node.ref
    if isinstance(node, ArrayNode) and isinstance(node.items, ReferenceNode):
        return node.items.ref
    return None


def _ref_path_segments(ref: str) -> list[str]:
    # "#/definitions/v1.ObjectMeta" -> ["definitions", "v1.ObjectMeta"]
    return ref.split("/")[1:]


def _child_fields(properties: Mapping[str, Any]) -> tuple[ChildField, ...]:
    children = []
    for name, definition in properties.items():
        node = _as_node(definition)
        children.append(ChildField(str(name), type_desc(node), node.description))
    return tuple(children)


def _as_node(raw: Any) -> PropertyNode:
    try:
        return parse_property_node(raw)
    except SchemaError:
        _LOGGER.debug("Treating malformed schema node %r as opaque", raw)
        return PrimitiveNode(type_name=None)
