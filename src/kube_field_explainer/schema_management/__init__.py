"""Schema management exports."""

from .name_matching import find_property, singularize_versioned_name
from .schema_loading import SchemaError, load_schema_document, parse_property_node
from .schema_models import (
    ArrayNode,
    InlineObjectNode,
    PrimitiveNode,
    PropertyNode,
    ReferenceNode,
    SchemaDocument,
)

__all__ = [
    "ArrayNode",
    "InlineObjectNode",
    "PrimitiveNode",
    "PropertyNode",
    "ReferenceNode",
    "SchemaDocument",
    "SchemaError",
    "find_property",
    "load_schema_document",
    "parse_property_node",
    "singularize_versioned_name",
]
