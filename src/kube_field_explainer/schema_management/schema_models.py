"""Schema management entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class SchemaDocument:
    """Parsed API schema; `root` always carries a `definitions` mapping."""

    root: Mapping[str, Any]
    source: str | None = None

    @property
    def definitions(self) -> Mapping[str, Any]:
        return self.root["definitions"]


@dataclass(frozen=True)
class PrimitiveNode:
    """Property without `$ref` or `properties`, including open key/value maps."""

    type_name: str | None
    description: str | None = None


@dataclass(frozen=True)
class InlineObjectNode:
    """Property that lists its child properties directly."""

    properties: Mapping[str, Any]
    type_name: str | None = None
    description: str | None = None


@dataclass(frozen=True)
class ReferenceNode:
    """Property pointing at another type definition by `$ref` path."""

    ref: str
    type_name: str | None = None
    description: str | None = None


@dataclass(frozen=True)
class ArrayNode:
    """Property of `type: array` whose element shape is `items`."""

    items: PropertyNode | None
    description: str | None = None

    @property
    def type_name(self) -> str:
        return "array"


PropertyNode = PrimitiveNode | InlineObjectNode | ReferenceNode | ArrayNode
