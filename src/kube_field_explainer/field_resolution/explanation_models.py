"""Field explanation entities and their markup rendering."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ExplanationErrorKind(str, Enum):
    """Reasons a field path could not be explained."""

    KIND_NOT_FOUND = "kind_not_found"
    UNRESOLVABLE_TYPE_REFERENCE = "unresolvable_type_reference"
    FIELD_DOES_NOT_EXIST = "field_does_not_exist"


@dataclass(frozen=True)
class ChildField:
    """One child property listed under a compound explanation."""

    name: str
    type_description: str
    description: str | None

    def to_markup(self) -> str:
        return f"**{self.name}** ({self.type_description})\n\n{self.description or ''}\n\n"


@dataclass(frozen=True)
class LeafExplanation:
    """Explanation of a primitive or opaque field."""

    name: str
    type_description: str
    description: str | None

    def to_markup(self) -> str:
        return f"**{self.name}** ({self.type_description})\n\n{self.description or ''}"


@dataclass(frozen=True)
class CompoundExplanation:
    """Explanation of a field whose type lists child properties.

    `type_description` holds the prose of the referenced type when the field
    reached its properties through `$ref`; inline objects leave it unset.
    """

    name: str
    description: str | None
    type_description: str | None
    children: tuple[ChildField, ...]

    def to_markup(self) -> str:
        header = f"{self.name}: {self.description or ''}\n\n"
        if self.type_description is not None:
            header += f"{self.type_description}\n\n"
        return header + "".join(child.to_markup() for child in self.children)


@dataclass(frozen=True)
class ErrorExplanation:
    """User-facing explanation of why resolution stopped."""

    kind: ExplanationErrorKind
    header: str
    message: str

    def to_markup(self) -> str:
        return f"**{self.header}:** {self.message}"


Explanation = LeafExplanation | CompoundExplanation | ErrorExplanation
