"""Field resolution domain exports."""

from .explanation_models import (
    ChildField,
    CompoundExplanation,
    ErrorExplanation,
    Explanation,
    ExplanationErrorKind,
    LeafExplanation,
)
from .field_resolver import (
    KIND_NAMESPACE_PREFIXES,
    UnresolvableTypeReferenceError,
    find_kind_model,
    find_type_definition,
    resolve_field,
    type_desc,
)

__all__ = [
    "ChildField",
    "CompoundExplanation",
    "ErrorExplanation",
    "Explanation",
    "ExplanationErrorKind",
    "KIND_NAMESPACE_PREFIXES",
    "LeafExplanation",
    "UnresolvableTypeReferenceError",
    "find_kind_model",
    "find_type_definition",
    "resolve_field",
    "type_desc",
]
