"""Explain text formatting exports."""

from .line_markup import embolden_field_name, embolden_prefix, remove_leading
from .text_formatter import (
    ContentKind,
    FormattedExplanation,
    FormatterState,
    description_step,
    format_description,
    format_explain,
    format_field,
    format_resource,
    resource_step,
)

__all__ = [
    "ContentKind",
    "FormattedExplanation",
    "FormatterState",
    "description_step",
    "embolden_field_name",
    "embolden_prefix",
    "format_description",
    "format_explain",
    "format_field",
    "format_resource",
    "remove_leading",
    "resource_step",
]
