"""Explain session exports."""

from .documentation_sources import (
    ExplainSourceError,
    FileSchemaProvider,
    RawTextProvider,
    SchemaProvider,
    TextDirectoryProvider,
)
from .session_cache import ExplainBackend, ExplainSession

__all__ = [
    "ExplainBackend",
    "ExplainSession",
    "ExplainSourceError",
    "FileSchemaProvider",
    "RawTextProvider",
    "SchemaProvider",
    "TextDirectoryProvider",
]
