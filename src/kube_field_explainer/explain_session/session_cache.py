"""Per-session documentation cache and backend selection."""

from __future__ import annotations

import logging
from enum import Enum

from kube_field_explainer.explain_formatting import FormattedExplanation, format_explain
from kube_field_explainer.field_resolution import resolve_field
from kube_field_explainer.schema_management import SchemaDocument

from .documentation_sources import ExplainSourceError, RawTextProvider, SchemaProvider

_LOGGER = logging.getLogger("kube_field_explainer.explain_session")


class ExplainBackend(str, Enum):
    """Documentation backend used to answer explain requests."""

    AUTO = "auto"
    SCHEMA = "schema"
    TEXT = "text"


class ExplainSession:
    """Caches fetched documentation for the lifetime of one explain session.

    The schema document is fetched at most once and raw explain text once per
    reference, until `invalidate` is called. Resolution and formatting are
    pure; the session only owns the cached inputs.
    """

    def __init__(
        self,
        *,
        schema_provider: SchemaProvider | None = None,
        text_provider: RawTextProvider | None = None,
        backend: ExplainBackend = ExplainBackend.AUTO,
    ) -> None:
        self._schema_provider = schema_provider
        self._text_provider = text_provider
        self._backend = backend
        self._schema_document: SchemaDocument | None = None
        self._raw_text: dict[str, str] = {}

    def active_backend(self) -> ExplainBackend:
        """Return the backend that will answer requests, preferring the schema."""
        if self._backend is ExplainBackend.SCHEMA:
            if self._schema_provider is None:
                raise ExplainSourceError("Schema backend selected but no API schema is configured.")
            return ExplainBackend.SCHEMA
        if self._backend is ExplainBackend.TEXT:
            if self._text_provider is None:
                raise ExplainSourceError(
                    "Text backend selected but no explain text source is configured."
                )
            return ExplainBackend.TEXT
        if self._schema_provider is not None:
            return ExplainBackend.SCHEMA
        if self._text_provider is not None:
            return ExplainBackend.TEXT
        raise ExplainSourceError("No documentation source is configured.")

    def schema(self) -> SchemaDocument:
        if self._schema_provider is None:
            raise ExplainSourceError("No API schema is configured.")
        if self._schema_document is None:
            _LOGGER.debug("Schema cache miss; fetching")
            self._schema_document = self._schema_provider.fetch_schema()
        return self._schema_document

    def raw_text(self, reference: str) -> str:
        if self._text_provider is None:
            raise ExplainSourceError("No explain text source is configured.")
        cached = self._raw_text.get(reference)
        if cached is None:
            _LOGGER.debug("Explain text cache miss for %r", reference)
            cached = self._text_provider.fetch_explanation(reference)
            self._raw_text[reference] = cached
        return cached

    def invalidate(self) -> None:
        """Drop every cached document, e.g. when the feature is switched off."""
        self._schema_document = None
        self._raw_text.clear()

    def explain(self, field_path: str) -> FormattedExplanation:
        """Explain `field_path` with whichever backend is available."""
        backend = self.active_backend()
        _LOGGER.debug("Explaining %r using %s backend", field_path, backend.value)
        if backend is ExplainBackend.SCHEMA:
            return FormattedExplanation(resolve_field(self.schema(), field_path).to_markup())
        return format_explain(self.raw_text(field_path))
