"""Providers supplying schema documents and raw explain text."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

from kube_field_explainer.schema_management import (
    SchemaDocument,
    SchemaError,
    load_schema_document,
)

_LOGGER = logging.getLogger("kube_field_explainer.explain_session")


class ExplainSourceError(Exception):
    """Raised when documentation cannot be obtained from a source."""


class SchemaProvider(Protocol):
    """Supplies the API schema document for a session."""

    def fetch_schema(self) -> SchemaDocument: ...


class RawTextProvider(Protocol):
    """Supplies kubectl explain output for a kind/field reference."""

    def fetch_explanation(self, reference: str) -> str: ...


class FileSchemaProvider:
    """Reads a swagger document saved from the cluster's API server."""

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    def fetch_schema(self) -> SchemaDocument:
        _LOGGER.debug("Reading API schema from %s", self._path)
        try:
            text = self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ExplainSourceError(f"Cannot read API schema {self._path}: {exc}") from exc
        try:
            return load_schema_document(text, source=str(self._path))
        except SchemaError as exc:
            raise ExplainSourceError(str(exc)) from exc


class TextDirectoryProvider:
    """Reads captured explain output stored as `<reference>.txt` files."""

    def __init__(self, directory: Path | str) -> None:
        self._directory = Path(directory)

    def fetch_explanation(self, reference: str) -> str:
        directory = self._directory.resolve()
        path = (directory / f"{reference}.txt").resolve()
        if path.parent != directory:
            raise ExplainSourceError(
                f"Explain reference '{reference}' does not name a file in {directory}"
            )
        _LOGGER.debug("Reading explain text from %s", path)
        if not path.is_file():
            raise ExplainSourceError(f"No explain output captured for '{reference}': {path}")
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ExplainSourceError(f"Cannot read explain output {path}: {exc}") from exc
