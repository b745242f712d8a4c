"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from kube_field_explainer.explain_session import ExplainBackend


@dataclass(frozen=True)
class SchemaSourceConfig:
    """Location of the saved API schema (swagger) document."""

    path: Path | None


@dataclass(frozen=True)
class ExplainSettings:
    """Documentation backend preferences."""

    backend: ExplainBackend
    text_directory: Path | None


@dataclass(frozen=True)
class LoggingSettings:
    """Log output configuration."""

    level: str


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path
    schema: SchemaSourceConfig
    explain: ExplainSettings
    logging: LoggingSettings
