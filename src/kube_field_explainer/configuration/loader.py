"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from kube_field_explainer.explain_session import ExplainBackend

from .runtime_settings import (
    Configuration,
    ExplainSettings,
    LoggingSettings,
    SchemaSourceConfig,
)

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
DEFAULT_LOG_LEVEL = "WARNING"


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Cannot read configuration file {path}: {exc}") from exc

    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    schema = _parse_schema_section(parsed.get("schema"), path.parent)
    explain = _parse_explain_section(parsed.get("explain"), path.parent)
    _check_backend_sources(explain, schema)
    logging_settings = _parse_logging_section(parsed.get("logging"))

    return Configuration(path=path, schema=schema, explain=explain, logging=logging_settings)


def _parse_schema_section(value: Any, base_path: Path) -> SchemaSourceConfig:
    section = _optional_mapping(value, "schema")
    path_value = _optional_string(section.get("path"), "schema.path")
    if path_value is None:
        return SchemaSourceConfig(path=None)
    schema_path = _resolve_path(base_path, path_value)
    if not schema_path.is_file():
        raise ConfigurationError(f"API schema file not found: {schema_path}")
    return SchemaSourceConfig(path=schema_path)


def _parse_explain_section(value: Any, base_path: Path) -> ExplainSettings:
    section = _optional_mapping(value, "explain")
    backend_raw = _optional_string(section.get("backend"), "explain.backend") or "auto"
    try:
        backend = ExplainBackend(backend_raw.lower())
    except ValueError as exc:
        allowed = ", ".join(member.value for member in ExplainBackend)
        raise ConfigurationError(f"explain.backend must be one of: {allowed}.") from exc

    directory_value = _optional_string(section.get("text_directory"), "explain.text_directory")
    text_directory = None
    if directory_value is not None:
        text_directory = _resolve_path(base_path, directory_value)
        if not text_directory.is_dir():
            raise ConfigurationError(f"Explain text directory not found: {text_directory}")
    return ExplainSettings(backend=backend, text_directory=text_directory)


def _check_backend_sources(explain: ExplainSettings, schema: SchemaSourceConfig) -> None:
    if explain.backend is ExplainBackend.SCHEMA and schema.path is None:
        raise ConfigurationError("explain.backend 'schema' requires schema.path.")
    if explain.backend is ExplainBackend.TEXT and explain.text_directory is None:
        raise ConfigurationError("explain.backend 'text' requires explain.text_directory.")
    if schema.path is None and explain.text_directory is None:
        raise ConfigurationError(
            "At least one documentation source (schema.path or explain.text_directory) "
            "must be provided."
        )


def _parse_logging_section(value: Any) -> LoggingSettings:
    section = _optional_mapping(value, "logging")
    level = _optional_string(section.get("level"), "logging.level") or DEFAULT_LOG_LEVEL
    level = level.upper()
    if level not in LOG_LEVELS:
        raise ConfigurationError(f"logging.level must be one of: {', '.join(LOG_LEVELS)}.")
    return LoggingSettings(level=level)


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None
