"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "explainer.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Configuration template for kube-field-explainer.
# Provide at least one documentation source: schema.path or explain.text_directory.
# Relative paths are resolved against the directory holding this file.

schema:
  # API schema saved from the cluster, e.g. `kubectl get --raw /openapi/v2 > swagger.json`.
  # path: "<OPTIONAL>"

explain:
  # auto prefers the API schema and falls back to captured explain text.
  backend: "auto"
  # Directory of captured `kubectl explain` output named <reference>.txt,
  # e.g. deployment.metadata.txt.
  # text_directory: "<OPTIONAL>"

logging:
  # One of CRITICAL, ERROR, WARNING, INFO, DEBUG.
  level: "WARNING"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
