"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TextIO

import click

from kube_field_explainer.configuration import (
    DEFAULT_CONFIG_FILENAME,
    Configuration,
    ConfigurationError,
    load_configuration,
    write_placeholder_configuration,
)
from kube_field_explainer.configuration.loader import LOG_LEVELS
from kube_field_explainer.explain_formatting import format_explain
from kube_field_explainer.explain_session import (
    ExplainSession,
    ExplainSourceError,
    FileSchemaProvider,
    TextDirectoryProvider,
)
from kube_field_explainer.field_resolution import resolve_field
from kube_field_explainer.schema_management import SchemaError, load_schema_document


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="kube-field-explainer")
@click.option(
    "--log-level",
    "log_level",
    required=False,
    default=None,
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Log verbosity; overrides logging.level from the configuration file",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """Explain Kubernetes API fields from a saved schema or kubectl explain output."""
    ctx.ensure_object(dict)
    ctx.obj["log_level"] = log_level.upper() if log_level else None
    if log_level:
        _configure_logging(log_level)


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="resolve")
@click.argument("field_path")
@click.option(
    "--schema",
    "schema_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the saved API schema (swagger JSON)",
)
def resolve(field_path: str, schema_path: str) -> None:
    """Explain FIELD_PATH (e.g. Deployment.metadata.name) from an API schema."""
    path = Path(schema_path)
    try:
        document = load_schema_document(path.read_text(encoding="utf-8"), source=str(path))
    except (SchemaError, OSError, UnicodeDecodeError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(resolve_field(document, field_path).to_markup())


@cli.command(name="format-text")
@click.option(
    "--input",
    "input_file",
    required=False,
    default="-",
    show_default=True,
    type=click.File("r", encoding="utf-8"),
    help="File holding kubectl explain output; '-' reads standard input",
)
def format_text(input_file: TextIO) -> None:
    """Reformat kubectl explain output as marked-up text."""
    try:
        raw_text = input_file.read()
    except UnicodeDecodeError as exc:
        raise CliError(f"Cannot decode explain output as UTF-8: {exc}") from exc
    click.echo(format_explain(raw_text).value)


@cli.command(name="explain")
@click.argument("field_path")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON configuration file",
)
@click.pass_context
def explain(ctx: click.Context, field_path: str, config_path: str) -> None:
    """Explain FIELD_PATH using the documentation sources in the configuration."""
    try:
        configuration = load_configuration(config_path)
        if not ctx.obj.get("log_level"):
            _configure_logging(configuration.logging.level)
        session = build_explain_session(configuration)
        explanation = session.explain(field_path)
    except (ConfigurationError, ExplainSourceError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(explanation.value)


def build_explain_session(configuration: Configuration) -> ExplainSession:
    """Create a fresh explain session from the configured documentation sources."""
    schema_provider = None
    if configuration.schema.path is not None:
        schema_provider = FileSchemaProvider(configuration.schema.path)
    text_provider = None
    if configuration.explain.text_directory is not None:
        text_provider = TextDirectoryProvider(configuration.explain.text_directory)
    return ExplainSession(
        schema_provider=schema_provider,
        text_provider=text_provider,
        backend=configuration.explain.backend,
    )


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
