"""Reformat plain-text kubectl explain output as lightly marked-up text."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum

from .line_markup import embolden_field_name, embolden_prefix, remove_leading


class ContentKind(str, Enum):
    """How the presentation layer should render a formatted explanation."""

    MARKDOWN = "markdown"
    JSON = "json"


class FormatterState(str, Enum):
    """Parser states shared by the description and resource machines."""

    INIT = "init"
    DESCRIPTION_BODY = "description-body"
    FIELDS_NONE = "fields-none"
    FIELD_FIRST = "field-first"
    FIELD_REST = "field-rest"


@dataclass(frozen=True)
class FormattedExplanation:
    """Formatter output with its content tag."""

    value: str
    content_kind: ContentKind = ContentKind.MARKDOWN


StepResult = tuple[FormatterState, tuple[str, ...]]
StepFunction = Callable[[FormatterState, str], StepResult]


def format_explain(raw_text: str | None) -> FormattedExplanation:
    """Format raw explain output, dispatching on its leading section keyword.

    Text that does not open with `FIELD`, `DESCRIPTION` or `RESOURCE` is
    passed through untouched and tagged as JSON content.
    """
    if not raw_text:
        return FormattedExplanation(raw_text or "")

    lines = raw_text.replace("\r\n", "\n").split("\n")

    if raw_text.startswith("FIELD"):
        return FormattedExplanation(format_field(lines))
    if raw_text.startswith("DESCRIPTION"):
        return FormattedExplanation(format_description(lines))
    if raw_text.startswith("RESOURCE"):
        return FormattedExplanation(format_resource(lines))
    return FormattedExplanation(raw_text, ContentKind.JSON)


def format_field(lines: Iterable[str]) -> str:
    """Format a single `FIELD:` block.

    FIELD: name <type>                **FIELD:** name <type>

    DESCRIPTION:              ->      **DESCRIPTION:**
        first line                    first line
    """
    return "\n".join(remove_leading(embolden_prefix(line)) for line in lines)


def format_description(lines: Iterable[str]) -> str:
    """Format a `DESCRIPTION:` block followed by a `FIELDS:` listing.

    Each field header is bolded and its body re-indented to column zero,
    separated from the header by one blank line.
    """
    return _fold_lines(lines, description_step)


def format_resource(lines: Iterable[str]) -> str:
    """Format a `RESOURCE:` block; its indented description is flattened too."""
    return _fold_lines(lines, resource_step)


def description_step(state: FormatterState, line: str) -> StepResult:
    if state is FormatterState.INIT:
        formatted = embolden_prefix(line)
        if formatted.startswith("**FIELD"):
            return FormatterState.FIELDS_NONE, (formatted, "")
        return FormatterState.INIT, (formatted,)
    return _fields_step(state, line)


def resource_step(state: FormatterState, line: str) -> StepResult:
    if state is FormatterState.INIT:
        formatted = embolden_prefix(line)
        if formatted.startswith("**FIELD"):
            return FormatterState.FIELDS_NONE, (formatted, "")
        if formatted.startswith("**DESCRIPTION"):
            return FormatterState.DESCRIPTION_BODY, (formatted,)
        return FormatterState.INIT, (formatted,)
    if state is FormatterState.DESCRIPTION_BODY:
        formatted = remove_leading(embolden_prefix(line))
        if formatted.startswith("**FIELD"):
            return FormatterState.FIELDS_NONE, (formatted, "")
        return FormatterState.DESCRIPTION_BODY, (formatted,)
    return _fields_step(state, line)


def _fields_step(state: FormatterState, line: str) -> StepResult:
    if state is FormatterState.FIELDS_NONE:
        formatted = embolden_field_name(remove_leading(line))
        if formatted.startswith("**"):
            return FormatterState.FIELD_FIRST, (formatted,)
        return FormatterState.FIELDS_NONE, (formatted,)
    if state is FormatterState.FIELD_FIRST:
        # the blank line between a field header and its body is dropped
        if not line:
            return FormatterState.FIELD_FIRST, ()
        return FormatterState.FIELD_REST, ("", remove_leading(line))
    if state is FormatterState.FIELD_REST:
        if not line:
            return FormatterState.FIELDS_NONE, ("",)
        return FormatterState.FIELD_REST, (remove_leading(line),)
    raise ValueError(f"Unexpected formatter state for field listing: {state.value}")


def _fold_lines(lines: Iterable[str], step: StepFunction) -> str:
    state = FormatterState.INIT
    emitted: list[str] = []
    for line in lines:
        state, produced = step(state, line)
        emitted.extend(produced)
    return "\n".join(emitted)
