"""Line-level markup primitives for kubectl explain text."""

from __future__ import annotations

import re

SECTION_PREFIXES = ("FIELD:", "FIELDS:", "DESCRIPTION:", "RESOURCE:")
REQUIRED_MARKER = "-required-"

_FIELD_HEADER_PATTERN = re.compile(r"^(\w+)\s+<(\[\])?\w+>(\s+-required-)?$", re.ASCII)
_LEADING_WHITESPACE = re.compile(r"^\s+")


def embolden_prefix(line: str) -> str:
    """Bold a leading section keyword (`FIELDS:` -> `**FIELDS:**`)."""
    if not line:
        return line
    for prefix in SECTION_PREFIXES:
        if line.startswith(prefix):
            return f"**{prefix}**{line[len(prefix):]}"
    return line


def embolden_field_name(line: str) -> str:
    """Bold the name in a `name <type>` header and flag `-required-` fields.

    Lines that are not exactly a field header are returned unchanged.
    """
    if not line:
        return line
    parsed = _FIELD_HEADER_PATTERN.match(line)
    if parsed is None:
        return line
    name = parsed.group(1)
    formatted = f"**{name}**{line[len(name):]}"
    if parsed.group(3):
        formatted = formatted.replace(REQUIRED_MARKER, "**[required]**", 1)
    return formatted


def remove_leading(line: str) -> str:
    if not line:
        return line
    return _LEADING_WHITESPACE.sub("", line, count=1)
