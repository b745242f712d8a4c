"""Case-insensitive, plural-tolerant schema name lookup."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import inflection

_LOGGER = logging.getLogger("kube_field_explainer.schema")


def find_property(candidates: Mapping[str, Any] | None, name: str) -> Any | None:
    """Return the entry whose key matches `name`, or None.

    Keys are compared case-insensitively. On a miss the last dot-separated
    component of `name` is singularized and the lookup retried, so `volumes`
    finds `volume` and `v1.Deployments` finds `v1.Deployment`. Lookup stops
    once singularizing no longer changes the name.
    """
    if not isinstance(candidates, Mapping):
        return None

    sought = str(name)
    tried: set[str] = set()
    while sought not in tried:
        tried.add(sought)
        lowered = sought.lower()
        for key, value in candidates.items():
            if str(key).lower() == lowered:
                return value
        singular = singularize_versioned_name(sought)
        if singular == sought:
            break
        _LOGGER.debug("No match for %r; retrying as %r", sought, singular)
        sought = singular
    return None


def singularize_versioned_name(name: str) -> str:
    """Singularize only the last dot-separated component (`v1.Pods` -> `v1.Pod`)."""
    prefix, separator, last = name.rpartition(".")
    return f"{prefix}{separator}{inflection.singularize(last)}"
