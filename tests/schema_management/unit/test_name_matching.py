"""Schema name matching tests."""

from __future__ import annotations

from kube_field_explainer.schema_management import find_property, singularize_versioned_name


def test_lookup_is_case_insensitive() -> None:
    properties = {"Metadata": {"type": "object"}}

    assert find_property(properties, "metadata") == {"type": "object"}
    assert find_property(properties, "METADATA") == {"type": "object"}


def test_plural_name_finds_singular_property() -> None:
    properties = {"volume": {"type": "array"}}

    assert find_property(properties, "volumes") == {"type": "array"}


def test_exact_match_wins_over_singular_fallback() -> None:
    properties = {"volume": 1, "volumes": 2}

    assert find_property(properties, "Volumes") == 2


def test_missing_name_returns_none() -> None:
    assert find_property({"name": 1}, "biscuits") is None
    assert find_property({"name": 1}, "status") is None


def test_non_mapping_scope_returns_none() -> None:
    assert find_property("v1.Time", "definitions") is None
    assert find_property(None, "metadata") is None


def test_singularize_only_touches_last_component() -> None:
    assert singularize_versioned_name("v1.Deployments") == "v1.Deployment"
    assert singularize_versioned_name("volumes") == "volume"
    assert singularize_versioned_name("v1beta1.Jobs") == "v1beta1.Job"


def test_versioned_plural_type_name_is_found() -> None:
    definitions = {"v1.Pod": {"description": "pod"}}

    assert find_property(definitions, "v1.pods") == {"description": "pod"}
