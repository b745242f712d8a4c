"""Field resolution service tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from kube_field_explainer.field_resolution import (
    CompoundExplanation,
    ErrorExplanation,
    ExplanationErrorKind,
    LeafExplanation,
    UnresolvableTypeReferenceError,
    find_kind_model,
    find_type_definition,
    resolve_field,
)
from kube_field_explainer.schema_management import SchemaDocument, load_schema_document


def _sample_path() -> Path:
    return Path(__file__).resolve().parents[3] / "samples" / "sample-swagger.json"


@pytest.fixture(name="schema")
def _schema() -> SchemaDocument:
    path = _sample_path()
    return load_schema_document(path.read_text(encoding="utf-8"), source=str(path))


def _object_meta_property_names() -> list[str]:
    raw = json.loads(_sample_path().read_text(encoding="utf-8"))
    return list(raw["definitions"]["v1.ObjectMeta"]["properties"])


def test_primitive_field_resolves_to_leaf(schema: SchemaDocument) -> None:
    explanation = resolve_field(schema, "Deployment.metadata.generation")

    assert isinstance(explanation, LeafExplanation)
    markup = explanation.to_markup()
    assert markup.startswith("**generation** (integer)")
    assert "A sequence number" in markup


def test_trailing_segments_after_primitive_are_ignored(schema: SchemaDocument) -> None:
    shorter = resolve_field(schema, "Deployment.metadata.generation")
    longer = resolve_field(schema, "Deployment.metadata.generation.biscuits")

    assert longer == shorter
    assert longer.to_markup() == shorter.to_markup()


def test_missing_field_reports_offending_segment(schema: SchemaDocument) -> None:
    explanation = resolve_field(schema, "Deployment.metadata.biscuits")

    assert isinstance(explanation, ErrorExplanation)
    assert explanation.kind == ExplanationErrorKind.FIELD_DOES_NOT_EXIST
    assert explanation.header == "biscuits"
    assert explanation.to_markup().startswith("**biscuits:** field does not exist")


def test_missing_field_on_inline_kind_properties(schema: SchemaDocument) -> None:
    explanation = resolve_field(schema, "Deployment.Biscuits")

    assert explanation.to_markup() == "**Biscuits:** field does not exist"


def test_lowercase_kind_resolves_like_capitalised_kind(schema: SchemaDocument) -> None:
    assert resolve_field(schema, "deployment.metadata") == resolve_field(
        schema, "Deployment.metadata"
    )


def test_reference_at_end_of_path_lists_referenced_type_children(schema: SchemaDocument) -> None:
    explanation = resolve_field(schema, "Deployment.metadata")

    assert isinstance(explanation, CompoundExplanation)
    assert explanation.name == "metadata"
    assert explanation.description == "Standard object metadata."
    assert explanation.type_description == (
        "ObjectMeta is metadata that all persisted resources must have."
    )
    assert [child.name for child in explanation.children] == _object_meta_property_names()
    types = {child.name: child.type_description for child in explanation.children}
    assert types == {
        "annotations": "object",
        "creationTimestamp": "object",
        "finalizers": "string[]",
        "generation": "integer",
        "name": "string",
        "ownerReferences": "object[]",
    }


def test_compound_markup_layout(schema: SchemaDocument) -> None:
    markup = resolve_field(schema, "Deployment.metadata").to_markup()

    assert markup.startswith(
        "metadata: Standard object metadata.\n\n"
        "ObjectMeta is metadata that all persisted resources must have.\n\n"
        "**annotations** (object)\n\n"
        "Annotations is an unstructured key value map stored with a resource.\n\n"
    )
    assert markup.endswith(
        "**ownerReferences** (object[])\n\nList of objects depended by this object.\n\n"
    )


def test_kind_alone_lists_inline_properties_without_type_description(
    schema: SchemaDocument,
) -> None:
    explanation = resolve_field(schema, "Deployment")

    assert isinstance(explanation, CompoundExplanation)
    assert explanation.type_description is None
    assert [child.name for child in explanation.children] == [
        "apiVersion",
        "kind",
        "metadata",
        "spec",
    ]
    assert explanation.to_markup().startswith(
        "Deployment: Deployment enables declarative updates for Pods and ReplicaSets.\n\n"
        "**apiVersion** (string)\n\n"
    )


def test_reference_to_primitive_type_keeps_property_description(schema: SchemaDocument) -> None:
    explanation = resolve_field(schema, "Deployment.metadata.creationTimestamp")

    assert explanation == LeafExplanation(
        name="creationTimestamp",
        type_description="string",
        description=(
            "CreationTimestamp is a timestamp representing the server time "
            "when this object was created."
        ),
    )


def test_open_map_is_explained_as_a_whole(schema: SchemaDocument) -> None:
    whole = resolve_field(schema, "Deployment.metadata.annotations")
    keyed = resolve_field(
        schema, "Deployment.metadata.annotations.deployment.kubernetes.io/revision"
    )

    assert isinstance(whole, LeafExplanation)
    assert whole.type_description == "object"
    assert keyed == whole


def test_array_of_references_is_traversed(schema: SchemaDocument) -> None:
    listing = resolve_field(schema, "Deployment.metadata.ownerReferences")
    field = resolve_field(schema, "Deployment.metadata.ownerReferences.uid")

    assert isinstance(listing, CompoundExplanation)
    assert [child.name for child in listing.children] == ["kind", "uid"]
    assert field.to_markup() == "**uid** (string)\n\nUID of the referent."


def test_array_of_primitives_is_a_leaf(schema: SchemaDocument) -> None:
    explanation = resolve_field(schema, "Deployment.metadata.finalizers")

    assert explanation.to_markup().startswith("**finalizers** (string[])")


def test_plural_segment_matches_singular_property(schema: SchemaDocument) -> None:
    explanation = resolve_field(schema, "Deployment.spec.template.spec.volumes.name")

    assert explanation.to_markup() == "**name** (string)\n\nVolume's name."


def test_plural_kind_matches_singular_definition(schema: SchemaDocument) -> None:
    assert resolve_field(schema, "Deployments.metadata") == resolve_field(
        schema, "Deployment.metadata"
    )


def test_kind_falls_back_to_v1beta1_namespace(schema: SchemaDocument) -> None:
    explanation = resolve_field(schema, "Job.parallelism")

    assert isinstance(explanation, LeafExplanation)
    assert explanation.type_description == "integer"


def test_unknown_kind_is_reported(schema: SchemaDocument) -> None:
    explanation = resolve_field(schema, "Widget.spec")

    assert isinstance(explanation, ErrorExplanation)
    assert explanation.kind == ExplanationErrorKind.KIND_NOT_FOUND
    assert explanation.to_markup() == "**Widget:** kind not found"


def test_dangling_reference_is_reported(schema: SchemaDocument) -> None:
    explanation = resolve_field(schema, "Broken.target")

    assert isinstance(explanation, ErrorExplanation)
    assert explanation.kind == ExplanationErrorKind.UNRESOLVABLE_TYPE_REFERENCE
    assert explanation.to_markup() == (
        "**#/definitions/v1.Missing:** unresolvable type reference"
    )


def test_self_referencing_type_stops_when_path_is_consumed(schema: SchemaDocument) -> None:
    explanation = resolve_field(schema, "Tree.children.children.children")

    assert isinstance(explanation, CompoundExplanation)
    assert explanation.name == "children"
    assert explanation.type_description == "Tree nests copies of itself."


def test_find_type_definition_raises_on_missing_segment(schema: SchemaDocument) -> None:
    with pytest.raises(UnresolvableTypeReferenceError, match="v1.Missing"):
        find_type_definition(schema, ["definitions", "v1.Missing"])


def test_find_kind_model_skips_empty_v1_definition() -> None:
    document = load_schema_document(
        json.dumps(
            {
                "definitions": {
                    "v1.Job": {},
                    "v1beta1.Job": {"description": "beta", "properties": {}},
                }
            }
        )
    )

    assert find_kind_model(document, "job") == {"description": "beta", "properties": {}}


def test_bare_definitions_document_resolves_references() -> None:
    document = load_schema_document(
        json.dumps(
            {
                "v1.Pod": {
                    "properties": {
                        "metadata": {"$ref": "#/definitions/v1.ObjectMeta", "description": "meta"}
                    }
                },
                "v1.ObjectMeta": {"properties": {"name": {"type": "string"}}},
            }
        )
    )

    assert resolve_field(document, "Pod.metadata.name").to_markup() == "**name** (string)\n\n"
