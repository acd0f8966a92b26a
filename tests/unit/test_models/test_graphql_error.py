"""Tests for GraphQL error payload models."""

import pytest
from pydantic import ValidationError
from src.models.graphql_error import GraphQLErrorExtensions, GraphQLErrorPayload


@pytest.mark.unit
def test_payload_serializes_with_graphql_names():
    """originalError uses its GraphQL name and unset fields are dropped."""
    payload = GraphQLErrorPayload(
        message="Duplicate record: a record with the same unique field already exists.",
        extensions=GraphQLErrorExtensions(
            code="DUPLICATE_RECORD",
            original_error='duplicate key value violates unique constraint "tags_name_key"',
        ),
    )

    assert payload.to_dict() == {
        "message": "Duplicate record: a record with the same unique field already exists.",
        "extensions": {
            "code": "DUPLICATE_RECORD",
            "originalError": 'duplicate key value violates unique constraint "tags_name_key"',
        },
    }


@pytest.mark.unit
def test_extensions_accept_alias():
    """Extensions can be built from a GraphQL-shaped dict."""
    extensions = GraphQLErrorExtensions.model_validate({"code": "INTERNAL_ERROR", "originalError": "boom"})

    assert extensions.original_error == "boom"


@pytest.mark.unit
def test_payload_with_path():
    """Paths mix field names and list indexes."""
    payload = GraphQLErrorPayload(
        message="x",
        path=["createBrief", 0, "tags"],
        extensions=GraphQLErrorExtensions(code="INTERNAL_ERROR"),
    )

    assert payload.to_dict()["path"] == ["createBrief", 0, "tags"]


@pytest.mark.unit
def test_code_is_required():
    """Extensions without a code are rejected."""
    with pytest.raises(ValidationError):
        GraphQLErrorExtensions()
