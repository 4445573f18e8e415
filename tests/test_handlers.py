"""Unit tests for validation error formatting and response helpers."""

from datetime import datetime, timezone
from typing import Annotated, Any

import pytest
from bson import ObjectId
from pydantic import BaseModel, Field, StringConstraints, ValidationError

from common.utils import error_response, serialize_document
from common.utils.handlers import format_validation_errors
from common.utils.validation import forbidden, message


class RatingModel(BaseModel):
    rating: Annotated[int, Field(ge=1, le=5), message("Please provide a valid rating.")]
    title: Annotated[str, StringConstraints(max_length=32)] = "t"


class PatchModel(BaseModel):
    name: Annotated[str, StringConstraints(min_length=1), message("Please provide a name.")] = None
    places: Annotated[Any, forbidden("Cannot modify user listings.")] = None


def errors_of(model, payload):
    with pytest.raises(ValidationError) as exc_info:
        model.model_validate(payload)
    return format_validation_errors(exc_info.value.errors())


def test_location_prefix_stripped():
    errors = [
        {"loc": ("body", "rating"), "msg": "Input should be less than or equal to 5"},
        {"loc": ("body", "title"), "msg": "String should have at most 32 characters"},
    ]

    assert format_validation_errors(errors) == [
        {"field": "rating", "message": "Input should be less than or equal to 5"},
        {"field": "title", "message": "String should have at most 32 characters"},
    ]


def test_first_error_per_field_wins():
    errors = [
        {"loc": ("body", "email"), "msg": "first"},
        {"loc": ("body", "email"), "msg": "second"},
    ]
    assert format_validation_errors(errors) == [{"field": "email", "message": "first"}]


def test_field_named_like_a_location():
    errors = [{"loc": ("body", "body"), "msg": "too long"}]
    assert format_validation_errors(errors) == [{"field": "body", "message": "too long"}]


class TestFieldMessages:
    @pytest.mark.parametrize("rating", [0, 6, "five"])
    def test_message_replaces_pydantic_text(self, rating):
        assert errors_of(RatingModel, {"rating": rating}) == [
            {"field": "rating", "message": "Please provide a valid rating."}
        ]

    def test_fields_without_message_keep_pydantic_text(self):
        errors = errors_of(RatingModel, {"rating": 3, "title": "x" * 33})
        assert errors == [{"field": "title", "message": "String should have at most 32 characters"}]

    def test_missing_field_reports_required(self):
        assert errors_of(RatingModel, {}) == [{"field": "rating", "message": "Field required"}]

    def test_explicit_null_is_rejected(self):
        assert errors_of(PatchModel, {"name": None}) == [
            {"field": "name", "message": "Please provide a name."}
        ]

    def test_omitted_optional_field_is_left_unset(self):
        assert PatchModel.model_validate({}).model_dump(exclude_unset=True) == {}

    @pytest.mark.parametrize("value", [[], None, "x"])
    def test_forbidden_field_rejected_for_any_value(self, value):
        assert errors_of(PatchModel, {"places": value}) == [
            {"field": "places", "message": "Cannot modify user listings."}
        ]


def test_error_response_shapes():
    assert error_response("Not found") == {"message": "Not found"}
    assert error_response("Validation error", [{"field": "a", "message": "b"}]) == {
        "errors": [{"field": "a", "message": "b"}]
    }


def test_serialize_document_nested():
    oid = ObjectId()
    when = datetime(2026, 5, 1, tzinfo=timezone.utc)

    doc = serialize_document({"_id": oid, "places": [{"_id": oid, "createdAt": when}]})

    assert doc == {"_id": str(oid), "places": [{"_id": str(oid), "createdAt": when.isoformat()}]}
