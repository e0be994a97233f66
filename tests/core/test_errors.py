"""Error Hierarchy: tests for codes, statuses and the REST envelope.

Tests cover:
    - to_response() shape and context propagation
    - Each concrete error's code, category and HTTP status
    - ValidationFailedError.from_pydantic picks the first failing field, named by its python field
"""

import pytest
from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from copejem.core.errors import (
    AuthenticationRequiredError, BackendUnavailableError, ErrorCategory,
    ErrorSeverity, ImmutableRecordError, PermissionDeniedError,
    ResourceNotFoundError, ValidationFailedError,
)


def test_resource_not_found_response():
    body = ResourceNotFoundError("members", "m9").to_response()["error"]
    assert body["code"] == "RESOURCE_NOT_FOUND"
    assert body["category"] == "resource_not_found"
    assert body["context"] == {"entity_kind": "members", "entity_id": "m9"}
    assert "timestamp" in body


@pytest.mark.parametrize("error, status, code", [
    (ValidationFailedError("bad", "name"), 400, "VALIDATION_FAILED"),
    (AuthenticationRequiredError(), 401, "AUTHENTICATION_REQUIRED"),
    (PermissionDeniedError("is_admin"), 403, "PERMISSION_DENIED"),
    (ResourceNotFoundError("projects", "p1"), 404, "RESOURCE_NOT_FOUND"),
    (ImmutableRecordError("p1", 2023), 409, "IMMUTABLE_RECORD"),
    (BackendUnavailableError("down", "read"), 503, "BACKEND_UNAVAILABLE"),
])
def test_error_status_and_code(error, status, code):
    assert error.http_status == status
    assert error.code == code


def test_backend_unavailable_is_critical():
    error = BackendUnavailableError("connection refused", "execute")
    assert error.severity == ErrorSeverity.CRITICAL
    assert error.category == ErrorCategory.DATABASE
    assert error.operation == "execute"


def test_immutable_record_message_mentions_year():
    error = ImmutableRecordError("p1", 2023)
    assert "2023" in error.message
    assert error.category == ErrorCategory.BUSINESS_RULE


def test_from_pydantic_uses_first_error_location():
    class Body(BaseModel):
        name: str
        year: int

    with pytest.raises(ValidationError) as exc:
        Body.model_validate({"year": "not-a-year"})
    error = ValidationFailedError.from_pydantic(exc.value)
    assert error.field == "name"
    assert error.http_status == 400


def test_from_pydantic_maps_alias_back_to_field_name():
    class Body(BaseModel):
        model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
        exit_year: int

    with pytest.raises(ValidationError) as exc:
        Body.model_validate({"exitYear": "soon"})
    assert ValidationFailedError.from_pydantic(exc.value).field == "exitYear"
    assert ValidationFailedError.from_pydantic(exc.value, model=Body).field == "exit_year"
