"""Patch Application: shallow-merge a field mapping onto an immutable record.

Invariants:
    - A patched field is replaced whole, never deep-merged
    - Unpatched fields are carried over unchanged
    - The input record is never mutated; a new validated record is returned
    - Unknown and repository-owned fields are rejected with ValidationFailedError
"""

from typing import Any, Mapping, TypeVar

from pydantic import BaseModel, ValidationError

from copejem.core.domain_types import Patch, READONLY_FIELDS
from copejem.core.errors import ValidationFailedError

R = TypeVar("R", bound=BaseModel)


def check_writable_fields(model: type[BaseModel], fields: Mapping[str, Any]) -> None:
    """Reject keys that are not model fields or that the repository owns."""
    for name in fields:
        if name not in model.model_fields:
            raise ValidationFailedError(f"Unknown field '{name}'", name)
        if name in READONLY_FIELDS:
            raise ValidationFailedError(f"Field '{name}' is read-only", name)


def build_record(model: type[R], data: Mapping[str, Any]) -> R:
    """Validate a full field mapping into a record, mapping pydantic errors."""
    try:
        return model.model_validate(dict(data))
    except ValidationError as e:
        raise ValidationFailedError.from_pydantic(e, model=model)


def apply_patch(record: R, patch: Patch, **stamps: Any) -> R:
    """Return a new record with `patch` (and repository stamps) merged on top."""
    check_writable_fields(type(record), patch)
    merged = {**record.model_dump(), **patch, **stamps}
    return build_record(type(record), merged)


def changed_fields(before: BaseModel, after: BaseModel) -> set[str]:
    """Names of fields whose values differ between two records of one kind."""
    return {
        name for name in type(before).model_fields
        if getattr(before, name) != getattr(after, name)
    }
