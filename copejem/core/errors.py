"""Error Hierarchy: typed, categorized exceptions for all COPEJEM failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; BackendUnavailableError is critical
    - to_response() produces the REST envelope
    - No internal details leaked in user-facing messages
    - Lookup misses and failed logins are NOT errors on read paths (they return None)

Design Decisions:
    - Single hierarchy with CopejemError base: one FastAPI handler catches all
    - ErrorContext as dataclass: observability without coupling to the logging setup
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone

from pydantic import BaseModel, ValidationError

from copejem.core.domain_types import ProjectId


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    AUTHORIZATION = "authorization"
    AUTHENTICATION = "authentication"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    entity_kind: str | None = None
    entity_id: str | None = None
    actor_id: str | None = None
    user_message: str | None = None
    debug_info: dict[str, Any] | None = None


class CopejemError(Exception):
    """Base exception for all COPEJEM errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.context.user_message or self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "entity_kind": self.context.entity_kind,
                    "entity_id": self.context.entity_id,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class ValidationFailedError(CopejemError):
    """A required field is missing or a field value is invalid."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_FAILED", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field

    @classmethod
    def from_pydantic(
        cls,
        exc: ValidationError,
        context: ErrorContext | None = None,
        model: type[BaseModel] | None = None,
    ) -> "ValidationFailedError":
        """First pydantic error wins; its location names the field.

        pydantic reports locations by alias (admissionYear); with `model` given
        the top-level alias is mapped back to the python field name.
        """
        first = exc.errors()[0]
        loc = [str(part) for part in first["loc"]]
        if loc and model is not None:
            loc[0] = _field_names_by_alias(model).get(loc[0], loc[0])
        field_name = ".".join(loc) or "__root__"
        return cls(f"Invalid '{field_name}': {first['msg']}", field_name, context)


def _field_names_by_alias(model: type[BaseModel]) -> dict[str, str]:
    names: dict[str, str] = {}
    for name, info in model.model_fields.items():
        for alias in (info.alias, info.validation_alias):
            if isinstance(alias, str):
                names[alias] = name
    return names


class AuthenticationRequiredError(CopejemError):
    """No valid session for an operation that needs one."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Authentication required",
            "AUTHENTICATION_REQUIRED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class PermissionDeniedError(CopejemError):
    """Session user may not edit the given field of the given record."""
    def __init__(self, field: str, context: ErrorContext | None = None):
        super().__init__(
            f"Not allowed to change '{field}'",
            "PERMISSION_DENIED", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.WARNING, context, 403,
        )
        self.field = field


class ResourceNotFoundError(CopejemError):
    """Requested resource does not exist (write paths only)."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.entity_kind = ctx.entity_kind or resource_type
        ctx.entity_id = ctx.entity_id or resource_id
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class ImmutableRecordError(CopejemError):
    """Delete attempted on a project that belongs to institutional memory."""
    def __init__(self, project_id: ProjectId, year: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.entity_kind = "projects"
        ctx.entity_id = project_id
        super().__init__(
            f"Cannot delete projects from previous years ({year}). "
            "Institutional memory must be preserved.",
            "IMMUTABLE_RECORD", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, ctx, 409,
        )
        self.project_id = project_id
        self.year = year


# ─── Infrastructure Errors (500-level) ──────────────────────────

class BackendUnavailableError(CopejemError):
    """Storage backend failed; surfaced to the caller, never retried here."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Storage {operation} failed: {message}",
            "BACKEND_UNAVAILABLE", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
