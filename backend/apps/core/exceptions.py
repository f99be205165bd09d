"""
Domain exceptions shared by all apps.

Service functions raise these; config/api.py renders them as the uniform
JSON error body {"error": ..., "message": ..., **extra}.
"""

from typing import Any


class StatusPageError(Exception):
    """Base exception carrying an HTTP status and an error body."""

    status_code = 400
    default_error = "Bad request"

    def __init__(self, error: str | None = None, message: str | None = None, **extra: Any) -> None:
        self.error = error or self.default_error
        self.message = message
        self.extra = extra
        super().__init__(message or self.error)

    def to_dict(self) -> dict[str, Any]:
        """Render the JSON error body."""
        body: dict[str, Any] = {"error": self.error}
        if self.message:
            body["message"] = self.message
        body.update(self.extra)
        return body


class ValidationFailed(StatusPageError):
    """Missing or invalid field."""

    status_code = 400
    default_error = "Validation failed"


class AccessDenied(StatusPageError):
    """Caller is not allowed to act on the organization."""

    status_code = 403
    default_error = "Access denied"


class NotFound(StatusPageError):
    """Requested record does not exist."""

    status_code = 404
    default_error = "Not found"


class Conflict(StatusPageError):
    """Request conflicts with an existing record."""

    status_code = 409
    default_error = "Conflict"
