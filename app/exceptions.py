from typing import Any, Mapping, Optional


class DailyDietError(Exception):
    """Base class for errors raised by services and surfaced by the API handlers.

    Attributes:
        message: human-readable message
        details: optional mapping with extra context (field errors, ids)
        code: optional machine-readable error code
        http_status: suggested HTTP status code for handlers
    """

    http_status = 500
    default_message = "Unexpected error"

    def __init__(
        self,
        message: Optional[str] = None,
        details: Optional[Mapping[str, Any]] = None,
        code: Optional[str] = None,
    ):
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code

    def __str__(self) -> str:
        return self.message


class ServiceValidationError(DailyDietError):
    """Raised when input data is invalid or a precondition for a service call is not met."""

    http_status = 400
    default_message = "Invalid input"


class NotFoundError(DailyDietError):
    """Raised when a requested resource was not found.

    Also used when the resource exists but belongs to another user, so callers
    cannot tell the two apart.
    """

    http_status = 404
    default_message = "Not found"


class ConflictError(DailyDietError):
    """Raised when a resource conflict occurs (e.g., duplicate e-mail)."""

    http_status = 409
    default_message = "Conflict"


class UnauthorizedError(DailyDietError):
    """Raised when the request carries no usable session."""

    http_status = 401
    default_message = "Unauthorized"
