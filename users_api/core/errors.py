"""Error hierarchy for the users service.

Every error carries a stable ``code`` and the HTTP status it maps to, and
renders as ``{"error": {"code": ...}}`` through the global handlers.
"""
from __future__ import annotations

FIELD_ERROR_CODES = {
    "username": "INVALID_USER_NAME",
    "email": "INVALID_USER_EMAIL",
    "password": "INVALID_PASSWORD",
}


class UsersApiError(Exception):
    """Base exception for all users service errors."""

    def __init__(self, message: str, code: str, http_status: int = 500) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.http_status = http_status

    def to_response(self) -> dict:
        return {"error": {"code": self.code}}


# ─── Domain errors (400-level) ──────────────────────────────────

class ValidationError(UsersApiError):
    """A user field failed its constraint."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message, FIELD_ERROR_CODES[field], 406)
        self.field = field


class InvalidUserIdError(UsersApiError):
    def __init__(self, raw_id: str) -> None:
        super().__init__(f"Invalid user id: {raw_id!r}", "INVALID_USER_ID", 406)
        self.raw_id = raw_id


class InvalidRequestBodyError(UsersApiError):
    """Body is not valid JSON or not a JSON object."""

    def __init__(self, message: str) -> None:
        super().__init__(message, "INVALID_REQUEST_BODY", 400)


class UserNotFoundError(UsersApiError):
    def __init__(self, user_id: int) -> None:
        super().__init__(f"User {user_id} does not exist", "INEXISTING_USER", 404)
        self.user_id = user_id


# ─── Infrastructure errors (500-level) ──────────────────────────

class DatabaseError(UsersApiError):
    """Store-level failure (connection, constraint, driver)."""

    def __init__(self, message: str, operation: str) -> None:
        super().__init__(message, "DATABASE_ERROR", 500)
        self.operation = operation
