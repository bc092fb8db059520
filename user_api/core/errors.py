"""Error Hierarchy — typed exceptions for every failure the HTTP layer can report.

Invariants:
    - Every error has a message (str), code (str), category (ErrorCategory)
    - http_status is the explicit status_code when set, otherwise 500
    - to_response() produces exactly {"error": message, "status": http_status}
    - Codes, categories and debug fields never reach the response body

Design Decisions:
    - Single hierarchy with ApiError base: one translator handles every failure
      (ADR: uniform error shape)
    - status_code stays optional on the base: collaborator failures without a
      status must fall through to 500, never be inferred from message content
"""

from enum import Enum


class ErrorCategory(str, Enum):
    """High-level error categories for logging and routing."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    EXTERNAL = "external"
    INTERNAL = "internal"


class ApiError(Exception):
    """Base exception for all user API errors."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        code: str = "API_ERROR",
        category: ErrorCategory = ErrorCategory.EXTERNAL,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code
        self.category = category

    @property
    def http_status(self) -> int:
        # Status lines outside 100-599 cannot be sent
        if self.status_code and 100 <= self.status_code <= 599:
            return self.status_code
        return 500

    def to_response(self) -> dict:
        """Convert to the two-field REST error body."""
        return {"error": self.message, "status": self.http_status}

    @classmethod
    def from_exception(cls, exc: Exception) -> "ApiError":
        """Wrap a collaborator failure, preserving its message and status.

        ApiError instances pass through unchanged. Any other exception keeps
        str(exc) verbatim and its integer ``status_code`` attribute if it has one.
        """
        if isinstance(exc, ApiError):
            return exc
        status_code = getattr(exc, "status_code", None)
        if not isinstance(status_code, int) or isinstance(status_code, bool):
            status_code = None
        return cls(str(exc), status_code=status_code, code=type(exc).__name__)


# ─── Client Errors (400-level) ──────────────────────────────────

class MissingFieldsError(ApiError):
    """Create request lacks one or more required fields."""
    def __init__(self, fields: list[str]):
        super().__init__(
            "Missing required fields", 400,
            "MISSING_REQUIRED_FIELDS", ErrorCategory.VALIDATION,
        )
        self.fields = fields


class UserNotFoundError(ApiError):
    """No user exists with the requested id."""
    def __init__(self, user_id: str):
        super().__init__(
            "User not found", 404,
            "USER_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
        )
        self.user_id = user_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(ApiError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Database {operation} failed: {message}", 503,
            "DATABASE_ERROR", ErrorCategory.DATABASE,
        )
        self.operation = operation
