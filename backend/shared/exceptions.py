"""
Base exception classes for the MuniServe portal core.

Each module should define its own exceptions that inherit from these bases.
This enables consistent error handling at the presentation boundary.
"""

from typing import Optional, Any


class MuniServeError(Exception):
    """
    Base exception for all MuniServe errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for user-facing messages."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(MuniServeError):
    """Resource not found."""

    pass


class ValidationError(MuniServeError):
    """Input validation failed."""

    pass


class AuthenticationError(MuniServeError):
    """Authentication failed (invalid credentials or stale session)."""

    pass


class AuthorizationError(MuniServeError):
    """Authorization failed (insufficient permissions)."""

    pass


class ExternalServiceError(MuniServeError):
    """Error communicating with an external service."""

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service


class StoreError(MuniServeError):
    """
    Underlying persistence failure.

    Raised by record store engines; the original engine error is chained
    as ``__cause__``. Callers get no automatic retry.
    """

    def __init__(self, operation: str, collection: str, reason: str):
        super().__init__(
            f"Record store {operation} failed on '{collection}': {reason}",
            code="STORE_ERROR",
            details={"operation": operation, "collection": collection},
        )
