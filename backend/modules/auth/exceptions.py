"""
Authentication module exceptions.

These exceptions are raised by the session authority and are recovered at
the presentation boundary, where they become blocking notices.
"""

from shared.exceptions import AuthenticationError, AuthorizationError, ValidationError


class InvalidCredentialsError(AuthenticationError):
    """Raised when login uses an unknown email or a mismatched credential."""

    def __init__(self, message: str = "Authentication failed: Invalid credentials."):
        super().__init__(message, code="INVALID_CREDENTIALS")


class SessionPreemptedError(AuthenticationError):
    """Raised when a newer login has replaced this session's token."""

    def __init__(self, email: str):
        super().__init__(
            "Session preempted: This account was logged in from another location.",
            code="SESSION_PREEMPTED",
            details={"email": email},
        )


class SessionNotFoundError(AuthenticationError):
    """Raised when the account behind a local session no longer exists."""

    def __init__(self, email: str):
        super().__init__(
            "Session ended: This account is no longer registered.",
            code="SESSION_NOT_FOUND",
            details={"email": email},
        )


class AccountExistsError(ValidationError):
    """Raised when registering an email that is already in the registry."""

    def __init__(self, email: str):
        super().__init__(
            f"Account already registered: {email}",
            code="ACCOUNT_EXISTS",
            details={"email": email},
        )


class SignupNotAllowedError(ValidationError):
    """Raised when a citizen signs up with an email outside the allowed domains."""

    def __init__(self, email: str, allowed_domains: list[str]):
        domains = ", ".join(f"@{d}" for d in allowed_domains)
        super().__init__(
            f"Only {domains} accounts are permitted.",
            code="SIGNUP_NOT_ALLOWED",
            details={"email": email, "allowed_domains": allowed_domains},
        )


class InsufficientPermissionsError(AuthorizationError):
    """Raised when user lacks required permissions."""

    def __init__(self, required_role: str, user_role: str):
        super().__init__(
            f"Insufficient permissions. Required: {required_role}, has: {user_role}",
            code="INSUFFICIENT_PERMISSIONS",
            details={"required_role": required_role, "user_role": user_role},
        )
