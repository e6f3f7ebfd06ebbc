"""
Authentication module.

Handles the account registry, single-active-session enforcement and
profile updates.

Public API:
- ISessionAuthority: Interface for session operations
- Account: Registry entry
- Session / SessionUser: Local session snapshot
- SessionStatus: Outcome of a session check
- Auth exceptions: InvalidCredentialsError, SessionPreemptedError, etc.
"""

from .interfaces import ISessionAuthority
from .models import (
    Account,
    ProfileUpdate,
    Session,
    SessionStatus,
    SessionUser,
    UserRole,
    STAFF_ROLES,
    CONTENT_MANAGER_ROLES,
)
from .exceptions import (
    InvalidCredentialsError,
    SessionPreemptedError,
    SessionNotFoundError,
    AccountExistsError,
    SignupNotAllowedError,
    InsufficientPermissionsError,
)

__all__ = [
    # Interface
    "ISessionAuthority",
    # Models
    "Account",
    "ProfileUpdate",
    "Session",
    "SessionStatus",
    "SessionUser",
    "UserRole",
    "STAFF_ROLES",
    "CONTENT_MANAGER_ROLES",
    # Exceptions
    "InvalidCredentialsError",
    "SessionPreemptedError",
    "SessionNotFoundError",
    "AccountExistsError",
    "SignupNotAllowedError",
    "InsufficientPermissionsError",
]
