"""
Authentication module data models.

These models define the account registry entry, the local session
snapshot and the session check outcome exposed to other modules.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional
from pydantic import BaseModel, Field, field_validator

from shared.store import CURRENT_SESSION_KEY


class UserRole(str, Enum):
    """Portal roles."""

    PUBLIC = "PUBLIC"
    ADMIN = "ADMIN"
    EDITOR = "EDITOR"
    VIEWER = "VIEWER"


# Management roles get management-prefixed session tokens
STAFF_ROLES = frozenset({UserRole.ADMIN, UserRole.EDITOR, UserRole.VIEWER})

# Roles allowed to publish and withdraw content
CONTENT_MANAGER_ROLES = frozenset({UserRole.ADMIN, UserRole.EDITOR})


def normalize_email(email: str) -> str:
    """Normalize an email for registry lookup (strip + lowercase)."""
    return email.strip().lower()


class SessionStatus(str, Enum):
    """Outcome of a session check."""

    VALID = "valid"
    PREEMPTED = "preempted"        # A newer login replaced the token
    NOT_FOUND = "not_found"        # Account vanished from the registry


class Account(BaseModel):
    """
    Global registry entry, keyed by normalized email.

    `active_session_id` is the single authoritative session token for the
    account. Writing a new value invalidates every previously issued token.
    """

    id: str = Field(..., description="Stable account ID")
    email: str = Field(..., description="Normalized email address (registry key)")
    name: str = Field(..., description="Display name")
    password: str = Field(..., description="Opaque credential, equality-compared")
    role: UserRole = Field(default=UserRole.PUBLIC, description="Portal role")
    active_session_id: Optional[str] = Field(
        None,
        description="Token of the only session currently considered valid",
    )
    avatar: Optional[str] = Field(None, description="Avatar URL")
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Registration time",
    )
    # Opaque extension bag, never inspected by the core
    profile: dict[str, Any] = Field(default_factory=dict)

    @field_validator("email")
    @classmethod
    def _normalize_email(cls, value: str) -> str:
        return normalize_email(value)


class SessionUser(BaseModel):
    """
    Denormalized copy of an Account taken at login time.

    Immutable; refreshed only by logging in again or updating the profile,
    both of which produce a new Session.
    """

    id: str
    name: str
    email: str
    role: UserRole
    avatar: Optional[str] = None
    session_id: str

    model_config = {"frozen": True}


class Session(BaseModel):
    """
    The local, single-client record asserting "this account is logged in here".

    Valid only while user.session_id equals the account's active_session_id.
    """

    id: str = Field(default=CURRENT_SESSION_KEY, description="Singleton record key")
    user: SessionUser
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    model_config = {"frozen": True}


class ProfileUpdate(BaseModel):
    """Fields a user may change on their own profile."""

    name: Optional[str] = Field(None, min_length=1, max_length=200)
    avatar: Optional[str] = None

    @field_validator("name", mode="before")
    @classmethod
    def _strip(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip()
        return value
