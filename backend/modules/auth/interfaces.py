"""
Authentication module interface.

Other modules should depend on ISessionAuthority, not the concrete implementation.
This enables testing with mocks and swapping the registry engine.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import Account, ProfileUpdate, Session, SessionStatus


@runtime_checkable
class ISessionAuthority(Protocol):
    """
    Interface for session operations.

    Enforces one live session per account: every login mints a token that
    replaces the account's authoritative token, so any older session
    becomes stale and is torn down at its next check.
    """

    async def login(self, email: str, credential: str) -> Session:
        """
        Authenticate and start a session, preempting any other session.

        Args:
            email: Account email (case-insensitive)
            credential: Opaque credential

        Returns:
            The new Session, also persisted as the local current session

        Raises:
            InvalidCredentialsError: If the account is unknown or the credential mismatches
            StoreError: If the record store fails
        """
        ...

    async def check_session(self, session: Session) -> SessionStatus:
        """
        Compare a session's token against the account's authoritative token.

        Returns:
            VALID, PREEMPTED if another login replaced the token,
            or NOT_FOUND if the account no longer exists
        """
        ...

    async def logout(self, session: Optional[Session] = None) -> None:
        """
        Delete the local current session.

        Does not clear the account's authoritative token.
        """
        ...

    async def restore(self) -> Optional[Session]:
        """
        Read the local current session at startup.

        Callers must run check_session() on the result before trusting it.
        """
        ...

    async def get_account(self, email: str) -> Optional[Account]:
        """Look up a registry entry by (case-insensitive) email."""
        ...

    async def update_profile(self, session: Session, update: ProfileUpdate) -> Session:
        """
        Update the account's name/avatar and return a refreshed Session.

        Raises:
            SessionPreemptedError: If the session is stale
            SessionNotFoundError: If the account no longer exists
        """
        ...
