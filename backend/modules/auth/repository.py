"""
Account and session repositories.

AccountRepository reads and writes the global account registry.
SessionRepository holds the client-local current-session singleton.
"""

from typing import Optional

from shared.repository import BaseRepository
from shared.store import Collection, CURRENT_SESSION_KEY

from .models import Account, Session, normalize_email


class AccountRepository(BaseRepository[Account]):
    """
    Repository for the account registry.

    Note: This repository does NOT perform credential or token checks.
    The session authority is responsible for those.
    """

    collection = Collection.ACCOUNTS
    model = Account

    async def get_by_email(self, email: str) -> Optional[Account]:
        """Look up an account by email, normalizing the key first."""
        return await self.get(normalize_email(email))

    async def set_active_session(
        self, account: Account, session_id: Optional[str]
    ) -> Account:
        """Overwrite the account's authoritative session token."""
        updated = account.model_copy(update={"active_session_id": session_id})
        return await self.save(updated)


class SessionRepository(BaseRepository[Session]):
    """Repository for the current-session singleton."""

    collection = Collection.CURRENT_SESSION
    model = Session

    async def get_current(self) -> Optional[Session]:
        """Read the current session, if any."""
        return await self.get(CURRENT_SESSION_KEY)

    async def clear(self) -> None:
        """Delete the current session."""
        await self.delete(CURRENT_SESSION_KEY)
