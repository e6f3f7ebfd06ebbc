"""
Presentation boundary for session validity.

The UI layer calls the gate at startup and on every route change. When
the local session is no longer the account's live session, the gate
logs the client out and returns a blocking notice the user must
acknowledge before being sent to the public login page.
"""

import logging
from typing import Optional

from pydantic import BaseModel

from modules.auth.interfaces import ISessionAuthority
from modules.auth.models import Session, SessionStatus

logger = logging.getLogger(__name__)


LOGIN_ROUTE = "/login/public"


class BlockingNotice(BaseModel):
    """A modal message that must be acknowledged before navigation continues."""

    code: str
    title: str
    message: str
    requires_acknowledgement: bool = True

    model_config = {"frozen": True}


PREEMPTED_NOTICE = BlockingNotice(
    code="SESSION_PREEMPTED",
    title="Session preempted",
    message="This account was logged in from another location. Please log in again.",
)

NOT_FOUND_NOTICE = BlockingNotice(
    code="SESSION_NOT_FOUND",
    title="Session ended",
    message="This account is no longer registered. Please log in again.",
)


class GateResult(BaseModel):
    """Outcome of a gate check."""

    session: Optional[Session] = None
    notice: Optional[BlockingNotice] = None
    redirect_to: Optional[str] = None

    model_config = {"frozen": True}

    @property
    def is_authenticated(self) -> bool:
        return self.session is not None


class SessionGate:
    """Runs session checks for the presentation layer."""

    def __init__(self, authority: ISessionAuthority):
        self._authority = authority

    async def on_startup(self) -> GateResult:
        """Restore the persisted session and verify it against the registry."""
        session = await self._authority.restore()
        if session is None:
            return GateResult()
        return await self._verify(session)

    async def on_navigate(self, session: Optional[Session]) -> GateResult:
        """Re-check the session on a route change."""
        if session is None:
            return GateResult()
        return await self._verify(session)

    async def _verify(self, session: Session) -> GateResult:
        status = await self._authority.check_session(session)
        if status == SessionStatus.VALID:
            return GateResult(session=session)

        notice = PREEMPTED_NOTICE if status == SessionStatus.PREEMPTED else NOT_FOUND_NOTICE
        logger.info(f"Ending session for {session.user.email}: {status.value}")
        await self._authority.logout(session)
        return GateResult(notice=notice, redirect_to=LOGIN_ROUTE)
