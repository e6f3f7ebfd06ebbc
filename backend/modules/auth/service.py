"""
Session authority implementation.

Owns the rule "one live session per account". Every login mints a fresh
token and writes it as the account's active_session_id, which preempts any
session holding an older token. Sessions discover preemption only when
they are next checked; the gap between two checks is an accepted
staleness window.

There is no lock or transaction around read-compare-write sequences:
each operation does a fresh registry read immediately before it writes.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Callable, Iterable, Optional
from urllib.parse import quote

from shared.config import StaffAccountConfig, get_settings
from shared.exceptions import StoreError
from shared.store import IRecordStore

from .interfaces import ISessionAuthority
from .models import (
    Account,
    ProfileUpdate,
    Session,
    SessionStatus,
    SessionUser,
    UserRole,
    STAFF_ROLES,
    normalize_email,
)
from .repository import AccountRepository, SessionRepository
from .exceptions import (
    AccountExistsError,
    InvalidCredentialsError,
    SessionNotFoundError,
    SessionPreemptedError,
    SignupNotAllowedError,
)

logger = logging.getLogger(__name__)


def mint_session_id(role: UserRole) -> str:
    """Mint a session token. Uniqueness is the only requirement."""
    prefix = "mgmt_sess" if role in STAFF_ROLES else "sess"
    return f"{prefix}_{uuid.uuid4().hex}"


def default_avatar(name: str) -> str:
    """Generated initials avatar used when a citizen has not set one."""
    return f"https://ui-avatars.com/api/?name={quote(name)}&background=f97316&color=fff"


class SessionAuthority(ISessionAuthority):
    """
    Session authority over a shared account registry.

    The registry store holds accounts and is shared by every client.
    The local store holds this client's current-session singleton; it
    defaults to the registry store.
    """

    def __init__(
        self,
        registry: IRecordStore,
        local: Optional[IRecordStore] = None,
        token_factory: Callable[[UserRole], str] = mint_session_id,
        allowed_signup_domains: Optional[list[str]] = None,
    ):
        self._accounts = AccountRepository(registry)
        self._sessions = SessionRepository(local if local is not None else registry)
        self._mint = token_factory
        if allowed_signup_domains is None:
            allowed_signup_domains = get_settings().allowed_signup_domains
        self._allowed_domains = [d.lower() for d in allowed_signup_domains]

    # -------------------------------------------------------------------------
    # Login / logout
    # -------------------------------------------------------------------------

    async def login(self, email: str, credential: str) -> Session:
        """Authenticate, preempt other sessions and persist the new local session."""
        account = await self._accounts.get_by_email(email)
        if account is None or account.password != credential:
            logger.info(f"Rejected login for {normalize_email(email)}")
            raise InvalidCredentialsError()

        return await self._start_session(account)

    async def logout(self, session: Optional[Session] = None) -> None:
        """Delete the local session; the registry token is left as is."""
        await self._sessions.clear()

    async def restore(self) -> Optional[Session]:
        """Read the persisted local session, unverified."""
        return await self._sessions.get_current()

    # -------------------------------------------------------------------------
    # Session checks
    # -------------------------------------------------------------------------

    async def check_session(self, session: Session) -> SessionStatus:
        """Re-read the account and compare tokens."""
        account = await self._accounts.get_by_email(session.user.email)
        if account is None:
            logger.info(f"Session for {session.user.email} references a missing account")
            return SessionStatus.NOT_FOUND
        if account.active_session_id != session.user.session_id:
            logger.info(f"Session for {session.user.email} was preempted")
            return SessionStatus.PREEMPTED
        return SessionStatus.VALID

    async def require_valid(self, session: Session) -> Account:
        """
        Check a session and return its account.

        Raises:
            SessionPreemptedError: If another login replaced the token
            SessionNotFoundError: If the account no longer exists
        """
        account = await self._accounts.get_by_email(session.user.email)
        if account is None:
            raise SessionNotFoundError(session.user.email)
        if account.active_session_id != session.user.session_id:
            raise SessionPreemptedError(session.user.email)
        return account

    # -------------------------------------------------------------------------
    # Registry
    # -------------------------------------------------------------------------

    async def get_account(self, email: str) -> Optional[Account]:
        return await self._accounts.get_by_email(email)

    async def register_account(
        self,
        email: str,
        name: str,
        credential: str,
        role: UserRole = UserRole.PUBLIC,
        avatar: Optional[str] = None,
        profile: Optional[dict[str, Any]] = None,
    ) -> Account:
        """
        Add an account to the registry.

        Raises:
            AccountExistsError: If the email is already registered
        """
        normalized = normalize_email(email)
        if await self._accounts.get(normalized) is not None:
            raise AccountExistsError(normalized)

        account = Account(
            id=str(uuid.uuid4()),
            email=normalized,
            name=name,
            password=credential,
            role=role,
            avatar=avatar,
            profile=profile or {},
        )
        await self._accounts.save(account)
        logger.info(f"Registered {role.value} account {normalized}")
        return account

    async def signup(self, email: str, name: str, credential: str) -> Session:
        """
        Register a verified citizen account and log it in.

        Raises:
            SignupNotAllowedError: If the email domain is not allowed
            AccountExistsError: If the email is already registered
        """
        normalized = normalize_email(email)
        domain = normalized.rpartition("@")[2]
        if not domain or domain not in self._allowed_domains:
            raise SignupNotAllowedError(normalized, self._allowed_domains)

        display_name = name.strip() or normalized.split("@")[0]
        account = await self.register_account(
            normalized,
            display_name,
            credential,
            avatar=default_avatar(display_name),
            profile={"verified": True},
        )
        return await self._start_session(account)

    async def seed_accounts(self, staff: Iterable[StaffAccountConfig]) -> list[Account]:
        """Register configured staff accounts that are not in the registry yet."""
        created = []
        for entry in staff:
            if await self._accounts.get_by_email(entry.email) is not None:
                continue
            created.append(
                await self.register_account(
                    entry.email,
                    entry.name,
                    entry.password,
                    role=UserRole(entry.role.upper()),
                )
            )
        return created

    async def update_profile(self, session: Session, update: ProfileUpdate) -> Session:
        """Update name/avatar on the registry and replace the local session snapshot."""
        account = await self.require_valid(session)

        changes: dict[str, Any] = {}
        if update.name is not None:
            changes["name"] = update.name
        if update.avatar is not None:
            changes["avatar"] = update.avatar
        account = await self._accounts.save(account.model_copy(update=changes))

        refreshed = Session(
            user=self._snapshot(account, session.user.session_id),
            created_at=session.created_at,
        )
        await self._sessions.save(refreshed)
        return refreshed

    # -------------------------------------------------------------------------
    # Private helpers
    # -------------------------------------------------------------------------

    async def _start_session(self, account: Account) -> Session:
        previous_session_id = account.active_session_id
        session_id = self._mint(account.role)
        account = await self._accounts.set_active_session(account, session_id)

        session = Session(
            user=self._snapshot(account, session_id),
            created_at=datetime.now(timezone.utc),
        )
        try:
            await self._sessions.save(session)
        except StoreError:
            # Put the old token back so other devices are not preempted by a
            # login that never completed
            logger.warning(f"Local session save failed for {account.email}, restoring token")
            await self._accounts.set_active_session(account, previous_session_id)
            raise
        logger.info(f"Started session for {account.email}")
        return session

    def _snapshot(self, account: Account, session_id: str) -> SessionUser:
        return SessionUser(
            id=account.id,
            name=account.name,
            email=account.email,
            role=account.role,
            avatar=account.avatar,
            session_id=session_id,
        )

