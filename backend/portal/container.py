"""
Service container for the portal core.

This module wires together all module implementations. Each module
exposes its service through an interface, and this file creates the
concrete implementations from Settings.

The registry store (accounts, grievances, announcements) is shared by
every client. The local store holds this client's current session.
"""

from typing import TYPE_CHECKING, Optional

from shared.config import Settings, get_settings
from shared.log_config import configure_logging

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.announcements.interfaces import IAnnouncementService
    from modules.auth.service import SessionAuthority
    from modules.grievances.interfaces import IGrievanceService
    from modules.triage.interfaces import ITriageAdvisor
    from shared.store import IRecordStore

    from .session_gate import SessionGate


class ServiceContainer:
    """
    Container for all service instances.

    Services are created lazily on first access and cached within the
    container. Use reset() to clear all cached services for testing.
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self._settings = settings
        self._registry_store: "IRecordStore | None" = None
        self._local_store: "IRecordStore | None" = None
        self._session_authority: "SessionAuthority | None" = None
        self._triage_advisor: "ITriageAdvisor | None" = None
        self._grievances: "IGrievanceService | None" = None
        self._announcements: "IAnnouncementService | None" = None
        self._session_gate: "SessionGate | None" = None

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def registry_store(self) -> "IRecordStore":
        """Get the shared record store selected by RECORD_STORE_BACKEND."""
        if self._registry_store is None:
            backend = self.settings.record_store_backend.lower()
            if backend == "memory":
                from shared.store import InMemoryRecordStore
                self._registry_store = InMemoryRecordStore()
            elif backend == "supabase":
                from shared.database import get_supabase_client
                from shared.store import SupabaseRecordStore
                self._registry_store = SupabaseRecordStore(
                    get_supabase_client(self.settings)
                )
            else:
                raise ValueError(
                    f"Unknown record store backend '{backend}'. "
                    "Expected 'memory' or 'supabase'."
                )
        return self._registry_store

    @property
    def local_store(self) -> "IRecordStore":
        """Get this client's local store."""
        if self._local_store is None:
            from shared.store import InMemoryRecordStore
            self._local_store = InMemoryRecordStore()
        return self._local_store

    @property
    def session_authority(self) -> "SessionAuthority":
        """Get the session authority instance."""
        if self._session_authority is None:
            from modules.auth.service import SessionAuthority
            self._session_authority = SessionAuthority(
                registry=self.registry_store,
                local=self.local_store,
                allowed_signup_domains=self.settings.allowed_signup_domains,
            )
        return self._session_authority

    @property
    def triage_advisor(self) -> "ITriageAdvisor":
        """Get the triage advisor instance."""
        if self._triage_advisor is None:
            from modules.triage.service import GeminiTriageAdvisor
            from providers import build_model_config, get_providers

            config = build_model_config(
                "triage",
                self.settings.triage_model,
                api_key=self.settings.google_api_key,
                timeout=self.settings.triage_timeout_seconds,
            )
            self._triage_advisor = GeminiTriageAdvisor(
                provider=get_providers()[config.provider_type],
                config=config,
                city_name=self.settings.city_name,
            )
        return self._triage_advisor

    @property
    def grievances(self) -> "IGrievanceService":
        """Get the grievance service instance."""
        if self._grievances is None:
            from modules.grievances.service import GrievanceService
            self._grievances = GrievanceService(
                store=self.registry_store,
                triage=self.triage_advisor,
                city_name=self.settings.city_name,
                wards=self.settings.wards,
                triage_timeout_seconds=self.settings.triage_timeout_seconds,
            )
        return self._grievances

    @property
    def announcements(self) -> "IAnnouncementService":
        """Get the announcement service instance."""
        if self._announcements is None:
            from modules.announcements.service import AnnouncementService
            self._announcements = AnnouncementService(self.registry_store)
        return self._announcements

    @property
    def session_gate(self) -> "SessionGate":
        """Get the session gate instance."""
        if self._session_gate is None:
            from .session_gate import SessionGate
            self._session_gate = SessionGate(self.session_authority)
        return self._session_gate

    async def seed_staff_accounts(self) -> int:
        """Register configured staff accounts missing from the registry."""
        created = await self.session_authority.seed_accounts(self.settings.staff_accounts)
        return len(created)

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different settings.
        """
        self._registry_store = None
        self._local_store = None
        self._session_authority = None
        self._triage_advisor = None
        self._grievances = None
        self._announcements = None
        self._session_gate = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container, configuring logging on first use."""
    global _container
    if _container is None:
        _container = ServiceContainer()
        configure_logging(_container.settings.log_level)
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    The next call to get_container() creates a fresh container with new
    service instances. Primarily used for testing.
    """
    global _container
    if _container is not None:
        _container.reset()
    _container = None
