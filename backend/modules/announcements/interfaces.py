"""
Announcements module interface.
"""

from typing import Protocol, runtime_checkable

from modules.auth.models import SessionUser

from .models import Announcement, CreateAnnouncementRequest


@runtime_checkable
class IAnnouncementService(Protocol):
    """
    Interface for announcement operations.

    Reads are open to everyone. Publishing, toggling and deleting require
    a content manager role (ADMIN or EDITOR).
    """

    async def list_announcements(self, active_only: bool = False) -> list[Announcement]:
        """List announcements, most recent first."""
        ...

    async def publish(
        self,
        request: CreateAnnouncementRequest,
        actor: SessionUser,
    ) -> Announcement:
        """
        Publish a new, active announcement.

        Raises:
            InsufficientPermissionsError: If the actor cannot manage content
        """
        ...

    async def set_active(
        self,
        announcement_id: str,
        is_active: bool,
        actor: SessionUser,
    ) -> Announcement:
        """
        Show or hide an announcement.

        Raises:
            InsufficientPermissionsError: If the actor cannot manage content
            AnnouncementNotFoundError: If the announcement doesn't exist
        """
        ...

    async def delete(self, announcement_id: str, actor: SessionUser) -> None:
        """
        Delete an announcement.

        Raises:
            InsufficientPermissionsError: If the actor cannot manage content
            AnnouncementNotFoundError: If the announcement doesn't exist
        """
        ...
