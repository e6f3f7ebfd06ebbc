"""
Announcement service implementation.
"""

import logging
import uuid
from datetime import datetime, timezone

from modules.auth.exceptions import InsufficientPermissionsError
from modules.auth.models import CONTENT_MANAGER_ROLES, SessionUser
from shared.store import IRecordStore

from .interfaces import IAnnouncementService
from .models import Announcement, CreateAnnouncementRequest
from .repository import AnnouncementRepository
from .exceptions import AnnouncementNotFoundError

logger = logging.getLogger(__name__)


class AnnouncementService(IAnnouncementService):
    """Announcement service over the record store."""

    def __init__(self, store: IRecordStore):
        self._repo = AnnouncementRepository(store)

    async def list_announcements(self, active_only: bool = False) -> list[Announcement]:
        announcements = await self._repo.list_newest_first()
        if active_only:
            announcements = [a for a in announcements if a.is_active]
        return announcements

    async def publish(
        self,
        request: CreateAnnouncementRequest,
        actor: SessionUser,
    ) -> Announcement:
        self._require_content_manager(actor)

        announcement = Announcement(
            id=str(uuid.uuid4()),
            title=request.title,
            description=request.description,
            image_url=request.image_url,
            is_active=True,
            created_at=datetime.now(timezone.utc),
        )
        await self._repo.save(announcement)
        logger.info(f"Announcement {announcement.id} published by {actor.name}")
        return announcement

    async def set_active(
        self,
        announcement_id: str,
        is_active: bool,
        actor: SessionUser,
    ) -> Announcement:
        self._require_content_manager(actor)

        announcement = await self._get_or_raise(announcement_id)
        updated = announcement.model_copy(update={"is_active": is_active})
        await self._repo.save(updated)
        logger.info(
            f"Announcement {announcement_id} "
            f"{'shown' if is_active else 'hidden'} by {actor.name}"
        )
        return updated

    async def delete(self, announcement_id: str, actor: SessionUser) -> None:
        self._require_content_manager(actor)

        await self._get_or_raise(announcement_id)
        await self._repo.delete(announcement_id)
        logger.info(f"Announcement {announcement_id} deleted by {actor.name}")

    async def _get_or_raise(self, announcement_id: str) -> Announcement:
        announcement = await self._repo.get(announcement_id)
        if announcement is None:
            raise AnnouncementNotFoundError(announcement_id)
        return announcement

    @staticmethod
    def _require_content_manager(actor: SessionUser) -> None:
        if actor.role not in CONTENT_MANAGER_ROLES:
            raise InsufficientPermissionsError(
                required_role="ADMIN or EDITOR",
                user_role=actor.role.value,
            )
