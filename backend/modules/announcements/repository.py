"""
Announcement repository for record store access.
"""

from shared.repository import BaseRepository
from shared.store import Collection

from .models import Announcement


class AnnouncementRepository(BaseRepository[Announcement]):
    """Repository for the announcements collection."""

    collection = Collection.ANNOUNCEMENTS
    model = Announcement

    async def list_newest_first(self) -> list[Announcement]:
        announcements = await self.list_all()
        return sorted(announcements, key=lambda a: a.created_at, reverse=True)
