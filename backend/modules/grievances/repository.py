"""
Grievance repository for record store access.

Note: This repository does NOT perform authorization checks.
The service layer is responsible for verifying reporter ownership.
"""

from shared.repository import BaseRepository
from shared.store import Collection

from .models import Grievance


class GrievanceRepository(BaseRepository[Grievance]):
    """Repository for the grievances collection."""

    collection = Collection.GRIEVANCES
    model = Grievance

    async def list_newest_first(self) -> list[Grievance]:
        """Load every grievance, most recent first."""
        grievances = await self.list_all()
        return sorted(grievances, key=lambda g: g.created_at, reverse=True)
