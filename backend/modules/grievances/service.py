"""
Grievance lifecycle service.

Creates grievances (with best-effort triage), moves them through the
status lifecycle while appending to their history, and deletes them on
behalf of their reporter.

Every write is preceded by a fresh read of the record; there is no
locking across the read-write pair.
"""

import asyncio
import logging
import uuid
from datetime import datetime, timezone
from typing import Iterable, Optional

from modules.auth.models import SessionUser
from modules.triage.interfaces import ITriageAdvisor
from modules.triage.models import TriageResult, SUMMARY_UNAVAILABLE
from shared.config import DEFAULT_WARDS
from shared.exceptions import MuniServeError
from shared.store import IRecordStore

from .interfaces import IGrievanceService
from .models import (
    BULK_RESOLUTION_NOTE,
    BulkTransitionOutcome,
    BulkTransitionResult,
    CreateGrievanceRequest,
    Grievance,
    GrievanceStatus,
    StatusHistoryEntry,
    is_exposed_transition,
)
from .repository import GrievanceRepository
from .exceptions import (
    GrievanceAccessDeniedError,
    GrievanceNotFoundError,
    InvalidLocationError,
    InvalidTransitionError,
)

logger = logging.getLogger(__name__)


class GrievanceService(IGrievanceService):
    """
    Grievance service over the record store.

    Implements IGrievanceService; the triage advisor is injected and
    treated as untrusted.
    """

    def __init__(
        self,
        store: IRecordStore,
        triage: ITriageAdvisor,
        city_name: str = "Puttur",
        wards: Optional[list[str]] = None,
        triage_timeout_seconds: float = 10.0,
    ):
        self._repo = GrievanceRepository(store)
        self._triage = triage
        self._city = city_name
        self._wards = list(wards) if wards is not None else list(DEFAULT_WARDS)
        self._triage_timeout = triage_timeout_seconds

    async def create(
        self,
        request: CreateGrievanceRequest,
        reporter: SessionUser,
    ) -> Grievance:
        """Validate the location, triage, and persist a new PENDING grievance."""
        if request.ward not in self._wards:
            raise InvalidLocationError(request.ward)

        triage = await self._classify(request.title, request.description)

        grievance = Grievance(
            id=str(uuid.uuid4()),
            title=request.title,
            description=request.description,
            category=request.category,
            reported_by=reporter.id,
            reported_by_name=reporter.name,
            location=f"{request.landmark}, {request.ward}, {self._city}",
            created_at=datetime.now(timezone.utc),
            report_image=request.report_image,
            status=GrievanceStatus.PENDING,
            priority=triage.priority,
            severity=triage.severity,
            ai_analysis=triage.format_analysis(),
        )
        await self._repo.save(grievance)

        logger.info(
            f"Grievance {grievance.id} filed by {reporter.id} "
            f"(priority={triage.priority.value})"
        )
        return grievance

    async def get(self, grievance_id: str) -> Optional[Grievance]:
        return await self._repo.get(grievance_id)

    async def list_grievances(
        self,
        reported_by: Optional[str] = None,
    ) -> list[Grievance]:
        grievances = await self._repo.list_newest_first()
        if reported_by is not None:
            grievances = [g for g in grievances if g.reported_by == reported_by]
        return grievances

    async def transition(
        self,
        grievance_id: str,
        new_status: GrievanceStatus,
        actor: SessionUser,
        note: Optional[str] = None,
        resolution_image: Optional[str] = None,
        enforce_workflow: bool = False,
    ) -> Grievance:
        """Append a history entry and apply the new status."""
        new_status = GrievanceStatus(new_status)
        grievance = await self._repo.get(grievance_id)
        if grievance is None:
            raise GrievanceNotFoundError(grievance_id)

        if enforce_workflow and not is_exposed_transition(grievance.status, new_status):
            raise InvalidTransitionError(
                grievance_id, grievance.status.value, new_status.value
            )

        entry = StatusHistoryEntry(
            from_status=grievance.status,
            to=new_status,
            timestamp=datetime.now(timezone.utc),
            updated_by=actor.name,
        )
        changes = {
            "status": new_status,
            "history": [*grievance.history, entry],
        }
        # Leaving Resolved keeps the previous note and image
        if new_status == GrievanceStatus.RESOLVED:
            changes["resolution_note"] = note
            changes["resolution_image"] = resolution_image or grievance.resolution_image

        updated = grievance.model_copy(update=changes)
        await self._repo.save(updated)

        logger.info(
            f"Grievance {grievance_id}: {grievance.status.value} -> "
            f"{new_status.value} by {actor.name}"
        )
        return updated

    async def bulk_transition(
        self,
        grievance_ids: Iterable[str],
        new_status: GrievanceStatus,
        actor: SessionUser,
        note: Optional[str] = None,
        enforce_workflow: bool = False,
    ) -> BulkTransitionResult:
        """Transition each ID independently and report per-ID outcomes."""
        new_status = GrievanceStatus(new_status)
        if new_status == GrievanceStatus.RESOLVED and note is None:
            note = BULK_RESOLUTION_NOTE

        outcomes = []
        for grievance_id in grievance_ids:
            try:
                grievance = await self.transition(
                    grievance_id,
                    new_status,
                    actor,
                    note=note,
                    enforce_workflow=enforce_workflow,
                )
            except MuniServeError as e:
                logger.warning(f"Bulk transition skipped {grievance_id}: {e.message}")
                outcomes.append(
                    BulkTransitionOutcome(
                        grievance_id=grievance_id,
                        error_code=e.code,
                        error_message=e.message,
                    )
                )
            else:
                outcomes.append(
                    BulkTransitionOutcome(grievance_id=grievance_id, grievance=grievance)
                )

        return BulkTransitionResult(status=new_status, outcomes=outcomes)

    async def remove(self, grievance_id: str, requester: SessionUser) -> None:
        """Hard-delete a grievance on behalf of its reporter."""
        grievance = await self._repo.get(grievance_id)
        if grievance is None:
            raise GrievanceNotFoundError(grievance_id)
        if grievance.reported_by != requester.id:
            raise GrievanceAccessDeniedError(grievance_id, requester.id)

        await self._repo.delete(grievance_id)
        logger.info(f"Grievance {grievance_id} deleted by its reporter")

    async def _classify(self, title: str, description: str) -> TriageResult:
        """Run triage with a timeout; anything but a result becomes the fallback."""
        try:
            result = await asyncio.wait_for(
                self._triage.classify(title, description),
                timeout=self._triage_timeout,
            )
        except asyncio.TimeoutError:
            logger.warning(f"Triage timed out after {self._triage_timeout}s")
        except Exception as e:
            logger.warning(f"Triage advisor failed: {e}")
        else:
            if isinstance(result, TriageResult):
                return result
            logger.warning(f"Triage advisor returned {type(result).__name__}, not a TriageResult")
        return TriageResult.fallback(SUMMARY_UNAVAILABLE)
