"""
Grievances module interface.

This is the core business logic interface of the portal.
The presentation layer depends on IGrievanceService for all grievance operations.
"""

from typing import Iterable, Protocol, Optional, runtime_checkable

from modules.auth.models import SessionUser

from .models import (
    BulkTransitionResult,
    CreateGrievanceRequest,
    Grievance,
    GrievanceStatus,
)


@runtime_checkable
class IGrievanceService(Protocol):
    """
    Interface for grievance operations.

    This protocol defines the contract that the grievances module exposes
    to the presentation layer.
    """

    async def create(
        self,
        request: CreateGrievanceRequest,
        reporter: SessionUser,
    ) -> Grievance:
        """
        File a new grievance.

        The grievance is created in PENDING status with empty history and
        annotated by the triage advisor. Triage failure never fails creation.

        Raises:
            InvalidLocationError: If the ward is unknown
            StoreError: If the record store fails
        """
        ...

    async def get(self, grievance_id: str) -> Optional[Grievance]:
        """Get a grievance by ID, or None if absent."""
        ...

    async def list_grievances(
        self,
        reported_by: Optional[str] = None,
    ) -> list[Grievance]:
        """
        List grievances, most recent first.

        Args:
            reported_by: Optional reporter account ID filter
        """
        ...

    async def transition(
        self,
        grievance_id: str,
        new_status: GrievanceStatus,
        actor: SessionUser,
        note: Optional[str] = None,
        resolution_image: Optional[str] = None,
        enforce_workflow: bool = False,
    ) -> Grievance:
        """
        Change a grievance's status and append a history entry.

        Every call appends exactly one entry, even when the status does
        not change. Resolving sets the note and, when given, the image.

        Raises:
            GrievanceNotFoundError: If the grievance doesn't exist
            InvalidTransitionError: If enforce_workflow is set and the
                staff workflow does not offer this change
        """
        ...

    async def bulk_transition(
        self,
        grievance_ids: Iterable[str],
        new_status: GrievanceStatus,
        actor: SessionUser,
        note: Optional[str] = None,
        enforce_workflow: bool = False,
    ) -> BulkTransitionResult:
        """
        Apply transition() to each ID independently.

        One ID's failure never aborts the others.
        """
        ...

    async def remove(self, grievance_id: str, requester: SessionUser) -> None:
        """
        Hard-delete a grievance. Only the original reporter may do this.

        Raises:
            GrievanceNotFoundError: If the grievance doesn't exist
            GrievanceAccessDeniedError: If the requester is not the reporter
        """
        ...
