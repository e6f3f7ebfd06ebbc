"""
Grievances module data models.

These models define the grievance record, its status lifecycle and the
append-only history ledger.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator

from modules.triage.models import PriorityLevel, Severity


class GrievanceStatus(str, Enum):
    """Grievance lifecycle status."""

    PENDING = "Pending"            # Filed, awaiting action
    IN_PROGRESS = "In Progress"    # Work underway
    RESOLVED = "Resolved"          # Terminal in the exposed workflow


class GrievanceCategory(str, Enum):
    """Grievance categories."""

    WASTE = "Waste Disposal"
    SOCIAL = "Social Issues"
    ROADS = "Road Facility"
    WATER = "Water Supply"
    OTHER = "Other"


# Conceptual predecessor of the first status; never written by transition()
CREATED = "CREATED"

# Transitions offered by the staff workflow. Nothing leaves Resolved.
EXPOSED_TRANSITIONS: dict[GrievanceStatus, frozenset[GrievanceStatus]] = {
    GrievanceStatus.PENDING: frozenset(
        {GrievanceStatus.IN_PROGRESS, GrievanceStatus.RESOLVED}
    ),
    GrievanceStatus.IN_PROGRESS: frozenset(
        {GrievanceStatus.PENDING, GrievanceStatus.RESOLVED}
    ),
    GrievanceStatus.RESOLVED: frozenset(),
}

BULK_RESOLUTION_NOTE = "Bulk resolved via management portal."


def is_exposed_transition(current: GrievanceStatus, new: GrievanceStatus) -> bool:
    """Whether the staff workflow offers moving from `current` to `new`."""
    return new in EXPOSED_TRANSITIONS[current]


class StatusHistoryEntry(BaseModel):
    """One status change. Stored with the key "from" for the previous status."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    from_status: Union[GrievanceStatus, Literal["CREATED"]] = Field(..., alias="from")
    to: GrievanceStatus
    timestamp: datetime
    updated_by: str


class Grievance(BaseModel):
    """A citizen-filed issue with a status lifecycle and audit history."""

    # Fixed at creation
    id: str = Field(..., description="Grievance ID")
    title: str
    description: str
    category: GrievanceCategory
    reported_by: str = Field(..., description="Reporter account ID (weak reference)")
    reported_by_name: str
    location: str = Field(..., description='"<landmark>, <ward>, <city>"')
    created_at: datetime
    report_image: Optional[str] = Field(None, description="Image of the problem")

    # Mutable
    status: GrievanceStatus = GrievanceStatus.PENDING
    resolution_note: Optional[str] = None
    resolution_image: Optional[str] = Field(None, description="Image of the fix")
    priority: Optional[PriorityLevel] = None
    severity: Optional[Severity] = None
    ai_analysis: Optional[str] = None
    history: list[StatusHistoryEntry] = Field(default_factory=list)


class CreateGrievanceRequest(BaseModel):
    """Request to file a new grievance."""

    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1, max_length=5000)
    category: GrievanceCategory = GrievanceCategory.WASTE
    ward: str = Field(..., min_length=1, description="Ward name")
    landmark: str = Field(..., min_length=1, max_length=200, description="Nearest landmark")
    report_image: Optional[str] = None

    @field_validator("title", "description", "ward", "landmark", mode="before")
    @classmethod
    def _strip(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip()
        return value


class BulkTransitionOutcome(BaseModel):
    """Result of one id within a bulk transition."""

    grievance_id: str
    grievance: Optional[Grievance] = None
    error_code: Optional[str] = None
    error_message: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.error_code is None


class BulkTransitionResult(BaseModel):
    """Per-id outcomes of a bulk transition. Partial success is normal."""

    status: GrievanceStatus
    outcomes: list[BulkTransitionOutcome] = Field(default_factory=list)
    completed_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def succeeded_ids(self) -> list[str]:
        return [o.grievance_id for o in self.outcomes if o.succeeded]

    @property
    def failed_ids(self) -> list[str]:
        return [o.grievance_id for o in self.outcomes if not o.succeeded]
