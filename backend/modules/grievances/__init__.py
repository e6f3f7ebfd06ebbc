"""
Grievances module.

Handles grievance filing, the status lifecycle and its history ledger.

Public API:
- IGrievanceService: Interface for grievance operations
- Grievance: Full grievance record
- StatusHistoryEntry: One recorded status change
- CreateGrievanceRequest: Request to file a grievance
- BulkTransitionResult: Per-ID outcomes of a bulk status change
"""

from .interfaces import IGrievanceService
from .models import (
    BulkTransitionOutcome,
    BulkTransitionResult,
    CreateGrievanceRequest,
    Grievance,
    GrievanceCategory,
    GrievanceStatus,
    StatusHistoryEntry,
    EXPOSED_TRANSITIONS,
    BULK_RESOLUTION_NOTE,
    is_exposed_transition,
)
from .exceptions import (
    GrievanceNotFoundError,
    GrievanceAccessDeniedError,
    InvalidTransitionError,
    InvalidLocationError,
)

__all__ = [
    # Interface
    "IGrievanceService",
    # Models
    "BulkTransitionOutcome",
    "BulkTransitionResult",
    "CreateGrievanceRequest",
    "Grievance",
    "GrievanceCategory",
    "GrievanceStatus",
    "StatusHistoryEntry",
    "EXPOSED_TRANSITIONS",
    "BULK_RESOLUTION_NOTE",
    "is_exposed_transition",
    # Exceptions
    "GrievanceNotFoundError",
    "GrievanceAccessDeniedError",
    "InvalidTransitionError",
    "InvalidLocationError",
]
