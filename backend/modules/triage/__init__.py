"""
Triage module.

Best-effort AI classification of new grievances.

Public API:
- ITriageAdvisor: Interface for classification
- TriageResult: Severity, priority and summary
- Severity / PriorityLevel: Classification levels
"""

from .interfaces import ITriageAdvisor
from .models import (
    PriorityLevel,
    Severity,
    TriageResult,
    SUMMARY_API_KEY_MISSING,
    SUMMARY_RATE_LIMITED,
    SUMMARY_UNAVAILABLE,
)
from .exceptions import TriageUnavailableError

__all__ = [
    # Interface
    "ITriageAdvisor",
    # Models
    "PriorityLevel",
    "Severity",
    "TriageResult",
    "SUMMARY_API_KEY_MISSING",
    "SUMMARY_RATE_LIMITED",
    "SUMMARY_UNAVAILABLE",
    # Exceptions
    "TriageUnavailableError",
]
