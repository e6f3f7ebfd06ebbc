"""
Triage module interface.

The grievance lifecycle depends on ITriageAdvisor, an untrusted,
best-effort oracle.
"""

from typing import Protocol, runtime_checkable

from .models import TriageResult


@runtime_checkable
class ITriageAdvisor(Protocol):
    """Interface for grievance classification."""

    async def classify(self, title: str, description: str) -> TriageResult:
        """
        Classify a grievance.

        Implementations should return TriageResult.fallback() on any
        failure instead of raising. Callers still guard against
        implementations that raise or hang.

        Args:
            title: Grievance title
            description: Grievance description

        Returns:
            Severity, priority and summary
        """
        ...
