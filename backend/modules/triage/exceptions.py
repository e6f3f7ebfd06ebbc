"""
Triage module exceptions.

TriageUnavailableError never leaves the module: the advisor converts it
into the fallback classification.
"""

from typing import Optional

from shared.exceptions import ExternalServiceError


class TriageUnavailableError(ExternalServiceError):
    """Raised internally when the classifier cannot produce a result."""

    def __init__(
        self,
        summary: str,
        original_error: Optional[str] = None,
    ):
        super().__init__(
            f"Triage unavailable: {summary}",
            service="triage",
            code="TRIAGE_UNAVAILABLE",
            details={"original_error": original_error},
        )
        self.summary = summary
