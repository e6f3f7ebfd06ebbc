"""
Triage module data models.
"""

from enum import Enum
from typing import Any
from pydantic import BaseModel, Field, field_validator


class Severity(str, Enum):
    """Degree of impact of a grievance."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class PriorityLevel(str, Enum):
    """Suggested urgency of a grievance."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"


# Diagnostic summaries used when classification is unavailable
SUMMARY_API_KEY_MISSING = "Disconnected: API key missing."
SUMMARY_RATE_LIMITED = "System overloaded. Default priority applied."
SUMMARY_UNAVAILABLE = "AI analysis unavailable."


class TriageResult(BaseModel):
    """Classification of a new grievance."""

    severity: Severity = Field(
        ...,
        description="The degree of impact (Low, Medium, High)",
    )
    priority: PriorityLevel = Field(
        ...,
        description="The suggested urgency level (Low, Medium, High, Critical)",
    )
    summary: str = Field(
        ...,
        min_length=1,
        description="Action-oriented summary for the municipal task force (max 50 words)",
    )

    model_config = {"frozen": True}

    @field_validator("severity", "priority", mode="before")
    @classmethod
    def _normalize_level(cls, value: Any) -> Any:
        # Models answer "high", "HIGH " or "High" interchangeably
        if isinstance(value, str):
            return value.strip().capitalize()
        return value

    @classmethod
    def fallback(cls, summary: str = SUMMARY_UNAVAILABLE) -> "TriageResult":
        """The fixed classification used whenever triage fails."""
        return cls(severity=Severity.MEDIUM, priority=PriorityLevel.MEDIUM, summary=summary)

    def format_analysis(self) -> str:
        """Render the analysis line stored on the grievance."""
        return f"[Priority: {self.priority.value}] {self.summary}"
