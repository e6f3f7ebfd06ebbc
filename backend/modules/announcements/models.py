"""
Announcements module data models.
"""

from datetime import datetime, timezone
from typing import Any, Optional
from pydantic import BaseModel, Field, field_validator


class Announcement(BaseModel):
    """A municipal notice shown on the public portal."""

    id: str = Field(..., description="Announcement ID")
    title: str
    description: str
    image_url: Optional[str] = None
    is_active: bool = Field(default=True, description="Whether the notice is shown publicly")
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class CreateAnnouncementRequest(BaseModel):
    """Request to publish an announcement."""

    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1, max_length=5000)
    image_url: Optional[str] = None

    @field_validator("title", "description", mode="before")
    @classmethod
    def _strip(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip()
        return value
