"""
Announcements module exceptions.
"""

from shared.exceptions import NotFoundError


class AnnouncementNotFoundError(NotFoundError):
    """Raised when an announcement is not found."""

    def __init__(self, announcement_id: str):
        super().__init__(
            f"Announcement not found: {announcement_id}",
            code="ANNOUNCEMENT_NOT_FOUND",
            details={"announcement_id": announcement_id},
        )
