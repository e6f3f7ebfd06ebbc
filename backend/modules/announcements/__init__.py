"""
Announcements module.

Municipal notices published by staff and shown on the public portal.

Public API:
- IAnnouncementService: Interface for announcement operations
- Announcement: Announcement record
- CreateAnnouncementRequest: Request to publish an announcement
"""

from .interfaces import IAnnouncementService
from .models import Announcement, CreateAnnouncementRequest
from .exceptions import AnnouncementNotFoundError

__all__ = [
    "IAnnouncementService",
    "Announcement",
    "CreateAnnouncementRequest",
    "AnnouncementNotFoundError",
]
