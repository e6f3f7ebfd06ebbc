"""
Shared infrastructure for the MuniServe portal core.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory
- store: Record store contract and engines
- repository: Base repository over the record store
- exceptions: Base exception classes

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import get_supabase_client, reset_client_cache
from .exceptions import (
    MuniServeError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    ExternalServiceError,
    StoreError,
)
from .store import (
    Collection,
    IRecordStore,
    InMemoryRecordStore,
    SupabaseRecordStore,
    CURRENT_SESSION_KEY,
)

__all__ = [
    "Settings",
    "get_settings",
    "get_supabase_client",
    "reset_client_cache",
    "MuniServeError",
    "NotFoundError",
    "ValidationError",
    "AuthenticationError",
    "AuthorizationError",
    "ExternalServiceError",
    "StoreError",
    "Collection",
    "IRecordStore",
    "InMemoryRecordStore",
    "SupabaseRecordStore",
    "CURRENT_SESSION_KEY",
]
