"""
Record store contract and engines.

The portal core persists everything through IRecordStore, a keyed
get/put/delete/scan service over four independent collections:

- grievances (key: id)
- current_session (key: fixed singleton id)
- accounts (key: email)
- announcements (key: id)

There are no transactions across collections and no queries beyond a
full-collection scan. Two engines are provided:

- InMemoryRecordStore: process-local store, also used as the per-client
  "local" store holding the current session
- SupabaseRecordStore: one Supabase table per collection
"""

import copy
import logging
from enum import Enum
from typing import Any, Optional, Protocol, runtime_checkable

from supabase import Client

from .exceptions import StoreError

logger = logging.getLogger(__name__)


class Collection(str, Enum):
    """Record store collections."""

    GRIEVANCES = "grievances"
    CURRENT_SESSION = "current_session"
    ACCOUNTS = "accounts"
    ANNOUNCEMENTS = "announcements"


# Key field of each collection's records
KEY_FIELDS: dict[Collection, str] = {
    Collection.GRIEVANCES: "id",
    Collection.CURRENT_SESSION: "id",
    Collection.ACCOUNTS: "email",
    Collection.ANNOUNCEMENTS: "id",
}

# Key of the singleton record in the current_session collection
CURRENT_SESSION_KEY = "current_session"


def record_key(collection: Collection, record: dict[str, Any]) -> str:
    """Extract the key of a record for the given collection."""
    key_field = KEY_FIELDS[collection]
    key = record.get(key_field)
    if not key:
        raise StoreError("put", collection.value, f"record has no '{key_field}' field")
    return str(key)


@runtime_checkable
class IRecordStore(Protocol):
    """
    Interface for record persistence.

    Every method is a suspension point. Implementations raise StoreError
    on any engine failure and never retry.
    """

    async def get(self, collection: Collection, key: str) -> Optional[dict[str, Any]]:
        """
        Get a record by key.

        Returns:
            The record, or None if absent
        """
        ...

    async def get_all(self, collection: Collection) -> list[dict[str, Any]]:
        """Return every record of a collection, in no particular order."""
        ...

    async def put(self, collection: Collection, record: dict[str, Any]) -> None:
        """Upsert a record keyed by the collection's key field."""
        ...

    async def delete(self, collection: Collection, key: str) -> None:
        """Delete a record by key. Deleting an absent key is not an error."""
        ...


class InMemoryRecordStore(IRecordStore):
    """
    Record store kept in process memory.

    Records are deep-copied on the way in and out, so callers can never
    mutate stored state except through put().
    """

    def __init__(self) -> None:
        self._collections: dict[Collection, dict[str, dict[str, Any]]] = {
            collection: {} for collection in Collection
        }

    async def get(self, collection: Collection, key: str) -> Optional[dict[str, Any]]:
        record = self._collections[collection].get(key)
        return copy.deepcopy(record) if record is not None else None

    async def get_all(self, collection: Collection) -> list[dict[str, Any]]:
        return [copy.deepcopy(r) for r in self._collections[collection].values()]

    async def put(self, collection: Collection, record: dict[str, Any]) -> None:
        key = record_key(collection, record)
        self._collections[collection][key] = copy.deepcopy(record)

    async def delete(self, collection: Collection, key: str) -> None:
        self._collections[collection].pop(key, None)


class SupabaseRecordStore(IRecordStore):
    """
    Record store backed by Supabase tables.

    Each collection maps to a table of the same name whose columns match
    the record fields. Upserts resolve conflicts on the key column.
    """

    def __init__(self, db: Client) -> None:
        """
        Initialize the store with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    async def get(self, collection: Collection, key: str) -> Optional[dict[str, Any]]:
        key_field = KEY_FIELDS[collection]
        try:
            result = (
                self._db.table(collection.value).select("*").eq(key_field, key).execute()
            )
        except Exception as e:
            raise self._wrap("get", collection, e) from e

        if not result.data:
            return None
        return result.data[0]

    async def get_all(self, collection: Collection) -> list[dict[str, Any]]:
        try:
            result = self._db.table(collection.value).select("*").execute()
        except Exception as e:
            raise self._wrap("get_all", collection, e) from e
        return list(result.data or [])

    async def put(self, collection: Collection, record: dict[str, Any]) -> None:
        record_key(collection, record)
        try:
            self._db.table(collection.value).upsert(
                record, on_conflict=KEY_FIELDS[collection]
            ).execute()
        except Exception as e:
            raise self._wrap("put", collection, e) from e

    async def delete(self, collection: Collection, key: str) -> None:
        try:
            self._db.table(collection.value).delete().eq(
                KEY_FIELDS[collection], key
            ).execute()
        except Exception as e:
            raise self._wrap("delete", collection, e) from e

    def _wrap(self, operation: str, collection: Collection, error: Exception) -> StoreError:
        logger.warning(f"Supabase {operation} on {collection.value} failed: {error}")
        return StoreError(operation, collection.value, str(error))
