"""
Base repository class for record store access.

Provides a common abstraction layer for all repositories, encapsulating
record store access and the mapping between stored dicts and Pydantic
models.
"""

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel

from .store import Collection, IRecordStore


T = TypeVar("T", bound=BaseModel)


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for record operations:
    - Record store access via self._store
    - Dict-to-model mapping via the `model` class attribute

    Subclasses set `collection` and `model`, and add domain-specific
    helpers on top of get/list_all/save/delete.

    Example:
        class GrievanceRepository(BaseRepository[Grievance]):
            collection = Collection.GRIEVANCES
            model = Grievance
    """

    collection: Collection
    model: type[T]

    def __init__(self, store: IRecordStore) -> None:
        """
        Initialize the repository with a record store.

        Args:
            store: Record store used for all persistence.
        """
        self._store = store

    async def get(self, key: str) -> Optional[T]:
        """Load a record by key, or None if absent."""
        data = await self._store.get(self.collection, key)
        if data is None:
            return None
        return self._map_to_model(data)

    async def list_all(self) -> list[T]:
        """Load every record in the collection."""
        rows = await self._store.get_all(self.collection)
        return [self._map_to_model(row) for row in rows]

    async def save(self, item: T) -> T:
        """Upsert a model and return it."""
        await self._store.put(self.collection, self._map_to_record(item))
        return item

    async def delete(self, key: str) -> None:
        """Delete a record by key."""
        await self._store.delete(self.collection, key)

    def _map_to_model(self, data: dict) -> T:
        """Map a stored record to the repository's model."""
        return self.model.model_validate(data)

    def _map_to_record(self, item: T) -> dict:
        """Map a model to a JSON-ready stored record."""
        return item.model_dump(mode="json", by_alias=True)
