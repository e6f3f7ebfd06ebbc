"""Tests for shared/store.py."""

import pytest
from unittest.mock import MagicMock

from shared.exceptions import StoreError
from shared.store import (
    Collection,
    IRecordStore,
    InMemoryRecordStore,
    SupabaseRecordStore,
    record_key,
)


class TestRecordKey:
    def test_accounts_are_keyed_by_email(self):
        assert record_key(Collection.ACCOUNTS, {"email": "a@gmail.com", "id": "x"}) == "a@gmail.com"

    def test_grievances_are_keyed_by_id(self):
        assert record_key(Collection.GRIEVANCES, {"id": "g-1"}) == "g-1"

    def test_missing_key_raises(self):
        with pytest.raises(StoreError) as exc_info:
            record_key(Collection.ACCOUNTS, {"id": "x"})
        assert exc_info.value.details["collection"] == "accounts"


class TestInMemoryRecordStore:
    def test_implements_interface(self):
        assert isinstance(InMemoryRecordStore(), IRecordStore)

    @pytest.mark.asyncio
    async def test_put_then_get(self):
        store = InMemoryRecordStore()
        await store.put(Collection.GRIEVANCES, {"id": "g-1", "title": "Pothole"})

        assert await store.get(Collection.GRIEVANCES, "g-1") == {"id": "g-1", "title": "Pothole"}

    @pytest.mark.asyncio
    async def test_get_missing_returns_none(self):
        store = InMemoryRecordStore()
        assert await store.get(Collection.ACCOUNTS, "nobody@gmail.com") is None

    @pytest.mark.asyncio
    async def test_put_overwrites(self):
        store = InMemoryRecordStore()
        await store.put(Collection.GRIEVANCES, {"id": "g-1", "status": "Pending"})
        await store.put(Collection.GRIEVANCES, {"id": "g-1", "status": "Resolved"})

        records = await store.get_all(Collection.GRIEVANCES)
        assert records == [{"id": "g-1", "status": "Resolved"}]

    @pytest.mark.asyncio
    async def test_collections_are_independent(self):
        store = InMemoryRecordStore()
        await store.put(Collection.GRIEVANCES, {"id": "same"})

        assert await store.get(Collection.ANNOUNCEMENTS, "same") is None

    @pytest.mark.asyncio
    async def test_returned_records_are_copies(self):
        """Mutating a returned record must not change stored state."""
        store = InMemoryRecordStore()
        await store.put(Collection.GRIEVANCES, {"id": "g-1", "history": []})

        record = await store.get(Collection.GRIEVANCES, "g-1")
        record["history"].append("tampered")

        stored = await store.get(Collection.GRIEVANCES, "g-1")
        assert stored["history"] == []

    @pytest.mark.asyncio
    async def test_delete(self):
        store = InMemoryRecordStore()
        await store.put(Collection.GRIEVANCES, {"id": "g-1"})
        await store.delete(Collection.GRIEVANCES, "g-1")

        assert await store.get(Collection.GRIEVANCES, "g-1") is None

    @pytest.mark.asyncio
    async def test_delete_missing_is_not_an_error(self):
        store = InMemoryRecordStore()
        await store.delete(Collection.GRIEVANCES, "absent")


class TestSupabaseRecordStore:
    @pytest.fixture
    def mock_db(self):
        return MagicMock()

    @pytest.fixture
    def store(self, mock_db):
        return SupabaseRecordStore(mock_db)

    @pytest.mark.asyncio
    async def test_get_queries_key_column(self, store, mock_db):
        table = mock_db.table.return_value
        table.select.return_value.eq.return_value.execute.return_value.data = [
            {"email": "a@gmail.com", "name": "A"}
        ]

        record = await store.get(Collection.ACCOUNTS, "a@gmail.com")

        mock_db.table.assert_called_with("accounts")
        table.select.return_value.eq.assert_called_once_with("email", "a@gmail.com")
        assert record == {"email": "a@gmail.com", "name": "A"}

    @pytest.mark.asyncio
    async def test_get_missing_returns_none(self, store, mock_db):
        mock_db.table.return_value.select.return_value.eq.return_value.execute.return_value.data = []

        assert await store.get(Collection.GRIEVANCES, "absent") is None

    @pytest.mark.asyncio
    async def test_get_all(self, store, mock_db):
        mock_db.table.return_value.select.return_value.execute.return_value.data = [
            {"id": "1"},
            {"id": "2"},
        ]

        records = await store.get_all(Collection.ANNOUNCEMENTS)

        mock_db.table.assert_called_with("announcements")
        assert [r["id"] for r in records] == ["1", "2"]

    @pytest.mark.asyncio
    async def test_put_upserts_on_key_column(self, store, mock_db):
        record = {"id": "g-1", "title": "Pothole"}

        await store.put(Collection.GRIEVANCES, record)

        mock_db.table.return_value.upsert.assert_called_once_with(record, on_conflict="id")

    @pytest.mark.asyncio
    async def test_delete_filters_on_key_column(self, store, mock_db):
        await store.delete(Collection.CURRENT_SESSION, "current_session")

        mock_db.table.assert_called_with("current_session")
        mock_db.table.return_value.delete.return_value.eq.assert_called_once_with(
            "id", "current_session"
        )

    @pytest.mark.asyncio
    async def test_engine_failure_is_wrapped(self, store, mock_db):
        """Engine failures surface as StoreError with the cause chained."""
        cause = ConnectionError("connection reset")
        mock_db.table.return_value.upsert.return_value.execute.side_effect = cause

        with pytest.raises(StoreError) as exc_info:
            await store.put(Collection.GRIEVANCES, {"id": "g-1"})

        assert exc_info.value.__cause__ is cause
        assert exc_info.value.details == {"operation": "put", "collection": "grievances"}

    @pytest.mark.asyncio
    async def test_get_failure_is_wrapped(self, store, mock_db):
        mock_db.table.return_value.select.return_value.eq.return_value.execute.side_effect = (
            RuntimeError("boom")
        )

        with pytest.raises(StoreError):
            await store.get(Collection.ACCOUNTS, "a@gmail.com")
