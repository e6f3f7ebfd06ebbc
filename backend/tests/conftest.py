"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest
from unittest.mock import AsyncMock

from modules.auth.models import SessionUser, UserRole
from modules.triage.models import PriorityLevel, Severity, TriageResult
from portal.container import reset_container
from shared.config import get_settings
from shared.store import InMemoryRecordStore


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset the container and cached settings before and after each test."""
    reset_container()
    get_settings.cache_clear()
    yield
    reset_container()
    get_settings.cache_clear()


@pytest.fixture
def store() -> InMemoryRecordStore:
    """Provide an empty in-memory record store."""
    return InMemoryRecordStore()


@pytest.fixture
def citizen() -> SessionUser:
    """A logged-in citizen."""
    return SessionUser(
        id="citizen-1",
        name="Asha Rao",
        email="asha@gmail.com",
        role=UserRole.PUBLIC,
        session_id="sess_citizen",
    )


@pytest.fixture
def other_citizen() -> SessionUser:
    """A second citizen, unrelated to the first."""
    return SessionUser(
        id="citizen-2",
        name="Ravi Shetty",
        email="ravi@gmail.com",
        role=UserRole.PUBLIC,
        session_id="sess_other",
    )


@pytest.fixture
def admin() -> SessionUser:
    """A logged-in municipal admin."""
    return SessionUser(
        id="admin-1",
        name="Ward Officer",
        email="officer@puttur.gov.in",
        role=UserRole.ADMIN,
        session_id="mgmt_sess_admin",
    )


@pytest.fixture
def viewer() -> SessionUser:
    """A read-only staff member."""
    return SessionUser(
        id="viewer-1",
        name="Auditor",
        email="auditor@puttur.gov.in",
        role=UserRole.VIEWER,
        session_id="mgmt_sess_viewer",
    )


@pytest.fixture
def triage_result() -> TriageResult:
    """A typical classification returned by the advisor."""
    return TriageResult(
        severity=Severity.HIGH,
        priority=PriorityLevel.CRITICAL,
        summary="Clear the blocked drain before the monsoon.",
    )


@pytest.fixture
def triage(triage_result) -> AsyncMock:
    """Triage advisor mock returning triage_result."""
    advisor = AsyncMock()
    advisor.classify.return_value = triage_result
    return advisor
