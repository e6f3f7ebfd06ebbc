"""Tests for shared/exceptions.py."""

import pytest

from shared.exceptions import (
    MuniServeError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    ExternalServiceError,
    StoreError,
)


class TestMuniServeError:
    def test_message(self):
        """MuniServeError should store message."""
        error = MuniServeError("Test error")
        assert error.message == "Test error"
        assert str(error) == "Test error"

    def test_default_code(self):
        """MuniServeError should default code to class name."""
        error = MuniServeError("Test error")
        assert error.code == "MuniServeError"

    def test_custom_code(self):
        error = MuniServeError("Test error", code="CUSTOM_ERROR")
        assert error.code == "CUSTOM_ERROR"

    def test_default_details(self):
        error = MuniServeError("Test error")
        assert error.details == {}

    def test_to_dict(self):
        """MuniServeError should convert to dict."""
        error = MuniServeError("Test error", code="TEST_ERROR", details={"key": "value"})
        result = error.to_dict()

        assert result["error"] == "TEST_ERROR"
        assert result["message"] == "Test error"
        assert result["details"]["key"] == "value"


class TestCategoryErrors:
    @pytest.mark.parametrize(
        "error_class",
        [NotFoundError, ValidationError, AuthenticationError, AuthorizationError],
    )
    def test_inherits_from_base(self, error_class):
        """Category errors should be catchable as MuniServeError."""
        error = error_class("Something went wrong")
        assert isinstance(error, MuniServeError)
        assert error.code == error_class.__name__

    def test_external_service_error_records_service(self):
        error = ExternalServiceError("Model down", service="triage")
        assert error.service == "triage"
        assert error.details["service"] == "triage"

    def test_external_service_error_keeps_details(self):
        error = ExternalServiceError(
            "Model down", service="triage", details={"attempt": 1}
        )
        assert error.details == {"attempt": 1, "service": "triage"}


class TestStoreError:
    def test_store_error_fields(self):
        error = StoreError("put", "grievances", "connection reset")

        assert error.code == "STORE_ERROR"
        assert "grievances" in error.message
        assert "connection reset" in error.message
        assert error.details == {"operation": "put", "collection": "grievances"}

    def test_store_error_is_catchable_as_base(self):
        with pytest.raises(MuniServeError):
            raise StoreError("get", "accounts", "timeout")
