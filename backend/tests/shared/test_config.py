"""Tests for shared/config.py."""

import json
import os

import pytest
from unittest.mock import patch

from shared.config import DEFAULT_WARDS, Settings, StaffAccountConfig, get_settings


class TestSettings:
    def test_default_values(self):
        """Settings should have sensible defaults."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)

        assert settings.log_level == "INFO"
        assert settings.record_store_backend == "memory"
        assert settings.triage_model == "gemini/gemini-2.0-flash"
        assert settings.triage_timeout_seconds == 10.0
        assert settings.city_name == "Puttur"
        assert settings.wards == DEFAULT_WARDS
        assert settings.allowed_signup_domains == ["gmail.com"]
        assert settings.staff_accounts == []

    def test_loads_from_env(self):
        """Settings should load from environment variables."""
        with patch.dict(os.environ, {
            "LOG_LEVEL": "DEBUG",
            "TRIAGE_TIMEOUT_SECONDS": "2.5",
            "RECORD_STORE_BACKEND": "supabase",
        }):
            settings = Settings(_env_file=None)

        assert settings.log_level == "DEBUG"
        assert settings.triage_timeout_seconds == 2.5
        assert settings.record_store_backend == "supabase"

    def test_loads_supabase_config_from_env(self):
        with patch.dict(os.environ, {
            "SUPABASE_URL": "https://test.supabase.co",
            "SUPABASE_SERVICE_ROLE_KEY": "test-service-key",
            "GOOGLE_API_KEY": "test-google-key",
        }):
            settings = Settings(_env_file=None)

        assert settings.supabase_url == "https://test.supabase.co"
        assert settings.supabase_service_role_key == "test-service-key"
        assert settings.google_api_key == "test-google-key"

    def test_loads_staff_accounts_from_json(self):
        """Complex settings are read as JSON."""
        staff = [
            {"email": "officer@puttur.gov.in", "name": "Officer", "password": "pw", "role": "ADMIN"},
        ]
        with patch.dict(os.environ, {"STAFF_ACCOUNTS": json.dumps(staff)}):
            settings = Settings(_env_file=None)

        assert settings.staff_accounts == [
            StaffAccountConfig(
                email="officer@puttur.gov.in",
                name="Officer",
                password="pw",
                role="ADMIN",
            )
        ]

    def test_staff_account_role_defaults_to_viewer(self):
        entry = StaffAccountConfig(email="a@b.c", name="A", password="pw")
        assert entry.role == "VIEWER"


class TestGetSettings:
    def test_get_settings_returns_settings_instance(self):
        """get_settings should return a Settings instance."""
        get_settings.cache_clear()
        settings = get_settings()
        assert isinstance(settings, Settings)

    def test_get_settings_is_cached(self):
        """get_settings should return the same instance (cached)."""
        get_settings.cache_clear()
        assert get_settings() is get_settings()
