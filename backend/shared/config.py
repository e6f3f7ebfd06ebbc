"""
Centralized configuration for the MuniServe portal core.

All settings are loaded from environment variables with sensible defaults.
Integration settings are namespaced (e.g., SUPABASE_*, TRIAGE_*).
"""

from functools import lru_cache
from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict


# Wards of Puttur Municipal Corporation
DEFAULT_WARDS = [
    "Darbe",
    "Bolwar",
    "Nehru Nagar",
    "Kombettu",
    "Kabaka",
    "Bannur",
    "Court Road",
    "Parlane",
    "Vivekananda College Area",
    "Muraliya",
    "Sampya",
    "Kemminje",
    "Padil",
    "Kodimbadi",
    "Other Area",
]


class StaffAccountConfig(BaseModel):
    """A management account seeded into the registry at startup."""

    email: str
    name: str
    password: str
    role: str = "VIEWER"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = "INFO"

    # Record store: "memory" or "supabase"
    record_store_backend: str = "memory"

    # Supabase
    supabase_url: str = ""
    supabase_service_role_key: str = ""

    # Triage advisor
    google_api_key: str = ""
    triage_model: str = "gemini/gemini-2.0-flash"
    triage_timeout_seconds: float = 10.0

    # Municipality
    city_name: str = "Puttur"
    wards: list[str] = DEFAULT_WARDS

    # Accounts
    allowed_signup_domains: list[str] = ["gmail.com"]
    staff_accounts: list[StaffAccountConfig] = []


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
