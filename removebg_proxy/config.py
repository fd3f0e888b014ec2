"""
Configuration loader for the background-removal proxy.

Environment variables are centralized here to keep the rest of the code
focused on request handling. The remove.bg API key is deliberately kept out
of the cached settings: it is looked up per request and only ever handled
as a `SecretStr`.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

REMOVEBG_SIZES = {"preview", "small", "regular", "medium", "hd", "full", "4k", "auto"}


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Upstream
    removebg_api_url: str = Field("https://api.remove.bg/v1.0/removebg")
    removebg_size: str = Field("regular")
    # None keeps the call unbounded; a value adds a read/connect timeout.
    request_timeout_seconds: Optional[float] = Field(None)

    # Upload hardening, 0 disables the check
    max_upload_bytes: int = Field(0, ge=0)

    log_level: str = Field("INFO")

    @field_validator("removebg_size")
    @classmethod
    def validate_size(cls, v: str) -> str:
        if v not in REMOVEBG_SIZES:
            raise ValueError(f"REMOVEBG_SIZE must be one of {'|'.join(sorted(REMOVEBG_SIZES))}")
        return v


class Credentials(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    removebg_api_key: Optional[SecretStr] = None


@lru_cache()
def get_settings() -> Settings:
    """Return cached settings to avoid reparsing env on every call."""
    return Settings()


def load_api_key() -> Optional[SecretStr]:
    """
    Read the remove.bg API key from the environment at call time.

    Returns None when unset. The value stays wrapped so it does not show up
    in reprs or log lines.
    """
    key = Credentials().removebg_api_key
    if key is not None and not key.get_secret_value():
        return None
    return key
