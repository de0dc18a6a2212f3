"""Pydantic Settings for the envelope codec.

All environment variables use the JSONRESP_ prefix.
Example: JSONRESP_TRAILING_NEWLINE=false, JSONRESP_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class JsonRespSettings(BaseSettings):
    """Codec configuration validated from environment variables."""

    model_config = SettingsConfigDict(env_prefix="JSONRESP_", extra="ignore")

    log_level: str = "INFO"

    # Encoding
    trailing_newline: bool = True  # End each body with "\n" like a streaming encoder

    # FastAPI integration
    internal_error_message: str = "Internal server error"  # Sent for unhandled exceptions


@lru_cache
def get_settings() -> JsonRespSettings:
    return JsonRespSettings()
