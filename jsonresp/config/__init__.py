"""Configuration module."""

from jsonresp.config.settings import JsonRespSettings, get_settings

__all__ = [
    "JsonRespSettings",
    "get_settings",
]
