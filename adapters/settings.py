"""Application settings read from the Functions host environment."""

from __future__ import annotations

import os
from datetime import timedelta

from core.upload_grant import UPLOAD_CONTAINER, UPLOAD_GRANT_TTL

DEFAULT_CONNECTION_SETTING = "AzureWebJobsStorage"


class ConfigurationError(RuntimeError):
    """Raised when a required application setting is missing or invalid."""


def connection_setting_name() -> str:
    """Return the name of the app setting that holds the storage connection string."""

    return os.environ.get("STORAGE_CONNECTION_SETTING", "").strip() or DEFAULT_CONNECTION_SETTING


def get_storage_connection_string() -> str:
    """Return the storage connection string, read at call time."""

    setting = connection_setting_name()
    connection_string = os.environ.get(setting, "")
    if not connection_string.strip():
        raise ConfigurationError(
            f"{setting} is not configured; set the environment variable before requesting upload grants."
        )
    return connection_string


def get_upload_container() -> str:
    return os.environ.get("UPLOAD_CONTAINER", "").strip() or UPLOAD_CONTAINER


def get_upload_grant_ttl() -> timedelta:
    raw = os.environ.get("UPLOAD_GRANT_TTL_MINUTES", "").strip()
    if not raw:
        return UPLOAD_GRANT_TTL
    try:
        minutes = int(raw)
    except ValueError as exc:
        raise ConfigurationError(
            f"UPLOAD_GRANT_TTL_MINUTES must be a whole number of minutes, got '{raw}'."
        ) from exc
    if minutes <= 0:
        raise ConfigurationError("UPLOAD_GRANT_TTL_MINUTES must be positive.")
    return timedelta(minutes=minutes)


__all__ = [
    "ConfigurationError",
    "DEFAULT_CONNECTION_SETTING",
    "connection_setting_name",
    "get_storage_connection_string",
    "get_upload_container",
    "get_upload_grant_ttl",
]
