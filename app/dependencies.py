"""Centralised imports for route dependencies."""

from __future__ import annotations

from typing import Iterable

from adapters.settings import (
    ConfigurationError,
    get_storage_connection_string,
    get_upload_container,
    get_upload_grant_ttl,
)
from core.errors import InvalidConnectionStringError, UnsupportedCredentialKindError
from core.upload_grant import issue_upload_grant

__all__: Iterable[str] = (
    "ConfigurationError",
    "InvalidConnectionStringError",
    "UnsupportedCredentialKindError",
    "get_storage_connection_string",
    "get_upload_container",
    "get_upload_grant_ttl",
    "issue_upload_grant",
)
