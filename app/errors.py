"""Shared error helpers for HTTP routes."""

from __future__ import annotations

import logging

import azure.functions as func

from .dependencies import (
    ConfigurationError,
    InvalidConnectionStringError,
    UnsupportedCredentialKindError,
)
from .responses import json_message


def handle_grant_error(exc: Exception, *, log_prefix: str) -> func.HttpResponse:
    if isinstance(exc, (ConfigurationError, InvalidConnectionStringError)):
        logging.error(
            "[%s] Storage configuration rejected (%s): %s", log_prefix, type(exc).__name__, exc
        )
        return json_message("Storage account is not configured correctly.", status_code=500)
    if isinstance(exc, UnsupportedCredentialKindError):
        logging.error("[%s] Configured credential cannot sign grants.", log_prefix)
        return json_message("Storage account credential cannot issue upload grants.", status_code=500)

    logging.exception("[%s] Unexpected error", log_prefix)
    return json_message("Error issuing upload grant.", status_code=500)
