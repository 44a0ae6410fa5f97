"""Helper utilities for building HTTP responses."""

from __future__ import annotations

import json
from typing import Mapping

import azure.functions as func

_NO_STORE = {"Cache-Control": "no-store"}


def json_message(message: str, *, status_code: int) -> func.HttpResponse:
    return func.HttpResponse(
        json.dumps({"message": message}),
        mimetype="application/json",
        status_code=status_code,
    )


def grant_response(grant: Mapping[str, str]) -> func.HttpResponse:
    """Return a signed grant; grants must never be cached by intermediaries."""
    return func.HttpResponse(
        json.dumps(dict(grant)),
        mimetype="application/json",
        status_code=200,
        headers=dict(_NO_STORE),
    )
