import json
import logging
import pathlib
import sys
from types import SimpleNamespace

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app.routes import credentials as credential_routes

ACCOUNT_KEY_CONNECTION = (
    "DefaultEndpointsProtocol=https;AccountName=acct;AccountKey=c2VjcmV0LWtleQ==;"
    "EndpointSuffix=core.windows.net"
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("AzureWebJobsStorage", "STORAGE_CONNECTION_SETTING", "UPLOAD_CONTAINER", "UPLOAD_GRANT_TTL_MINUTES"):
        monkeypatch.delenv(name, raising=False)


def _request():
    return SimpleNamespace(params={}, headers={})


def test_grant_request_returns_url_and_sas_key(monkeypatch):
    monkeypatch.setenv("AzureWebJobsStorage", ACCOUNT_KEY_CONNECTION)

    response = credential_routes._handle_grant_request(_request(), log_prefix="credentials")

    assert response.status_code == 200
    assert response.headers["Cache-Control"] == "no-store"
    body = json.loads(response.get_body())
    assert set(body) == {"url", "sasKey"}
    assert body["url"] == "https://acct.blob.core.windows.net"
    assert "sp=c" in body["sasKey"]


def test_grant_request_passes_configured_scope(monkeypatch):
    captured = {}

    def fake_issue(connection_string, *, container, ttl):
        captured.update(connection_string=connection_string, container=container, ttl=ttl)
        return {"url": "https://acct.blob.core.windows.net", "sasKey": "sv=1&sig=x"}

    monkeypatch.setenv("AzureWebJobsStorage", ACCOUNT_KEY_CONNECTION)
    monkeypatch.setenv("UPLOAD_CONTAINER", "avatars")
    monkeypatch.setenv("UPLOAD_GRANT_TTL_MINUTES", "30")
    monkeypatch.setattr(credential_routes, "issue_upload_grant", fake_issue)

    response = credential_routes._handle_grant_request(_request(), log_prefix="credentials")

    assert response.status_code == 200
    assert captured["connection_string"] == ACCOUNT_KEY_CONNECTION
    assert captured["container"] == "avatars"
    assert captured["ttl"].total_seconds() == 30 * 60


def test_missing_connection_string_returns_500():
    response = credential_routes._handle_grant_request(_request(), log_prefix="credentials")

    assert response.status_code == 500
    body = json.loads(response.get_body())
    assert body["message"] == "Storage account is not configured correctly."


def test_invalid_connection_string_returns_500_without_leaking_key(monkeypatch, caplog):
    monkeypatch.setenv(
        "AzureWebJobsStorage",
        "DefaultEndpointsProtocol=ftp;AccountName=acct;AccountKey=c2VjcmV0LWtleQ==;EndpointSuffix=core.windows.net",
    )

    with caplog.at_level(logging.INFO):
        response = credential_routes._handle_grant_request(_request(), log_prefix="credentials")

    assert response.status_code == 500
    body = json.loads(response.get_body())
    assert body["message"] == "Storage account is not configured correctly."
    assert "InvalidProtocolError" in caplog.text
    assert "c2VjcmV0LWtleQ==" not in caplog.text
    assert "c2VjcmV0LWtleQ==" not in response.get_body().decode()


def test_sas_connection_string_cannot_issue(monkeypatch):
    monkeypatch.setenv(
        "AzureWebJobsStorage",
        "BlobEndpoint=https://acct.blob.core.windows.net;SharedAccessSignature=sv=1&sig=x",
    )

    response = credential_routes._handle_grant_request(_request(), log_prefix="credentials")

    assert response.status_code == 500
    body = json.loads(response.get_body())
    assert body["message"] == "Storage account credential cannot issue upload grants."


def test_unexpected_failure_returns_generic_500(monkeypatch):
    def boom(*_args, **_kwargs):
        raise RuntimeError("signer exploded")

    monkeypatch.setenv("AzureWebJobsStorage", ACCOUNT_KEY_CONNECTION)
    monkeypatch.setattr(credential_routes, "issue_upload_grant", boom)

    response = credential_routes._handle_grant_request(_request(), log_prefix="credentials")

    assert response.status_code == 500
    body = json.loads(response.get_body())
    assert body["message"] == "Error issuing upload grant."
