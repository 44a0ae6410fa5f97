"""Parse Azure Storage connection strings into typed credentials.

Three textual forms are accepted:

* account key: ``DefaultEndpointsProtocol``, ``AccountName``, ``AccountKey`` and
  either ``BlobEndpoint`` or ``EndpointSuffix``;
* shared access signature: ``BlobEndpoint`` and ``SharedAccessSignature``;
* the emulator shorthand ``UseDevelopmentStorage=true``, optionally followed by
  ``DevelopmentStorageProxyUri``.
"""

from __future__ import annotations

import base64
import binascii
import logging
from typing import Dict, Optional
from urllib.parse import urlsplit

from core.credentials import AccountKeyCredential, Credential, SasCredential
from core.development_storage import DEVELOPMENT_STORAGE_FLAG, dev_storage_connection_string
from core.errors import (
    InvalidAccountKeyError,
    InvalidAccountNameError,
    InvalidBlobEndpointError,
    InvalidEndpointSuffixError,
    InvalidProtocolError,
    InvalidSharedAccessSignatureError,
    UnparseableHostError,
)

logger = logging.getLogger(__name__)

_VALID_PROTOCOLS = {"http", "https"}


def tokenize(raw: str) -> Dict[str, str]:
    """Split ``raw`` into a key/value mapping.

    Segments are trimmed, empty segments and segments without ``=`` are
    skipped, and the first occurrence of a key wins. Values keep any further
    ``=`` characters so base64 padding and query strings survive.
    """

    fields: Dict[str, str] = {}
    for segment in raw.split(";"):
        segment = segment.strip()
        if not segment or "=" not in segment:
            continue
        key, _, value = segment.partition("=")
        fields.setdefault(key, value)
    return fields


def account_name_from_url(url: str) -> str:
    """Derive the storage account name from a blob endpoint URL.

    ``https://foo.blob.core.windows.net`` yields ``foo``. Any other host is
    treated as path-style (IP, localhost, emulator) and the first path segment
    is used, so ``http://127.0.0.1:10000/devstoreaccount1`` yields
    ``devstoreaccount1``.
    """

    target = url if "://" in url else f"//{url}"
    try:
        parts = urlsplit(target)
        host = parts.hostname
    except ValueError as exc:
        raise UnparseableHostError(f"Unable to parse BlobEndpoint '{url}'.") from exc

    if not host:
        raise UnparseableHostError(f"BlobEndpoint '{url}' has no host.")

    labels = host.split(".")
    if len(labels) > 1 and labels[1] == "blob":
        account_name = labels[0]
    else:
        segments = parts.path.split("/")
        account_name = segments[1] if len(segments) > 1 else ""

    if not account_name:
        raise UnparseableHostError(
            f"Unable to extract the account name from BlobEndpoint '{url}'."
        )
    return account_name


def _decode_account_key(value: str) -> bytes:
    # Unpadded keys are accepted; only an empty result is rejected.
    try:
        key = base64.b64decode(value + "=" * (-len(value) % 4))
    except (binascii.Error, ValueError) as exc:
        raise InvalidAccountKeyError(
            "Invalid AccountKey in the provided connection string: not valid base64."
        ) from exc
    if not key:
        raise InvalidAccountKeyError("Invalid AccountKey in the provided connection string.")
    return key


def _account_key_credential(
    fields: Dict[str, str], blob_endpoint: str, proxy_uri: Optional[str]
) -> AccountKeyCredential:
    account_name = fields.get("AccountName", "")

    if not blob_endpoint:
        protocol = fields.get("DefaultEndpointsProtocol", "")
        if protocol.lower() not in _VALID_PROTOCOLS:
            raise InvalidProtocolError(
                "Invalid DefaultEndpointsProtocol in the provided connection string. "
                "Expecting 'https' or 'http'."
            )
        endpoint_suffix = fields.get("EndpointSuffix", "")
        if not endpoint_suffix:
            raise InvalidEndpointSuffixError(
                "Invalid EndpointSuffix in the provided connection string."
            )
        blob_endpoint = f"{protocol}://{account_name}.blob.{endpoint_suffix}"

    if not account_name:
        raise InvalidAccountNameError("Invalid AccountName in the provided connection string.")

    account_key = _decode_account_key(fields.get("AccountKey", ""))

    return AccountKeyCredential(
        url=blob_endpoint,
        account_name=account_name,
        account_key=account_key,
        proxy_uri=proxy_uri,
    )


def _sas_credential(fields: Dict[str, str], blob_endpoint: str) -> SasCredential:
    if not blob_endpoint:
        raise InvalidBlobEndpointError(
            "Invalid BlobEndpoint in the provided SAS connection string."
        )

    account_name = fields.get("AccountName") or account_name_from_url(blob_endpoint)

    signature = fields.get("SharedAccessSignature", "")
    if signature.startswith("?"):
        signature = signature[1:]
    if not signature:
        raise InvalidSharedAccessSignatureError(
            "Invalid SharedAccessSignature in the provided SAS connection string."
        )

    return SasCredential(
        url=blob_endpoint,
        account_name=account_name,
        shared_access_signature=signature,
    )


def _is_account_key_shaped(fields: Dict[str, str]) -> bool:
    if "DefaultEndpointsProtocol" not in fields:
        return False
    # An account key always wins over a SAS. Without either, the string is
    # still account-key shaped and must fail on the missing key.
    return "AccountKey" in fields or "SharedAccessSignature" not in fields


def parse_connection_string(raw: str) -> Credential:
    """Resolve ``raw`` to an :class:`AccountKeyCredential` or :class:`SasCredential`.

    Raises a subclass of :class:`core.errors.InvalidConnectionStringError` when
    the string cannot be resolved to exactly one credential.
    """

    proxy_uri: Optional[str] = None
    if raw.lstrip().startswith(DEVELOPMENT_STORAGE_FLAG):
        proxy_uri = tokenize(raw).get("DevelopmentStorageProxyUri") or None
        raw = dev_storage_connection_string()

    fields = tokenize(raw)

    blob_endpoint = fields.get("BlobEndpoint", "")
    if blob_endpoint.endswith("/"):
        blob_endpoint = blob_endpoint[:-1]

    credential: Credential
    if _is_account_key_shaped(fields):
        credential = _account_key_credential(fields, blob_endpoint, proxy_uri)
    else:
        credential = _sas_credential(fields, blob_endpoint)

    logger.debug(
        "Resolved %s for account %s.", type(credential).__name__, credential.account_name
    )
    return credential


__all__ = ["account_name_from_url", "parse_connection_string", "tokenize"]
