"""Signing port and the shared-key implementation backed by the Azure SDK."""

from __future__ import annotations

import base64
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Protocol

from azure.storage.blob import ContainerSasPermissions, generate_container_sas


@dataclass(frozen=True)
class CanonicalSigningRequest:
    """Scope of a container grant: what may be done, where, and until when."""

    container_name: str
    permission: str
    expires_on: datetime


class Signer(Protocol):
    """Contract for turning a signing request into a signed query string."""

    def sign(self, account_name: str, account_key: bytes, request: CanonicalSigningRequest) -> str:
        """Return the signed query string for ``request``."""


class SharedKeySigner:
    """Sign container SAS tokens with the account's shared key (HMAC-SHA256)."""

    def sign(self, account_name: str, account_key: bytes, request: CanonicalSigningRequest) -> str:
        return generate_container_sas(
            account_name=account_name,
            container_name=request.container_name,
            account_key=base64.b64encode(account_key).decode("ascii"),
            permission=ContainerSasPermissions.from_string(request.permission),
            expiry=request.expires_on.astimezone(timezone.utc),
        )


__all__ = ["CanonicalSigningRequest", "SharedKeySigner", "Signer"]
