"""Resolved storage credentials."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union


@dataclass(frozen=True)
class AccountKeyCredential:
    """Shared-key credential able to sign new grants."""

    url: str
    account_name: str
    account_key: bytes = field(repr=False)
    proxy_uri: Optional[str] = None


@dataclass(frozen=True)
class SasCredential:
    """Pre-signed credential; holds no signing material of its own."""

    url: str
    account_name: str
    shared_access_signature: str = field(repr=False)


Credential = Union[AccountKeyCredential, SasCredential]

__all__ = ["AccountKeyCredential", "Credential", "SasCredential"]
