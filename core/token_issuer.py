"""Issue time-bound, permission-scoped container grants."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, Optional

from core.credentials import AccountKeyCredential, Credential, SasCredential
from core.errors import UnsupportedCredentialKindError
from core.permissions import PermissionInput, format_permissions, parse_permissions
from core.signer import CanonicalSigningRequest, SharedKeySigner, Signer

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class SignedGrant:
    """A freshly signed grant. Never persisted; it expires on its own."""

    url: str
    signed_query: str
    container: str
    expires_on: datetime

    def blob_url(self, object_name: str) -> str:
        """Return the upload target for ``object_name`` inside the granted container."""

        return f"{self.url}/{self.container}/{object_name}?{self.signed_query}"

    def to_dict(self) -> Dict[str, str]:
        return {"url": self.url, "sasKey": self.signed_query}


class ScopedTokenIssuer:
    """Mint container grants from account-key credentials."""

    def __init__(self, signer: Optional[Signer] = None, clock: Optional[Clock] = None) -> None:
        self._signer = signer if signer is not None else SharedKeySigner()
        self._clock = clock if clock is not None else _utcnow

    def issue(
        self,
        credential: Credential,
        container: str,
        permissions: PermissionInput,
        ttl: timedelta,
    ) -> SignedGrant:
        if isinstance(credential, SasCredential):
            raise UnsupportedCredentialKindError(
                "A shared access signature credential holds no account key and cannot issue grants."
            )
        if not isinstance(credential, AccountKeyCredential):
            raise UnsupportedCredentialKindError(
                f"Unsupported credential type: {type(credential).__name__}."
            )

        if not container:
            raise ValueError("A container name is required to issue a grant.")
        permission = format_permissions(parse_permissions(permissions))
        if not permission:
            raise ValueError("At least one permission is required to issue a grant.")
        if ttl <= timedelta(0):
            raise ValueError("Grant lifetime must be positive.")

        expires_on = self._clock() + ttl
        request = CanonicalSigningRequest(
            container_name=container,
            permission=permission,
            expires_on=expires_on,
        )
        signed_query = self._signer.sign(credential.account_name, credential.account_key, request)

        logger.debug(
            "Issued '%s' grant on %s/%s expiring %s.",
            permission,
            credential.account_name,
            container,
            expires_on.isoformat(),
        )
        return SignedGrant(
            url=credential.url,
            signed_query=signed_query,
            container=container,
            expires_on=expires_on,
        )


_default_issuer = ScopedTokenIssuer()


def issue_grant(
    credential: Credential,
    container: str,
    permissions: PermissionInput,
    ttl: timedelta,
) -> SignedGrant:
    """Issue a grant with the shared-key signer and the wall clock."""

    return _default_issuer.issue(credential, container, permissions, ttl)


__all__ = ["Clock", "ScopedTokenIssuer", "SignedGrant", "issue_grant"]
