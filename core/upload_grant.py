"""Upload grant issuance for the image upload flow."""

from __future__ import annotations

import posixpath
import uuid
from datetime import timedelta
from typing import Dict, Optional

from core.connection_string import parse_connection_string
from core.permissions import PermissionInput, SasPermission
from core.token_issuer import ScopedTokenIssuer, issue_grant

UPLOAD_CONTAINER = "images"
UPLOAD_PERMISSIONS = frozenset({SasPermission.CREATE})
UPLOAD_GRANT_TTL = timedelta(hours=2)


def issue_upload_grant(
    connection_string: str,
    *,
    container: str = UPLOAD_CONTAINER,
    permissions: PermissionInput = UPLOAD_PERMISSIONS,
    ttl: timedelta = UPLOAD_GRANT_TTL,
    issuer: Optional[ScopedTokenIssuer] = None,
) -> Dict[str, str]:
    """Resolve ``connection_string`` and return ``{"url", "sasKey"}`` for a create-only grant."""

    credential = parse_connection_string(connection_string)
    if issuer is None:
        grant = issue_grant(credential, container, permissions, ttl)
    else:
        grant = issuer.issue(credential, container, permissions, ttl)
    return grant.to_dict()


def unique_blob_name(filename: str) -> str:
    """Insert a random suffix before the extension so uploads never collide."""

    stem, extension = posixpath.splitext(filename)
    return f"{stem or 'upload'}-{uuid.uuid4().hex[:8]}{extension}"


__all__ = [
    "UPLOAD_CONTAINER",
    "UPLOAD_GRANT_TTL",
    "UPLOAD_PERMISSIONS",
    "issue_upload_grant",
    "unique_blob_name",
]
