"""Classified failures raised while resolving credentials and issuing grants."""

from __future__ import annotations


class CredentialError(Exception):
    """Base class for credential resolution and issuance failures."""


class InvalidConnectionStringError(CredentialError, ValueError):
    """Raised when a connection string cannot be resolved to a credential."""


class InvalidAccountNameError(InvalidConnectionStringError):
    """Raised when no account name is present or derivable."""


class UnparseableHostError(InvalidAccountNameError):
    """Raised when the blob endpoint yields no account name from host or path."""


class InvalidAccountKeyError(InvalidConnectionStringError):
    """Raised when the account key is missing, malformed, or empty once decoded."""


class InvalidBlobEndpointError(InvalidConnectionStringError):
    """Raised when a SAS connection string has no BlobEndpoint."""


class InvalidSharedAccessSignatureError(InvalidConnectionStringError):
    """Raised when a SAS connection string has no SharedAccessSignature."""


class InvalidProtocolError(InvalidConnectionStringError):
    """Raised when DefaultEndpointsProtocol is neither http nor https."""


class InvalidEndpointSuffixError(InvalidConnectionStringError):
    """Raised when EndpointSuffix is needed to build the endpoint but is empty."""


class UnsupportedCredentialKindError(CredentialError, TypeError):
    """Raised when a credential without signing material is asked to issue a grant."""


__all__ = [
    "CredentialError",
    "InvalidAccountKeyError",
    "InvalidAccountNameError",
    "InvalidBlobEndpointError",
    "InvalidConnectionStringError",
    "InvalidEndpointSuffixError",
    "InvalidProtocolError",
    "InvalidSharedAccessSignatureError",
    "UnparseableHostError",
    "UnsupportedCredentialKindError",
]
