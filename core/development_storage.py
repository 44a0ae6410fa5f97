"""Well-known Azurite development storage account.

The emulator ships a fixed account name and key, so connection strings using
the ``UseDevelopmentStorage=true`` shorthand expand to these values instead of
anything user supplied.
"""

from __future__ import annotations

DEVELOPMENT_STORAGE_FLAG: str = "UseDevelopmentStorage=true"

AZURITE_HOST: str = "127.0.0.1"
AZURITE_BLOB_PORT: int = 10000

DEVSTORE_ACCOUNT_NAME: str = "devstoreaccount1"
DEVSTORE_ACCOUNT_KEY: str = (
    "Eby8vdM02xNOcqFlqUwJPLlmEtlCDXJ1OUzFT50uSRZ6IFsuFq2UVErCz4I6tq/K1SZFPTOtr/KBHBeksoGMGw=="
)


def dev_blob_endpoint() -> str:
    """Get the Azurite blob service endpoint."""
    return f"http://{AZURITE_HOST}:{AZURITE_BLOB_PORT}/{DEVSTORE_ACCOUNT_NAME}"


def dev_storage_connection_string() -> str:
    """Return the account-key connection string the emulator shorthand stands for.

    Example:
        "DefaultEndpointsProtocol=http;AccountName=devstoreaccount1;..."
    """
    return (
        f"DefaultEndpointsProtocol=http;"
        f"AccountName={DEVSTORE_ACCOUNT_NAME};"
        f"AccountKey={DEVSTORE_ACCOUNT_KEY};"
        f"BlobEndpoint={dev_blob_endpoint()};"
    )
