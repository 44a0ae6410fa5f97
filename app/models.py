"""Pydantic models shared across HTTP routes."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class UploadGrantResponse(BaseModel):
    """Successful response carrying a create-only container grant."""

    model_config = ConfigDict(populate_by_name=True)

    url: str = Field(..., description="Blob service endpoint of the storage account, without a trailing slash.")
    sas_key: str = Field(
        ...,
        alias="sasKey",
        description="Signed query string to append to '{url}/{container}/{blob}?'.",
    )
