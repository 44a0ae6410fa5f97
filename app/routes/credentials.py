"""HTTP route issuing create-only upload grants."""

from __future__ import annotations

import logging

import azure.functions as func
from azure_functions_openapi.decorator import openapi as openapi_doc

from app import app
from app.constants import GRANT_LOG_PREFIX
from app.errors import handle_grant_error
from app.models import UploadGrantResponse
from app.responses import grant_response
from app.dependencies import (
    get_storage_connection_string,
    get_upload_container,
    get_upload_grant_ttl,
    issue_upload_grant,
)


def _handle_grant_request(req: func.HttpRequest, *, log_prefix: str) -> func.HttpResponse:
    logging.info("[%s] Issuing upload grant.", log_prefix)

    try:
        grant = issue_upload_grant(
            get_storage_connection_string(),
            container=get_upload_container(),
            ttl=get_upload_grant_ttl(),
        )
    except Exception as exc:
        return handle_grant_error(exc, log_prefix=log_prefix)

    return grant_response(grant)


@app.function_name(name="credentials")
@app.route(route="credentials", methods=[func.HttpMethod.GET])
@openapi_doc(
    summary="Issue a short-lived upload grant",
    description=(
        "Returns the blob endpoint of the storage account together with a container SAS "
        "that only allows creating new blobs in the upload container. The grant expires "
        "after two hours and cannot be revoked."
    ),
    tags=["Uploads"],
    response_model=UploadGrantResponse,
    operation_id="issueUploadGrant",
    route="/credentials",
    method="get",
)
def credentials(req: func.HttpRequest) -> func.HttpResponse:
    """Issue a create-only grant for the upload container."""

    return _handle_grant_request(req, log_prefix=GRANT_LOG_PREFIX)

