"""Routes describing and exercising the registered renderers."""

from typing import List

from fastapi import APIRouter, Query, Request
from fastapi.responses import Response

from render import ResponseWriter

from ..dependencies import RegistryDep, StatusRendererDep

router = APIRouter(tags=["renderers"])

# Status code -> StatusRenderer method
STATUS_HELPERS = {
    200: "ok",
    201: "created",
    202: "accepted",
    400: "bad_request",
    401: "unauthorized",
    402: "forbidden",
    404: "not_found",
    405: "method_not_allowed",
    500: "internal_server_error",
    501: "service_unavailable",
}

SUCCESS_CODES = {200, 201, 202}


@router.get("/renderers")
async def list_renderers(
    request: Request,
    registry: RegistryDep,
    helper: StatusRendererDep
) -> Response:
    """List registered content types in registration order."""
    writer = ResponseWriter()
    helper.ok(writer, request, {"content_types": registry.content_types})
    return writer.to_response()


@router.get("/status/{code}")
async def render_status(
    code: int,
    request: Request,
    helper: StatusRendererDep,
    detail: List[str] = Query([], description="Error message parts")
) -> Response:
    """Render the status helper response for ``code``."""
    writer = ResponseWriter()
    name = STATUS_HELPERS.get(code)
    if name is None:
        helper.not_found(writer, request, "unsupported status", code)
    elif code in SUCCESS_CODES:
        getattr(helper, name)(writer, request, {"status": code})
    else:
        getattr(helper, name)(writer, request, *detail)
    return writer.to_response()
