"""Bridge between renderers and Starlette responses."""

from typing import Any, Optional

from fastapi import Request
from fastapi.responses import Response

from render import Renderer, ResponseWriter, default_negotiator


def negotiated(
    request: Request,
    status_code: int,
    payload: Any,
    renderer: Optional[Renderer] = None
) -> Response:
    """
    Render ``payload`` into a fresh writer and return the response.

    Args:
        request: Incoming request, its Accept header drives negotiation
        status_code: HTTP status code
        payload: Object to serialize
        renderer: Renderer to use, defaults to the negotiator on the
            default registry

    Raises:
        RenderException: If rendering fails
    """
    writer = ResponseWriter()
    (renderer or default_negotiator).render(writer, request, status_code, payload)
    return writer.to_response()
