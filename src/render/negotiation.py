"""
Accept header negotiation.

Candidates are tried in header order and the first registered one wins.
Parameters after ``;`` (including ``q=``) are discarded, never weighed.
"""

import logging
from http import HTTPStatus
from typing import Any, Callable, Optional

from . import settings
from .base import Renderer, Request, ResponseWriter
from .json_renderer import JSONRenderer
from .registry import RendererRegistry
from .schemas import ErrorPayload

logger = logging.getLogger(__name__)

MatchStrategy = Callable[[str, RendererRegistry], Optional[Renderer]]


def _accept_header(request: Request) -> str:
    headers = request.headers
    value = headers.get("accept")
    if value is None:
        value = headers.get("Accept", "")
    return value


def first_match(accept: str, registry: RendererRegistry) -> Optional[Renderer]:
    """
    Find the renderer for the first registered Accept candidate.

    Args:
        accept: Raw Accept header value
        registry: Registry to look candidates up in

    Returns:
        The matching renderer, or None when no candidate is registered
    """
    for candidate in accept.split(","):
        content_type = candidate.split(";")[0]
        renderer = registry.get(content_type)
        if renderer is not None:
            logger.debug(f"Accept candidate {content_type!r} matched {renderer!r}")
            return renderer
    return None


class Negotiator(Renderer):
    """
    Renderer that dispatches to a registered renderer by Accept header.

    Falls back to a 406 JSON error listing the registered content types
    when nothing matches.
    """

    def __init__(
        self,
        registry: RendererRegistry,
        fallback: Optional[Renderer] = None,
        strategy: MatchStrategy = first_match
    ):
        self.registry = registry
        self.fallback = fallback or JSONRenderer()
        self.strategy = strategy

    def render(
        self,
        writer: ResponseWriter,
        request: Request,
        status_code: int,
        payload: Any
    ) -> None:
        accept = _accept_header(request)

        renderer = self.strategy(accept, self.registry)
        if renderer is not None:
            renderer.render(writer, request, status_code, payload)
            return

        logger.debug(f"No renderer registered for Accept {accept!r}")
        self.fallback.render(
            writer,
            request,
            HTTPStatus.NOT_ACCEPTABLE,
            self.not_acceptable_payload(),
        )

    def not_acceptable_payload(self) -> ErrorPayload:
        """Error body listing every registered content type in order."""
        return ErrorPayload(
            message=settings.NOT_ACCEPTABLE_PREFIX + ",".join(self.registry.content_types)
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(content_types={self.registry.content_types!r})"
