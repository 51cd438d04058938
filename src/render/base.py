"""
Base classes and types for response renderers.

This module defines the abstract base class Renderer and the ResponseWriter
that renderers write status, headers and body to.

Design Pattern: Strategy Pattern
    - Renderer is the abstract strategy interface
    - Concrete renderers implement format-specific logic
    - Negotiator picks the strategy from the request's Accept header
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Optional, Protocol, Tuple

from fastapi.responses import Response

logger = logging.getLogger(__name__)


class Request(Protocol):
    """Anything exposing request headers (a Starlette ``Request`` qualifies)."""

    @property
    def headers(self) -> Mapping[str, str]: ...


class ResponseWriter:
    """
    Buffered HTTP response stream.

    Header names are case-insensitive: setting a name again in any case
    replaces the earlier value. Headers may be set until ``write_header``
    commits the status line. After that the header snapshot is final; later
    header changes and repeated ``write_header`` calls have no effect.
    """

    def __init__(self):
        # lower-cased name -> (name as last set, value)
        self._headers: Dict[str, Tuple[str, str]] = {}
        self._committed_headers: Optional[Dict[str, Tuple[str, str]]] = None
        self._status_code: Optional[int] = None
        self._body = bytearray()

    def set_header(self, name: str, value: str) -> None:
        """Set a response header, replacing any previous value."""
        self._headers[name.lower()] = (name, value)

    def write_header(self, status_code: int) -> None:
        """Commit the status code and the current headers."""
        if self._status_code is not None:
            logger.warning(
                f"Superfluous write_header({status_code}), "
                f"status {self._status_code} already written"
            )
            return
        self._status_code = int(status_code)
        self._committed_headers = dict(self._headers)

    def write(self, data: bytes) -> int:
        """Append body bytes, committing a 200 status if none was written."""
        if self._status_code is None:
            self.write_header(200)
        self._body.extend(data)
        return len(data)

    @property
    def committed(self) -> bool:
        return self._status_code is not None

    @property
    def status_code(self) -> int:
        return self._status_code if self._status_code is not None else 200

    @property
    def headers(self) -> Dict[str, str]:
        current = self._committed_headers if self._committed_headers is not None else self._headers
        return {name: value for name, value in current.values()}

    @property
    def body(self) -> bytes:
        return bytes(self._body)

    def to_response(self) -> Response:
        """Build the Starlette response for the buffered output."""
        return Response(
            content=self.body,
            status_code=self.status_code,
            headers=self.headers,
        )


class Renderer(ABC):
    """
    Abstract base class for all renderers.

    A renderer serializes a status code and payload into a response
    stream for a given request.
    """

    @abstractmethod
    def render(
        self,
        writer: ResponseWriter,
        request: Request,
        status_code: int,
        payload: Any
    ) -> None:
        """
        Write ``payload`` to ``writer`` with ``status_code``.

        Args:
            writer: Response stream to write to
            request: Incoming request
            status_code: HTTP status code
            payload: Object to serialize

        Raises:
            RenderException: If the payload cannot be rendered
        """
        pass
