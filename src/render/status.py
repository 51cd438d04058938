"""
Per-status convenience wrappers around a renderer.

Success helpers pass the payload through unchanged. Error helpers take any
number of values and render them as a single ``ErrorPayload`` message.
"""

from http import HTTPStatus
from typing import Any, Optional

from . import settings
from .base import Renderer, Request, ResponseWriter
from .schemas import ErrorPayload


def _check_style(style: str) -> None:
    if style not in settings.ERROR_MESSAGE_STYLES:
        raise ValueError(
            f"message style must be one of {sorted(settings.ERROR_MESSAGE_STYLES)}, "
            f"got {style!r}"
        )


def format_message(args: tuple, style: Optional[str] = None) -> str:
    """
    Join ``args`` into one message.

    Args:
        args: Values to display, joined with single spaces
        style: "bracketed" wraps the result in ``[...]``, "plain" does not.
            Defaults to ``settings.ERROR_MESSAGE_STYLE``.

    Returns:
        Formatted message

    Raises:
        ValueError: If ``style`` is not a known message style
    """
    style = style or settings.ERROR_MESSAGE_STYLE
    _check_style(style)
    message = " ".join(str(arg) for arg in args)
    if style == "plain":
        return message
    return f"[{message}]"


class StatusRenderer(Renderer):
    """Wraps one renderer and exposes a method per HTTP status."""

    def __init__(self, renderer: Renderer, message_style: Optional[str] = None):
        if message_style is not None:
            _check_style(message_style)
        self.renderer = renderer
        self.message_style = message_style

    def render(
        self,
        writer: ResponseWriter,
        request: Request,
        status_code: int,
        payload: Any
    ) -> None:
        self.renderer.render(writer, request, status_code, payload)

    def _error(self, writer: ResponseWriter, request: Request, status_code: int, args: tuple) -> None:
        payload = ErrorPayload(message=format_message(args, self.message_style))
        self.renderer.render(writer, request, status_code, payload)

    # 2XX

    def ok(self, writer: ResponseWriter, request: Request, payload: Any) -> None:
        self.renderer.render(writer, request, HTTPStatus.OK, payload)

    def created(self, writer: ResponseWriter, request: Request, payload: Any) -> None:
        self.renderer.render(writer, request, HTTPStatus.CREATED, payload)

    def accepted(self, writer: ResponseWriter, request: Request, payload: Any) -> None:
        self.renderer.render(writer, request, HTTPStatus.ACCEPTED, payload)

    # 4XX

    def bad_request(self, writer: ResponseWriter, request: Request, *args: Any) -> None:
        self._error(writer, request, HTTPStatus.BAD_REQUEST, args)

    def unauthorized(self, writer: ResponseWriter, request: Request, *args: Any) -> None:
        self._error(writer, request, HTTPStatus.UNAUTHORIZED, args)

    def forbidden(self, writer: ResponseWriter, request: Request, *args: Any) -> None:
        # 402, kept for compatibility with existing clients
        self._error(writer, request, HTTPStatus.PAYMENT_REQUIRED, args)

    def not_found(self, writer: ResponseWriter, request: Request, *args: Any) -> None:
        self._error(writer, request, HTTPStatus.NOT_FOUND, args)

    def method_not_allowed(self, writer: ResponseWriter, request: Request, *args: Any) -> None:
        self._error(writer, request, HTTPStatus.METHOD_NOT_ALLOWED, args)

    # 5XX

    def internal_server_error(self, writer: ResponseWriter, request: Request, *args: Any) -> None:
        self._error(writer, request, HTTPStatus.INTERNAL_SERVER_ERROR, args)

    def service_unavailable(self, writer: ResponseWriter, request: Request, *args: Any) -> None:
        # 501, kept for compatibility with existing clients
        self._error(writer, request, HTTPStatus.NOT_IMPLEMENTED, args)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.renderer!r})"
