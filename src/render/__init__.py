"""
Content negotiation and response rendering.

This package selects a renderer from the request's Accept header and
provides per-status helpers that render a payload through it.

Usage:
    import render

    writer = render.ResponseWriter()
    render.created(writer, request, {"id": 7})
    response = writer.to_response()

    # Extra formats register at startup
    render.register("application/vnd.example+json", MyRenderer())
"""

from typing import Any

from . import settings
from .base import Renderer, Request, ResponseWriter
from .exceptions import RenderException, SerializationError
from .json_renderer import JSONRenderer
from .negotiation import Negotiator, first_match
from .registry import RendererRegistry, create_default_registry
from .schemas import ErrorPayload
from .status import StatusRenderer, format_message

# Process-wide defaults; register additional renderers before serving traffic
default_registry = create_default_registry()
default_negotiator = Negotiator(default_registry)
default_status_renderer = StatusRenderer(default_negotiator)


def register(content_type: str, renderer: Renderer) -> None:
    """Register ``renderer`` for ``content_type`` on the default registry."""
    default_registry.register(content_type, renderer)


def render(writer: ResponseWriter, request: Request, status_code: int, payload: Any) -> None:
    """Render through the renderer negotiated from the Accept header."""
    default_negotiator.render(writer, request, status_code, payload)


def ok(writer: ResponseWriter, request: Request, payload: Any) -> None:
    default_status_renderer.ok(writer, request, payload)


def created(writer: ResponseWriter, request: Request, payload: Any) -> None:
    default_status_renderer.created(writer, request, payload)


def accepted(writer: ResponseWriter, request: Request, payload: Any) -> None:
    default_status_renderer.accepted(writer, request, payload)


def bad_request(writer: ResponseWriter, request: Request, *args: Any) -> None:
    default_status_renderer.bad_request(writer, request, *args)


def unauthorized(writer: ResponseWriter, request: Request, *args: Any) -> None:
    default_status_renderer.unauthorized(writer, request, *args)


def forbidden(writer: ResponseWriter, request: Request, *args: Any) -> None:
    default_status_renderer.forbidden(writer, request, *args)


def not_found(writer: ResponseWriter, request: Request, *args: Any) -> None:
    default_status_renderer.not_found(writer, request, *args)


def method_not_allowed(writer: ResponseWriter, request: Request, *args: Any) -> None:
    default_status_renderer.method_not_allowed(writer, request, *args)


def internal_server_error(writer: ResponseWriter, request: Request, *args: Any) -> None:
    default_status_renderer.internal_server_error(writer, request, *args)


def service_unavailable(writer: ResponseWriter, request: Request, *args: Any) -> None:
    default_status_renderer.service_unavailable(writer, request, *args)


__all__ = [
    "settings",
    "Renderer",
    "Request",
    "ResponseWriter",
    "RenderException",
    "SerializationError",
    "JSONRenderer",
    "Negotiator",
    "first_match",
    "RendererRegistry",
    "create_default_registry",
    "ErrorPayload",
    "StatusRenderer",
    "format_message",
    "default_registry",
    "default_negotiator",
    "default_status_renderer",
    "register",
    "render",
    "ok",
    "created",
    "accepted",
    "bad_request",
    "unauthorized",
    "forbidden",
    "not_found",
    "method_not_allowed",
    "internal_server_error",
    "service_unavailable",
]
