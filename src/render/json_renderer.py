"""
JSON renderer.

Writes the payload as compact UTF-8 JSON.
"""

import dataclasses
import json
from datetime import datetime
from typing import Any, Callable, Optional

from pydantic import BaseModel

from .base import Renderer, Request, ResponseWriter
from .exceptions import SerializationError

JSON_CONTENT_TYPE = "application/json;charset=utf-8"

# RFC 1123 with a numeric zone, e.g. "Mon, 02 Jan 2006 15:04:05 -0700"
RFC1123Z = "%a, %d %b %Y %H:%M:%S %z"


def _local_now() -> datetime:
    return datetime.now().astimezone()


def _encode_default(obj: Any) -> Any:
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json")
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


class JSONRenderer(Renderer):
    """Renderer that writes payloads as JSON."""

    content_type = JSON_CONTENT_TYPE

    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        self.clock = clock or _local_now

    def render(
        self,
        writer: ResponseWriter,
        request: Request,
        status_code: int,
        payload: Any
    ) -> None:
        """
        Write headers, status and the JSON-encoded payload.

        Raises:
            SerializationError: If the payload cannot be encoded. Headers
                and status have already been written at that point.
        """
        writer.set_header("Content-Type", self.content_type)
        writer.set_header("Date", self.clock().strftime(RFC1123Z))

        writer.write_header(status_code)

        try:
            content = json.dumps(
                payload,
                separators=(",", ":"),
                ensure_ascii=False,
                allow_nan=False,
                default=_encode_default,
            )
        except (TypeError, ValueError) as e:
            raise SerializationError(
                f"Failed to encode payload as JSON: {e}",
                details={"payload_type": type(payload).__name__}
            ) from e

        writer.write(content.encode("utf-8"))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
