"""Exceptions raised while rendering responses."""

from typing import Optional, Dict, Any


class RenderException(Exception):
    """Base exception for all rendering errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)


class SerializationError(RenderException):
    """Raised when a payload cannot be encoded.

    By the time this is raised the status line and headers have already
    been written, so the response cannot be corrected.
    """
    pass
