"""
Renderer registry keyed by content type.

Usage:
    from render import RendererRegistry, JSONRenderer

    registry = RendererRegistry()
    registry.register("application/json", JSONRenderer())

    renderer = registry.get("application/json")

Registering a content type twice replaces the earlier renderer and logs a
warning. The registration order is kept, duplicates included, and is only
used to tell clients which content types they may ask for.
"""

import logging
from typing import Dict, Iterator, List, Optional

from .base import Renderer

logger = logging.getLogger(__name__)


class RendererRegistry:
    """
    Mapping from content type to renderer.

    Written during application startup, read-only while serving requests.
    """

    def __init__(self):
        self._renderers: Dict[str, Renderer] = {}
        self._content_types: List[str] = []

    def register(self, content_type: str, renderer: Renderer) -> None:
        """
        Bind ``renderer`` to ``content_type``.

        Args:
            content_type: Exact media type matched against Accept candidates
            renderer: Renderer serving that media type
        """
        previous = self._renderers.get(content_type)
        if previous is not None:
            logger.warning(
                f"Content handler already registered for {content_type}: {previous!r}"
            )
        self._renderers[content_type] = renderer
        self._content_types.append(content_type)

    def get(self, content_type: str) -> Optional[Renderer]:
        """Get the renderer bound to ``content_type``, if any."""
        return self._renderers.get(content_type)

    @property
    def content_types(self) -> List[str]:
        """Registered content types in registration order."""
        return list(self._content_types)

    def clear(self) -> None:
        """
        Remove all bindings.

        Primarily for testing purposes.
        """
        self._renderers.clear()
        self._content_types.clear()

    def __contains__(self, content_type: object) -> bool:
        return content_type in self._renderers

    def __len__(self) -> int:
        return len(self._renderers)

    def __iter__(self) -> Iterator[str]:
        return iter(self._renderers)


def create_default_registry() -> RendererRegistry:
    """Create a registry serving JSON for ``application/json`` and ``*/*``."""
    from .json_renderer import JSONRenderer

    registry = RendererRegistry()
    registry.register("application/json", JSONRenderer())
    registry.register("*/*", JSONRenderer())
    return registry
