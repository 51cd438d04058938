"""Dependency injection for FastAPI routes."""

from typing import Annotated

from fastapi import Depends

from render import RendererRegistry, StatusRenderer, default_negotiator, default_registry

# Singleton instances
_status_renderer = None


def get_status_renderer() -> StatusRenderer:
    """Get StatusRenderer singleton wrapping the default negotiator."""
    global _status_renderer
    if _status_renderer is None:
        _status_renderer = StatusRenderer(default_negotiator)
    return _status_renderer


def get_registry() -> RendererRegistry:
    """Get the process-wide renderer registry."""
    return default_registry


# Dependency annotations for type hints
StatusRendererDep = Annotated[StatusRenderer, Depends(get_status_renderer)]
RegistryDep = Annotated[RendererRegistry, Depends(get_registry)]
