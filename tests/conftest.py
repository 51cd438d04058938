"""Pytest configuration for test suite."""

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path
from types import SimpleNamespace

import pytest

# Get paths
project_root = Path(__file__).parent.parent
src_dir = project_root / "src"

# Add src before any test imports so "render.*" resolves without installing
if str(src_dir) not in sys.path:
    sys.path.insert(0, str(src_dir))

from fastapi.datastructures import Headers  # noqa: E402

from render import JSONRenderer, RendererRegistry, ResponseWriter  # noqa: E402

FIXED_NOW = datetime(2024, 1, 2, 15, 4, 5, tzinfo=timezone(timedelta(hours=-7)))
FIXED_DATE = "Tue, 02 Jan 2024 15:04:05 -0700"


def make_request(accept=None):
    """Build a request double exposing case-insensitive headers."""
    headers = {} if accept is None else {"Accept": accept}
    return SimpleNamespace(headers=Headers(headers))


@pytest.fixture
def json_renderer():
    """JSON renderer with a frozen clock."""
    return JSONRenderer(clock=lambda: FIXED_NOW)


@pytest.fixture
def registry(json_renderer):
    """Fresh registry with the default JSON bindings."""
    registry = RendererRegistry()
    registry.register("application/json", json_renderer)
    registry.register("*/*", json_renderer)
    return registry


@pytest.fixture
def writer():
    """Empty response writer."""
    return ResponseWriter()


@pytest.fixture(name="make_request")
def make_request_fixture():
    """Factory for request doubles."""
    return make_request
