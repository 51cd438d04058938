"""Tests for the renderer registry."""

import logging

import pytest

from render import JSONRenderer, RendererRegistry, create_default_registry
from render.base import Renderer


class StubRenderer(Renderer):
    def render(self, writer, request, status_code, payload):
        writer.write_header(status_code)

    def __repr__(self):
        return "StubRenderer()"


class TestRendererRegistry:
    """Test RendererRegistry behavior."""

    def test_register_and_get(self):
        """Registered renderer is returned for its content type."""
        registry = RendererRegistry()
        renderer = StubRenderer()
        registry.register("text/csv", renderer)

        assert registry.get("text/csv") is renderer
        assert "text/csv" in registry
        assert len(registry) == 1

    def test_get_unknown_returns_none(self):
        """Unknown content types have no renderer."""
        registry = RendererRegistry()
        assert registry.get("text/csv") is None
        assert "text/csv" not in registry

    def test_last_registration_wins(self, caplog):
        """Re-registering replaces the renderer and warns."""
        registry = RendererRegistry()
        first, second = StubRenderer(), StubRenderer()

        registry.register("text/csv", first)
        with caplog.at_level(logging.WARNING, logger="render.registry"):
            registry.register("text/csv", second)

        assert registry.get("text/csv") is second
        assert registry.content_types == ["text/csv", "text/csv"]
        assert len(registry) == 1
        assert "already registered for text/csv" in caplog.text

    def test_first_registration_does_not_warn(self, caplog):
        """No warning for a new content type."""
        registry = RendererRegistry()
        with caplog.at_level(logging.WARNING, logger="render.registry"):
            registry.register("text/csv", StubRenderer())
        assert caplog.records == []

    def test_content_types_keep_registration_order(self):
        """Order list follows registration order."""
        registry = RendererRegistry()
        for content_type in ["b/b", "a/a", "c/c"]:
            registry.register(content_type, StubRenderer())
        assert registry.content_types == ["b/b", "a/a", "c/c"]

    def test_content_types_is_a_copy(self):
        """Mutating the returned list does not touch the registry."""
        registry = RendererRegistry()
        registry.register("text/csv", StubRenderer())
        registry.content_types.append("x/y")
        assert registry.content_types == ["text/csv"]

    def test_clear(self):
        """clear() drops bindings and order."""
        registry = RendererRegistry()
        registry.register("text/csv", StubRenderer())
        registry.clear()
        assert len(registry) == 0
        assert registry.content_types == []


class TestDefaultRegistry:
    """Test the default JSON bindings."""

    def test_default_bindings(self):
        registry = create_default_registry()
        assert registry.content_types == ["application/json", "*/*"]
        assert isinstance(registry.get("application/json"), JSONRenderer)
        assert isinstance(registry.get("*/*"), JSONRenderer)

    def test_each_call_builds_a_fresh_registry(self):
        first = create_default_registry()
        second = create_default_registry()
        first.register("text/csv", StubRenderer())
        assert "text/csv" not in second

    def test_module_register_uses_default_registry(self, monkeypatch):
        """render.register() binds on the process-wide registry."""
        import render

        fresh = create_default_registry()
        monkeypatch.setattr(render, "default_registry", fresh)
        renderer = StubRenderer()

        render.register("text/csv", renderer)

        assert fresh.get("text/csv") is renderer

    @pytest.mark.parametrize("content_type", ["application/json", "*/*"])
    def test_process_registry_has_json(self, content_type):
        import render

        assert content_type in render.default_registry
