"""Tests for settings validation."""

import pytest

from render import settings


def test_defaults_are_valid():
    settings.validate()


def test_unknown_message_style_rejected(monkeypatch):
    monkeypatch.setattr(settings, "ERROR_MESSAGE_STYLE", "shouty")
    with pytest.raises(ValueError) as exc:
        settings.validate()
    assert "ERROR_MESSAGE_STYLE" in str(exc.value)


def test_negative_port_rejected(monkeypatch):
    monkeypatch.setattr(settings, "API_PORT", -1)
    with pytest.raises(ValueError):
        settings.validate()
