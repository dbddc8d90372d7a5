"""Pytest configuration and fixtures."""

import io
from unittest.mock import MagicMock

import pytest
from PIL import Image

from rtldoc import config


@pytest.fixture
def canvas():
    """Mock canvas recording placement calls."""
    mock_canvas = MagicMock()
    mock_canvas.bounds_width = 540.0
    return mock_canvas


@pytest.fixture
def company():
    """Company attributes without a logo."""
    return {
        "name": "Acme",
        "address": "1 Main St",
        "phone": "555-0100",
        "email": "a@b.com",
    }


@pytest.fixture
def attributes(company):
    """A complete attribute bag."""
    return {
        "company": company,
        "recipient": ["Jane Doe"],
        "details": [["Date", "2024-01-01"]],
        "line_items": [["Item", "Qty", "Price"], ["Widget", "2", "$10"]],
    }


@pytest.fixture
def png_bytes():
    """A small 20x10 PNG image."""
    buffer = io.BytesIO()
    Image.new("RGB", (20, 10), color=(255, 0, 0)).save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def default_font_state(monkeypatch):
    """Isolate the process-wide default font from other tests."""
    monkeypatch.setattr(config, "_default_font", None)
    monkeypatch.setattr(config, "_default_font_read", False)
