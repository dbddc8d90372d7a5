"""Tests for settings and the process-wide default font."""

import logging

import pytest

from rtldoc import config
from rtldoc.config import Settings, get_default_font, set_default_font
from rtldoc.errors import ConfigurationError
from rtldoc.models import FontFamily


class TestSettings:
    """Tests for Settings defaults and environment overrides."""

    def test_defaults(self):
        settings = Settings()

        assert settings.page_size == "LETTER"
        assert settings.logo_height == 16.0
        assert settings.font_size == 8.0

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("RTLDOC_PAGE_SIZE", "A4")
        monkeypatch.setenv("RTLDOC_LOGO_HEIGHT", "24")

        settings = Settings()

        assert settings.page_size == "A4"
        assert settings.logo_height == 24.0


@pytest.mark.usefixtures("default_font_state")
class TestDefaultFont:
    """Tests for set_default_font()/get_default_font()."""

    def test_unset(self):
        assert get_default_font() is None

    def test_mapping(self, tmp_path):
        set_default_font({"normal": tmp_path / "r.ttf", "bold": str(tmp_path / "b.ttf")})

        font = get_default_font()
        assert isinstance(font, FontFamily)
        assert font.bold == tmp_path / "b.ttf"

    def test_invalid_mapping(self):
        with pytest.raises(ConfigurationError):
            set_default_font({"bold": "b.ttf"})

    def test_change_after_read_warns(self, tmp_path, caplog):
        get_default_font()

        with caplog.at_level(logging.WARNING, logger="rtldoc.config"):
            set_default_font({"normal": tmp_path / "r.ttf"})

        assert "after documents were built" in caplog.text
        assert config._default_font.normal == tmp_path / "r.ttf"

    def test_set_before_read_is_quiet(self, tmp_path, caplog):
        with caplog.at_level(logging.WARNING, logger="rtldoc.config"):
            set_default_font({"normal": tmp_path / "r.ttf"})

        assert caplog.text == ""
