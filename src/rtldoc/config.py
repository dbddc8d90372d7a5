"""Configuration management for rtldoc."""

import logging
from pathlib import Path
from typing import Mapping, Optional, Union

from pydantic import ValidationError
from pydantic_settings import BaseSettings

from rtldoc.errors import ConfigurationError
from rtldoc.models.base import FontFamily

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Page
    page_size: str = "LETTER"
    page_margin: float = 36.0

    # Typography
    font_size: float = 8.0
    logo_height: float = 16.0

    # Tables
    border_color: str = "eeeeee"

    # Logging
    log_level: str = "INFO"

    class Config:
        env_prefix = "RTLDOC_"
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()


# Process-wide default font, set once at startup and read by every document.
_default_font: Optional[FontFamily] = None
_default_font_read = False


def set_default_font(
    font: Union[FontFamily, Mapping[str, Union[str, Path]], None],
) -> None:
    """Set the font family used by documents that don't pass their own.

    Must be called before documents are built. Changing it while a
    document is being composed is undefined behaviour.

    Args:
        font: Mapping of style name ("normal", "bold") to a font file,
            a FontFamily, or None to fall back to built-in Helvetica.
    """
    global _default_font

    if font is not None and not isinstance(font, FontFamily):
        try:
            font = FontFamily.model_validate(dict(font))
        except ValidationError as e:
            raise ConfigurationError(f"Invalid default font: {e}") from e

    if _default_font_read and font != _default_font:
        logger.warning("Default font changed after documents were built")

    _default_font = font


def get_default_font() -> Optional[FontFamily]:
    """Return the process-wide default font family."""
    global _default_font_read

    _default_font_read = True
    return _default_font
