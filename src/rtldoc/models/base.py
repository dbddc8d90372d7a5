"""Base models and common types for rtldoc."""

from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Align(str, Enum):
    """Horizontal placement of text, tables and images."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class FontStyle(str, Enum):
    """Font styles a font family can provide."""

    NORMAL = "normal"
    BOLD = "bold"


class BorderSide(str, Enum):
    """Sides of a table cell that can carry a border."""

    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    LEFT = "left"


class BaseDocModel(BaseModel):
    """Base class for request-scoped document models.

    Instances are immutable once validated; a document is built from
    them once and they are discarded afterwards.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")


class FontFamily(BaseDocModel):
    """Font files for each style of the primary font family."""

    normal: Path = Field(..., description="Font file used for regular text")
    bold: Optional[Path] = Field(
        None, description="Font file used for bold text (falls back to normal)"
    )

    def path_for(self, style: FontStyle) -> Path:
        """Return the font file for a style."""
        if style == FontStyle.BOLD and self.bold is not None:
            return self.bold
        return self.normal
