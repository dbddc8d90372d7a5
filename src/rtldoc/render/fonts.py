"""Font selection for the PDF canvas."""

import logging
from typing import Optional

import fitz  # PyMuPDF

from rtldoc.errors import ResourceError
from rtldoc.models import FontFamily, FontStyle

logger = logging.getLogger(__name__)

# Base-14 fallbacks, used when no font family is configured. They only
# cover Latin text.
BUILTIN_FONTS = {
    FontStyle.NORMAL: "helv",
    FontStyle.BOLD: "hebo",
}


class FontSet:
    """Resolves a font style to a PDF font name and metrics.

    Custom families are embedded under the names ``PrimaryNormal`` and
    ``PrimaryBold``.
    """

    def __init__(self, family: Optional[FontFamily] = None):
        """Initialize font set.

        Args:
            family: Font files to embed, or None for Base-14 Helvetica.

        Raises:
            ResourceError: If a font file is missing or unreadable.
        """
        self.family = family
        self._fonts: dict[FontStyle, fitz.Font] = {}

        for style in FontStyle:
            if family is None:
                self._fonts[style] = fitz.Font(BUILTIN_FONTS[style])
                continue

            path = family.path_for(style)
            if not path.is_file():
                raise ResourceError(f"Font file not found: {path}")
            try:
                self._fonts[style] = fitz.Font(fontfile=str(path))
            except RuntimeError as e:
                raise ResourceError(f"Cannot load font {path}: {e}") from e
            logger.debug("Loaded %s font from %s", style.value, path)

    def fontname(self, style: FontStyle) -> str:
        """PDF resource name for a style."""
        style = FontStyle(style)
        if self.family is None:
            return BUILTIN_FONTS[style]
        return f"Primary{style.value.capitalize()}"

    def fontfile(self, style: FontStyle) -> Optional[str]:
        """Font file to embed for a style, None for built-in fonts."""
        if self.family is None:
            return None
        return str(self.family.path_for(FontStyle(style)))

    def text_length(self, text: str, style: FontStyle, size: float) -> float:
        """Width of a string in points."""
        return self._fonts[FontStyle(style)].text_length(text, fontsize=size)
