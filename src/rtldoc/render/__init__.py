"""Rendering: the layout target documents are placed on.

- base - the Canvas placement interface
- canvas - PdfCanvas, a PyMuPDF implementation
- inline - inline markup to styled runs
- fonts - font selection and metrics
- resources - logo image loading
"""

from .base import Canvas
from .canvas import PdfCanvas, hex_to_rgb, resolve_page_size
from .fonts import FontSet
from .inline import TextRun, parse_runs
from .resources import load_image

__all__ = [
    "Canvas",
    "PdfCanvas",
    "hex_to_rgb",
    "resolve_page_size",
    "FontSet",
    "TextRun",
    "parse_runs",
    "load_image",
]
