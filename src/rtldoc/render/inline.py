"""Inline formatting for rendered text.

Turns a markup fragment into styled runs grouped by line. Recognized
tags: ``<b>``/``<strong>`` (bold), ``<color rgb='rrggbb'>`` and
``<link href='...'>``. Other tags are transparent: their text is kept
with the surrounding style.
"""

from dataclasses import dataclass, replace
from typing import Optional

from lxml import etree

from rtldoc.markup import parse_fragment

BOLD_TAGS = {"b", "strong"}


@dataclass(frozen=True)
class TextRun:
    """A piece of text drawn with a single style."""

    text: str
    bold: bool = False
    color: Optional[str] = None  # hex RGB
    link: Optional[str] = None


def parse_runs(markup: str, inline_format: bool = True) -> list[list[TextRun]]:
    """Split text into lines of styled runs.

    Args:
        markup: Text to lay out.
        inline_format: Interpret tags; when False the text is taken literally.

    Returns:
        One list of runs per line. Empty lines are empty lists.
    """
    if not inline_format:
        return [[TextRun(line)] if line else [] for line in markup.split("\n")]

    runs: list[TextRun] = []
    _collect(parse_fragment(markup), TextRun(""), runs, root=True)
    return _split_lines(runs)


def _collect(element: etree._Element, style: TextRun, runs: list[TextRun], root: bool = False) -> None:
    if not root:
        style = _style_for(element, style)
    if element.text:
        runs.append(replace(style, text=element.text))
    for child in element:
        if isinstance(child.tag, str):
            _collect(child, style, runs)
        if child.tail:
            runs.append(replace(style, text=child.tail))


def _style_for(element: etree._Element, style: TextRun) -> TextRun:
    tag = element.tag.lower()
    if tag in BOLD_TAGS:
        return replace(style, bold=True)
    if tag == "color" and element.get("rgb"):
        return replace(style, color=element.get("rgb").lstrip("#"))
    if tag == "link" and element.get("href"):
        return replace(style, link=element.get("href"))
    return style


def _split_lines(runs: list[TextRun]) -> list[list[TextRun]]:
    lines: list[list[TextRun]] = [[]]
    for run in runs:
        pieces = run.text.split("\n")
        for index, piece in enumerate(pieces):
            if index > 0:
                lines.append([])
            if piece:
                lines[-1].append(replace(run, text=piece))
    return lines
