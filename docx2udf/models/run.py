"""
Run variants of the document model.

A paragraph holds an ordered list of runs; each run is exactly one of
the classes below and consumers dispatch on the concrete type.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from ..config import DEFAULT_FONT_FAMILY, DEFAULT_FONT_SIZE


@dataclass(frozen=True)
class TextRun:
    """Formatted text. ``text`` is never empty."""

    text: str
    bold: bool = False
    italic: bool = False
    underline: bool = False
    strike: bool = False
    font_family: str = DEFAULT_FONT_FAMILY
    font_size: float = DEFAULT_FONT_SIZE
    color: Optional[str] = None  # "#RRGGBB"

    def __post_init__(self):
        if not self.text:
            raise ValueError("TextRun text must be non-empty")


@dataclass(frozen=True)
class TabRun:
    pass


@dataclass(frozen=True)
class LineBreakRun:
    pass


@dataclass(frozen=True)
class PageBreakRun:
    pass


@dataclass(frozen=True)
class ImageRun:
    """Inline image; ``data`` is base64 text or ``None`` when the reference did not resolve."""

    data: Optional[str] = None
    width: int = 100
    height: int = 100


@dataclass(frozen=True)
class FootnoteRefRun:
    """Footnote reference: ``label`` is rendered in place, ``body_text`` is deferred."""

    label: str
    body_text: str = ""


Run = Union[TextRun, TabRun, LineBreakRun, PageBreakRun, ImageRun, FootnoteRefRun]
