"""
Document model produced by the DOCX parser and consumed by the UDF serializer.
"""

from .run import (
    Run,
    TextRun,
    TabRun,
    LineBreakRun,
    PageBreakRun,
    ImageRun,
    FootnoteRefRun,
)
from .document import (
    Alignment,
    BorderMode,
    VerticalAlignment,
    VerticalMerge,
    Numbering,
    Paragraph,
    Cell,
    Row,
    Table,
    BlockElement,
    Document,
)

__all__ = [
    "Run",
    "TextRun",
    "TabRun",
    "LineBreakRun",
    "PageBreakRun",
    "ImageRun",
    "FootnoteRefRun",
    "Alignment",
    "BorderMode",
    "VerticalAlignment",
    "VerticalMerge",
    "Numbering",
    "Paragraph",
    "Cell",
    "Row",
    "Table",
    "BlockElement",
    "Document",
]
