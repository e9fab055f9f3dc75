"""
Block-level document model: paragraphs, tables and the document itself.

The model is produced once by the parser and treated as read-only
afterwards. Optional properties are explicit fields with documented
defaults rather than looked up dynamically.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional, Union

from .run import FootnoteRefRun, ImageRun, Run


class Alignment(str, Enum):
    """Paragraph alignment."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    JUSTIFY = "justify"


class BorderMode(str, Enum):
    """Table border rendering."""

    CELL = "borderCell"
    NONE = "borderNone"


class VerticalAlignment(str, Enum):
    TOP = "top"
    CENTER = "center"
    BOTTOM = "bottom"


class VerticalMerge(str, Enum):
    """Vertical merge state of a table cell."""

    NONE = "none"
    RESTART = "restart"
    CONTINUATION = "continue"


@dataclass(frozen=True)
class Numbering:
    level: int
    list_id: str


@dataclass
class Paragraph:
    """
    Paragraph with alignment, indents in points and an ordered run list.

    Indents are ``None`` when the source did not specify them.
    """

    runs: List[Run] = field(default_factory=list)
    alignment: Alignment = Alignment.LEFT
    left_indent: Optional[int] = None
    right_indent: Optional[int] = None
    first_line_indent: Optional[int] = None
    numbering: Optional[Numbering] = None


@dataclass
class Cell:
    paragraphs: List[Paragraph] = field(default_factory=list)
    colspan: int = 1
    vertical_merge: VerticalMerge = VerticalMerge.NONE
    vertical_alignment: VerticalAlignment = VerticalAlignment.TOP
    background_color: Optional[str] = None  # "#RRGGBB"

    def __post_init__(self):
        if self.colspan < 1:
            self.colspan = 1

    @property
    def is_continuation(self) -> bool:
        """True for a vertically merged cell that only continues a merge above it."""
        return self.vertical_merge is VerticalMerge.CONTINUATION


@dataclass
class Row:
    cells: List[Cell] = field(default_factory=list)


@dataclass
class Table:
    rows: List[Row] = field(default_factory=list)
    column_widths: List[int] = field(default_factory=list)
    border: BorderMode = BorderMode.CELL


BlockElement = Union[Paragraph, Table]


@dataclass
class Document:
    """Ordered sequence of block elements."""

    blocks: List[BlockElement] = field(default_factory=list)

    def iter_paragraphs(self) -> Iterator[Paragraph]:
        """Iterate over every paragraph, including those inside table cells."""
        for block in self.blocks:
            if isinstance(block, Paragraph):
                yield block
            else:
                for row in block.rows:
                    for cell in row.cells:
                        yield from cell.paragraphs

    def iter_runs(self) -> Iterator[Run]:
        for paragraph in self.iter_paragraphs():
            yield from paragraph.runs

    def get_stats(self):
        """Counts of blocks and notable runs, for logging and the CLI."""
        runs = list(self.iter_runs())
        return {
            "paragraphs": sum(1 for b in self.blocks if isinstance(b, Paragraph)),
            "tables": sum(1 for b in self.blocks if isinstance(b, Table)),
            "images": sum(1 for r in runs if isinstance(r, ImageRun)),
            "unresolved_images": sum(1 for r in runs if isinstance(r, ImageRun) and r.data is None),
            "footnotes": sum(1 for r in runs if isinstance(r, FootnoteRefRun)),
        }
