"""
UDF serializer.

Walks the document model and builds the target format's flat text
buffer together with the offset-addressed elements that describe it.
Footnote references render their label in place; their bodies are
queued and written out at the next page break or at the end of the
document.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from ..config import ConverterOptions
from ..models import (
    Alignment,
    Cell,
    Document,
    FootnoteRefRun,
    ImageRun,
    LineBreakRun,
    PageBreakRun,
    Paragraph,
    Row,
    TabRun,
    Table,
    TextRun,
)
from ..utils import format_indent, format_number, hex_to_rgb_int, round_half_up
from .elements import ElementKind, TargetDocument, UdfElement

logger = logging.getLogger(__name__)

ZERO_WIDTH_SPACE = "\u200b"
OBJECT_REPLACEMENT = "\ufffc"
EMPTY_CELL_PLACEHOLDER = " "

ALIGNMENT_CODES = {
    Alignment.LEFT: "0",
    Alignment.CENTER: "1",
    Alignment.RIGHT: "2",
    Alignment.JUSTIFY: "3",
}

COLUMN_SPAN_TOTAL = 300


def text_length(text: str) -> int:
    """Length in UTF-16 code units, the unit the consuming editor counts offsets in."""
    return len(text.encode("utf-16-le")) // 2


@dataclass(frozen=True)
class PendingFootnote:
    label: str
    body_text: str


class UdfSerializer:
    """
    Serializer from the document model to a TargetDocument.

    An instance holds the working state of one conversion at a time;
    ``serialize`` resets it, so concurrent conversions need separate
    instances.
    """

    def __init__(self, options: Optional[ConverterOptions] = None):
        self.options = options or ConverterOptions()
        self._reset()

    def _reset(self) -> None:
        self._buffer: List[str] = []
        self._cursor = 0
        self._elements: List[UdfElement] = []
        self._pending_footnotes: List[PendingFootnote] = []

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def pending_footnotes(self) -> List[PendingFootnote]:
        return list(self._pending_footnotes)

    def serialize(self, document: Document) -> TargetDocument:
        self._reset()

        for block in document.blocks:
            if isinstance(block, Paragraph):
                self.process_paragraph(block)
            elif isinstance(block, Table):
                self.process_table(block)
            else:
                raise TypeError(f"Unsupported block element: {type(block).__name__}")

        self.flush_footnotes()

        if self._cursor == 0:
            # The target format requires non-empty content.
            start = self._append(ZERO_WIDTH_SPACE)
            self._elements.append(
                self._paragraph_element(None, start, [self._default_content(start, 1)])
            )

        target = TargetDocument(buffer="".join(self._buffer), elements=self._elements)
        logger.debug(
            f"Serialized {len(document.blocks)} blocks into {self._cursor} units "
            f"and {len(self._elements)} top-level elements"
        )
        self._reset()
        return target

    # ------------------------------------------------------------------
    # Buffer

    def _append(self, text: str) -> int:
        """Append text to the buffer and return its start offset."""
        start = self._cursor
        self._buffer.append(text)
        self._cursor += text_length(text)
        return start

    def _default_attributes(self) -> Dict[str, str]:
        return {
            "family": self.options.default_font_family,
            "size": format_number(self.options.default_font_size),
        }

    def _default_content(self, start: int, length: int) -> UdfElement:
        return UdfElement(ElementKind.CONTENT, start, length, self._default_attributes())

    # ------------------------------------------------------------------
    # Paragraphs

    def process_paragraph(self, paragraph: Paragraph) -> None:
        """Serialize a top-level paragraph, honouring page breaks."""
        element, page_break = self._build_paragraph(paragraph, top_level=True)
        if element is not None:
            self._elements.append(element)
        if page_break:
            self.flush_footnotes()
            self._elements.append(UdfElement(ElementKind.PAGE_BREAK, self._cursor, 0))

    def _build_paragraph(self, paragraph: Paragraph, top_level: bool) -> Tuple[Optional[UdfElement], bool]:
        """
        Append a paragraph's runs and build its element.

        Returns the element (``None`` when a top-level page break arrives
        before anything was appended) and whether a page break ended the
        paragraph. Runs after a page break are not processed.
        """
        start = self._cursor
        children: List[UdfElement] = []

        for run in paragraph.runs:
            if isinstance(run, TextRun):
                children.append(self._append_text_run(run))
            elif isinstance(run, TabRun):
                children.append(UdfElement(ElementKind.TAB, self._append("\t"), 1))
            elif isinstance(run, ImageRun):
                image = self._append_image(run)
                if image is not None:
                    children.append(image)
            elif isinstance(run, LineBreakRun):
                self._append("\n")
            elif isinstance(run, FootnoteRefRun):
                children.append(self._append_superscript(run.label))
                self._pending_footnotes.append(PendingFootnote(run.label, run.body_text))
            elif isinstance(run, PageBreakRun):
                if top_level:
                    if self._cursor == start:
                        return None, True
                    return self._paragraph_element(paragraph, start, children), True
                # Page-break markers only exist between top-level blocks.
                break
            else:
                raise TypeError(f"Unsupported run: {type(run).__name__}")

        if self._cursor == start:
            children.append(self._default_content(self._append(ZERO_WIDTH_SPACE), 1))

        return self._paragraph_element(paragraph, start, children), False

    def _append_text_run(self, run: TextRun) -> UdfElement:
        attributes = {
            "family": run.font_family,
            "size": format_number(run.font_size),
        }
        if run.bold:
            attributes["bold"] = "true"
        if run.italic:
            attributes["italic"] = "true"
        if run.underline:
            attributes["underline"] = "true"
        if run.strike:
            attributes["strikethrough"] = "true"
        if run.color:
            attributes["foreground"] = str(hex_to_rgb_int(run.color))

        start = self._append(run.text)
        return UdfElement(ElementKind.CONTENT, start, self._cursor - start, attributes)

    def _append_image(self, run: ImageRun) -> Optional[UdfElement]:
        if not run.data or not self.options.embed_images:
            logger.debug("Dropping image without embedded data")
            return None
        start = self._append(OBJECT_REPLACEMENT)
        return UdfElement(
            ElementKind.IMAGE,
            start,
            1,
            {"imageData": run.data, "width": str(run.width), "height": str(run.height)},
        )

    def _append_superscript(self, text: str) -> UdfElement:
        attributes = self._default_attributes()
        attributes["superscript"] = "true"
        start = self._append(text)
        return UdfElement(ElementKind.CONTENT, start, self._cursor - start, attributes)

    def _paragraph_element(self, paragraph: Optional[Paragraph], start: int, children: List[UdfElement]) -> UdfElement:
        return UdfElement(
            ElementKind.PARAGRAPH,
            start,
            self._cursor - start,
            self.paragraph_attributes(paragraph),
            children,
        )

    @staticmethod
    def paragraph_attributes(paragraph: Optional[Paragraph]) -> Dict[str, str]:
        """Paragraph attributes in target-format order; ``None`` gives the defaults."""
        if paragraph is None:
            return {"Alignment": "0", "LeftIndent": "0.0", "RightIndent": "0.0"}

        attributes = {
            "Alignment": ALIGNMENT_CODES.get(paragraph.alignment, "0"),
            "LeftIndent": format_indent(paragraph.left_indent),
            "RightIndent": format_indent(paragraph.right_indent),
        }
        if paragraph.first_line_indent is not None:
            attributes["FirstLineIndent"] = format_indent(paragraph.first_line_indent)

        numbering = paragraph.numbering
        if numbering is not None:
            level = str(numbering.level)
            if is_bulleted_list(numbering.list_id):
                attributes.update({
                    "Bulleted": "true",
                    "BulletType": "BULLET_TYPE_ELLIPSE",
                    "ListLevel": level,
                    "ListId": numbering.list_id,
                })
            else:
                attributes.update({
                    "Numbered": "true",
                    "NumberType": "NUMBER_TYPE_NUMBER_TRE",
                    "ListLevel": level,
                    "ListId": numbering.list_id,
                })
        return attributes

    # ------------------------------------------------------------------
    # Tables

    def process_table(self, table: Table) -> None:
        column_count = len(table.column_widths) or (len(table.rows[0].cells) if table.rows else 0) or 1
        start = self._cursor

        rows = [self._build_row(index, row) for index, row in enumerate(table.rows)]

        self._elements.append(
            UdfElement(
                ElementKind.TABLE,
                start,
                self._cursor - start,
                {
                    "tableName": "Table",
                    "columnCount": str(column_count),
                    "columnSpans": ",".join(str(span) for span in column_spans(table.column_widths, column_count)),
                    "border": table.border.value,
                },
                rows,
            )
        )

    def _build_row(self, index: int, row: Row) -> UdfElement:
        start = self._cursor
        cells = [self._build_cell(cell) for cell in row.cells if not cell.is_continuation]
        return UdfElement(
            ElementKind.ROW,
            start,
            self._cursor - start,
            {"rowName": f"row{index + 1}", "rowType": "dataRow"},
            cells,
        )

    def _build_cell(self, cell: Cell) -> UdfElement:
        start = self._cursor
        children: List[UdfElement] = []

        last = len(cell.paragraphs) - 1
        for index, paragraph in enumerate(cell.paragraphs):
            element, _ = self._build_paragraph(paragraph, top_level=False)
            children.append(element)
            if index < last:
                self._append("\n")

        if not children:
            placeholder = self._append(EMPTY_CELL_PLACEHOLDER)
            children.append(
                self._paragraph_element(None, placeholder, [self._default_content(placeholder, 1)])
            )

        attributes: Dict[str, str] = {}
        if cell.colspan > 1:
            attributes["colspan"] = str(cell.colspan)
        if cell.background_color:
            attributes["bgColor"] = str(hex_to_rgb_int(cell.background_color))
        attributes["vAlign"] = cell.vertical_alignment.value

        return UdfElement(ElementKind.CELL, start, self._cursor - start, attributes, children)

    # ------------------------------------------------------------------
    # Footnotes

    def flush_footnotes(self) -> None:
        """
        Write out queued footnotes and clear the queue.

        Emits a blank-line paragraph, a separator paragraph and one
        paragraph per footnote: superscript ``"label. "`` then the body.
        """
        if not self._pending_footnotes:
            return

        logger.debug(f"Flushing {len(self._pending_footnotes)} footnotes at offset {self._cursor}")

        start = self._append("\n")
        self._elements.append(self._paragraph_element(None, start, [self._default_content(start, 1)]))

        separator = self.options.footnote_separator
        start = self._append(separator)
        self._elements.append(
            self._paragraph_element(None, start, [self._default_content(start, self._cursor - start)])
        )

        for footnote in self._pending_footnotes:
            start = self._cursor
            children = [self._append_superscript(f"{footnote.label}. ")]
            if footnote.body_text:
                body_start = self._append(footnote.body_text)
                children.append(self._default_content(body_start, self._cursor - body_start))
            self._elements.append(self._paragraph_element(None, start, children))

        self._pending_footnotes.clear()


def is_bulleted_list(list_id: str) -> bool:
    """Even list ids render as bullets, odd (or non-numeric) ones as numbers."""
    try:
        return int(list_id) % 2 == 0
    except (TypeError, ValueError):
        return False


def column_spans(column_widths: List[int], column_count: int) -> List[int]:
    """
    Share a fixed span total across columns.

    Each share is rounded on its own, so the spans need not add up to
    the total exactly.
    """
    total = sum(column_widths)
    if column_widths and total > 0:
        return [round_half_up(width / total * COLUMN_SPAN_TOTAL) for width in column_widths]
    equal = round_half_up(COLUMN_SPAN_TOTAL / column_count)
    return [equal] * column_count
