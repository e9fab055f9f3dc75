"""
Table parser for DOCX documents.

Handles table grid, border mode, rows and cell properties. Cell
paragraphs are parsed by the paragraph callback handed in by the
document parser so tables and body share the same run logic.
"""

import xml.etree.ElementTree as ET
from typing import Callable, List
import logging

from ..models import (
    BorderMode,
    Cell,
    Paragraph,
    Row,
    Table,
    VerticalAlignment,
    VerticalMerge,
)
from ..utils import normalize_hex, parse_int, twips_to_points

logger = logging.getLogger(__name__)

W_NS = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"
W = f"{{{W_NS}}}"

BORDER_POSITIONS = ("top", "left", "start", "bottom", "right", "end", "insideH", "insideV")
NO_BORDER_VALUES = ("none", "nil")

VERTICAL_ALIGNMENTS = {
    "top": VerticalAlignment.TOP,
    "center": VerticalAlignment.CENTER,
    "bottom": VerticalAlignment.BOTTOM,
}


def _val(element: ET.Element, name: str = "val"):
    return element.get(f"{W}{name}")


class TableParser:
    """
    Parser for tables.

    Rows are the table's direct ``w:tr`` children and cells the row's
    direct ``w:tc`` children; a cell's paragraphs are every paragraph
    below it, so nested tables are flattened into the cell.
    """

    def __init__(self, paragraph_parser: Callable[[ET.Element], Paragraph]):
        """
        Initialize table parser.

        Args:
            paragraph_parser: Callable turning a ``w:p`` element into a Paragraph
        """
        self.paragraph_parser = paragraph_parser

    def parse_table(self, table_element: ET.Element) -> Table:
        table = Table(
            column_widths=self.parse_column_widths(table_element),
            border=self.parse_border_mode(table_element),
        )

        for row_element in table_element.findall(f"{W}tr"):
            table.rows.append(self.parse_table_row(row_element))

        logger.debug(
            f"Parsed table: {len(table.rows)} rows, {len(table.column_widths)} grid columns, "
            f"border={table.border.value}"
        )
        return table

    def parse_column_widths(self, table_element: ET.Element) -> List[int]:
        tbl_grid = table_element.find(f"{W}tblGrid")
        if tbl_grid is None:
            return []
        return [
            twips_to_points(parse_int(_val(col, "w"), 0))
            for col in tbl_grid.findall(f"{W}gridCol")
        ]

    def parse_border_mode(self, table_element: ET.Element) -> BorderMode:
        """Borderless only if a ``tblBorders`` block sets every position to none/nil or leaves it out."""
        tbl_pr = table_element.find(f"{W}tblPr")
        if tbl_pr is None:
            return BorderMode.CELL
        tbl_borders = tbl_pr.find(f"{W}tblBorders")
        if tbl_borders is None:
            return BorderMode.CELL

        for position in BORDER_POSITIONS:
            border = tbl_borders.find(f"{W}{position}")
            if border is None:
                continue
            value = _val(border)
            if value and value not in NO_BORDER_VALUES:
                return BorderMode.CELL
        return BorderMode.NONE

    def parse_table_row(self, row_element: ET.Element) -> Row:
        return Row(cells=[self.parse_table_cell(tc) for tc in row_element.findall(f"{W}tc")])

    def parse_table_cell(self, cell_element: ET.Element) -> Cell:
        cell = Cell()

        tc_pr = cell_element.find(f"{W}tcPr")
        if tc_pr is not None:
            self._apply_cell_properties(cell, tc_pr)

        if cell.is_continuation:
            # Content already rendered by the merge-start cell above.
            return cell

        for paragraph in cell_element.iter(f"{W}p"):
            cell.paragraphs.append(self.paragraph_parser(paragraph))
        return cell

    def _apply_cell_properties(self, cell: Cell, tc_pr: ET.Element) -> None:
        grid_span = tc_pr.find(f"{W}gridSpan")
        if grid_span is not None:
            cell.colspan = max(1, parse_int(_val(grid_span), 1))

        v_merge = tc_pr.find(f"{W}vMerge")
        if v_merge is not None:
            value = _val(v_merge)
            if not value or value == "continue":
                cell.vertical_merge = VerticalMerge.CONTINUATION
            elif value == "restart":
                cell.vertical_merge = VerticalMerge.RESTART

        v_align = tc_pr.find(f"{W}vAlign")
        if v_align is not None:
            cell.vertical_alignment = VERTICAL_ALIGNMENTS.get(_val(v_align) or "top", VerticalAlignment.TOP)

        shd = tc_pr.find(f"{W}shd")
        if shd is not None:
            cell.background_color = normalize_hex(_val(shd, "fill"))
