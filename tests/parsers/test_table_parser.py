"""
Tests for TableParser.
"""

import xml.etree.ElementTree as ET

import pytest

from docx2udf.models import BorderMode, Paragraph, VerticalAlignment, VerticalMerge
from docx2udf.parser import DocxParser, TableParser
from tests.docx_factory import W_NS, para, text_run


def make_table(inner):
    return ET.fromstring(f'<w:tbl xmlns:w="{W_NS}">{inner}</w:tbl>')


def cell(content="", tcpr=""):
    props = f"<w:tcPr>{tcpr}</w:tcPr>" if tcpr else ""
    return f"<w:tc>{props}{content}</w:tc>"


@pytest.fixture
def table_parser():
    return TableParser(DocxParser().parse_paragraph)


class TestTableParser:
    """Test cases for TableParser."""

    def test_column_widths_from_grid(self, table_parser):
        table = table_parser.parse_table(
            make_table('<w:tblGrid><w:gridCol w:w="1440"/><w:gridCol w:w="2890"/></w:tblGrid>')
        )
        assert table.column_widths == [72, 145]

    def test_no_grid_gives_empty_widths(self, table_parser):
        assert table_parser.parse_table(make_table("")).column_widths == []

    def test_default_border_mode(self, table_parser):
        assert table_parser.parse_table(make_table("<w:tblPr/>")).border is BorderMode.CELL

    def test_all_borders_none_is_borderless(self, table_parser):
        borders = (
            '<w:tblPr><w:tblBorders><w:top w:val="none"/><w:left w:val="nil"/>'
            '<w:insideH w:val="none"/></w:tblBorders></w:tblPr>'
        )
        assert table_parser.parse_table(make_table(borders)).border is BorderMode.NONE

    def test_one_visible_border_keeps_cell_borders(self, table_parser):
        borders = (
            '<w:tblPr><w:tblBorders><w:top w:val="none"/>'
            '<w:bottom w:val="single" w:sz="4"/></w:tblBorders></w:tblPr>'
        )
        assert table_parser.parse_table(make_table(borders)).border is BorderMode.CELL

    def test_rows_and_cells(self, table_parser):
        inner = (
            "<w:tr>" + cell(para(text_run("a"))) + cell(para(text_run("b"))) + "</w:tr>"
            "<w:tr>" + cell(para(text_run("c"))) + "</w:tr>"
        )
        table = table_parser.parse_table(make_table(inner))

        assert [len(row.cells) for row in table.rows] == [2, 1]
        first = table.rows[0].cells[0]
        assert isinstance(first.paragraphs[0], Paragraph)
        assert first.paragraphs[0].runs[0].text == "a"

    def test_cell_properties(self, table_parser):
        tcpr = '<w:gridSpan w:val="2"/><w:vAlign w:val="center"/><w:shd w:val="clear" w:fill="00FF00"/>'
        table = table_parser.parse_table(make_table("<w:tr>" + cell(para(), tcpr) + "</w:tr>"))
        parsed = table.rows[0].cells[0]

        assert parsed.colspan == 2
        assert parsed.vertical_alignment is VerticalAlignment.CENTER
        assert parsed.background_color == "#00FF00"

    def test_cell_defaults(self, table_parser):
        table = table_parser.parse_table(make_table("<w:tr>" + cell(para(), '<w:shd w:fill="auto"/>') + "</w:tr>"))
        parsed = table.rows[0].cells[0]

        assert parsed.colspan == 1
        assert parsed.vertical_merge is VerticalMerge.NONE
        assert parsed.vertical_alignment is VerticalAlignment.TOP
        assert parsed.background_color is None

    @pytest.mark.parametrize("v_merge, expected", [
        ('<w:vMerge w:val="restart"/>', VerticalMerge.RESTART),
        ('<w:vMerge w:val="continue"/>', VerticalMerge.CONTINUATION),
        ("<w:vMerge/>", VerticalMerge.CONTINUATION),
    ])
    def test_vertical_merge(self, table_parser, v_merge, expected):
        table = table_parser.parse_table(make_table("<w:tr>" + cell(para(text_run("x")), v_merge) + "</w:tr>"))
        assert table.rows[0].cells[0].vertical_merge is expected

    def test_continuation_cell_has_no_content(self, table_parser):
        table = table_parser.parse_table(make_table("<w:tr>" + cell(para(text_run("stale")), "<w:vMerge/>") + "</w:tr>"))
        merged = table.rows[0].cells[0]
        assert merged.is_continuation
        assert merged.paragraphs == []

    def test_nested_table_is_flattened_into_cell(self, table_parser):
        nested = "<w:tbl><w:tr>" + cell(para(text_run("inner"))) + "</w:tr></w:tbl>"
        table = table_parser.parse_table(make_table("<w:tr>" + cell(para(text_run("outer")) + nested) + "</w:tr>"))

        assert len(table.rows) == 1
        texts = [p.runs[0].text for p in table.rows[0].cells[0].paragraphs]
        assert texts == ["outer", "inner"]
