"""
Tests for RelationshipsParser and NotesParser.
"""

from unittest.mock import Mock

import pytest

from docx2udf.parser import NotesParser, RelationshipsParser
from docx2udf.parser.relationships_parser import media_filename

RELS = """<?xml version="1.0" encoding="UTF-8" standalone="yes"?>
<Relationships xmlns="http://schemas.openxmlformats.org/package/2006/relationships">
    <Relationship Id="rId1" Type="http://schemas.openxmlformats.org/officeDocument/2006/relationships/styles" Target="styles.xml"/>
    <Relationship Id="rId5" Type="http://schemas.openxmlformats.org/officeDocument/2006/relationships/image" Target="media/image1.png"/>
    <Relationship Id="rId6" Type="http://schemas.openxmlformats.org/officeDocument/2006/relationships/image" Target="http://example.com/a.png" TargetMode="External"/>
</Relationships>"""

FOOTNOTES = """<?xml version="1.0" encoding="UTF-8" standalone="yes"?>
<w:footnotes xmlns:w="http://schemas.openxmlformats.org/wordprocessingml/2006/main">
    <w:footnote w:type="separator" w:id="-1"><w:p><w:r><w:separator/></w:r></w:p></w:footnote>
    <w:footnote w:id="1">
        <w:p><w:r><w:footnoteRef/></w:r><w:r><w:t xml:space="preserve"> See the </w:t></w:r><w:r><w:t>record.</w:t></w:r></w:p>
        <w:p><w:r><w:t>Second paragraph.</w:t></w:r></w:p>
    </w:footnote>
</w:footnotes>"""


class TestRelationshipsParser:
    """Test cases for RelationshipsParser."""

    def test_parse_relationships(self):
        reader = Mock()
        reader.get_xml_if_exists.return_value = RELS

        relationships = RelationshipsParser(reader).parse_relationships()

        reader.get_xml_if_exists.assert_called_with("word/_rels/document.xml.rels")
        assert set(relationships) == {"rId1", "rId5", "rId6"}
        assert relationships["rId5"]["target"] == "media/image1.png"
        assert relationships["rId5"]["target_mode"] == "Internal"
        assert relationships["rId6"]["target_mode"] == "External"

    def test_missing_part_gives_empty_table(self):
        reader = Mock()
        reader.get_xml_if_exists.return_value = None
        assert RelationshipsParser(reader).parse_relationships() == {}

    @pytest.mark.parametrize("relationship, expected", [
        ({"target": "media/image1.png"}, "image1.png"),
        ({"target": "/word/media/image2.jpeg"}, "image2.jpeg"),
        ({"target": "media/x.png", "target_mode": "External"}, None),
        (None, None),
    ])
    def test_media_filename(self, relationship, expected):
        assert media_filename(relationship) == expected


class TestNotesParser:
    """Test cases for NotesParser."""

    def test_parse_footnotes(self):
        reader = Mock()
        reader.get_xml_if_exists.return_value = FOOTNOTES

        notes = NotesParser(reader)
        footnotes = notes.parse_footnotes()

        assert footnotes == {"1": "See the record. Second paragraph."}
        assert notes.get_body_text("1") == "See the record. Second paragraph."

    def test_separators_are_skipped(self):
        reader = Mock()
        reader.get_xml_if_exists.return_value = FOOTNOTES
        assert "-1" not in NotesParser(reader).parse_footnotes()

    def test_no_footnotes_part(self):
        reader = Mock()
        reader.get_xml_if_exists.return_value = None

        notes = NotesParser(reader)
        assert notes.parse_footnotes() == {}
        assert notes.get_body_text("1") == ""
