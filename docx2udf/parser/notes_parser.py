"""
Notes parser for DOCX documents.

Reads ``word/footnotes.xml`` into a map of footnote id to plain body text.
"""

import xml.etree.ElementTree as ET
from typing import Dict
import logging

logger = logging.getLogger(__name__)

W_NS = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"
FOOTNOTES_PATH = "word/footnotes.xml"
SKIPPED_NOTE_TYPES = ("separator", "continuationSeparator", "continuationNotice")


class NotesParser:
    """
    Parser for footnote bodies.

    Separator notes are skipped; every other note maps to its text with
    paragraphs joined by a single space.
    """

    def __init__(self, package_reader):
        self.package_reader = package_reader
        self.footnotes: Dict[str, str] = {}

    def parse_footnotes(self) -> Dict[str, str]:
        """Parse footnotes; a package without ``footnotes.xml`` has none."""
        footnotes_xml = self.package_reader.get_xml_if_exists(FOOTNOTES_PATH)
        if not footnotes_xml:
            logger.debug("No footnotes.xml found")
            self.footnotes = {}
            return {}

        self.footnotes = self._parse_footnotes_xml(footnotes_xml)
        logger.debug(f"Parsed {len(self.footnotes)} footnotes")
        return dict(self.footnotes)

    def get_body_text(self, footnote_id: str) -> str:
        if footnote_id not in self.footnotes:
            logger.warning(f"Footnote {footnote_id} referenced but not defined")
            return ""
        return self.footnotes[footnote_id]

    def _parse_footnotes_xml(self, footnotes_xml: str) -> Dict[str, str]:
        footnotes: Dict[str, str] = {}
        root = ET.fromstring(footnotes_xml)

        for footnote in root.iter(f"{{{W_NS}}}footnote"):
            footnote_id = footnote.get(f"{{{W_NS}}}id", "")
            footnote_type = footnote.get(f"{{{W_NS}}}type", "normal")
            if not footnote_id or footnote_type in SKIPPED_NOTE_TYPES:
                continue
            footnotes[footnote_id] = self.extract_note_text(footnote)

        return footnotes

    @staticmethod
    def extract_note_text(note_element: ET.Element) -> str:
        paragraphs = []
        for paragraph in note_element.iter(f"{{{W_NS}}}p"):
            text = "".join(t.text or "" for t in paragraph.iter(f"{{{W_NS}}}t"))
            if text.strip():
                paragraphs.append(text.strip())
        return " ".join(paragraphs)
