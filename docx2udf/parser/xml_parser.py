"""
Main XML parser for DOCX documents.

Turns the package's ``word/document.xml`` body into the normalized
document model: an ordered list of paragraphs and tables whose runs
carry explicit formatting.
"""

import base64
import logging
import xml.etree.ElementTree as ET
import zipfile
from typing import Dict, Iterator, Optional, Union

from ..config import ConverterOptions
from ..exceptions import (
    ConverterError,
    MalformedPackageError,
    UnsupportedDocumentError,
)
from ..models import (
    Alignment,
    Document,
    FootnoteRefRun,
    ImageRun,
    LineBreakRun,
    Numbering,
    PageBreakRun,
    Paragraph,
    Run,
    TabRun,
    TextRun,
)
from ..utils import emu_to_points, normalize_hex, parse_int, twips_to_points, half_points_to_points
from .notes_parser import NotesParser
from .package_reader import MEDIA_PREFIX, PackageReader
from .relationships_parser import RelationshipsParser, media_filename
from .table_parser import TableParser

logger = logging.getLogger(__name__)

DOCUMENT_PATH = "word/document.xml"

NS = {
    "w": "http://schemas.openxmlformats.org/wordprocessingml/2006/main",
    "wp": "http://schemas.openxmlformats.org/drawingml/2006/wordprocessingDrawing",
    "a": "http://schemas.openxmlformats.org/drawingml/2006/main",
    "r": "http://schemas.openxmlformats.org/officeDocument/2006/relationships",
}
W = f"{{{NS['w']}}}"
WP = f"{{{NS['wp']}}}"
A = f"{{{NS['a']}}}"
R = f"{{{NS['r']}}}"

ALIGNMENT_MAP = {
    "left": Alignment.LEFT,
    "start": Alignment.LEFT,
    "center": Alignment.CENTER,
    "right": Alignment.RIGHT,
    "end": Alignment.RIGHT,
    "both": Alignment.JUSTIFY,
    "distribute": Alignment.JUSTIFY,
}

DEFAULT_IMAGE_SIZE = 100

# Tracked deletions are not part of the visible text.
SKIPPED_RUN_CONTAINERS = (f"{W}pPr", f"{W}del", f"{W}moveFrom")


def _val(element: ET.Element, name: str = "val") -> Optional[str]:
    return element.get(f"{W}{name}")


def _is_on(element: Optional[ET.Element]) -> bool:
    """Toggle properties are on unless explicitly ``false``/``0``."""
    if element is None:
        return False
    return _val(element) not in ("false", "0")


class DocxParser:
    """
    Parser from DOCX package bytes to the document model.

    One instance can parse many packages; per-package state (media map,
    relationships, footnote labels) is rebuilt on every ``parse`` call.
    """

    def __init__(self, options: Optional[ConverterOptions] = None):
        self.options = options or ConverterOptions()
        self.table_parser = TableParser(self.parse_paragraph)

        self.relationships: Dict[str, Dict[str, str]] = {}
        self.media: Dict[str, str] = {}
        self.notes_parser: Optional[NotesParser] = None
        self._footnote_counter = 0

    def parse(self, package: Union[bytes, PackageReader]) -> Document:
        """
        Parse a DOCX package into a Document.

        Raises:
            MalformedPackageError: the container, its relationships or the body XML are unreadable
            UnsupportedDocumentError: any other failure while building the model
        """
        try:
            if isinstance(package, PackageReader):
                return self.parse_package(package)
            with PackageReader.from_bytes(package) as reader:
                return self.parse_package(reader)
        except ConverterError:
            raise
        except zipfile.BadZipFile as e:
            raise MalformedPackageError("Not a valid DOCX package", str(e)) from e
        except Exception as e:
            logger.error(f"Failed to parse DOCX: {e}")
            raise UnsupportedDocumentError("Failed to parse DOCX document", e) from e

    def parse_package(self, reader: PackageReader) -> Document:
        self._footnote_counter = 0

        try:
            document_xml = reader.get_xml_content(DOCUMENT_PATH)
        except KeyError as e:
            raise MalformedPackageError("Document body is missing", DOCUMENT_PATH) from e

        try:
            self.relationships = RelationshipsParser(reader).parse_relationships()
        except ET.ParseError as e:
            raise MalformedPackageError("Relationships are not well-formed XML", str(e)) from e

        self.media = self.extract_media(reader)

        self.notes_parser = NotesParser(reader)
        self.notes_parser.parse_footnotes()

        try:
            root = ET.fromstring(document_xml)
        except ET.ParseError as e:
            raise MalformedPackageError("Document body is not well-formed XML", str(e)) from e

        document = self.parse_body(root)
        logger.info(f"Parsed document: {document.get_stats()}")
        return document

    def extract_media(self, reader: PackageReader) -> Dict[str, str]:
        """Read every media part up front, keyed by filename below ``word/media/``."""
        media: Dict[str, str] = {}
        for part_name in reader.get_media_files():
            data = reader.get_binary_content(part_name)
            if data is None:
                continue
            media[part_name[len(MEDIA_PREFIX):]] = base64.b64encode(data).decode("ascii")
        logger.debug(f"Extracted {len(media)} media files")
        return media

    def parse_body(self, root: ET.Element) -> Document:
        document = Document()
        body = root.find(f"{W}body")
        if body is None:
            logger.warning("Document has no body")
            return document

        for element in self._iter_blocks(body):
            if element.tag == f"{W}p":
                document.blocks.append(self.parse_paragraph(element))
            else:
                document.blocks.append(self.table_parser.parse_table(element))
        return document

    def _iter_blocks(self, container: ET.Element) -> Iterator[ET.Element]:
        for child in container:
            if child.tag in (f"{W}p", f"{W}tbl"):
                yield child
            elif child.tag == f"{W}sdt":
                content = child.find(f"{W}sdtContent")
                if content is not None:
                    yield from self._iter_blocks(content)

    # ------------------------------------------------------------------
    # Paragraphs

    def parse_paragraph(self, para: ET.Element) -> Paragraph:
        paragraph = Paragraph()

        p_pr = para.find(f"{W}pPr")
        if p_pr is not None:
            self._apply_paragraph_properties(paragraph, p_pr)

        for run_element in self._iter_runs(para):
            run = self.parse_run(run_element)
            if run is not None:
                paragraph.runs.append(run)
        return paragraph

    def _apply_paragraph_properties(self, paragraph: Paragraph, p_pr: ET.Element) -> None:
        jc = p_pr.find(f"{W}jc")
        if jc is not None:
            paragraph.alignment = self.map_alignment(_val(jc))

        ind = p_pr.find(f"{W}ind")
        if ind is not None:
            left = _val(ind, "left") or _val(ind, "start")
            right = _val(ind, "right") or _val(ind, "end")
            first_line = _val(ind, "firstLine")
            hanging = _val(ind, "hanging")
            if left is not None:
                paragraph.left_indent = twips_to_points(parse_int(left))
            if right is not None:
                paragraph.right_indent = twips_to_points(parse_int(right))
            if first_line is not None:
                paragraph.first_line_indent = twips_to_points(parse_int(first_line))
            elif hanging is not None:
                paragraph.first_line_indent = -twips_to_points(parse_int(hanging))

        paragraph.numbering = self._parse_numbering(p_pr)

    @staticmethod
    def _parse_numbering(p_pr: ET.Element) -> Optional[Numbering]:
        num_pr = p_pr.find(f"{W}numPr")
        if num_pr is None:
            return None
        ilvl = num_pr.find(f"{W}ilvl")
        num_id = num_pr.find(f"{W}numId")
        if ilvl is None or num_id is None:
            return None
        list_id = _val(num_id)
        # numId 0 removes numbering inherited from a style
        if not list_id or list_id == "0":
            return None
        return Numbering(level=parse_int(_val(ilvl), 0), list_id=list_id)

    @staticmethod
    def map_alignment(value: Optional[str]) -> Alignment:
        return ALIGNMENT_MAP.get(value or "", Alignment.LEFT)

    def _iter_runs(self, element: ET.Element) -> Iterator[ET.Element]:
        """Runs below a paragraph in document order, without descending into runs."""
        for child in element:
            if child.tag == f"{W}r":
                yield child
            elif child.tag not in SKIPPED_RUN_CONTAINERS and child.tag != f"{W}p":
                yield from self._iter_runs(child)

    # ------------------------------------------------------------------
    # Runs

    def parse_run(self, run: ET.Element) -> Optional[Run]:
        """
        Classify a run; the first matching kind wins.

        Drawing, footnote reference, tab, break, then text. A run with no
        text that matches nothing else is dropped.
        """
        drawing = run.find(f".//{W}drawing")
        if drawing is not None:
            return self.parse_drawing(drawing)

        footnote_ref = run.find(f"{W}footnoteReference")
        if footnote_ref is not None:
            return self.parse_footnote_reference(footnote_ref)

        if run.find(f".//{W}tab") is not None:
            return TabRun()

        br = run.find(f".//{W}br")
        if br is not None:
            if _val(br, "type") == "page":
                return PageBreakRun()
            return LineBreakRun()
        if run.find(f"{W}cr") is not None:
            return LineBreakRun()

        text = "".join(t.text or "" for t in run.findall(f"{W}t"))
        if not text:
            return None
        return self.parse_text_run(run, text)

    def parse_text_run(self, run: ET.Element, text: str) -> TextRun:
        formatting = {
            "bold": False,
            "italic": False,
            "underline": False,
            "strike": False,
            "font_family": self.options.default_font_family,
            "font_size": self.options.default_font_size,
            "color": None,
        }

        r_pr = run.find(f"{W}rPr")
        if r_pr is not None:
            formatting["bold"] = _is_on(r_pr.find(f"{W}b"))
            formatting["italic"] = _is_on(r_pr.find(f"{W}i"))

            u = r_pr.find(f"{W}u")
            if u is not None:
                value = _val(u)
                formatting["underline"] = bool(value) and value != "none"

            strike = r_pr.find(f"{W}strike")
            formatting["strike"] = strike is not None and _val(strike) != "false"

            r_fonts = r_pr.find(f"{W}rFonts")
            if r_fonts is not None and _val(r_fonts, "ascii"):
                formatting["font_family"] = _val(r_fonts, "ascii")

            sz = r_pr.find(f"{W}sz")
            if sz is not None and _val(sz):
                half_points = parse_int(_val(sz), 0)
                if half_points > 0:
                    formatting["font_size"] = half_points_to_points(half_points)

            color = r_pr.find(f"{W}color")
            if color is not None:
                formatting["color"] = normalize_hex(_val(color))

        return TextRun(text=text, **formatting)

    def parse_drawing(self, drawing: ET.Element) -> ImageRun:
        width = height = DEFAULT_IMAGE_SIZE
        extent = drawing.find(f".//{WP}extent")
        if extent is not None:
            width = emu_to_points(parse_int(extent.get("cx"), 0))
            height = emu_to_points(parse_int(extent.get("cy"), 0))

        data = None
        blip = drawing.find(f".//{A}blip")
        if blip is not None:
            embed = blip.get(f"{R}embed")
            filename = media_filename(self.relationships.get(embed)) if embed else None
            data = self.media.get(filename) if filename else None
            if data is None:
                logger.warning(f"Image reference {embed!r} did not resolve to embedded media")

        return ImageRun(data=data, width=width, height=height)

    def parse_footnote_reference(self, reference: ET.Element) -> FootnoteRefRun:
        self._footnote_counter += 1
        footnote_id = _val(reference, "id") or ""
        body_text = self.notes_parser.get_body_text(footnote_id) if self.notes_parser else ""
        return FootnoteRefRun(label=str(self._footnote_counter), body_text=body_text)
