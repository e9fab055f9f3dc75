"""
Simple high-level API for docx2udf.

Usage example:
>>> from docx2udf import Converter
>>>
>>> converter = Converter()
>>> udf_bytes = converter.convert(Path("file.docx").read_bytes())
>>>
>>> # Or straight from disk
>>> convert_file("file.docx")  # writes file.udf
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from .config import ConverterOptions
from .export import TargetDocument, UdfPackager, UdfSerializer, UdfXmlWriter
from .models import Document
from .parser import DocxParser

logger = logging.getLogger(__name__)

__all__ = [
    "Converter",
    "convert_bytes",
    "convert_file",
]

UDF_SUFFIX = ".udf"


class Converter:
    """
    DOCX to UDF conversion pipeline: parse, serialize, write XML, package.

    Parsing runs first and raises on failure, so nothing is serialized
    for a package that could not be read.
    """

    def __init__(self, options: Optional[ConverterOptions] = None):
        self.options = options or ConverterOptions()
        self.parser = DocxParser(self.options)
        self.writer = UdfXmlWriter()
        self.packager = UdfPackager(self.options)

    def parse(self, docx_bytes: bytes) -> Document:
        return self.parser.parse(docx_bytes)

    def serialize(self, document: Document) -> TargetDocument:
        # Fresh serializer per conversion; its working state is not shareable.
        return UdfSerializer(self.options).serialize(document)

    def convert_to_xml(self, docx_bytes: bytes) -> str:
        document = self.parse(docx_bytes)
        return self.writer.write(self.serialize(document))

    def convert(self, docx_bytes: bytes) -> bytes:
        """Convert DOCX package bytes into UDF container bytes."""
        xml = self.convert_to_xml(docx_bytes)
        return self.packager.package(xml)


def convert_bytes(docx_bytes: bytes, options: Optional[ConverterOptions] = None) -> bytes:
    return Converter(options).convert(docx_bytes)


def convert_file(
    input_path: Union[str, Path],
    output_path: Optional[Union[str, Path]] = None,
    options: Optional[ConverterOptions] = None,
    xml_only: bool = False,
) -> Path:
    """
    Convert a DOCX file on disk.

    Args:
        input_path: Source ``.docx`` file
        output_path: Destination; defaults to the input path with a ``.udf`` suffix
        options: Conversion options
        xml_only: Write the raw target XML instead of the container

    Returns:
        Path of the written file
    """
    input_path = Path(input_path)
    if not input_path.exists():
        raise FileNotFoundError(f"Input file not found: {input_path}")

    if output_path is None:
        output_path = input_path.with_suffix(".xml" if xml_only else UDF_SUFFIX)
    output_path = Path(output_path)

    converter = Converter(options)
    logger.info(f"Converting {input_path} -> {output_path}")
    xml = converter.convert_to_xml(input_path.read_bytes())

    if xml_only:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(xml, encoding="utf-8")
        return output_path
    return converter.packager.write(xml, output_path)
