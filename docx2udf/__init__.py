"""
docx2udf - Word (.docx) to UYAP UDF document converter.

The converter parses a WordprocessingML package into a normalized
document model and re-serializes it into the UDF format, where all text
lives in one flat buffer and formatting is expressed as offset/length
annotations on that buffer.

Quick Start:
    from docx2udf import Converter

    udf_bytes = Converter().convert(open("document.docx", "rb").read())
"""

from .version import __version__, __version_info__

from .exceptions import (
    ConverterError,
    MalformedPackageError,
    UnsupportedDocumentError,
)
from .config import ConverterOptions
from .parser import DocxParser, PackageReader
from .export import TargetDocument, UdfElement, UdfSerializer, UdfXmlWriter, UdfPackager
from .api import Converter, convert_bytes, convert_file

__all__ = [
    "__version__",
    "__version_info__",
    "ConverterError",
    "MalformedPackageError",
    "UnsupportedDocumentError",
    "ConverterOptions",
    "DocxParser",
    "PackageReader",
    "TargetDocument",
    "UdfElement",
    "UdfSerializer",
    "UdfXmlWriter",
    "UdfPackager",
    "Converter",
    "convert_bytes",
    "convert_file",
]
