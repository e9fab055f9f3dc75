"""
Parser module for DOCX packages.

Package reading, relationship and footnote lookup, and the body parser
that builds the document model.
"""

from .package_reader import PackageReader
from .relationships_parser import RelationshipsParser
from .notes_parser import NotesParser
from .table_parser import TableParser
from .xml_parser import DocxParser

__all__ = [
    "PackageReader",
    "RelationshipsParser",
    "NotesParser",
    "TableParser",
    "DocxParser",
]
