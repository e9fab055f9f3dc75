"""
Export module: DOCX document model to the UDF target format.
"""

from .elements import ElementKind, TargetDocument, UdfElement
from .udf_serializer import UdfSerializer, column_spans, is_bulleted_list, text_length
from .udf_writer import UdfXmlWriter
from .udf_packager import UdfPackager

__all__ = [
    "ElementKind",
    "TargetDocument",
    "UdfElement",
    "UdfSerializer",
    "UdfXmlWriter",
    "UdfPackager",
    "column_spans",
    "is_bulleted_list",
    "text_length",
]
