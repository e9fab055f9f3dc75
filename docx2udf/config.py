"""
Conversion options.

Options tune how the model is rendered; the page geometry and style
table of the target format are fixed and not configurable.
"""

from __future__ import annotations

import logging
import zipfile
from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping

logger = logging.getLogger(__name__)

DEFAULT_FONT_FAMILY = "Times New Roman"
DEFAULT_FONT_SIZE = 12
DEFAULT_FOOTNOTE_SEPARATOR = "_" * 20
CONTENT_ENTRY_NAME = "content.xml"


@dataclass
class ConverterOptions:
    """Options for a DOCX to UDF conversion."""

    default_font_family: str = DEFAULT_FONT_FAMILY
    default_font_size: float = DEFAULT_FONT_SIZE
    footnote_separator: str = DEFAULT_FOOTNOTE_SEPARATOR
    embed_images: bool = True
    compression: int = zipfile.ZIP_DEFLATED
    content_entry_name: str = CONTENT_ENTRY_NAME

    @classmethod
    def from_dict(cls, values: Mapping[str, Any]) -> "ConverterOptions":
        """Build options from a mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        accepted: Dict[str, Any] = {}
        for key, value in values.items():
            if key in known:
                accepted[key] = value
            else:
                logger.warning(f"Ignoring unknown converter option: {key}")
        return cls(**accepted)
