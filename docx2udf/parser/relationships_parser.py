"""Relationships parser for DOCX documents."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from typing import Dict, Optional

logger = logging.getLogger(__name__)

DOCUMENT_RELS_PATH = "word/_rels/document.xml.rels"
IMAGE_REL_TYPE = "http://schemas.openxmlformats.org/officeDocument/2006/relationships/image"


class RelationshipsParser:
    """Parse the ``_rels/*.rels`` parts from the DOCX package."""

    NAMESPACE = "http://schemas.openxmlformats.org/package/2006/relationships"

    def __init__(self, package_reader):
        self.package_reader = package_reader

    def parse_relationships(self, rels_path: str = DOCUMENT_RELS_PATH) -> Dict[str, Dict[str, str]]:
        """
        Build the relationship table ``{id: {id, type, target, target_mode}}``.

        A missing part yields an empty table.
        """
        xml_content = self.package_reader.get_xml_if_exists(rels_path)
        if not xml_content:
            logger.warning(f"Relationships part not found: {rels_path}")
            return {}

        root = ET.fromstring(xml_content)
        relationships: Dict[str, Dict[str, str]] = {}
        for rel_element in root.findall(f"{{{self.NAMESPACE}}}Relationship"):
            rel = self.parse_relationship(rel_element)
            if rel["id"] and rel["target"]:
                relationships[rel["id"]] = rel

        logger.debug(f"Parsed {len(relationships)} relationships from {rels_path}")
        return relationships

    def parse_relationship(self, rel_element: ET.Element) -> Dict[str, str]:
        return {
            "id": rel_element.get("Id", ""),
            "type": rel_element.get("Type", ""),
            "target": rel_element.get("Target", ""),
            "target_mode": rel_element.get("TargetMode", "Internal"),
        }


def media_filename(relationship: Optional[Dict[str, str]]) -> Optional[str]:
    """
    Map a relationship to its key in the media map.

    ``media/image1.png`` and ``/word/media/image1.png`` both map to
    ``image1.png``; external targets map to ``None``.
    """
    if not relationship or relationship.get("target_mode") == "External":
        return None
    target = relationship.get("target", "")
    for prefix in ("/word/media/", "word/media/", "media/"):
        if target.startswith(prefix):
            return target[len(prefix):]
    return target or None
