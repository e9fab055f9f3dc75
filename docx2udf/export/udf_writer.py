"""
UDF XML writer.

Renders a TargetDocument into the XML carried by a ``.udf`` container:
the flat buffer as CDATA, the element list, and the fixed page format
and style table the consuming editor expects.
"""

import logging
from typing import Dict

from lxml import etree

from .elements import ElementKind, TargetDocument, UdfElement

logger = logging.getLogger(__name__)

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8" ?>\n'
FORMAT_ID = "1.8"
ELEMENTS_RESOLVER = "hvl-default"

PAGE_FORMAT: Dict[str, str] = {
    "mediaSizeName": "1",
    "leftMargin": "42.51968479156494",
    "rightMargin": "28.34645652770996",
    "topMargin": "14.17322826385498",
    "bottomMargin": "14.17322826385498",
    "paperOrientation": "1",
    "headerFOffset": "20.0",
    "footerFOffset": "20.0",
}

STYLES = (
    {
        "name": "default",
        "description": "Geçerli",
        "family": "Dialog",
        "size": "12",
        "bold": "false",
        "italic": "false",
        "foreground": "-13421773",
        "FONT_ATTRIBUTE_KEY": "javax.swing.plaf.FontUIResource[family=Dialog,name=Dialog,style=plain,size=12]",
    },
    {
        "name": "hvl-default",
        "family": "Times New Roman",
        "size": "12",
        "description": "Gövde",
    },
)

# Leaf elements carry their buffer range as attributes; containers do not.
OFFSET_KINDS = (ElementKind.CONTENT, ElementKind.TAB, ElementKind.IMAGE)


class UdfXmlWriter:
    """Writes the target XML document for a serialized TargetDocument."""

    def write(self, target: TargetDocument) -> str:
        root = etree.Element("template", format_id=FORMAT_ID)
        root.text = "\n"

        content = etree.SubElement(root, "content")
        if "]]>" in target.buffer:
            # A CDATA section cannot contain its own terminator.
            content.text = target.buffer
        else:
            content.text = etree.CDATA(target.buffer)
        content.tail = "\n"

        properties = etree.SubElement(root, "properties")
        etree.SubElement(properties, "pageFormat", attrib=PAGE_FORMAT)
        properties.tail = "\n"

        elements = etree.SubElement(root, "elements", resolver=ELEMENTS_RESOLVER)
        elements.text = "\n"
        for element in target.elements:
            node = self.build_element(element)
            node.tail = "\n"
            elements.append(node)
        elements.tail = "\n"

        styles = etree.SubElement(root, "styles")
        for style in STYLES:
            etree.SubElement(styles, "style", attrib=style)
        styles.tail = "\n"

        xml = XML_DECLARATION + etree.tostring(root, encoding="unicode")
        logger.debug(f"Wrote UDF XML: {len(xml)} characters, {len(target.elements)} top-level elements")
        return xml

    def build_element(self, element: UdfElement) -> etree._Element:
        node = etree.Element(element.kind.value)
        if element.kind in OFFSET_KINDS:
            node.set("startOffset", str(element.start_offset))
            node.set("length", str(element.length))
        for name, value in element.attributes.items():
            node.set(name, value)
        for child in element.children:
            node.append(self.build_element(child))
        return node
