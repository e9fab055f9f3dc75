"""
Element descriptors of the UDF target model.

The target format keeps all text in one flat buffer; every element
refers to a slice of it by ``start_offset`` and ``length``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Optional


class ElementKind(str, Enum):
    PARAGRAPH = "paragraph"
    CONTENT = "content"
    TAB = "tab"
    IMAGE = "image"
    PAGE_BREAK = "page-break"
    TABLE = "table"
    ROW = "row"
    CELL = "cell"


# Kinds whose offsets cover text directly (as opposed to containers).
LEAF_KINDS = (ElementKind.CONTENT, ElementKind.TAB, ElementKind.IMAGE)


@dataclass
class UdfElement:
    """
    One structural or formatting element.

    ``attributes`` keeps insertion order, which is the order attributes
    are written to the target XML.
    """

    kind: ElementKind
    start_offset: int
    length: int
    attributes: Dict[str, str] = field(default_factory=dict)
    children: List["UdfElement"] = field(default_factory=list)

    @property
    def end_offset(self) -> int:
        return self.start_offset + self.length

    def iter_tree(self) -> Iterator["UdfElement"]:
        """Depth-first iteration over this element and its descendants."""
        yield self
        for child in self.children:
            yield from child.iter_tree()

    def iter_leaves(self) -> Iterator["UdfElement"]:
        for element in self.iter_tree():
            if element.kind in LEAF_KINDS:
                yield element


@dataclass
class TargetDocument:
    """Serializer output: the flat text buffer and the top-level element list."""

    buffer: str
    elements: List[UdfElement] = field(default_factory=list)

    def iter_leaves(self) -> Iterator[UdfElement]:
        for element in self.elements:
            yield from element.iter_leaves()

    @property
    def buffer_length(self) -> int:
        """Buffer length in UTF-16 code units."""
        return len(self.buffer.encode("utf-16-le")) // 2

    def slice(self, element: UdfElement) -> str:
        """Text covered by ``element``; offsets count UTF-16 code units."""
        encoded = self.buffer.encode("utf-16-le")
        return encoded[element.start_offset * 2:element.end_offset * 2].decode("utf-16-le")

    def find(self, kind: ElementKind) -> List[UdfElement]:
        """Every element of ``kind``, in document order."""
        return [e for top in self.elements for e in top.iter_tree() if e.kind is kind]

    def first(self, kind: ElementKind) -> Optional[UdfElement]:
        found = self.find(kind)
        return found[0] if found else None
