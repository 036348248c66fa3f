"""Navigable XML tree used by the GPX extractors.

The extractors only depend on the ``XmlNode`` protocol. ``ElementTreeNode``
backs it with :mod:`xml.etree.ElementTree`.
"""

import xml.etree.ElementTree as ET
from typing import Iterator, Optional, Protocol, Union

DOCUMENT_TAG = "#document"


def local_name(tag) -> str:
    """Return the local name of an XML tag regardless of namespace."""
    return tag.rsplit("}", 1)[-1] if isinstance(tag, str) else ""


class XmlNode(Protocol):
    @property
    def tag(self) -> str: ...

    def find(self, tag: str) -> Optional["XmlNode"]: ...

    def find_all(self, tag: str) -> list["XmlNode"]: ...

    def children(self) -> list["XmlNode"]: ...

    def get(self, name: str) -> Optional[str]: ...

    def text(self) -> str: ...


class ElementTreeNode:
    """``XmlNode`` over an ElementTree element, matching tags by local name."""

    def __init__(self, element: ET.Element):
        self.element = element

    def __repr__(self) -> str:
        return f"ElementTreeNode({self.tag!r})"

    def __eq__(self, other) -> bool:
        return isinstance(other, ElementTreeNode) and other.element is self.element

    def __hash__(self) -> int:
        return id(self.element)

    @property
    def tag(self) -> str:
        return local_name(self.element.tag)

    def _descendants(self, tag: str) -> Iterator["ElementTreeNode"]:
        # iter() yields the element itself first; descendants only.
        it = self.element.iter()
        next(it)
        for element in it:
            if local_name(element.tag) == tag:
                yield ElementTreeNode(element)

    def find(self, tag: str) -> Optional["ElementTreeNode"]:
        return next(self._descendants(tag), None)

    def find_all(self, tag: str) -> list["ElementTreeNode"]:
        return list(self._descendants(tag))

    def children(self) -> list["ElementTreeNode"]:
        return [ElementTreeNode(child) for child in self.element
                if isinstance(child.tag, str)]

    def get(self, name: str) -> Optional[str]:
        return self.element.get(name)

    def text(self) -> str:
        return "".join(self.element.itertext())


def parse_xml(text: Union[str, bytes]) -> ElementTreeNode:
    """Parse XML text into a document node.

    Bytes are decoded according to the document's encoding declaration.
    The returned node wraps the root element so that document-level queries
    also see the root itself. Raises ``ET.ParseError`` on malformed input.
    """
    root = ET.fromstring(text)
    document = ET.Element(DOCUMENT_TAG)
    document.append(root)
    return ElementTreeNode(document)
