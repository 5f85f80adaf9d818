"""
XML tree infrastructure for p2site.

Wraps lxml so the services only deal with parsed elements and simple
path queries:
- parse_xml: bytes -> root element, with entity expansion and network disabled
- MetadataDocument: read-only view over a p2 ``content.xml`` tree
"""

import logging
from typing import List, Optional

from lxml import etree

logger = logging.getLogger(__name__)

XmlParseError = etree.XMLSyntaxError


def _parser() -> etree.XMLParser:
    return etree.XMLParser(resolve_entities=False, no_network=True, remove_blank_text=True)


def parse_xml(data: bytes) -> etree._Element:
    """
    Parse XML bytes into a root element.

    Args:
        data: Raw document bytes (encoding taken from the XML declaration)

    Returns:
        Root element of the parsed document

    Raises:
        XmlParseError: If the bytes are not well-formed XML
    """
    return etree.fromstring(data, parser=_parser())


class MetadataDocument:
    """
    Read-only view over a repository metadata document.

    An empty document (no root) answers every query with no matches, so
    repositories without content.xml/content.jar resolve no categories.

    Example:
        doc = MetadataDocument(parse_xml(data), source="content.xml")
        for required in doc.select(
                "/repository/units/unit/requires/required[@name=$name]",
                name="org.example.feature.group"):
            unit = doc.ancestor(required, 2)
    """

    def __init__(self, root: Optional[etree._Element] = None, source: str = "none"):
        self._root = root
        self.source = source

    @classmethod
    def empty(cls) -> 'MetadataDocument':
        """Create a document with no content."""
        return cls(None, source="none")

    @property
    def is_empty(self) -> bool:
        return self._root is None

    @property
    def root(self) -> Optional[etree._Element]:
        return self._root

    def select(self, path: str, **variables) -> List[etree._Element]:
        """
        Select elements matching an XPath expression, in document order.

        Args:
            path: XPath expression, evaluated against the document root
            **variables: XPath variables referenced as ``$name`` in the path

        Returns:
            Matching elements (non-element results are dropped)
        """
        if self._root is None:
            return []
        return [node for node in self._root.xpath(path, **variables)
                if isinstance(node, etree._Element)]

    @staticmethod
    def ancestor(element: etree._Element, levels: int) -> Optional[etree._Element]:
        """Walk ``levels`` parents up from ``element``."""
        node = element
        for _ in range(levels):
            if node is None:
                return None
            node = node.getparent()
        return node

    @staticmethod
    def property(unit: etree._Element, name: str) -> Optional[str]:
        """
        Read a unit property value.

        Returns the ``value`` attribute of the first
        ``properties/property[@name=name]`` child, or None when absent.
        """
        values = unit.xpath("properties/property[@name=$name]/@value", name=name)
        return str(values[0]) if values else None
