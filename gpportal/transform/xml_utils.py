"""Small ElementTree helpers for portal XML documents."""

import xml.etree.ElementTree as ET
from typing import Optional

from gpportal.errors import InvalidConfigDocumentError


def parse_document(text: str) -> ET.Element:
    """Parse ``text`` and return the root element.

    Raises:
        InvalidConfigDocumentError: If the text is not well-formed XML.
    """
    try:
        return ET.fromstring(text)
    except ET.ParseError as exc:
        raise InvalidConfigDocumentError(f"Invalid portal config document: {exc}") from exc


def find_first(root: ET.Element, tag: str) -> Optional[ET.Element]:
    """Return the first element named ``tag`` in document order, root included."""
    return next(root.iter(tag), None)


def get_child_text(root: ET.Element, tag: str) -> Optional[str]:
    """Text of the first ``tag`` element.

    ``None`` means the element is absent; an element without text yields ``""``.
    """
    node = find_first(root, tag)
    if node is None:
        return None
    return (node.text or "").strip()


def child_text(node: ET.Element, tag: str) -> Optional[str]:
    """Like ``get_child_text`` but limited to direct children of ``node``."""
    child = node.find(tag)
    if child is None:
        return None
    return (child.text or "").strip()


__all__ = ["child_text", "find_first", "get_child_text", "parse_document"]
