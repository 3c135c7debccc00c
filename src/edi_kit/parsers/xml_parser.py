# src/edi_kit/parsers/xml_parser.py

import logging
from typing import Any

from lxml import etree

from edi_kit.config import ConversionOptions
from edi_kit.document.models import RawTree
from edi_kit.errors import ParseError

from .base import DocumentParser

logger = logging.getLogger(__name__)


def _make_xml_parser() -> etree.XMLParser:
    # No DTD entities, no network, no comments or PIs in the tree.
    return etree.XMLParser(
        resolve_entities=False,
        no_network=True,
        remove_comments=True,
        remove_pis=True,
        huge_tree=False,
        encoding="utf-8",
    )


def parse_xml_root(text: str) -> etree._Element:
    """Parse XML text and return its root element.

    Raises:
        ParseError: If the text is not well-formed XML.
    """
    try:
        # Always UTF-8 bytes; the parser ignores any declared encoding.
        root = etree.fromstring(text.encode("utf-8"), parser=_make_xml_parser())
    except (etree.XMLSyntaxError, ValueError) as e:
        raise ParseError(f"Invalid XML document: {e}") from e
    if root is None:
        raise ParseError("Invalid XML document: no root element")
    return root


def is_well_formed_xml(text: str) -> bool:
    try:
        parse_xml_root(text)
    except ParseError:
        return False
    return True


def _child_elements(element: etree._Element) -> list[etree._Element]:
    return [child for child in element if isinstance(child.tag, str)]


class XmlParser(DocumentParser):
    """
    XML parser.

    - The single root element is a wrapper and is dropped
    - Elements with child elements become mappings, collected in a list per
      tag so repeated segments keep their order
    - Leaf elements become their stripped text
    - Attributes are ignored
    """

    def parse(self, text: str, options: ConversionOptions | None = None) -> RawTree:
        root = parse_xml_root(text)
        children = _child_elements(root)
        if not children:
            logger.debug("Root <%s> has no child elements", root.tag)
            return {}

        result = self._element_to_tree(root)
        logger.debug("Parsed XML root <%s> into %d segments", root.tag, len(result))
        return result

    def _element_to_tree(self, element: etree._Element) -> dict[str, Any]:
        tree: dict[str, Any] = {}
        for child in _child_elements(element):
            tag = etree.QName(child).localname
            is_leaf = not _child_elements(child)
            value = (child.text or "").strip() if is_leaf else self._element_to_tree(child)

            if tag not in tree:
                tree[tag] = value if is_leaf else [value]
            elif isinstance(tree[tag], list):
                tree[tag].append(value)
            else:
                # Repeated leaf: kept as a list so the validator can reject it.
                tree[tag] = [tree[tag], value]
        return tree
