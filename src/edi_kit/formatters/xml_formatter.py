# src/edi_kit/formatters/xml_formatter.py

import logging

from lxml import etree

from edi_kit.config import DEFAULT_CONFIG, ConversionOptions, ConverterConfig
from edi_kit.document.models import Document
from edi_kit.errors import FormatError

from .base import DocumentFormatter

logger = logging.getLogger(__name__)


class XmlFormatter(DocumentFormatter):
    """
    XML formatter.

    - Document wrapped in the configured root tag
    - One element per occurrence, named after its segment
    - One leaf per element; empty values render as ``<K></K>``
    - Output starts with the configured XML declaration
    """

    def __init__(self, config: ConverterConfig = DEFAULT_CONFIG) -> None:
        self._config = config

    def format(
        self, document: Document, options: ConversionOptions | None = None
    ) -> str:
        options = self._config.resolve(options)

        try:
            root = etree.Element(self._config.xml_root_tag)
            for segment_name, occurrences in document.items():
                for occurrence in occurrences:
                    segment = etree.SubElement(root, segment_name)
                    for key, value in occurrence.items():
                        # Empty text, not None: keeps <K></K> instead of <K/>.
                        etree.SubElement(segment, key).text = value
        except ValueError as e:
            logger.error("Cannot render document as XML: %s", e)
            raise FormatError(f"Cannot render document as XML: {e}") from e

        body = etree.tostring(
            root, encoding="unicode", pretty_print=not options.minify
        ).rstrip("\n")
        separator = "" if options.minify else "\n"
        return f"{self._config.xml_declaration}{separator}{body}"
