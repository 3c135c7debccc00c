# src/edi_kit/parsers/factory.py

from edi_kit.document.models import Format

from .base import DocumentParser
from .delimited_parser import DelimitedParser
from .json_parser import JsonParser
from .xml_parser import XmlParser


def create_parser(fmt: Format) -> DocumentParser:
    """Create the parser for a source format.

    Raises:
        ValueError: If the format is unknown.
    """
    if fmt == Format.JSON:
        return JsonParser()

    if fmt == Format.XML:
        return XmlParser()

    if fmt == Format.STRING:
        return DelimitedParser()

    raise ValueError(f"Unknown source format: {fmt}")
