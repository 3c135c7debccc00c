# src/edi_kit/parsers/json_parser.py

import json

from edi_kit.config import ConversionOptions
from edi_kit.document.models import RawTree
from edi_kit.errors import ParseError

from .base import DocumentParser


class JsonParser(DocumentParser):
    """Decodes JSON text. The decoded value is returned unchanged."""

    def parse(self, text: str, options: ConversionOptions | None = None) -> RawTree:
        try:
            return json.loads(text)
        except (json.JSONDecodeError, RecursionError) as e:
            raise ParseError(f"Invalid JSON document: {e}") from e
