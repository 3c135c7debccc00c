# src/edi_kit/formatters/json_formatter.py

from edi_kit.config import ConversionOptions
from edi_kit.document.models import Document

from .base import DocumentFormatter


class JsonFormatter(DocumentFormatter):
    """Identity: the validated Document is the JSON output.

    Callers serialize it (``document.to_dict()``) as they need.
    """

    def format(
        self, document: Document, options: ConversionOptions | None = None
    ) -> Document:
        return document
