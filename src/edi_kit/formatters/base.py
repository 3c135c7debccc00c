# src/edi_kit/formatters/base.py

from abc import ABC, abstractmethod

from edi_kit.config import ConversionOptions
from edi_kit.document.models import Document


class DocumentFormatter(ABC):
    @abstractmethod
    def format(
        self, document: Document, options: ConversionOptions | None = None
    ) -> str | Document:
        """
        Render a validated Document.

        Requirements:
        - Never mutate the Document
        - Deterministic output for the same document and options
        """
        raise NotImplementedError
