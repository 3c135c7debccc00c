# src/edi_kit/parsers/base.py

from abc import ABC, abstractmethod

from edi_kit.config import ConversionOptions
from edi_kit.document.models import RawTree


class DocumentParser(ABC):
    @abstractmethod
    def parse(self, text: str, options: ConversionOptions | None = None) -> RawTree:
        """
        Parse document text into an untyped tree.

        Requirements:
        - Fresh tree per call, no state kept between calls
        - Raise ParseError only on syntactically malformed input
        - Leave structural checks to the validator
        """
        raise NotImplementedError
