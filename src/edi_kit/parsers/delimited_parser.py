# src/edi_kit/parsers/delimited_parser.py

import logging

from edi_kit.config import DEFAULT_CONFIG, ConversionOptions
from edi_kit.document.models import RawTree

from .base import DocumentParser

logger = logging.getLogger(__name__)


class DelimitedParser(DocumentParser):
    """
    Parser for the flat EDI-style encoding.

    - One segment occurrence per line
    - First element of a line is the segment name (always stripped)
    - Remaining elements are keyed ``<segment name><position>``, 1-based
    - Repeated segment names accumulate occurrences in line order
    """

    def parse(self, text: str, options: ConversionOptions | None = None) -> RawTree:
        options = DEFAULT_CONFIG.resolve(options)
        line_delimiter = options.line_delimiter
        element_delimiter = options.element_delimiter

        parsed = [
            self._parse_line(line, element_delimiter, bool(options.preserve_whitespace))
            for line in text.split(line_delimiter)
            if line
        ]

        result: dict[str, list[dict[str, str]]] = {}
        for segment_name, occurrence in parsed:
            result.setdefault(segment_name, []).append(occurrence)

        logger.debug(
            "Parsed %d lines into %d segments", len(parsed), len(result)
        )
        return result

    def _parse_line(
        self, line: str, element_delimiter: str, preserve_whitespace: bool
    ) -> tuple[str, dict[str, str]]:
        # An empty segment name is kept; the validator rejects it.
        segment_name, *values = line.split(element_delimiter)
        segment_name = segment_name.strip()

        occurrence = {
            f"{segment_name}{position}": value if preserve_whitespace else value.strip()
            for position, value in enumerate(values, start=1)
        }
        return segment_name, occurrence
