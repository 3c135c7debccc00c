# src/edi_kit/formatters/delimited_formatter.py

from edi_kit.config import DEFAULT_CONFIG, ConversionOptions
from edi_kit.document.models import Document

from .base import DocumentFormatter


class DelimitedFormatter(DocumentFormatter):
    """
    Formatter for the flat EDI-style encoding.

    - One line per occurrence: name, then values, each followed by the
      element delimiter except the last, and a line delimiter at the end
    - Element keys are dropped, values keep the occurrence's key order
    - A newline follows each line unless minified
    """

    def format(
        self, document: Document, options: ConversionOptions | None = None
    ) -> str:
        options = DEFAULT_CONFIG.resolve(options)
        element_delimiter = options.element_delimiter
        newline = "" if options.minify else "\n"

        lines = []
        for segment_name, occurrences in document.items():
            for occurrence in occurrences:
                values = [
                    value if options.preserve_whitespace else value.strip()
                    for value in occurrence.values()
                ]
                lines.append(
                    f"{segment_name}{element_delimiter}"
                    f"{element_delimiter.join(values)}"
                    f"{options.line_delimiter}{newline}"
                )

        return "".join(lines).strip()
