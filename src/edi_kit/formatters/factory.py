# src/edi_kit/formatters/factory.py

from edi_kit.config import DEFAULT_CONFIG, ConverterConfig
from edi_kit.document.models import Format

from .base import DocumentFormatter
from .delimited_formatter import DelimitedFormatter
from .json_formatter import JsonFormatter
from .xml_formatter import XmlFormatter


def create_formatter(
    fmt: Format, config: ConverterConfig = DEFAULT_CONFIG
) -> DocumentFormatter:
    """Create the formatter for an output format.

    Args:
        fmt: Requested output format.
        config: Converter config; only the XML formatter reads it.

    Raises:
        ValueError: If the format is unknown.
    """
    if fmt == Format.JSON:
        return JsonFormatter()

    if fmt == Format.XML:
        return XmlFormatter(config)

    if fmt == Format.STRING:
        return DelimitedFormatter()

    raise ValueError(f"Unknown output format: {fmt}")
