# src/edi_kit/conversion/__init__.py

"""Conversion pipeline for edi-kit.

Every conversion runs detect -> parse -> validate -> format through the
canonical Document.

Design principles:
- Stateless: Each call reads only its own input and options
- Fail fast: The first failing stage aborts with a ConversionError
- No partial output: A failed conversion returns nothing

Example:
    >>> from edi_kit.conversion import ConversionOptions, convert
    >>>
    >>> result = convert(
    ...     "A*a1~B*b1~",
    ...     "xml",
    ...     ConversionOptions(line_delimiter="~", element_delimiter="*"),
    ... )
    >>> print(result.output)
"""

from edi_kit.config import ConversionOptions, ConverterConfig, load_config

from .pipeline import ConversionResult, DocumentConverter, convert
from .request import ConvertRequest, content_type_for, convert_request

__all__ = [
    # Pipeline
    "convert",
    "DocumentConverter",
    "ConversionResult",
    # Config
    "ConversionOptions",
    "ConverterConfig",
    "load_config",
    # Request boundary
    "ConvertRequest",
    "convert_request",
    "content_type_for",
]
