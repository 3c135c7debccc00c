# Config
from .config import ConversionOptions, ConverterConfig, load_config

# Conversion
from .conversion import (
    ConversionResult,
    ConvertRequest,
    DocumentConverter,
    content_type_for,
    convert,
    convert_request,
)

# Detection
from .detection import detect_format

# Document
from .document import Document, Format, Occurrence, check_document, validate_document

# Errors
from .errors import (
    ConfigurationError,
    ConversionError,
    DetectionError,
    DocumentValidationError,
    EdiKitError,
    ErrorDetail,
    FormatError,
    ParseError,
    ValidationIssue,
)

# Formatters
from .formatters import (
    DelimitedFormatter,
    DocumentFormatter,
    JsonFormatter,
    XmlFormatter,
    create_formatter,
)

# Observability
from .observability import MetricsHook, NoOpMetricsHook

# Parsers
from .parsers import (
    DelimitedParser,
    DocumentParser,
    JsonParser,
    XmlParser,
    create_parser,
)

__all__ = [
    # Config
    "ConversionOptions",
    "ConverterConfig",
    "load_config",
    # Conversion
    "ConversionResult",
    "ConvertRequest",
    "DocumentConverter",
    "content_type_for",
    "convert",
    "convert_request",
    # Detection
    "detect_format",
    # Document
    "Document",
    "Format",
    "Occurrence",
    "check_document",
    "validate_document",
    # Errors
    "ConfigurationError",
    "ConversionError",
    "DetectionError",
    "DocumentValidationError",
    "EdiKitError",
    "ErrorDetail",
    "FormatError",
    "ParseError",
    "ValidationIssue",
    # Formatters
    "DelimitedFormatter",
    "DocumentFormatter",
    "JsonFormatter",
    "XmlFormatter",
    "create_formatter",
    # Observability
    "MetricsHook",
    "NoOpMetricsHook",
    # Parsers
    "DelimitedParser",
    "DocumentParser",
    "JsonParser",
    "XmlParser",
    "create_parser",
]
