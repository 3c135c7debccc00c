from .base import DocumentFormatter
from .delimited_formatter import DelimitedFormatter
from .factory import create_formatter
from .json_formatter import JsonFormatter
from .xml_formatter import XmlFormatter

__all__ = [
    "DocumentFormatter",
    "DelimitedFormatter",
    "JsonFormatter",
    "XmlFormatter",
    "create_formatter",
]
