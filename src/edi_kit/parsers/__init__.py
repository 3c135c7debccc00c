from .base import DocumentParser
from .delimited_parser import DelimitedParser
from .factory import create_parser
from .json_parser import JsonParser
from .xml_parser import XmlParser, is_well_formed_xml

__all__ = [
    "DocumentParser",
    "DelimitedParser",
    "JsonParser",
    "XmlParser",
    "create_parser",
    "is_well_formed_xml",
]
