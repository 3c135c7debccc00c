from .models import Document, Format, Occurrence, RawTree
from .validator import check_document, validate_document

__all__ = [
    "Document",
    "Format",
    "Occurrence",
    "RawTree",
    "check_document",
    "validate_document",
]
