# src/edi_kit/document/validator.py

"""Structural validation of raw trees against the canonical model.

Parsers stay permissive and emit whatever shape the input has; every
invariant of the canonical Document is enforced here, in one place, for
all source formats.
"""

import logging
from collections.abc import Mapping
from typing import Any

from edi_kit.errors import DocumentValidationError, FieldPath, ValidationIssue

from .models import Document, Occurrence, RawTree

logger = logging.getLogger(__name__)

DOCUMENT_EMPTY = "Document has no segments"
SEGMENT_NAME_EMPTY = "Segment name is empty"
SEGMENT_EMPTY = "Segment must contain at least one occurrence"
OCCURRENCE_EMPTY = "Occurrence must contain at least one element"
ELEMENT_KEY_EMPTY = "Element key is empty"


def _type_name(value: Any) -> str:
    """JSON type name of a value, as used in error messages."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Mapping):
        return "object"
    if isinstance(value, (list, tuple)):
        return "array"
    return type(value).__name__


def _expected(expected: str, value: Any) -> str:
    return f"Expected {expected}, received {_type_name(value)}"


def _check_occurrence(
    occurrence: Any, path: FieldPath, issues: list[ValidationIssue]
) -> None:
    if not isinstance(occurrence, Mapping):
        issues.append(ValidationIssue(path, _expected("object", occurrence)))
        return

    if not occurrence:
        issues.append(ValidationIssue(path, OCCURRENCE_EMPTY))
        return

    for key, value in occurrence.items():
        if not isinstance(key, str):
            issues.append(ValidationIssue((*path, str(key)), _expected("string", key)))
            continue
        if not key:
            issues.append(ValidationIssue((*path, key), ELEMENT_KEY_EMPTY))
        if not isinstance(value, str):
            issues.append(ValidationIssue((*path, key), _expected("string", value)))


def _check_segment(
    name: Any, occurrences: Any, issues: list[ValidationIssue]
) -> None:
    if not isinstance(name, str):
        issues.append(ValidationIssue((str(name),), _expected("string", name)))
        return

    if not name.strip():
        issues.append(ValidationIssue((name,), SEGMENT_NAME_EMPTY))

    if not isinstance(occurrences, (list, tuple)):
        issues.append(ValidationIssue((name,), _expected("array", occurrences)))
        return

    if not occurrences:
        issues.append(ValidationIssue((name,), SEGMENT_EMPTY))
        return

    for index, occurrence in enumerate(occurrences):
        _check_occurrence(occurrence, (name, index), issues)


def check_document(tree: RawTree) -> list[ValidationIssue]:
    """Collect every invariant violation in a raw tree.

    Does not stop at the first problem: an occurrence with two bad values
    yields two issues, and problems in different segments are all reported.

    Args:
        tree: Untyped tree as produced by a parser (or supplied directly).

    Returns:
        List of issues, empty if the tree is a valid document.
    """
    issues: list[ValidationIssue] = []

    if not isinstance(tree, Mapping):
        issues.append(ValidationIssue((), _expected("object", tree)))
        return issues

    if not tree:
        issues.append(ValidationIssue((), DOCUMENT_EMPTY))
        return issues

    for name, occurrences in tree.items():
        _check_segment(name, occurrences, issues)

    return issues


def validate_document(tree: RawTree) -> Document:
    """Check a raw tree and build the typed Document from it.

    Raises:
        DocumentValidationError: With every violation found.
    """
    issues = check_document(tree)
    if issues:
        logger.warning("Document rejected with %d issues", len(issues))
        raise DocumentValidationError(issues)

    document = Document(
        {
            name: tuple(Occurrence(occurrence) for occurrence in occurrences)
            for name, occurrences in tree.items()
        }
    )
    logger.debug(
        "Validated document: %d segments, %d occurrences",
        len(document),
        document.occurrence_count(),
    )
    return document
