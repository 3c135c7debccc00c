# src/edi_kit/errors.py

"""Exception hierarchy for edi-kit.

Stage errors (detection, parsing, validation, configuration, formatting)
are raised by the individual components. The conversion pipeline wraps
whichever one aborted it in a ConversionError, which is the only error
type callers of ``convert`` need to handle. Anything else escaping the
pipeline is an internal failure.
"""

from dataclasses import dataclass
from typing import Any

UNKNOWN_FORMAT = "unknown"

FieldPath = tuple[str | int, ...]


class EdiKitError(Exception):
    """Base class for all edi-kit errors."""


class DetectionError(EdiKitError):
    """No input format could be classified."""


class ParseError(EdiKitError):
    """Input matched a format's surface syntax but failed its grammar."""


class ConfigurationError(EdiKitError, ValueError):
    """Required options are missing or invalid."""


class FormatError(EdiKitError):
    """A valid Document cannot be rendered in the requested format."""


@dataclass(frozen=True)
class ValidationIssue:
    """A single structural violation found in a raw tree."""

    path: FieldPath
    message: str

    def __str__(self) -> str:
        if not self.path:
            return self.message
        return f"{'.'.join(str(p) for p in self.path)}: {self.message}"


class DocumentValidationError(EdiKitError):
    """The raw tree violates one or more canonical model invariants."""

    def __init__(self, issues: list[ValidationIssue]) -> None:
        self.issues = list(issues)
        summary = "; ".join(str(issue) for issue in self.issues)
        super().__init__(f"Invalid document ({len(self.issues)} issues): {summary}")


@dataclass(frozen=True)
class ErrorDetail:
    """One entry of the aggregated error payload."""

    field: FieldPath | None
    message: str
    detected_input_format: str = UNKNOWN_FORMAT

    def to_dict(self) -> dict[str, Any]:
        return {
            "field": list(self.field) if self.field else None,
            "message": self.message,
            "detectedInputFormat": self.detected_input_format,
        }


class ConversionError(EdiKitError):
    """Raised by the pipeline when any stage rejects the input.

    Wraps the stage error (available as ``__cause__``) and lists every
    violation found, annotated with the detected input format.
    """

    def __init__(
        self,
        stage: str,
        details: list[ErrorDetail],
        detected_format: str = UNKNOWN_FORMAT,
    ) -> None:
        self.stage = stage
        self.details = list(details)
        self.detected_format = detected_format
        messages = "; ".join(detail.message for detail in self.details)
        super().__init__(f"Conversion failed at {stage}: {messages}")

    @property
    def messages(self) -> list[str]:
        return [detail.message for detail in self.details]

    def to_payload(self) -> dict[str, Any]:
        return {
            "error": "Validation Error",
            "details": [detail.to_dict() for detail in self.details],
        }
