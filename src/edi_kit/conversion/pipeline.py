# src/edi_kit/conversion/pipeline.py

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from time import monotonic
from typing import Any

from edi_kit.config import DEFAULT_CONFIG, ConversionOptions, ConverterConfig
from edi_kit.detection import detect_format
from edi_kit.document.models import Document, Format, RawTree
from edi_kit.document.validator import validate_document
from edi_kit.errors import (
    UNKNOWN_FORMAT,
    ConfigurationError,
    ConversionError,
    DetectionError,
    DocumentValidationError,
    EdiKitError,
    ErrorDetail,
    ParseError,
)
from edi_kit.formatters import create_formatter
from edi_kit.observability import names
from edi_kit.observability.base import MetricsHook, NoOpMetricsHook
from edi_kit.parsers import create_parser

logger = logging.getLogger(__name__)

UNSUPPORTED_DATA = "Required field data must be a string or plain object"
NOT_DETECTED = "Failed to detect a valid input format type"
DELIMITERS_REQUIRED = (
    "lineDelimiter and elementDelimiter are both required for string documents"
)


@dataclass(frozen=True)
class ConversionResult:
    """Output of a successful conversion.

    ``output`` is text for XML and delimited-string output, and the
    Document itself for JSON output.
    """

    output: str | Document
    detected_format: Format
    to_format: Format


def _as_format(value: Format | str, role: str) -> Format:
    try:
        return Format(value)
    except ValueError:
        raise ConfigurationError(f"Unsupported {role} format: {value!r}") from None


def _details(error: EdiKitError, detected: str) -> list[ErrorDetail]:
    if isinstance(error, DocumentValidationError):
        return [
            ErrorDetail(issue.path or None, issue.message, detected)
            for issue in error.issues
        ]
    field = ("data",) if isinstance(error, (DetectionError, ParseError)) else None
    return [ErrorDetail(field, str(error), detected)]


class DocumentConverter:
    """Runs detect -> parse -> validate -> format for one input at a time.

    Stateless between calls; one instance can serve concurrent conversions.
    """

    def __init__(
        self,
        config: ConverterConfig = DEFAULT_CONFIG,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.config = config
        self.metrics_hook = metrics_hook

    def convert(
        self,
        data: Any,
        to_format: Format | str,
        options: ConversionOptions | None = None,
        from_format: Format | str | None = None,
    ) -> ConversionResult:
        """Convert a document to the requested format.

        Args:
            data: Document text, or an already structured mapping.
            to_format: Output format.
            options: Per-request options; unset fields use config defaults.
            from_format: Source format, when known. Skips detection.

        Returns:
            ConversionResult with the output and the source format.

        Raises:
            ConversionError: If any stage rejects the input. Lists every
                violation found, tagged with the detected format.
        """
        start = monotonic()
        stage = "detect"
        detected: Format | None = None
        try:
            detected = (
                _as_format(from_format, "source")
                if from_format is not None
                else self.detect(data)
            )

            stage = "configure"
            target = _as_format(to_format, "output")
            options = options or ConversionOptions()
            if detected == Format.STRING and not options.has_delimiters:
                raise ConfigurationError(DELIMITERS_REQUIRED)
            resolved = self.config.resolve(options)

            stage = "parse"
            tree = self.parse(data, detected, resolved)

            stage = "validate"
            document = validate_document(tree)

            stage = "format"
            output = create_formatter(target, self.config).format(document, resolved)
        except EdiKitError as e:
            detected_name = detected.value if detected else UNKNOWN_FORMAT
            self.metrics_hook.increment(
                names.CONVERSION_ERRORS_TOTAL,
                labels={"stage": stage, "detected_format": detected_name},
            )
            logger.warning("Conversion failed at %s: %s", stage, e)
            raise ConversionError(stage, _details(e, detected_name), detected_name) from e

        elapsed_ms = 1000 * (monotonic() - start)
        labels = {"from_format": detected.value, "to_format": target.value}
        self.metrics_hook.record_latency(names.CONVERSION_DURATION, elapsed_ms, labels)
        self.metrics_hook.increment(names.CONVERSIONS_TOTAL, labels=labels)
        self.metrics_hook.record_gauge(names.DOCUMENT_SEGMENTS, len(document))
        self.metrics_hook.record_gauge(
            names.DOCUMENT_OCCURRENCES, document.occurrence_count()
        )
        logger.info(
            "Converted %s -> %s (%d segments) in %.1fms",
            detected.value,
            target.value,
            len(document),
            elapsed_ms,
        )
        return ConversionResult(output=output, detected_format=detected, to_format=target)

    def detect(self, data: Any) -> Format:
        """Detect the input format or raise DetectionError."""
        if not isinstance(data, (str, Mapping)):
            raise DetectionError(UNSUPPORTED_DATA)

        detected = detect_format(data, root_tag=self.config.xml_root_tag)
        if detected is None:
            raise DetectionError(NOT_DETECTED)
        return detected

    def parse(
        self, data: Any, fmt: Format, options: ConversionOptions | None = None
    ) -> RawTree:
        """Parse text with the parser for ``fmt``; structured input passes through."""
        if isinstance(data, str):
            return create_parser(fmt).parse(data, self.config.resolve(options))
        if isinstance(data, Mapping):
            logger.debug("Input already structured, skipping parse")
            return data
        raise DetectionError(UNSUPPORTED_DATA)


def convert(
    data: Any,
    to_format: Format | str,
    options: ConversionOptions | None = None,
    from_format: Format | str | None = None,
) -> ConversionResult:
    """Convert with the default configuration. See DocumentConverter.convert."""
    return DocumentConverter().convert(data, to_format, options, from_format)
