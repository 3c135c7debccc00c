# src/edi_kit/conversion/request.py

"""Request payload model for transports that expose conversions.

The transport layer itself lives outside this package; it hands the
decoded request body to ``convert_request`` and maps a ConversionError to
its own error response.
"""

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from edi_kit.config import ConversionOptions
from edi_kit.document.models import Format
from edi_kit.errors import UNKNOWN_FORMAT, ConversionError, DetectionError, ErrorDetail

from .pipeline import ConversionResult, DocumentConverter

logger = logging.getLogger(__name__)

CONTENT_TYPES = {
    Format.JSON: "application/json",
    Format.XML: "application/xml",
    Format.STRING: "text/plain",
}


def content_type_for(fmt: Format | str) -> str:
    return CONTENT_TYPES[Format(fmt)]


class ConvertRequest(BaseModel):
    data: Any = None
    to_format: Format = Field(alias="toFormat")
    line_delimiter: str | None = Field(default=None, alias="lineDelimiter", min_length=1)
    element_delimiter: str | None = Field(
        default=None, alias="elementDelimiter", min_length=1
    )
    minify: bool | None = None
    preserve_whitespace: bool | None = Field(default=None, alias="preserveWhitespace")

    class Config:
        extra = "forbid"
        populate_by_name = True

    def options(self) -> ConversionOptions:
        return ConversionOptions(
            line_delimiter=self.line_delimiter,
            element_delimiter=self.element_delimiter,
            minify=self.minify,
            preserve_whitespace=self.preserve_whitespace,
        )


def convert_request(
    payload: Mapping[str, Any],
    converter: DocumentConverter | None = None,
) -> ConversionResult:
    """Validate a request payload and run the conversion it describes.

    Raises:
        ConversionError: For an invalid payload or a rejected document.
    """
    converter = converter or DocumentConverter()
    try:
        request = ConvertRequest.model_validate(dict(payload))
    except ValidationError as e:
        logger.warning("Rejected convert request: %d errors", e.error_count())
        detection_error: DetectionError | None = None
        try:
            detected_name = converter.detect(payload.get("data")).value
        except DetectionError as de:
            detected_name = UNKNOWN_FORMAT
            detection_error = de

        details = [
            ErrorDetail(tuple(error["loc"]) or None, error["msg"], detected_name)
            for error in e.errors()
        ]
        # Unusable data is reported together with the schema errors.
        if detection_error is not None:
            details.append(ErrorDetail(("data",), str(detection_error), detected_name))
        raise ConversionError("request", details, detected_name) from e

    return converter.convert(request.data, request.to_format, request.options())
