from unittest.mock import Mock

import pytest

from edi_kit.config import ConversionOptions, ConverterConfig
from edi_kit.conversion.pipeline import DocumentConverter, convert
from edi_kit.document.models import Document, Format
from edi_kit.errors import (
    ConfigurationError,
    ConversionError,
    DetectionError,
    DocumentValidationError,
    ParseError,
)
from edi_kit.observability import names

DELIMITERS = ConversionOptions(line_delimiter="~", element_delimiter="*")


@pytest.fixture
def converter() -> DocumentConverter:
    return DocumentConverter()


class TestConvert:
    def test_string_to_json(self, converter: DocumentConverter) -> None:
        result = converter.convert("A*a1~B*b1~A*100*200~", "json", DELIMITERS)

        assert result.detected_format == Format.STRING
        assert result.to_format == Format.JSON
        assert isinstance(result.output, Document)
        assert result.output.to_dict() == {
            "A": [{"A1": "a1"}, {"A1": "100", "A2": "200"}],
            "B": [{"B1": "b1"}],
        }

    def test_structured_input_to_string(self, converter: DocumentConverter) -> None:
        data = {"A": [{"A1": "a1"}], "B": [{"B1": "b1", "B2": "b2"}]}

        result = converter.convert(
            data, Format.STRING, ConversionOptions(minify=True)
        )

        assert result.detected_format == Format.JSON
        assert result.output == "A*a1~B*b1*b2~"

    def test_xml_to_string_uses_default_delimiters(
        self, converter: DocumentConverter
    ) -> None:
        xml = "<root><A><A1>a1</A1></A><B><B1>b1</B1></B></root>"

        result = converter.convert(xml, "string")

        assert result.detected_format == Format.XML
        assert result.output == "A*a1~\nB*b1~"

    def test_json_text_to_xml(self, converter: DocumentConverter) -> None:
        result = converter.convert(
            '{"A":[{"A1":"a1","A2":""}]}', "xml", ConversionOptions(minify=True)
        )

        assert result.output == (
            '<?xml version="1.0" encoding="UTF-8" ?>'
            "<root><A><A1>a1</A1><A2></A2></A></root>"
        )

    def test_from_format_skips_detection(self, converter: DocumentConverter) -> None:
        """Text that would be detected as XML is parsed as a delimited string."""
        result = converter.convert(
            "<a>*1~", "json", DELIMITERS, from_format=Format.STRING
        )

        assert result.detected_format == Format.STRING
        assert result.output.to_dict() == {"<a>": [{"<a>1": "1"}]}

    def test_module_level_convert(self) -> None:
        result = convert({"A": [{"A1": "a1"}]}, "json")

        assert result.output.to_dict() == {"A": [{"A1": "a1"}]}

    def test_uses_configured_defaults(self) -> None:
        converter = DocumentConverter(ConverterConfig(default_minify=True))

        result = converter.convert({"A": [{"A1": "a1"}], "B": [{"B1": "b1"}]}, "string")

        assert result.output == "A*a1~B*b1~"


class TestConvertErrors:
    @pytest.mark.parametrize("data", [None, 12345, True, ["A"]])
    def test_unsupported_data(self, converter: DocumentConverter, data: object) -> None:
        with pytest.raises(ConversionError) as exc_info:
            converter.convert(data, "json")

        error = exc_info.value
        assert error.stage == "detect"
        assert error.detected_format == "unknown"
        assert error.messages == ["Required field data must be a string or plain object"]
        assert isinstance(error.__cause__, DetectionError)

    def test_nothing_detected(self, converter: DocumentConverter) -> None:
        with pytest.raises(ConversionError) as exc_info:
            converter.convert("", "json")

        assert exc_info.value.messages == ["Failed to detect a valid input format type"]
        assert exc_info.value.detected_format == "unknown"

    def test_string_source_requires_delimiters(
        self, converter: DocumentConverter
    ) -> None:
        with pytest.raises(ConversionError) as exc_info:
            converter.convert("A*a1~B*b1", "json", ConversionOptions(line_delimiter="~"))

        error = exc_info.value
        assert error.stage == "configure"
        assert error.detected_format == "string"
        assert "lineDelimiter and elementDelimiter are both required" in error.messages[0]
        assert isinstance(error.__cause__, ConfigurationError)

    def test_unsupported_output_format(self, converter: DocumentConverter) -> None:
        with pytest.raises(ConversionError, match="Unsupported output format"):
            converter.convert({"A": [{"A1": "a1"}]}, "csv")

    def test_unsupported_source_format(self, converter: DocumentConverter) -> None:
        with pytest.raises(ConversionError, match="Unsupported source format"):
            converter.convert("A*a1", "json", DELIMITERS, from_format="csv")

    def test_deeply_nested_brackets(self, converter: DocumentConverter) -> None:
        with pytest.raises(ConversionError) as exc_info:
            converter.convert("[" * 100000, "json", DELIMITERS)

        error = exc_info.value
        assert error.detected_format == "string"
        assert error.stage == "validate"

    def test_deeply_nested_json_source(self, converter: DocumentConverter) -> None:
        with pytest.raises(ConversionError) as exc_info:
            converter.convert("[" * 100000, "json", from_format=Format.JSON)

        error = exc_info.value
        assert error.stage == "parse"
        assert "Invalid JSON document" in error.messages[0]

    def test_broken_xml(self, converter: DocumentConverter) -> None:
        with pytest.raises(ConversionError) as exc_info:
            converter.convert("<root><roo", "json")

        error = exc_info.value
        assert error.stage == "parse"
        assert error.detected_format == "xml"
        assert error.details[0].field == ("data",)
        assert error.messages[0].startswith("Invalid XML document")
        assert isinstance(error.__cause__, ParseError)

    def test_all_validation_issues_are_reported(
        self, converter: DocumentConverter
    ) -> None:
        data = {"A": [{"A1": "100"}], "B": [], "C": [{}], "D": [{"D1": []}]}

        with pytest.raises(ConversionError) as exc_info:
            converter.convert(data, "xml")

        error = exc_info.value
        assert error.stage == "validate"
        assert error.detected_format == "json"
        assert isinstance(error.__cause__, DocumentValidationError)
        assert [(d.field, d.message) for d in error.details] == [
            (("B",), "Segment must contain at least one occurrence"),
            (("C", 0), "Occurrence must contain at least one element"),
            (("D", 0, "D1"), "Expected string, received array"),
        ]

    def test_empty_document(self, converter: DocumentConverter) -> None:
        with pytest.raises(ConversionError) as exc_info:
            converter.convert({}, "json")

        assert exc_info.value.messages == ["Document has no segments"]
        assert exc_info.value.details[0].field is None

    def test_empty_segment_name_from_string_source(
        self, converter: DocumentConverter
    ) -> None:
        with pytest.raises(ConversionError) as exc_info:
            converter.convert("A*a1~ *b1~", "json", DELIMITERS)

        assert exc_info.value.messages == ["Segment name is empty"]

    def test_unrenderable_xml(self, converter: DocumentConverter) -> None:
        with pytest.raises(ConversionError) as exc_info:
            converter.convert({"1A": [{"A1": "a1"}]}, "xml")

        assert exc_info.value.stage == "format"

    def test_payload(self, converter: DocumentConverter) -> None:
        with pytest.raises(ConversionError) as exc_info:
            converter.convert({"A": [{"": "100"}]}, "json")

        assert exc_info.value.to_payload() == {
            "error": "Validation Error",
            "details": [
                {
                    "field": ["A", 0, ""],
                    "message": "Element key is empty",
                    "detectedInputFormat": "json",
                }
            ],
        }

    def test_internal_errors_propagate(self, converter: DocumentConverter) -> None:
        converter.metrics_hook = Mock()
        converter.metrics_hook.record_latency.side_effect = RuntimeError("backend down")

        with pytest.raises(RuntimeError, match="backend down"):
            converter.convert({"A": [{"A1": "a1"}]}, "json")


class TestMetrics:
    def test_records_success_metrics(self) -> None:
        hook = Mock()
        converter = DocumentConverter(metrics_hook=hook)

        converter.convert("A*a1~A*a2~B*b1~", "xml", DELIMITERS)

        labels = {"from_format": "string", "to_format": "xml"}
        assert hook.record_latency.call_args.args[0] == names.CONVERSION_DURATION
        assert hook.record_latency.call_args.args[2] == labels
        hook.increment.assert_called_once_with(names.CONVERSIONS_TOTAL, labels=labels)
        hook.record_gauge.assert_any_call(names.DOCUMENT_SEGMENTS, 2)
        hook.record_gauge.assert_any_call(names.DOCUMENT_OCCURRENCES, 3)

    def test_records_error_metrics(self) -> None:
        hook = Mock()
        converter = DocumentConverter(metrics_hook=hook)

        with pytest.raises(ConversionError):
            converter.convert("<root><roo", "json")

        hook.increment.assert_called_once_with(
            names.CONVERSION_ERRORS_TOTAL,
            labels={"stage": "parse", "detected_format": "xml"},
        )
        hook.record_latency.assert_not_called()
