# src/edi_kit/observability/base.py

from typing import Protocol

# Conversion labels: from_format / to_format on success,
# stage / detected_format on failure.
Labels = dict[str, str]


class MetricsHook(Protocol):
    """Sink for conversion metrics.

    Implementations forward to whatever backend the host application uses.
    Must not raise: a failing hook would abort an otherwise valid conversion.
    """

    def record_latency(
        self, name: str, value_ms: float, labels: Labels | None = None
    ) -> None:
        """Wall time of one conversion, detection through formatting."""
        ...

    def increment(self, name: str, value: int = 1, labels: Labels | None = None) -> None:
        """Count a finished or rejected conversion."""
        ...

    def record_gauge(
        self, name: str, value: float, labels: Labels | None = None
    ) -> None:
        """Size of the converted document (segments or occurrences)."""
        ...


class NoOpMetricsHook:
    """Default hook. Drops every measurement."""

    def record_latency(
        self, name: str, value_ms: float, labels: Labels | None = None
    ) -> None:
        pass

    def increment(self, name: str, value: int = 1, labels: Labels | None = None) -> None:
        pass

    def record_gauge(
        self, name: str, value: float, labels: Labels | None = None
    ) -> None:
        pass
