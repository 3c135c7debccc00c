# src/edi_kit/observability/names.py

"""Standard metric names for edi-kit observability.

Use these constants instead of hardcoded strings for consistency
across the codebase.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Conversion Metrics
# ============================================================================

# Duration (labels: from_format, to_format)
CONVERSION_DURATION = "conversion_duration"

# Counters
CONVERSIONS_TOTAL = "conversions_total"
# labels: stage, detected_format
CONVERSION_ERRORS_TOTAL = "conversion_errors_total"


# ============================================================================
# Document Metrics
# ============================================================================

# Gauges
DOCUMENT_SEGMENTS = "document_segments"
DOCUMENT_OCCURRENCES = "document_occurrences"
