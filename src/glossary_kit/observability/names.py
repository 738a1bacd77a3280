# src/glossary_kit/observability/names.py

"""Standard metric names for glossary-kit observability.

Use these constants instead of hardcoded strings for consistency
across the codebase.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Document Metrics
# ============================================================================

# Duration
DOCUMENT_PROCESSING_DURATION = "document_processing_duration"

# Counters
DOCUMENTS_PROCESSED_TOTAL = "documents_processed_total"
DOCUMENT_FAILURES_TOTAL = "document_failures_total"
SECTIONS_NOT_FOUND_TOTAL = "sections_not_found_total"
ABBREVIATIONS_EXTRACTED_TOTAL = "abbreviations_extracted_total"


# ============================================================================
# Batch Metrics
# ============================================================================

# Duration
BATCH_DURATION = "batch_duration"

# Gauges
BATCH_SIZE = "batch_size"
