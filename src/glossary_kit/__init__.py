# Configuration
from .config import CorpusProfile, GlossaryConfig, load_profile

# Entries
from .entries import Abbreviation, EntryMatcher, parse_entries

# Errors
from .errors import ExtractionError, GlossaryKitError, OutputWriteError

# Extraction
from .extraction import PdfTextExtractor, TextExtractor

# Observability
from .observability import MetricsHook, NoOpMetricsHook

# Pipeline
from .pipeline import (
    BatchReport,
    DocumentFailure,
    DocumentSuccess,
    GlossaryPipeline,
    ProcessedDocument,
    discover_pdfs,
)

# Reports
from .reports import render_report, write_report

# Sections
from .sections import (
    DEFAULT_HEADERS,
    DEFAULT_NEXT_MARKERS,
    SectionMatch,
    locate_section,
)

__all__ = [
    # Configuration
    "CorpusProfile",
    "GlossaryConfig",
    "load_profile",
    # Entries
    "Abbreviation",
    "EntryMatcher",
    "parse_entries",
    # Errors
    "ExtractionError",
    "GlossaryKitError",
    "OutputWriteError",
    # Extraction
    "PdfTextExtractor",
    "TextExtractor",
    # Observability
    "MetricsHook",
    "NoOpMetricsHook",
    # Pipeline
    "BatchReport",
    "DocumentFailure",
    "DocumentSuccess",
    "GlossaryPipeline",
    "ProcessedDocument",
    "discover_pdfs",
    # Reports
    "render_report",
    "write_report",
    # Sections
    "DEFAULT_HEADERS",
    "DEFAULT_NEXT_MARKERS",
    "SectionMatch",
    "locate_section",
]
