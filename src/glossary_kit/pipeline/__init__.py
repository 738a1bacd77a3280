from .discovery import discover_pdfs
from .models import (
    BatchReport,
    DocumentFailure,
    DocumentOutcome,
    DocumentSuccess,
    ProcessedDocument,
)
from .pipeline import GlossaryPipeline

__all__ = [
    "BatchReport",
    "DocumentFailure",
    "DocumentOutcome",
    "DocumentSuccess",
    "GlossaryPipeline",
    "ProcessedDocument",
    "discover_pdfs",
]
