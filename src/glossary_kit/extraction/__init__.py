from .base import TextExtractor
from .pdf_extractor import PdfTextExtractor

__all__ = [
    "PdfTextExtractor",
    "TextExtractor",
]
