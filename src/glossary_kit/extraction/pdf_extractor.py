# src/glossary_kit/extraction/pdf_extractor.py

import io
import logging

import pdfplumber

from glossary_kit.errors import ExtractionError

from .base import TextExtractor

logger = logging.getLogger(__name__)


class PdfTextExtractor(TextExtractor):
    """
    Plain-text PDF extraction.
    - Uses page order
    - Pages are joined with a newline
    - No layout or column analysis
    """

    def extract_text(self, data: bytes) -> str:
        try:
            with pdfplumber.open(io.BytesIO(data)) as pdf:
                pages = [page.extract_text() or "" for page in pdf.pages]
        except Exception as exc:
            # pdfminer raises a wide range of parser errors on damaged files
            raise ExtractionError(f"Could not extract text: {exc}") from exc

        logger.debug("Extracted text from %d pages", len(pages))
        return "\n".join(pages)
