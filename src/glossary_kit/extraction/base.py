# src/glossary_kit/extraction/base.py

from abc import ABC, abstractmethod


class TextExtractor(ABC):
    @abstractmethod
    def extract_text(self, data: bytes) -> str:
        """
        Turn a document's raw bytes into linear text.

        Requirements:
        - Deterministic output for same input
        - Lines separated by newlines, in reading order
        - Raises ExtractionError when the document cannot be read
        """
        raise NotImplementedError
