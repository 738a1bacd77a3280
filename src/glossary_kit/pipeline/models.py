# src/glossary_kit/pipeline/models.py

from dataclasses import dataclass
from typing import TypeAlias

from glossary_kit.entries.models import Abbreviation


@dataclass(frozen=True)
class ProcessedDocument:
    source_name: str
    abbreviations: tuple[Abbreviation, ...]


@dataclass(frozen=True)
class DocumentSuccess:
    document: ProcessedDocument


@dataclass(frozen=True)
class DocumentFailure:
    source_name: str
    error: str


DocumentOutcome: TypeAlias = DocumentSuccess | DocumentFailure


@dataclass(frozen=True)
class BatchReport:
    outcomes: tuple[DocumentOutcome, ...]

    @property
    def documents(self) -> list[ProcessedDocument]:
        """Successfully processed documents that contributed at least one entry."""
        return [
            outcome.document
            for outcome in self.outcomes
            if isinstance(outcome, DocumentSuccess) and outcome.document.abbreviations
        ]

    @property
    def failures(self) -> list[DocumentFailure]:
        return [o for o in self.outcomes if isinstance(o, DocumentFailure)]
