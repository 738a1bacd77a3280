# src/glossary_kit/reports/markdown.py

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

from glossary_kit.errors import OutputWriteError
from glossary_kit.pipeline.models import ProcessedDocument

logger = logging.getLogger(__name__)

OutputMode = Literal["grouped", "unified"]

EMPTY_REPORT = "No abbreviations found.\n"


@dataclass(frozen=True)
class UnifiedEntry:
    term: str
    definition: str
    sources: tuple[str, ...]


@dataclass
class _Accumulator:
    definition: str
    sources: list[str] = field(default_factory=list)


def merge_unified(documents: Iterable[ProcessedDocument]) -> list[UnifiedEntry]:
    """
    Merge identical terms across documents.

    - The first definition seen for a term wins; later ones are dropped
    - Sources are distinct and kept in first-seen order
    - Result is sorted alphabetically by term
    """
    merged: dict[str, _Accumulator] = {}

    for document in documents:
        for abbreviation in document.abbreviations:
            entry = merged.get(abbreviation.term)
            if entry is None:
                entry = _Accumulator(definition=abbreviation.definition)
                merged[abbreviation.term] = entry
            elif entry.definition != abbreviation.definition:
                logger.debug(
                    "Dropping definition %r for %s from %s",
                    abbreviation.definition,
                    abbreviation.term,
                    document.source_name,
                )
            if document.source_name not in entry.sources:
                entry.sources.append(document.source_name)

    return [
        UnifiedEntry(term=term, definition=entry.definition, sources=tuple(entry.sources))
        for term, entry in sorted(
            merged.items(), key=lambda item: (item[0].casefold(), item[0])
        )
    ]


def render_grouped(documents: Iterable[ProcessedDocument]) -> str:
    blocks = []
    for document in documents:
        if not document.abbreviations:
            continue
        lines = [f"## From: {document.source_name}", ""]
        lines.extend(
            f"- **{a.term}**: {a.definition}" for a in document.abbreviations
        )
        blocks.append("\n".join(lines))

    if not blocks:
        return EMPTY_REPORT
    return "\n\n".join(blocks) + "\n"


def render_unified(documents: Iterable[ProcessedDocument]) -> str:
    entries = merge_unified(documents)
    if not entries:
        return EMPTY_REPORT
    lines = [
        f"- **{e.term}**: {e.definition} (Source: {', '.join(e.sources)})"
        for e in entries
    ]
    return "\n".join(lines) + "\n"


def render_report(
    documents: Iterable[ProcessedDocument], mode: OutputMode = "grouped"
) -> str:
    if mode == "grouped":
        return render_grouped(documents)
    if mode == "unified":
        return render_unified(documents)
    raise ValueError(f"Unknown output mode: {mode}")


def write_report(path: Path, content: str) -> None:
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        logger.error("Cannot write report to %s: %s", path, exc)
        raise OutputWriteError(f"Cannot write report to {path}: {exc}") from exc
    logger.info("Report written to %s", path)
