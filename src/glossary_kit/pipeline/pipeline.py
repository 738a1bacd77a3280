# src/glossary_kit/pipeline/pipeline.py

import asyncio
import logging
from collections.abc import Iterable, Sequence
from pathlib import Path
from time import monotonic

from glossary_kit.entries.parser import parse_entries
from glossary_kit.errors import ExtractionError
from glossary_kit.extraction.base import TextExtractor
from glossary_kit.extraction.pdf_extractor import PdfTextExtractor
from glossary_kit.observability import names
from glossary_kit.observability.base import MetricsHook, NoOpMetricsHook
from glossary_kit.sections.defaults import DEFAULT_HEADERS, DEFAULT_NEXT_MARKERS
from glossary_kit.sections.locator import locate_section

from .models import (
    BatchReport,
    DocumentFailure,
    DocumentOutcome,
    DocumentSuccess,
    ProcessedDocument,
)

logger = logging.getLogger(__name__)


class GlossaryPipeline:
    """
    Runs extraction, section location and entry parsing per document.

    A failing document becomes a DocumentFailure in the batch report;
    it never stops the remaining documents.
    """

    def __init__(
        self,
        extractor: TextExtractor | None = None,
        headers: Sequence[str] = DEFAULT_HEADERS,
        next_markers: Sequence[str] = DEFAULT_NEXT_MARKERS,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.extractor = extractor or PdfTextExtractor()
        self.headers = tuple(headers)
        self.next_markers = tuple(next_markers)
        self.metrics_hook = metrics_hook

    def process_text(self, source_name: str, text: str) -> ProcessedDocument:
        match = locate_section(text, self.headers, self.next_markers)
        if match is None:
            logger.info("No abbreviations section found in %s", source_name)
            self.metrics_hook.increment(names.SECTIONS_NOT_FOUND_TOTAL)
            return ProcessedDocument(source_name=source_name, abbreviations=())

        abbreviations = tuple(parse_entries(match.section_text(text)))
        if not abbreviations:
            logger.info(
                "Section %r in %s yielded no entries", match.matched_header, source_name
            )
        else:
            logger.info(
                "Extracted %d abbreviations from %s", len(abbreviations), source_name
            )

        self.metrics_hook.increment(
            names.ABBREVIATIONS_EXTRACTED_TOTAL, len(abbreviations)
        )
        return ProcessedDocument(source_name=source_name, abbreviations=abbreviations)

    def process_bytes(self, source_name: str, data: bytes) -> DocumentOutcome:
        start = monotonic()
        try:
            text = self.extractor.extract_text(data)
        except ExtractionError as exc:
            return self._failure(source_name, exc)

        document = self.process_text(source_name, text)

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.DOCUMENT_PROCESSING_DURATION, elapsed_ms)
        self.metrics_hook.increment(names.DOCUMENTS_PROCESSED_TOTAL)
        return DocumentSuccess(document=document)

    def process_path(self, path: Path) -> DocumentOutcome:
        try:
            data = path.read_bytes()
        except OSError as exc:
            return self._failure(path.name, exc)
        return self.process_bytes(path.name, data)

    def process_batch(self, paths: Iterable[Path]) -> BatchReport:
        paths = list(paths)
        start = monotonic()
        self.metrics_hook.record_gauge(names.BATCH_SIZE, len(paths))

        outcomes = tuple(self.process_path(path) for path in paths)

        return self._report(outcomes, start)

    async def aprocess_batch(
        self, paths: Iterable[Path], max_concurrency: int = 4
    ) -> BatchReport:
        """
        Process documents in worker threads.
        Outcomes keep the order of paths regardless of completion order.
        """
        if max_concurrency <= 0:
            raise ValueError("max_concurrency must be > 0")

        paths = list(paths)
        start = monotonic()
        self.metrics_hook.record_gauge(names.BATCH_SIZE, len(paths))
        semaphore = asyncio.Semaphore(max_concurrency)

        async def run(path: Path) -> DocumentOutcome:
            async with semaphore:
                return await asyncio.to_thread(self.process_path, path)

        outcomes = tuple(await asyncio.gather(*(run(path) for path in paths)))

        return self._report(outcomes, start)

    def _failure(self, source_name: str, exc: Exception) -> DocumentFailure:
        logger.warning("Skipping %s: %s", source_name, exc)
        self.metrics_hook.increment(names.DOCUMENT_FAILURES_TOTAL)
        return DocumentFailure(source_name=source_name, error=str(exc))

    def _report(self, outcomes: tuple[DocumentOutcome, ...], start: float) -> BatchReport:
        report = BatchReport(outcomes=outcomes)
        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.BATCH_DURATION, elapsed_ms)
        logger.info(
            "Processed %d documents: %d with abbreviations, %d failed",
            len(outcomes),
            len(report.documents),
            len(report.failures),
        )
        return report
