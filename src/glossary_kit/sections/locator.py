# src/glossary_kit/sections/locator.py

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass

from .defaults import DEFAULT_HEADERS, DEFAULT_NEXT_MARKERS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SectionMatch:
    start: int
    end: int
    matched_header: str

    def section_text(self, text: str) -> str:
        return text[self.start : self.end].strip()


def locate_section(
    text: str,
    headers: Iterable[str] = DEFAULT_HEADERS,
    next_markers: Iterable[str] = DEFAULT_NEXT_MARKERS,
) -> SectionMatch | None:
    """
    Find the span of text most likely to be the abbreviations section.

    - Every header is searched on its own; the earliest occurrence wins
    - The section ends at the earliest next-section marker found after
      the header, or at the end of the text
    - Returns None when no header occurs at all
    """
    if not text:
        return None

    best = _first_occurrence(text, headers, offset=0)
    if best is None:
        logger.debug("No section header found")
        return None

    start, header_length, header = best
    search_from = start + header_length
    end = len(text)

    marker = _first_occurrence(text, next_markers, offset=search_from)
    if marker is not None and marker[0] < end:
        end = marker[0]
        logger.debug("Section bounded by next marker %r at %d", marker[2], end)

    logger.debug("Located section %r at [%d, %d)", header, start, end)
    return SectionMatch(start=start, end=end, matched_header=header)


def _first_occurrence(
    text: str, literals: Iterable[str], offset: int
) -> tuple[int, int, str] | None:
    """
    Earliest case-insensitive hit among the literals, as
    (absolute position, matched length, literal). On equal positions the
    literal listed first is kept.
    """
    best: tuple[int, int, str] | None = None

    for literal in literals:
        if not literal:
            continue
        match = re.compile(re.escape(literal), re.IGNORECASE).search(text, offset)
        if match is None:
            continue
        if best is None or match.start() < best[0]:
            best = (match.start(), match.end() - match.start(), literal)

    return best
