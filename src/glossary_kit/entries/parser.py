# src/glossary_kit/entries/parser.py

import logging
from collections.abc import Sequence

from .matchers import DEFAULT_MATCHERS, EntryMatcher
from .models import Abbreviation

logger = logging.getLogger(__name__)


def parse_entries(
    section_text: str,
    matchers: Sequence[EntryMatcher] = DEFAULT_MATCHERS,
) -> list[Abbreviation]:
    """
    Parse a located section into abbreviation records.

    - The first line is the section header and is always skipped
    - Matchers are tried in order; the first full-line match wins
    - Lines no matcher accepts are dropped (prose, continuation lines)
    - Document order is kept and duplicates are not merged
    """
    abbreviations: list[Abbreviation] = []

    for line in section_text.split("\n")[1:]:
        clean = line.strip()
        if not clean:
            continue

        entry = _match_line(clean, matchers)
        if entry is None:
            logger.debug("No matcher accepted line: %r", clean)
            continue

        abbreviations.append(entry)

    return abbreviations


def _match_line(line: str, matchers: Sequence[EntryMatcher]) -> Abbreviation | None:
    for matcher in matchers:
        parts = matcher.match(line)
        if parts is None:
            continue

        term, definition = (part.strip() for part in parts)
        if not term or not definition:
            continue

        logger.debug("Matched %r via %s", term, matcher.name)
        return Abbreviation(term=term, definition=definition)

    return None
