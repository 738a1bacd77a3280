from .matchers import (
    DASH_MATCHER,
    DEFAULT_MATCHERS,
    LOOSE_MATCHER,
    WIDE_GAP_MATCHER,
    EntryMatcher,
)
from .models import Abbreviation
from .parser import parse_entries

__all__ = [
    "Abbreviation",
    "DASH_MATCHER",
    "DEFAULT_MATCHERS",
    "EntryMatcher",
    "LOOSE_MATCHER",
    "WIDE_GAP_MATCHER",
    "parse_entries",
]
