from .defaults import DEFAULT_HEADERS, DEFAULT_NEXT_MARKERS
from .locator import SectionMatch, locate_section

__all__ = [
    "DEFAULT_HEADERS",
    "DEFAULT_NEXT_MARKERS",
    "SectionMatch",
    "locate_section",
]
