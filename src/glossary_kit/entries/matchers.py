# src/glossary_kit/entries/matchers.py

import re
from dataclasses import dataclass

# Uppercase letters, digits, hyphens and periods: "GDP", "COVID-19", "U.S.".
_TERM = r"[A-Z0-9.\-]"


@dataclass(frozen=True)
class EntryMatcher:
    """A single line-splitting strategy. The pattern must capture term and definition."""

    name: str
    pattern: re.Pattern[str]

    def match(self, line: str) -> tuple[str, str] | None:
        found = self.pattern.fullmatch(line)
        if found is None:
            return None
        return found.group("term"), found.group("definition")


# "GDP - Gross Domestic Product", "GDP – ...", "GDP: ..."
# The lookahead takes the whole term run at once, so a hyphen inside
# "COVID-19" is never reused as the separator.
DASH_MATCHER = EntryMatcher(
    name="dash",
    pattern=re.compile(
        rf"(?=(?P<term>{_TERM}+))(?P=term)\s*[-–:]\s*(?P<definition>.+)"
    ),
)

# "NASA    National Aeronautics and Space Administration"
WIDE_GAP_MATCHER = EntryMatcher(
    name="wide_gap",
    pattern=re.compile(rf"(?P<term>{_TERM}+)\s{{2,}}(?P<definition>.+)"),
)

# "WHO World Health Organization". The definition may not carry stray
# punctuation such as ':' or '/', which keeps capitalised prose out.
LOOSE_MATCHER = EntryMatcher(
    name="loose",
    pattern=re.compile(rf"(?P<term>{_TERM}{{2,}})\s+(?P<definition>[\w\s\-.,;()]+)"),
)

DEFAULT_MATCHERS: tuple[EntryMatcher, ...] = (
    DASH_MATCHER,
    WIDE_GAP_MATCHER,
    LOOSE_MATCHER,
)
