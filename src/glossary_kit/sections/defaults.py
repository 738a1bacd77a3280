# src/glossary_kit/sections/defaults.py

# Literals are matched case-insensitively, each one probed on its own.
DEFAULT_HEADERS: tuple[str, ...] = (
    "list of abbreviations",
    "abbreviations",
    "acronyms",
    "glossary of terms",
    "list of acronyms",
    "symbols and abbreviations",
)

DEFAULT_NEXT_MARKERS: tuple[str, ...] = (
    "table of contents",
    "introduction",
    "chapter 1",
    "abstract",
    "acknowledgments",
    "references",
)
