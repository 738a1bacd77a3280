import pytest

from glossary_kit.sections.defaults import DEFAULT_HEADERS, DEFAULT_NEXT_MARKERS
from glossary_kit.sections.locator import SectionMatch, locate_section


class TestHeaderSelection:
    def test_leftmost_header_wins_over_list_order(self) -> None:
        """'Acronyms' at offset 10 beats 'Abbreviations' at offset 50."""
        text = "x" * 10 + "Acronyms" + "y" * 32 + "Abbreviations" + "\nz"
        assert text.index("Abbreviations") == 50

        match = locate_section(text)

        assert match is not None
        assert match.start == 10
        assert match.matched_header == "acronyms"

    def test_longer_header_starting_earlier_wins(self) -> None:
        text = "Preface\nList of Abbreviations\nCPU - Central Processing Unit"

        match = locate_section(text)

        assert match is not None
        assert match.matched_header == "list of abbreviations"
        assert match.start == text.index("List of Abbreviations")

    def test_header_search_is_case_insensitive(self) -> None:
        text = "front matter\nABBREVIATIONS\nEU - European Union"

        match = locate_section(text)

        assert match is not None
        assert match.start == text.index("ABBREVIATIONS")
        assert match.matched_header == "abbreviations"

    def test_equal_positions_prefer_first_listed_header(self) -> None:
        text = "Abbreviations and symbols\nEU - European Union"

        match = locate_section(
            text, headers=["abbreviations", "abbreviations and symbols"]
        )

        assert match is not None
        assert match.matched_header == "abbreviations"

    def test_blank_header_literals_are_ignored(self) -> None:
        text = "Some text\nAcronyms\nEU - European Union"

        match = locate_section(text, headers=["", "acronyms"])

        assert match is not None
        assert match.start == text.index("Acronyms")


class TestSectionEnd:
    def test_earliest_next_marker_bounds_the_section(self) -> None:
        """'References' at +80 wins over 'Introduction' at +200."""
        body = "\n" + "a" * 79 + "References" + "b" * 110 + "Introduction tail"
        text = "Abbreviations" + body
        header_end = len("Abbreviations")
        assert text.index("References") == header_end + 80
        assert text.index("Introduction") == header_end + 200

        match = locate_section(text)

        assert match is not None
        assert match.end == header_end + 80

    def test_section_runs_to_end_without_next_marker(self) -> None:
        text = "Abbreviations\nCPU - Central Processing Unit\nRAM - Random Access Memory"

        match = locate_section(text)

        assert match is not None
        assert match.end == len(text)

    def test_next_marker_before_header_is_ignored(self) -> None:
        text = "Table of Contents\n1 Introduction\nAbbreviations\nEU - European Union"

        match = locate_section(text)

        assert match is not None
        assert match.start == text.index("Abbreviations")
        assert match.end == len(text)

    def test_marker_search_starts_after_header(self) -> None:
        text = "Abbreviations\nEU - European Union"

        match = locate_section(text, next_markers=["viations"])

        assert match is not None
        assert match.end == len(text)

    def test_next_marker_is_case_insensitive(self) -> None:
        text = "Acronyms\nEU - European Union\nCHAPTER 1\nBody text"

        match = locate_section(text)

        assert match is not None
        assert match.end == text.index("CHAPTER 1")

    def test_start_never_exceeds_end(self) -> None:
        text = "intro\nGlossary of Terms"

        match = locate_section(text)

        assert match is not None
        assert match.start <= match.end


class TestNotFound:
    def test_missing_header_returns_none(self) -> None:
        assert locate_section("Chapter 1\nNothing to see here.") is None

    def test_empty_text_returns_none(self) -> None:
        assert locate_section("") is None

    def test_empty_header_list_returns_none(self) -> None:
        assert locate_section("Abbreviations\nEU - European Union", headers=[]) is None


class TestSectionMatch:
    def test_section_text_is_trimmed_slice(self) -> None:
        text = "  Abbreviations\nEU - European Union\n\n  Introduction"

        match = locate_section(text)

        assert match is not None
        assert match.section_text(text) == "Abbreviations\nEU - European Union"

    def test_header_at_end_of_document_has_no_entries_after_it(self) -> None:
        text = "Body text\nAbbreviations"

        match = locate_section(text)

        assert match is not None
        assert match.section_text(text) == "Abbreviations"

    def test_section_match_is_frozen(self) -> None:
        match = SectionMatch(start=0, end=1, matched_header="acronyms")

        with pytest.raises(AttributeError):
            match.start = 5  # type: ignore


def test_default_vocabularies() -> None:
    assert DEFAULT_HEADERS == (
        "list of abbreviations",
        "abbreviations",
        "acronyms",
        "glossary of terms",
        "list of acronyms",
        "symbols and abbreviations",
    )
    assert "references" in DEFAULT_NEXT_MARKERS
    assert "introduction" in DEFAULT_NEXT_MARKERS
