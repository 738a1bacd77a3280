from pathlib import Path

import pytest
from reportlab.lib.pagesizes import LETTER
from reportlab.pdfgen import canvas


def _write_pages(path: Path, pages: list[list[str]]) -> None:
    c = canvas.Canvas(str(path), pagesize=LETTER)
    width, height = LETTER

    for lines in pages:
        text = c.beginText(40, height - 50)
        for line in lines:
            text.textLine(line)
        c.drawText(text)
        c.showPage()

    c.save()


def _create_thesis_pdf(path: Path) -> None:
    """A glossary bounded by an Introduction heading."""
    _write_pages(
        path,
        [
            [
                "SAMPLE THESIS",
                "",
                "List of Abbreviations",
                "API - Application Programming Interface",
                "CPU: Central Processing Unit",
                "WHO World Health Organization",
                "",
                "Introduction",
                "This thesis studies glossary extraction.",
            ]
        ],
    )


def _create_split_glossary_pdf(path: Path) -> None:
    """Header on page one, entries continue on page two."""
    _write_pages(
        path,
        [
            ["REPORT", "", "Acronyms", "EU - European Union"],
            ["UN - United Nations", "", "References", "Smith 2020"],
        ],
    )


def _create_plain_pdf(path: Path) -> None:
    _write_pages(path, [["MEMO", "", "Nothing but prose on this page."]])


@pytest.fixture(scope="module")
def pdf_dir(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """Create all test PDFs once per module."""
    dir_path: Path = tmp_path_factory.mktemp("pdfs")

    _create_thesis_pdf(dir_path / "thesis.pdf")
    _create_split_glossary_pdf(dir_path / "split.pdf")
    _create_plain_pdf(dir_path / "memo.pdf")
    (dir_path / "corrupt.pdf").write_bytes(b"this is not a pdf")

    return dir_path
