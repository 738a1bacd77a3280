# src/glossary_kit/pipeline/discovery.py

from pathlib import Path


def discover_pdfs(directory: Path) -> list[Path]:
    """PDF files directly inside directory, sorted by name."""
    return sorted(
        (
            path
            for path in directory.iterdir()
            if path.is_file() and path.suffix.lower() == ".pdf"
        ),
        key=lambda path: path.name,
    )
