# src/glossary_kit/entries/models.py

from dataclasses import dataclass


@dataclass(frozen=True)
class Abbreviation:
    term: str
    definition: str
