# src/glossary_kit/config.py

import logging
from dataclasses import dataclass, replace
from pathlib import Path

import yaml
from pydantic import BaseModel, field_validator

from glossary_kit.reports.markdown import OutputMode
from glossary_kit.sections.defaults import DEFAULT_HEADERS, DEFAULT_NEXT_MARKERS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GlossaryConfig:
    """Configuration for a glossary extraction run.

    Immutable. Explicit. No magic defaults from environment.
    """

    input_dir: Path = Path("pdfs")
    output_file: Path = Path("abbreviations.md")
    mode: OutputMode = "grouped"
    headers: tuple[str, ...] = DEFAULT_HEADERS
    next_markers: tuple[str, ...] = DEFAULT_NEXT_MARKERS
    max_concurrency: int = 4

    def with_profile(self, profile: "CorpusProfile") -> "GlossaryConfig":
        changes: dict = {}
        if profile.headers is not None:
            changes["headers"] = tuple(profile.headers)
        if profile.next_markers is not None:
            changes["next_markers"] = tuple(profile.next_markers)
        if profile.mode is not None:
            changes["mode"] = profile.mode
        return replace(self, **changes)


class CorpusProfile(BaseModel):
    """Section vocabulary for a particular document corpus, loaded from YAML."""

    headers: list[str] | None = None
    next_markers: list[str] | None = None
    mode: OutputMode | None = None

    class Config:
        extra = "forbid"

    @field_validator("headers", "next_markers")
    @classmethod
    def _no_blank_literals(cls, value: list[str] | None) -> list[str] | None:
        if value is None:
            return None
        if any(not literal.strip() for literal in value):
            raise ValueError("literals must be non-empty")
        return value


def load_profile(path: str | Path) -> CorpusProfile:
    logger.info("Loading corpus profile from %s", path)
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    return CorpusProfile(**data)
