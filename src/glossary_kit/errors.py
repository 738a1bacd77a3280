# src/glossary_kit/errors.py


class GlossaryKitError(Exception):
    """Base class for glossary-kit errors."""


class ExtractionError(GlossaryKitError):
    """Text could not be extracted from a document."""


class OutputWriteError(GlossaryKitError):
    """The report could not be written to its destination."""
