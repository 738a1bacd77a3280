from .markdown import (
    EMPTY_REPORT,
    OutputMode,
    UnifiedEntry,
    merge_unified,
    render_grouped,
    render_report,
    render_unified,
    write_report,
)

__all__ = [
    "EMPTY_REPORT",
    "OutputMode",
    "UnifiedEntry",
    "merge_unified",
    "render_grouped",
    "render_report",
    "render_unified",
    "write_report",
]
