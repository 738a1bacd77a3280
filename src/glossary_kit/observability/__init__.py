"""Metrics hooks for instrumenting the extraction pipeline."""

from . import names
from .base import MetricsHook, NoOpMetricsHook

__all__ = [
    "MetricsHook",
    "NoOpMetricsHook",
    "names",
]
