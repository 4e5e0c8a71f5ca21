"""
Configuration and benchmarking package for the N-Queens solver.

This package contains:
- settings: search limits and benchmark knobs
- stats: typed benchmark summaries and progress reporting
- experiments: repeated count-only runs across board sizes
- reporting: CSV exports
- plots: benchmark charts
- cli: argument parser and command entry points
"""

from . import settings as settings  # re-export for convenience
from .stats import (
    BenchmarkEntry,
    BenchmarkRecord,
    BenchmarkResults,
    ProgressPrinter,
    StatsSummary,
    compute_detailed_statistics,
)

__all__ = [
    # types
    "StatsSummary",
    "BenchmarkRecord",
    "BenchmarkEntry",
    "BenchmarkResults",
    # utils
    "compute_detailed_statistics",
    "ProgressPrinter",
    # settings module
    "settings",
]
