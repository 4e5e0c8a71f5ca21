"""Typed result shapes and statistics helpers for the benchmark pipeline.

Defines ``TypedDict`` structures for benchmark outputs and a helper that
summarizes repeated timing measurements.
"""
from __future__ import annotations

import statistics
from typing import Dict, List, Optional, TypedDict


class StatsSummary(TypedDict, total=False):
    count: int
    mean: Optional[float]
    median: Optional[float]
    std: Optional[float]
    min: Optional[float]
    max: Optional[float]


class BenchmarkRecord(TypedDict):
    run: int
    solutions: int
    nodes: int
    time: float


class BenchmarkEntry(TypedDict, total=False):
    size: int
    solutions: int
    nodes: int
    symmetric: bool
    capped: bool
    total_runs: int
    time: StatsSummary
    raw_runs: List[BenchmarkRecord]


BenchmarkResults = Dict[int, BenchmarkEntry]


class ProgressPrinter:
    """Minimal, stdout-only progress reporter for long-running loops.

    Parameters
    ----------
    total : int
        Total number of steps expected. Values <= 0 are coerced to 1 to avoid
        division by zero when reporting percentages.
    label : str
        Short label printed in front of the counters (e.g., the current phase).
    """

    def __init__(self, total: int, label: str):
        self.total = max(1, total)
        self.label = label

    def update(self, index: int, detail: str = "") -> None:
        """Print ``[label] index/total (pct%) - detail`` on a single line."""
        percent = (index / self.total) * 100
        suffix = f" - {detail}" if detail else ""
        print(f"[{self.label}] {index}/{self.total} ({percent:.0f}%)" + suffix)


def compute_detailed_statistics(values: List[float]) -> StatsSummary:
    """Summarize a numeric sequence (count, mean, median, std, min, max).

    Empty input yields ``count == 0`` and ``None`` for every other field so
    CSV and plot generation stay uniform. The standard deviation is the
    population one, and 0 for a single sample.
    """
    if not values:
        return {"count": 0, "mean": None, "median": None, "std": None, "min": None, "max": None}

    return {
        "count": len(values),
        "mean": statistics.mean(values),
        "median": statistics.median(values),
        "std": statistics.pstdev(values) if len(values) > 1 else 0.0,
        "min": min(values),
        "max": max(values),
    }
