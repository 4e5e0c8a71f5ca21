"""Benchmark runner: repeated count-only searches across board sizes.

For every N the solver runs ``runs`` times without recording placements; the
per-run solution count, explored nodes and wall time are collected and
summarized. Since the search is deterministic, every run of a given N must
report the same count and node total, which is checked when ``validate`` is
set.
"""
from __future__ import annotations

from typing import List, Optional

from . import settings
from .stats import (
    BenchmarkEntry,
    BenchmarkRecord,
    BenchmarkResults,
    ProgressPrinter,
    compute_detailed_statistics,
)
from bitqueens.runner import count_solutions


def run_benchmark(
    N_values: List[int],
    runs: Optional[int] = None,
    enumeration_limit: Optional[int] = None,
    solution_cap: Optional[int] = None,
    progress_label: Optional[str] = None,
    validate: bool = False,
) -> BenchmarkResults:
    """Benchmark the solver for each N in ``N_values``.

    Parameters
    ----------
    N_values : List[int]
        Board sizes to evaluate, in the order they should be reported.
    runs : int | None
        Repetitions per N (defaults to ``settings.RUNS_PER_N``).
    enumeration_limit, solution_cap : optional
        Forwarded to ``count_solutions``; default to ``settings``.
    progress_label : str | None
        When given, a ``ProgressPrinter`` line is emitted per N.
    validate : bool
        Raise ``AssertionError`` if repeated runs disagree on the count.

    Returns
    -------
    BenchmarkResults
        Mapping N -> ``BenchmarkEntry`` with timing statistics and raw runs.
    """
    if runs is None:
        runs = settings.RUNS_PER_N
    if runs < 1:
        raise ValueError("runs must be >= 1.")
    if enumeration_limit is None:
        enumeration_limit = settings.ENUMERATION_LIMIT
    if solution_cap is None:
        solution_cap = settings.SOLUTION_CAP

    results: BenchmarkResults = {}
    progress = ProgressPrinter(len(N_values), progress_label) if progress_label else None

    for index, N in enumerate(N_values, start=1):
        if progress:
            progress.update(index, f"N={N}")

        raw_runs: List[BenchmarkRecord] = []
        last = None
        for run_id in range(1, runs + 1):
            result = count_solutions(N, enumeration_limit=enumeration_limit, solution_cap=solution_cap)
            raw_runs.append(
                {"run": run_id, "solutions": result.solutions, "nodes": result.nodes, "time": result.elapsed}
            )
            last = result

        if validate:
            counts = {record["solutions"] for record in raw_runs}
            nodes = {record["nodes"] for record in raw_runs}
            if len(counts) != 1 or len(nodes) != 1:
                raise AssertionError(f"Non-deterministic benchmark for N={N}: counts={counts}, nodes={nodes}")

        assert last is not None
        entry: BenchmarkEntry = {
            "size": N,
            "solutions": last.solutions,
            "nodes": last.nodes,
            "symmetric": last.symmetric,
            "capped": last.capped,
            "total_runs": runs,
            "time": compute_detailed_statistics([record["time"] for record in raw_runs]),
            "raw_runs": raw_runs,
        }
        results[N] = entry
        print(f"  N={N}: {last.solutions} solutions, {last.nodes} nodes, mean {entry['time']['mean']:.4f}s")

    return results
