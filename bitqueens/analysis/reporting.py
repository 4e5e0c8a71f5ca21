"""CSV export utilities for benchmark outputs (summary table and raw runs).

The summary is assembled as a pandas ``DataFrame`` (one row per N) so it can
also be printed or reused by callers; raw per-run rows are streamed with the
``csv`` module. Filenames share the suffix built from ``settings`` so every
artifact of one run is stamped consistently.
"""
from __future__ import annotations

import csv
import os
from typing import List

import pandas as pd

from . import settings
from .stats import BenchmarkResults


def build_suffix() -> str:
    """Return ``_<RUN_TAG>_<RUN_ID>`` according to settings, or ``""``."""
    parts: List[str] = []
    run_tag = getattr(settings, "RUN_TAG", None)
    if run_tag:
        parts.append(str(run_tag))
    if getattr(settings, "DATE_IN_FILENAMES", False):
        run_id = getattr(settings, "RUN_ID", None)
        if run_id:
            parts.append(str(run_id))
    return ("_" + "_".join(parts)) if parts else ""


def benchmark_frame(results: BenchmarkResults, N_values: List[int]) -> pd.DataFrame:
    """Flatten per-N benchmark entries into a summary ``DataFrame``."""
    rows = []
    for N in N_values:
        entry = results[N]
        timing = entry.get("time", {})
        rows.append(
            {
                "n": N,
                "solutions": entry.get("solutions", 0),
                "nodes_explored": entry.get("nodes", 0),
                "symmetric": bool(entry.get("symmetric", False)),
                "capped": bool(entry.get("capped", False)),
                "runs": entry.get("total_runs", 0),
                "time_mean_seconds": timing.get("mean"),
                "time_median_seconds": timing.get("median"),
                "time_std_seconds": timing.get("std"),
                "time_min_seconds": timing.get("min"),
                "time_max_seconds": timing.get("max"),
            }
        )
    frame = pd.DataFrame(rows)
    if not frame.empty:
        frame["time_per_node_seconds"] = frame["time_mean_seconds"] / frame["nodes_explored"].where(
            frame["nodes_explored"] > 0
        )
    return frame


def save_benchmark_to_csv(results: BenchmarkResults, N_values: List[int], out_dir: str) -> str:
    """Write the per-N summary table and return its path."""
    os.makedirs(out_dir, exist_ok=True)
    filename = os.path.join(out_dir, f"benchmark_summary{build_suffix()}.csv")
    benchmark_frame(results, N_values).to_csv(filename, index=False)
    print(f"Saved benchmark summary: {filename}")
    return filename


def save_raw_runs_to_csv(results: BenchmarkResults, N_values: List[int], out_dir: str) -> str:
    """Write every individual run and return the file path."""
    os.makedirs(out_dir, exist_ok=True)
    filename = os.path.join(out_dir, f"benchmark_raw_runs{build_suffix()}.csv")
    with open(filename, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(["n", "run_id", "solutions", "nodes_explored", "time_seconds"])
        for N in N_values:
            for run in results[N].get("raw_runs", []):
                writer.writerow([N, run["run"], run["solutions"], run["nodes"], run["time"]])
    print(f"Saved raw benchmark runs: {filename}")
    return filename
