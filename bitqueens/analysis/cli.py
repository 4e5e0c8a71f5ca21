"""Command-line interface for the N-Queens solver and benchmark pipeline.

This module wires together configuration loading, the file-level solve
pipeline, and the benchmark suite. It isolates argument parsing and console
reporting from the search modules so that the rest of the codebase remains
easy to test programmatically.

Commands
--------
- ``solve INPUT``: read N from INPUT, write ``<INPUT without extension>`` +
    ``settings.OUTPUT_SUFFIX`` and print N, the solution count, and the time.
- ``benchmark``: count-only runs over ``settings.N_VALUES`` with CSV and chart
    exports.
- ``--quick-test``: fast regression checks, then exit.
"""
from __future__ import annotations

import argparse
import sys
import tempfile
from pathlib import Path
from typing import Optional, Sequence

from . import settings
from .experiments import run_benchmark
from .reporting import save_benchmark_to_csv, save_raw_runs_to_csv
from config_manager import ConfigManager
from bitqueens.runner import InputFileError, SolveResult, count_solutions, read_board_size, solve_to_file
from bitqueens.symmetry import mirror_placement
from bitqueens.utils import format_placement, is_valid_solution, iter_solution_file, parse_solution_file

DEFAULT_CONFIG = "config.json"

# Reference totals used by the quick regression (OEIS A000170).
KNOWN_COUNTS = {1: 1, 2: 0, 3: 0, 4: 2, 5: 10, 6: 4, 7: 40, 8: 92, 9: 352, 10: 724}

USAGE = "Usage: bitqueens solve <input_file>"


# ------------- Configuration -----------------------------------------------

def apply_configuration(config_path: Optional[str], verbose: bool = False) -> Optional[ConfigManager]:
    """Load configuration and copy its values into ``settings``.

    An explicit ``config_path`` must exist; when it is None the default
    ``config.json`` is used only if present. Returns the ``ConfigManager`` used,
    or None when no file was loaded. ``verbose`` prints the resulting limits.
    """
    if config_path is None:
        if not Path(DEFAULT_CONFIG).exists():
            return None
        config_path = DEFAULT_CONFIG
    config_mgr = ConfigManager(config_path)

    solver_settings = config_mgr.get_solver_settings()
    if solver_settings:
        cap = solver_settings.get("solution_cap", settings.SOLUTION_CAP)
        settings.set_limits(
            enumeration_limit=int(solver_settings.get("enumeration_limit", settings.ENUMERATION_LIMIT)),
            solution_cap=int(cap) if cap is not None else None,
            buffer_size=int(solver_settings.get("buffer_size", settings.BUFFER_SIZE)),
            verbose=verbose,
        )
        settings.OUTPUT_SUFFIX = str(solver_settings.get("output_suffix", settings.OUTPUT_SUFFIX))

    benchmark_settings = config_mgr.get_benchmark_settings()
    if benchmark_settings:
        settings.N_VALUES = [int(n) for n in benchmark_settings.get("N_values", settings.N_VALUES)]
        settings.RUNS_PER_N = int(benchmark_settings.get("runs_per_n", settings.RUNS_PER_N))
        settings.OUT_DIR = benchmark_settings.get("output_dir", settings.OUT_DIR)

    return config_mgr


# ------------- Solve ---------------------------------------------------------

def print_summary(result: SolveResult) -> None:
    """Print the console summary for one solve."""
    if not result.solvable:
        print("No Solution")
        return
    print(f"N = {result.size}")
    print(f"Solutions = {result.solutions}")
    print(f"Time = {result.elapsed_ms} ms")
    if result.capped:
        print(f"Solution cap reached: output truncated to {result.solutions} solutions")


def validate_output(path: Path) -> int:
    """Check every placement of an output file; return the number checked.

    The file is streamed one line at a time, so memory does not grow with the
    number of solutions. Verifies that every line is a valid non-attacking
    placement of the header's board size and that the line count matches the
    header count. Raises ``ValueError`` describing the first problem found.
    """
    lines = iter_solution_file(path)
    _, (size, count) = next(lines)
    checked = 0
    for line_number, placement in lines:
        if len(placement) != size or not is_valid_solution(placement):
            raise ValueError(
                f"Validation failed: line {line_number} is not a valid placement: {format_placement(placement)}"
            )
        checked += 1
    if checked != count:
        raise ValueError(f"Validation failed: header says {count} solutions, file holds {checked}.")
    return checked


def run_solve(args: argparse.Namespace) -> None:
    if args.count_only:
        size = read_board_size(args.input)
        result = count_solutions(size, enumeration_limit=args.enumeration_limit, solution_cap=args.solution_cap)
        print_summary(result)
        return

    result = solve_to_file(
        args.input,
        output_path=args.output,
        enumeration_limit=args.enumeration_limit,
        solution_cap=args.solution_cap,
    )
    print_summary(result)
    if args.validate and result.output_path is not None:
        checked = validate_output(result.output_path)
        print(f"Validation passed: {checked} placements checked")


# ------------- Benchmark -----------------------------------------------------

def run_benchmark_pipeline(args: argparse.Namespace) -> None:
    N_values = args.sizes or list(settings.N_VALUES)
    out_dir = args.out_dir or settings.OUT_DIR

    print(f"Benchmark sizes: {N_values} ({args.runs or settings.RUNS_PER_N} runs each)")
    results = run_benchmark(
        N_values,
        runs=args.runs,
        enumeration_limit=args.enumeration_limit,
        solution_cap=args.solution_cap,
        progress_label="Benchmark",
        validate=args.validate,
    )
    save_benchmark_to_csv(results, N_values, out_dir)
    save_raw_runs_to_csv(results, N_values, out_dir)
    if not args.no_plots:
        from .plots import plot_benchmark

        plot_benchmark(results, N_values, out_dir)


# ------------- Quick regression -------------------------------------------

def run_quick_regression_tests() -> None:
    """Execute fast, deterministic checks of the whole pipeline.

    Verifies that:
    - Count-only runs match the reference totals for N=1..10.
    - Solved files for N=4 and N=5 hold valid placements in a fixed order and
      satisfy the mirror law.
    - The benchmark pipeline writes a non-empty CSV in a temporary folder.
    """
    print("Running quick regression tests (N=1..10)...")

    for size, expected in KNOWN_COUNTS.items():
        result = count_solutions(size)
        if result.solutions != expected:
            raise AssertionError(f"N={size}: expected {expected} solutions, got {result.solutions}.")
    print(f"  Count-only: {len(KNOWN_COUNTS)} sizes match reference totals")

    with tempfile.TemporaryDirectory() as tmpdir:
        outputs = {}
        for size in (4, 5):
            input_path = Path(tmpdir) / f"board{size}.txt"
            input_path.write_text(f"{size}\n")
            result = solve_to_file(input_path)
            assert result.output_path is not None
            outputs[size] = result.output_path
            validate_output(result.output_path)
            _, _, placements = parse_solution_file(result.output_path)
            as_set = {tuple(p) for p in placements}
            for placement in placements:
                if tuple(mirror_placement(placement, size)) not in as_set:
                    raise AssertionError(f"N={size}: mirror of {placement} missing from output.")
        four = outputs[4].read_text()
        if four != "4\n2\n2 4 1 3\n3 1 4 2\n":
            raise AssertionError(f"Unexpected N=4 output: {four!r}")
        print("  End-to-end: N=4 and N=5 output files valid")

        results = run_benchmark([6, 8], runs=1)
        csv_path = Path(save_benchmark_to_csv(results, [6, 8], tmpdir))
        if not csv_path.exists() or csv_path.stat().st_size == 0:
            raise AssertionError("Benchmark CSV was not generated successfully during quick tests.")

    print("Quick regression tests passed.")


# ------------- CLI wiring --------------------------------------------------

def _positive_int(value: str) -> int:
    parsed = int(value)
    if parsed < 1:
        raise argparse.ArgumentTypeError("Value must be >= 1.")
    return parsed


def build_arg_parser() -> argparse.ArgumentParser:
    """Construct the argument parser for the CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="bitqueens",
        description="Enumerate N-Queens solutions with bitmask backtracking.",
    )
    parser.add_argument("--config", default=None, help="Path to configuration file (default: config.json if present).")
    parser.add_argument("--quick-test", action="store_true", help="Run quick regression tests and exit.")
    parser.add_argument("--enumeration-limit", type=_positive_int, help="Board size at or above which symmetry is disabled.")
    parser.add_argument("--solution-cap", type=_positive_int, help="Maximum solutions to record on large boards.")
    subparsers = parser.add_subparsers(dest="command")

    solve = subparsers.add_parser("solve", help="Solve the board size read from a file.")
    solve.add_argument("input", help="Text file whose first token is N.")
    solve.add_argument("--output", "-o", help="Output path (default: input without extension + suffix).")
    solve.add_argument("--count-only", action="store_true", help="Print the count without writing placements.")
    solve.add_argument("--validate", action="store_true", help="Re-read the output file and check every placement.")

    benchmark = subparsers.add_parser("benchmark", help="Time count-only runs across board sizes.")
    benchmark.add_argument("--sizes", nargs="+", type=_positive_int, help="Board sizes (default: config N_values).")
    benchmark.add_argument("--runs", type=_positive_int, help="Runs per size (default: config runs_per_n).")
    benchmark.add_argument("--out-dir", help="Directory for CSV and chart outputs.")
    benchmark.add_argument("--no-plots", action="store_true", help="Skip chart generation.")
    benchmark.add_argument("--validate", action="store_true", help="Check that repeated runs agree.")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    """CLI entry point: parse arguments and dispatch to the chosen command."""
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    try:
        apply_configuration(args.config, verbose=args.quick_test or args.command == "benchmark")
    except FileNotFoundError as exc:
        print(f"Configuration file not found: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    except ValueError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if args.quick_test:
        run_quick_regression_tests()
        return

    if args.command is None:
        print(USAGE, file=sys.stderr)
        raise SystemExit(1)

    try:
        if args.command == "solve":
            run_solve(args)
        else:
            run_benchmark_pipeline(args)
    except FileNotFoundError as exc:
        print(f"Error: input file not found: {exc.filename}", file=sys.stderr)
        print(USAGE, file=sys.stderr)
        raise SystemExit(1) from exc
    except InputFileError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        print(USAGE, file=sys.stderr)
        raise SystemExit(1) from exc
    except (ValueError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    except KeyboardInterrupt:
        print("\nExecution interrupted by user.", file=sys.stderr)
        raise SystemExit(130) from None
