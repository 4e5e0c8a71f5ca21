"""Global settings for the N-Queens solver and its benchmark pipeline.

This module centralizes tunable constants used across the package. Values can
be overridden at runtime via the configuration loader in
`bitqueens.analysis.cli.apply_configuration` or the CLI flags; callers read
them at call time through the module (``settings.ENUMERATION_LIMIT``) so
overrides take effect.
"""
from __future__ import annotations

from typing import List, Optional
from datetime import datetime

# Board size at or above which the symmetry reduction is disabled and the
# plain engine runs once from the empty board.
ENUMERATION_LIMIT: int = 21

# Maximum number of solutions to record on large boards (None = no cap).
# Only applies at or above ENUMERATION_LIMIT.
SOLUTION_CAP: Optional[int] = None

# Bytes buffered in memory before the solution sink flushes to scratch storage
BUFFER_SIZE: int = 65536

# Appended to the input path (extension stripped) to name the output file
OUTPUT_SUFFIX: str = "_output.txt"

# Benchmark pipeline ----------------------------------------------------------

# Board sizes to evaluate (in ascending order) for scalability analysis
N_VALUES: List[int] = [4, 6, 8, 10, 11, 12]

# Count-only runs per N (the search is deterministic; repeats smooth timing noise)
RUNS_PER_N: int = 3

# Output directory for CSV and charts
OUT_DIR: str = "results_nqueens_benchmark"

# Output naming policy --------------------------------------------------------

# When True, benchmark CSVs and charts include a datestamp suffix
# (e.g., _20251113-142530) shared by every artifact of the same run.
DATE_IN_FILENAMES: bool = True

# Unique run identifier used for filename stamping; set once at import time.
RUN_ID: str = datetime.now().strftime("%Y%m%d-%H%M%S")

# Optional run labeling to avoid overwriting outputs
RUN_TAG: Optional[str] = None


def set_limits(
        enumeration_limit: int = 21,
        solution_cap: Optional[int] = None,
        buffer_size: int = 65536,
        verbose: bool = True,
) -> None:
        """Configure the search limits used by the solver.

        Parameters
        - enumeration_limit: board size at or above which the symmetry
            reduction is disabled.
        - solution_cap: maximum solutions recorded on large boards (None
            disables the cap).
        - buffer_size: bytes buffered before the solution sink flushes.
        - verbose: print the active limits (off for the solve summary).

        Side effects
        - Updates module-level globals and, when ``verbose``, prints a concise
            summary to stdout to make the active limits explicit at run start.
        """
        global ENUMERATION_LIMIT, SOLUTION_CAP, BUFFER_SIZE
        if enumeration_limit < 1:
                raise ValueError("enumeration_limit must be >= 1.")
        if solution_cap is not None and solution_cap < 1:
                raise ValueError("solution_cap must be >= 1.")
        if buffer_size < 1:
                raise ValueError("buffer_size must be >= 1.")
        ENUMERATION_LIMIT = enumeration_limit
        SOLUTION_CAP = solution_cap
        BUFFER_SIZE = buffer_size

        if not verbose:
                return
        print("Search limits configured:")
        print(f"   - Enumeration limit: N >= {ENUMERATION_LIMIT} uses the plain search")
        print(f"   - Solution cap: {SOLUTION_CAP}" if SOLUTION_CAP else "   - Solution cap: unlimited")
        print(f"   - Buffer size: {BUFFER_SIZE} bytes")
