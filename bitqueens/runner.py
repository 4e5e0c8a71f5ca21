"""File-level pipeline: read N, run the search, write the output file.

The output file is created only after the search completed, so a usage error
or a failure to allocate scratch storage never leaves a partial file behind.

Output format
-------------
- Unsolvable sizes: the single literal ``No Solution`` and nothing else.
- Otherwise: ``N``, the solution count, then one placement per line.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from time import perf_counter
from typing import Optional, Union

from .analysis import settings
from .engine import SearchContext, validate_board_size
from .sink import SolutionSink
from .symmetry import solve_with_symmetry, uses_symmetry
from .utils import NO_SOLUTION_MARKER, is_unsolvable

PathLike = Union[str, Path]


class InputFileError(ValueError):
    """The input file exists but does not start with an integer board size."""


@dataclass
class SolveResult:
    size: int
    solutions: int
    elapsed: float
    nodes: int = 0
    solvable: bool = True
    symmetric: bool = False
    capped: bool = False
    output_path: Optional[Path] = None

    @property
    def elapsed_ms(self) -> int:
        return int(self.elapsed * 1000)


def read_board_size(path: PathLike) -> int:
    """Parse the board size from the first token of a text file.

    Raises
    ------
    FileNotFoundError / OSError
        If the file cannot be read.
    InputFileError
        If the file is empty or its first token is not an integer.
    """
    text = Path(path).read_text(encoding="utf-8")
    tokens = text.split()
    if not tokens:
        raise InputFileError(f"Invalid input file {path}: expected a board size, found nothing.")
    try:
        return int(tokens[0])
    except ValueError as exc:
        raise InputFileError(f"Invalid input file {path}: {tokens[0]!r} is not an integer.") from exc


def derive_output_path(input_path: PathLike, suffix: Optional[str] = None) -> Path:
    """Strip the input file's extension and append the output suffix."""
    if suffix is None:
        suffix = settings.OUTPUT_SUFFIX
    path = Path(input_path)
    stem = path.with_suffix("") if path.suffix else path
    return stem.with_name(stem.name + suffix)


def _effective_cap(size: int, enumeration_limit: int, solution_cap: Optional[int]) -> Optional[int]:
    # The cap only bounds large boards; below the limit every solution is wanted.
    return solution_cap if size >= enumeration_limit else None


def _write_output(destination: Path, header: bytes, sink: SolutionSink) -> None:
    """Write header and sink contents to a sibling file, then move it into place.

    A failure while copying removes the partial file, so ``destination`` is
    either complete or untouched.
    """
    partial = destination.with_name(destination.name + ".part")
    try:
        with open(partial, "wb") as out:
            out.write(header)
            sink.copy_to(out)
        os.replace(partial, destination)
    except BaseException:
        partial.unlink(missing_ok=True)
        raise


def count_solutions(
    size: int,
    enumeration_limit: Optional[int] = None,
    solution_cap: Optional[int] = None,
) -> SolveResult:
    """Run the search without recording placements and return the count."""
    if enumeration_limit is None:
        enumeration_limit = settings.ENUMERATION_LIMIT
    if solution_cap is None:
        solution_cap = settings.SOLUTION_CAP
    validate_board_size(size)
    start = perf_counter()
    if is_unsolvable(size):
        return SolveResult(size=size, solutions=0, elapsed=perf_counter() - start, solvable=False)

    cap = _effective_cap(size, enumeration_limit, solution_cap)
    ctx = SearchContext(size, solution_cap=cap)
    solve_with_symmetry(ctx, enumeration_limit)
    return SolveResult(
        size=size,
        solutions=ctx.solutions,
        elapsed=perf_counter() - start,
        nodes=ctx.nodes,
        symmetric=uses_symmetry(size, enumeration_limit, cap),
        capped=ctx.capped,
    )


def solve_to_file(
    input_path: PathLike,
    output_path: Optional[PathLike] = None,
    enumeration_limit: Optional[int] = None,
    solution_cap: Optional[int] = None,
    buffer_size: Optional[int] = None,
) -> SolveResult:
    """Solve the board size found in ``input_path`` and write the output file.

    Parameters
    ----------
    input_path : str | Path
        Text file whose first token is N.
    output_path : str | Path | None
        Destination; derived from ``input_path`` when omitted.
    enumeration_limit, solution_cap, buffer_size : optional
        Overrides for the corresponding ``settings`` values.

    Returns
    -------
    SolveResult
        Count, timing, the path written, and which strategy ran.
    """
    if enumeration_limit is None:
        enumeration_limit = settings.ENUMERATION_LIMIT
    if solution_cap is None:
        solution_cap = settings.SOLUTION_CAP
    if buffer_size is None:
        buffer_size = settings.BUFFER_SIZE

    start = perf_counter()
    size = read_board_size(input_path)
    destination = Path(output_path) if output_path is not None else derive_output_path(input_path)
    validate_board_size(size)

    if is_unsolvable(size):
        destination.write_text(NO_SOLUTION_MARKER, encoding="ascii")
        return SolveResult(
            size=size,
            solutions=0,
            elapsed=perf_counter() - start,
            solvable=False,
            output_path=destination,
        )

    cap = _effective_cap(size, enumeration_limit, solution_cap)
    with SolutionSink(buffer_size) as sink:
        ctx = SearchContext(size, sink=sink, solution_cap=cap)
        solve_with_symmetry(ctx, enumeration_limit)
        _write_output(destination, f"{size}\n{ctx.solutions}\n".encode("ascii"), sink)

    return SolveResult(
        size=size,
        solutions=ctx.solutions,
        elapsed=perf_counter() - start,
        nodes=ctx.nodes,
        symmetric=uses_symmetry(size, enumeration_limit, cap),
        capped=ctx.capped,
        output_path=destination,
    )
