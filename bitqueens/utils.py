"""Utility helpers shared by the solver, the CLI, and the tests.

Representation
--------------
Placements are sequences where ``placement[row]`` is the 1-based column of the
queen on that row, which is also the textual order used in output files.
"""

from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import Iterator, List, Sequence, Tuple, Union

# Board sizes for which no non-attacking arrangement exists.
UNSOLVABLE_SIZES = frozenset({2, 3})

NO_SOLUTION_MARKER: str = "No Solution"


def is_unsolvable(size: int) -> bool:
    """Return True for the board sizes with zero solutions."""
    return size in UNSOLVABLE_SIZES


def conflicts(placement: Sequence[int]) -> int:
    """Count attacking queen pairs in O(N) using per-line counters."""
    col_count: Counter[int] = Counter()
    diag1: Counter[int] = Counter()
    diag2: Counter[int] = Counter()

    for row, column in enumerate(placement):
        col_count[column] += 1
        diag1[column - row] += 1
        diag2[column + row] += 1

    def _pairs(counter: Counter[int]) -> int:
        total = 0
        for count in counter.values():
            if count > 1:
                total += count * (count - 1) // 2
        return total

    return _pairs(col_count) + _pairs(diag1) + _pairs(diag2)


def is_valid_solution(placement: Sequence[int]) -> bool:
    """Return True if ``placement`` is a complete non-attacking arrangement.

    Valid if every value lies in ``1..N`` (N = ``len(placement)``) and no two
    queens share a column or a diagonal. Rows are distinct by representation.
    """
    n = len(placement)
    if n == 0:
        return False
    for column in placement:
        if not isinstance(column, int) or column < 1 or column > n:
            return False
    return conflicts(placement) == 0


def format_placement(placement: Sequence[int]) -> str:
    return " ".join(str(value) for value in placement)


def parse_solution_file(path: Union[str, Path]) -> Tuple[int, int, List[List[int]]]:
    """Read an output file back as ``(size, count, placements)``.

    The no-solution marker parses as ``(0, 0, [])``. Raises ``ValueError`` on a
    malformed header.
    """
    text = Path(path).read_text(encoding="ascii")
    if text.strip() == NO_SOLUTION_MARKER:
        return 0, 0, []
    lines = text.splitlines()
    if len(lines) < 2:
        raise ValueError(f"Malformed solution file {path}: missing header lines.")
    try:
        size = int(lines[0])
        count = int(lines[1])
        placements = [[int(token) for token in line.split()] for line in lines[2:]]
    except ValueError as exc:
        raise ValueError(f"Malformed solution file {path}: {exc}") from exc
    return size, count, placements


def iter_solution_file(path: Union[str, Path]) -> Iterator[Tuple[int, List[int]]]:
    """Stream an output file as ``(line_number, placement)`` pairs.

    The first item is ``(0, [size, count])`` taken from the header; each
    following item is one placement, read a line at a time so memory stays
    bounded by a single line. The no-solution marker yields ``(0, [0, 0])``
    only. Raises ``ValueError`` on a malformed header or line.
    """
    with open(path, "r", encoding="ascii") as f:
        first = f.readline()
        if first.strip() == NO_SOLUTION_MARKER:
            yield 0, [0, 0]
            return
        second = f.readline()
        if not first.endswith("\n") or not second:
            raise ValueError(f"Malformed solution file {path}: missing header lines.")
        try:
            yield 0, [int(first), int(second)]
            for line_number, line in enumerate(f, start=3):
                yield line_number, [int(token) for token in line.split()]
        except ValueError as exc:
            raise ValueError(f"Malformed solution file {path}: {exc}") from exc
