"""Bitmask N-Queens enumeration with mirror symmetry and buffered output."""

from .engine import MAX_BOARD_SIZE, SearchContext, full_mask, search, solve_plain, validate_board_size
from .runner import InputFileError, SolveResult, count_solutions, derive_output_path, read_board_size, solve_to_file
from .sink import SolutionSink
from .symmetry import mirror_placement, search_mirrored, solve_with_symmetry, uses_symmetry
from .utils import (
    NO_SOLUTION_MARKER,
    conflicts,
    is_unsolvable,
    is_valid_solution,
    iter_solution_file,
    parse_solution_file,
)

__all__ = [
    "InputFileError",
    "MAX_BOARD_SIZE",
    "NO_SOLUTION_MARKER",
    "SearchContext",
    "SolutionSink",
    "SolveResult",
    "conflicts",
    "count_solutions",
    "derive_output_path",
    "full_mask",
    "is_unsolvable",
    "is_valid_solution",
    "iter_solution_file",
    "mirror_placement",
    "parse_solution_file",
    "read_board_size",
    "search",
    "search_mirrored",
    "solve_plain",
    "solve_to_file",
    "solve_with_symmetry",
    "uses_symmetry",
    "validate_board_size",
]
