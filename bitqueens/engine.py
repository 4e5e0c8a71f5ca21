"""Bitmask backtracking engine for the N-Queens problem.

This module implements the plain depth-first search that every other entry
point builds upon. The board state for the next row is encoded with three
integers used as bit sets:

- ``columns``: bit c is set when column c already holds a queen.
- ``diag_left``: columns attacked along the down-left diagonals, shifted one
    position toward the higher bits on every row descent.
- ``diag_right``: columns attacked along the down-right diagonals, shifted one
    position toward the lower bits on every row descent.

Checking whether a column is free is a single ``&`` against the union of the
three masks, and the free columns of a row are enumerated lowest bit first
with the ``x & -x`` idiom, so the search visits solutions in ascending column
order at every branch.

Contract (public API)
---------------------
- ``validate_board_size(size)`` rejects sizes that a 64-bit column word
    cannot represent (``1 <= size <= MAX_BOARD_SIZE``).
- ``SearchContext`` owns every piece of mutable search state: the placement
    path, the solution counter, the early-stop flag, and an optional sink.
- ``search(ctx, columns, diag_left, diag_right)`` explores the subtree below
    the given masks and reports every complete placement into ``ctx``.
- ``solve_plain(ctx)`` runs ``search`` once from the empty board.

Placements are lists of 1-based column indices in row order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .sink import SolutionSink

# Widest board whose columns fit in a single 64-bit word with room for the
# left-diagonal shift.
MAX_BOARD_SIZE: int = 63


def validate_board_size(size: int) -> int:
    """Return ``size`` unchanged or raise ``ValueError`` when out of range."""
    if size < 1:
        raise ValueError(f"Board size must be at least 1 (got {size}).")
    if size > MAX_BOARD_SIZE:
        raise ValueError(
            f"Board size {size} exceeds the supported maximum of {MAX_BOARD_SIZE}: "
            "the column mask would not fit in a 64-bit word."
        )
    return size


def full_mask(size: int) -> int:
    """Return the mask with exactly the lowest ``size`` bits set."""
    return (1 << validate_board_size(size)) - 1


@dataclass
class SearchContext:
    """Mutable state shared by one search run.

    Parameters
    ----------
    size : int
        Board dimension N (validated on construction).
    sink : SolutionSink | None
        Destination for completed placements. ``None`` runs in count-only
        mode.
    solution_cap : int | None
        When set, the search stops cooperatively once ``solutions`` reaches
        this value.
    """

    size: int
    sink: Optional["SolutionSink"] = None
    solution_cap: Optional[int] = None
    full_mask: int = field(init=False)
    placement: List[int] = field(init=False, default_factory=list)
    solutions: int = field(init=False, default=0)
    nodes: int = field(init=False, default=0)
    stopped: bool = field(init=False, default=False)

    def __post_init__(self) -> None:
        self.full_mask = full_mask(self.size)
        if self.solution_cap is not None and self.solution_cap < 1:
            raise ValueError("solution_cap must be >= 1.")

    @property
    def capped(self) -> bool:
        """True when the early stop fired because the cap was reached."""
        return self.stopped and self.solution_cap is not None

    def record(self) -> None:
        """Count the current placement as one solution and emit it."""
        self.solutions += 1
        if self.sink is not None:
            self.sink.append(self.placement)
        self._check_cap()

    def record_pair(self) -> None:
        """Count the current placement and its mirror image together."""
        self.solutions += 2
        if self.sink is not None:
            self.sink.append(self.placement)
            self.sink.append_mirrored(self.placement, self.size)
        self._check_cap()

    def _check_cap(self) -> None:
        if self.solution_cap is not None and self.solutions >= self.solution_cap:
            self.stopped = True


def search(ctx: SearchContext, columns: int, diag_left: int, diag_right: int) -> None:
    """Explore every completion of ``ctx.placement`` under the given masks.

    The placement is restored to its entry state before returning, however
    many solutions the subtree produced.
    """
    if ctx.stopped:
        return

    mask = ctx.full_mask
    if columns == mask:
        ctx.record()
        return

    available = ~(columns | diag_left | diag_right) & mask
    placement = ctx.placement
    while available:
        if ctx.stopped:
            return
        # Isolate and consume the lowest free column.
        bit = available & -available
        available ^= bit

        # For a one-bit word, bit_length() is the trailing-zero count plus
        # one, which is exactly the 1-based column.
        placement.append(bit.bit_length())
        ctx.nodes += 1
        search(
            ctx,
            columns | bit,
            ((diag_left | bit) << 1) & mask,
            (diag_right | bit) >> 1,
        )
        placement.pop()


def solve_plain(ctx: SearchContext) -> None:
    """Run the engine once from the empty board (no symmetry reduction)."""
    search(ctx, 0, 0, 0)
