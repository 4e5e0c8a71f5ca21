"""Left/right mirror symmetry reduction on top of the bitmask engine.

Reflecting a board across its vertical axis maps a queen in column ``v`` to
column ``N + 1 - v`` and turns every solution into another solution. A
solution whose first-row queen sits in the left half therefore has a distinct
partner whose first-row queen sits in the right half, so it is enough to seed
the first row with the left-half columns and emit each solution together with
its mirror. On odd boards the middle column maps to itself and is searched
once with the plain engine.

The reduction is only valid when the search enumerates exhaustively, so it is
disabled at or above the enumeration limit and whenever a solution cap is
active (a mirrored pair could otherwise overshoot the cap by one).
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from .engine import SearchContext, search, solve_plain


def mirror_placement(placement: Sequence[int], size: int) -> List[int]:
    """Return the left/right reflection of a 1-based placement.

    The input sequence is not modified.
    """
    return [size + 1 - value for value in placement]


def uses_symmetry(size: int, enumeration_limit: int, solution_cap: Optional[int] = None) -> bool:
    """Return True when ``solve_with_symmetry`` takes the mirrored path."""
    return solution_cap is None and 2 <= size < enumeration_limit


def search_mirrored(ctx: SearchContext, columns: int, diag_left: int, diag_right: int) -> None:
    """Same traversal as ``engine.search``, reporting each hit with its mirror."""
    mask = ctx.full_mask
    if columns == mask:
        ctx.record_pair()
        return

    available = ~(columns | diag_left | diag_right) & mask
    placement = ctx.placement
    while available:
        bit = available & -available
        available ^= bit

        placement.append(bit.bit_length())
        ctx.nodes += 1
        search_mirrored(
            ctx,
            columns | bit,
            ((diag_left | bit) << 1) & mask,
            (diag_right | bit) >> 1,
        )
        placement.pop()


def _seed(ctx: SearchContext, column: int):
    """Place the first-row queen on 0-based ``column`` and return its masks."""
    bit = 1 << column
    ctx.placement.append(column + 1)
    ctx.nodes += 1
    return bit, (bit << 1) & ctx.full_mask, bit >> 1


def solve_with_symmetry(ctx: SearchContext, enumeration_limit: int) -> None:
    """Enumerate every solution of ``ctx.size``, halving the first-row work.

    Emission order: for each left-half seed column in ascending order, every
    solution immediately followed by its mirror; then, on odd boards, the
    solutions seeded on the middle column.
    """
    size = ctx.size
    if not uses_symmetry(size, enumeration_limit, ctx.solution_cap):
        solve_plain(ctx)
        return

    for column in range(size // 2):
        search_mirrored(ctx, *_seed(ctx, column))
        ctx.placement.pop()

    if size % 2 == 1:
        search(ctx, *_seed(ctx, size // 2))
        ctx.placement.pop()
