"""Tests for the mirror symmetry driver."""

from pathlib import Path
import sys
import unittest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from bitqueens.engine import SearchContext, solve_plain
from bitqueens.symmetry import mirror_placement, solve_with_symmetry, uses_symmetry
from bitqueens.utils import is_valid_solution

from tests.test_engine import KNOWN_COUNTS, ListSink


def run(size, enumeration_limit=21, solution_cap=None):
    sink = ListSink()
    ctx = SearchContext(size, sink=sink, solution_cap=solution_cap)
    solve_with_symmetry(ctx, enumeration_limit)
    return ctx, sink.lines


class MirrorPlacementTests(unittest.TestCase):
    def test_reflects_columns(self):
        self.assertEqual(mirror_placement([2, 4, 1, 3], 4), [3, 1, 4, 2])
        self.assertEqual(mirror_placement([1], 1), [1])

    def test_does_not_mutate_input(self):
        placement = [1, 5, 8, 6, 3, 7, 2, 4]
        mirrored = mirror_placement(placement, 8)
        self.assertEqual(placement, [1, 5, 8, 6, 3, 7, 2, 4])
        self.assertEqual(mirrored, [8, 4, 1, 3, 6, 2, 7, 5])


class UsesSymmetryTests(unittest.TestCase):
    def test_threshold_boundary(self):
        self.assertTrue(uses_symmetry(20, 21))
        self.assertFalse(uses_symmetry(21, 21))

    def test_degenerate_and_capped_boards(self):
        self.assertFalse(uses_symmetry(1, 21))
        self.assertFalse(uses_symmetry(8, 21, solution_cap=5))


class SymmetryDriverTests(unittest.TestCase):
    def test_counts_match_reference(self):
        for size, expected in KNOWN_COUNTS.items():
            ctx, lines = run(size)
            self.assertEqual(ctx.solutions, expected, f"N={size}")
            self.assertEqual(len(lines), expected)

    def test_same_solution_set_as_plain_search(self):
        for size in (5, 6, 7, 8, 9):
            _, mirrored = run(size)
            plain_sink = ListSink()
            solve_plain(SearchContext(size, sink=plain_sink))
            self.assertEqual(sorted(mirrored), plain_sink.lines, f"N={size}")
            self.assertEqual(len({tuple(line) for line in mirrored}), len(mirrored))

    def test_four_queens_order(self):
        _, lines = run(4)
        self.assertEqual(lines, [[2, 4, 1, 3], [3, 1, 4, 2]])

    def test_each_found_solution_is_followed_by_its_mirror(self):
        size = 8
        _, lines = run(size)
        for index in range(0, len(lines), 2):
            found, partner = lines[index], lines[index + 1]
            self.assertLessEqual(found[0], size // 2)
            self.assertEqual(partner, mirror_placement(found, size))
            self.assertNotEqual(found, partner)

    def test_odd_board_middle_column_searched_once_at_the_end(self):
        size = 5
        ctx, lines = run(size)
        self.assertEqual(ctx.solutions, 10)
        self.assertEqual(lines[-2:], [[3, 1, 4, 2, 5], [3, 5, 2, 4, 1]])
        self.assertTrue(all(line[0] != 3 for line in lines[:-2]))
        self.assertEqual(ctx.placement, [])

    def test_mirror_law_holds_on_emitted_set(self):
        for size in (6, 7, 9):
            _, lines = run(size)
            emitted = {tuple(line) for line in lines}
            for line in lines:
                self.assertIn(tuple(mirror_placement(line, size)), emitted)
                self.assertTrue(is_valid_solution(line))

    def test_threshold_switches_to_plain_order(self):
        _, at_limit = run(8, enumeration_limit=8)
        self.assertEqual(at_limit, sorted(at_limit))
        _, below_limit = run(7, enumeration_limit=8)
        self.assertNotEqual(below_limit, sorted(below_limit))
        self.assertEqual(len(at_limit), 92)
        self.assertEqual(len(below_limit), 40)

    def test_cap_forces_plain_path_and_exact_budget(self):
        ctx, lines = run(8, enumeration_limit=8, solution_cap=5)
        self.assertEqual(ctx.solutions, 5)
        self.assertEqual(len(lines), 5)
        self.assertTrue(ctx.capped)


if __name__ == "__main__":
    unittest.main()
