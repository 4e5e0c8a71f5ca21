"""Quick regression tests for the solver pipeline."""

import contextlib
import io
from pathlib import Path
import sys
import unittest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from bitqueens.analysis.cli import run_quick_regression_tests


class QuickRegressionTests(unittest.TestCase):
    """Verify that the lightweight regression checks pass."""

    def test_counts_files_and_csv_generation(self):
        """Ensure counts, N=4/N=5 output files, and benchmark CSV export succeed."""
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            run_quick_regression_tests()
        self.assertIn("Quick regression tests passed.", out.getvalue())


if __name__ == "__main__":
    unittest.main()
