"""Tests for configuration loading and the command-line entry point."""

import contextlib
import io
import json
from pathlib import Path
import sys
import tempfile
import unittest
from unittest import mock

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from bitqueens.analysis import settings
from bitqueens.analysis.cli import apply_configuration, main, validate_output
from bitqueens.utils import iter_solution_file

_SAVED = ("ENUMERATION_LIMIT", "SOLUTION_CAP", "BUFFER_SIZE", "OUTPUT_SUFFIX", "N_VALUES", "RUNS_PER_N", "OUT_DIR")


class CliTestCase(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmpdir = Path(self._tmp.name)
        self._saved = {name: getattr(settings, name) for name in _SAVED}

    def tearDown(self):
        for name, value in self._saved.items():
            setattr(settings, name, value)
        self._tmp.cleanup()

    def run_main(self, argv):
        out, err = io.StringIO(), io.StringIO()
        code = 0
        with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
            try:
                main(argv)
            except SystemExit as exc:
                code = exc.code
        return code, out.getvalue(), err.getvalue()

    def write_input(self, content, name="board.txt"):
        path = self.tmpdir / name
        path.write_text(content)
        return path


class ApplyConfigurationTests(CliTestCase):
    def test_values_are_copied_into_settings(self):
        config_path = self.tmpdir / "config.json"
        config_path.write_text(json.dumps({
            "solver_settings": {"enumeration_limit": 10, "solution_cap": 50, "buffer_size": 128, "output_suffix": ".sol"},
            "benchmark_settings": {"N_values": [4, 5], "runs_per_n": 2, "output_dir": "bench"},
        }))
        with contextlib.redirect_stdout(io.StringIO()):
            config_mgr = apply_configuration(str(config_path))
        self.assertIsNotNone(config_mgr)
        self.assertEqual(settings.ENUMERATION_LIMIT, 10)
        self.assertEqual(settings.SOLUTION_CAP, 50)
        self.assertEqual(settings.BUFFER_SIZE, 128)
        self.assertEqual(settings.OUTPUT_SUFFIX, ".sol")
        self.assertEqual(settings.N_VALUES, [4, 5])
        self.assertEqual(settings.RUNS_PER_N, 2)
        self.assertEqual(settings.OUT_DIR, "bench")

    def test_explicit_missing_config_is_an_error(self):
        with self.assertRaises(FileNotFoundError):
            apply_configuration(str(self.tmpdir / "nope.json"))

    def test_quiet_limits_print_nothing(self):
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            settings.set_limits(enumeration_limit=12, buffer_size=256, verbose=False)
        self.assertEqual(out.getvalue(), "")
        self.assertEqual(settings.ENUMERATION_LIMIT, 12)
        self.assertEqual(settings.BUFFER_SIZE, 256)

    def test_verbose_configuration_prints_limits(self):
        config_path = self.tmpdir / "config.json"
        config_path.write_text(json.dumps({"solver_settings": {"enumeration_limit": 9}}))
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            apply_configuration(str(config_path), verbose=True)
        self.assertIn("Search limits configured", out.getvalue())

    def test_invalid_limits_are_rejected(self):
        config_path = self.tmpdir / "config.json"
        config_path.write_text(json.dumps({"solver_settings": {"enumeration_limit": 0}}))
        with self.assertRaises(ValueError):
            apply_configuration(str(config_path))


class SolveCommandTests(CliTestCase):
    def test_prints_summary_and_writes_file(self):
        input_path = self.write_input("8")
        code, out, _ = self.run_main(["solve", str(input_path)])
        self.assertEqual(code, 0)
        self.assertIn("N = 8", out)
        self.assertIn("Solutions = 92", out)
        self.assertIn("Time = ", out)
        self.assertTrue((self.tmpdir / "board_output.txt").exists())

    def test_unsolvable_is_success(self):
        code, out, _ = self.run_main(["solve", str(self.write_input("3"))])
        self.assertEqual(code, 0)
        self.assertIn("No Solution", out)

    def test_missing_input_is_usage_error(self):
        code, _, err = self.run_main(["solve", str(self.tmpdir / "missing.txt")])
        self.assertEqual(code, 1)
        self.assertIn("Usage", err)
        self.assertFalse((self.tmpdir / "missing_output.txt").exists())

    def test_non_numeric_input_is_usage_error(self):
        code, _, err = self.run_main(["solve", str(self.write_input("queens"))])
        self.assertEqual(code, 1)
        self.assertIn("not an integer", err)
        self.assertIn("Usage", err)

    def test_board_too_large_is_range_error(self):
        code, _, err = self.run_main(["solve", str(self.write_input("64"))])
        self.assertEqual(code, 1)
        self.assertIn("64-bit", err)
        self.assertNotIn("Usage", err)

    def test_temp_storage_failure_is_an_error_without_output(self):
        input_path = self.write_input("8")
        with mock.patch("bitqueens.sink.tempfile.TemporaryFile", side_effect=OSError("no space left on device")):
            code, out, err = self.run_main(["solve", str(input_path)])
        self.assertEqual(code, 1)
        self.assertIn("Error: no space left on device", err)
        self.assertNotIn("Usage", err)
        self.assertNotIn("Solutions", out)
        self.assertFalse((self.tmpdir / "board_output.txt").exists())

    def test_summary_is_not_preceded_by_limits(self):
        code, out, _ = self.run_main(["solve", str(self.write_input("4"))])
        self.assertEqual(code, 0)
        self.assertTrue(out.startswith("N = 4\n"), out)
        self.assertNotIn("Search limits configured", out)

    def test_no_command_prints_usage(self):
        code, _, err = self.run_main([])
        self.assertEqual(code, 1)
        self.assertIn("Usage", err)

    def test_validate_flag(self):
        code, out, _ = self.run_main(["solve", str(self.write_input("6")), "--validate"])
        self.assertEqual(code, 0)
        self.assertIn("Validation passed: 4 placements checked", out)

    def test_count_only_writes_no_file(self):
        code, out, _ = self.run_main(["solve", str(self.write_input("7")), "--count-only"])
        self.assertEqual(code, 0)
        self.assertIn("Solutions = 40", out)
        self.assertFalse((self.tmpdir / "board_output.txt").exists())

    def test_cap_flag_reports_truncation(self):
        argv = ["--enumeration-limit", "6", "--solution-cap", "2", "solve", str(self.write_input("8"))]
        code, out, _ = self.run_main(argv)
        self.assertEqual(code, 0)
        self.assertIn("Solutions = 2", out)
        self.assertIn("Solution cap reached", out)

    def test_missing_explicit_config(self):
        code, _, err = self.run_main(["--config", str(self.tmpdir / "nope.json"), "solve", str(self.write_input("4"))])
        self.assertEqual(code, 1)
        self.assertIn("Configuration file not found", err)


class ValidateOutputTests(CliTestCase):
    def test_detects_attacking_placement(self):
        path = self.tmpdir / "bad.txt"
        path.write_text("4\n1\n1 2 3 4\n")
        with self.assertRaises(ValueError):
            validate_output(path)

    def test_detects_count_mismatch(self):
        path = self.tmpdir / "bad.txt"
        path.write_text("4\n2\n2 4 1 3\n")
        with self.assertRaises(ValueError):
            validate_output(path)

    def test_detects_wrong_board_size(self):
        path = self.tmpdir / "bad.txt"
        path.write_text("5\n1\n2 4 1 3\n")
        with self.assertRaisesRegex(ValueError, "line 3"):
            validate_output(path)

    def test_counts_placements_of_a_solved_file(self):
        self.run_main(["solve", str(self.write_input("8"))])
        self.assertEqual(validate_output(self.tmpdir / "board_output.txt"), 92)


class IterSolutionFileTests(CliTestCase):
    def test_header_comes_first_and_lines_are_read_lazily(self):
        path = self.tmpdir / "four.txt"
        path.write_text("4\n2\n2 4 1 3\nnot a placement\n")
        lines = iter_solution_file(path)
        self.assertEqual(next(lines), (0, [4, 2]))
        self.assertEqual(next(lines), (3, [2, 4, 1, 3]))
        with self.assertRaises(ValueError):
            next(lines)

    def test_no_solution_marker(self):
        path = self.tmpdir / "none.txt"
        path.write_text("No Solution")
        self.assertEqual(list(iter_solution_file(path)), [(0, [0, 0])])

    def test_missing_header_line(self):
        path = self.tmpdir / "short.txt"
        path.write_text("4")
        with self.assertRaises(ValueError):
            next(iter_solution_file(path))


if __name__ == "__main__":
    unittest.main()
