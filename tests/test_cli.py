import contextlib
import io
import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from quizterm.app import explain
from quizterm.app.cli import main


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.dir = Path(self._tmp.name)
        self.addCleanup(explain.enable, False)

    def write_questions(self, content, name: str = "questions.json") -> str:
        p = self.dir / name
        p.write_text(content if isinstance(content, str) else json.dumps(content), encoding="utf-8")
        return str(p)

    def invoke(self, argv, answers=()):
        out, err = io.StringIO(), io.StringIO()
        with mock.patch("builtins.input", side_effect=list(answers)):
            with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
                code = main(argv)
        return code, out.getvalue(), err.getvalue()

    def test_run_example_session(self) -> None:
        path = self.write_questions([
            {"question": "2+2?", "choices": ["3", "4", "5"], "answer": 1},
            {"question": "Bad", "choices": ["a"], "answer": 5},
        ])
        code, out, err = self.invoke(["run", "--questions", path], answers=["abc", "7", "2"])
        self.assertEqual(code, 0)
        self.assertIn("=== Welcome to the Terminal Quiz Game ===", out)
        self.assertIn("Question 1 / 1", out)
        self.assertIn("Invalid input, please enter a number.", out)
        self.assertIn("Please enter a number between 1 and 3.", out)
        self.assertIn("Correct!", out)
        self.assertIn("Total Questions: 1", out)
        self.assertIn("Attempts: 1", out)
        self.assertIn("Score: 1", out)
        self.assertIn("Thank you for playing!", out)
        self.assertIn("WARNING: question #2 skipped", err)

    def test_run_missing_file_exits_1(self) -> None:
        code, _out, err = self.invoke(["run", "--questions", str(self.dir / "missing.json")])
        self.assertEqual(code, 1)
        self.assertIn("ERROR: Could not open questions file", err)

    def test_run_non_array_exits_1(self) -> None:
        path = self.write_questions({"question": "x", "choices": ["a"], "answer": 0})
        code, _out, err = self.invoke(["run", "--questions", path])
        self.assertEqual(code, 1)
        self.assertIn("Expected an array", err)

    def test_run_empty_array_exits_1(self) -> None:
        path = self.write_questions([])
        code, _out, err = self.invoke(["run", "--questions", path])
        self.assertEqual(code, 1)
        self.assertIn("No valid questions loaded", err)

    def test_run_all_records_invalid_exits_1(self) -> None:
        path = self.write_questions([{"question": "x"}])
        code, _out, _err = self.invoke(["run", "--questions", path])
        self.assertEqual(code, 1)

    def test_run_eof_aborts(self) -> None:
        path = self.write_questions([{"question": "x", "choices": ["a"], "answer": 0}])
        out, err = io.StringIO(), io.StringIO()
        with mock.patch("builtins.input", side_effect=EOFError):
            with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
                code = main(["run", "--questions", path])
        self.assertEqual(code, 1)
        self.assertIn("Quiz aborted.", err.getvalue())

    def test_run_uses_config_path(self) -> None:
        qpath = self.write_questions([{"question": "x", "choices": ["a", "b"], "answer": 0}], name="mine.json")
        cfg = self.dir / "cfg.yml"
        cfg.write_text(f"quiz:\n  questions_path: {json.dumps(qpath)}\nui:\n  show_banner: false\n", encoding="utf-8")
        code, out, _err = self.invoke(["run", "--config", str(cfg)], answers=["2"])
        self.assertEqual(code, 0)
        self.assertNotIn("Welcome", out)
        self.assertIn("Wrong. Correct answer was: a", out)
        self.assertIn("Score: 0", out)

    def test_run_explain_traces(self) -> None:
        path = self.write_questions([{"question": "x", "choices": ["a"], "answer": 0}])
        code, out, _err = self.invoke(["run", "--questions", path, "--explain"], answers=["1"])
        self.assertEqual(code, 0)
        self.assertIn("[EXPLAIN] questions_loaded", out)
        self.assertIn("[EXPLAIN] answer_graded", out)
        self.assertIn("[EXPLAIN] session_ended", out)

    def test_check_counts(self) -> None:
        path = self.write_questions([
            {"question": "ok", "choices": ["a"], "answer": 0},
            {"question": "bad", "choices": ["a"], "answer": 1},
        ])
        code, out, err = self.invoke(["check", "--questions", path])
        self.assertEqual(code, 0)
        self.assertIn("1 valid question(s), 1 skipped.", out)
        self.assertIn("WARNING: question #2 skipped", err)

    def test_check_no_valid_exits_1(self) -> None:
        path = self.write_questions([])
        code, out, _err = self.invoke(["check", "--questions", path])
        self.assertEqual(code, 1)
        self.assertIn("0 valid question(s), 0 skipped.", out)

    def test_check_malformed_exits_1(self) -> None:
        path = self.write_questions("[1, 2")
        code, _out, err = self.invoke(["check", "--questions", path])
        self.assertEqual(code, 1)
        self.assertIn("ERROR: Error parsing JSON", err)

    def test_run_deeply_nested_file_reports_error(self) -> None:
        path = self.write_questions("[" * 200000)
        code, _out, err = self.invoke(["run", "--questions", path])
        self.assertEqual(code, 1)
        self.assertIn("ERROR: Error parsing JSON", err)
        self.assertNotIn("Traceback", err)

    def test_version(self) -> None:
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            with self.assertRaises(SystemExit) as cm:
                main(["--version"])
        self.assertEqual(cm.exception.code, 0)
        self.assertIn("quizterm", out.getvalue())


if __name__ == "__main__":
    unittest.main()
