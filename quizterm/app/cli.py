from __future__ import annotations

"""CLI for quizterm: load a question file and play it in the terminal."""

import argparse
import sys
from typing import Any, Callable, Dict

from .. import __version__
from ..config.config import load_config, validate_config
from ..questions.errors import QuestionFileError, QuestionFormatError
from ..questions.loader import QuestionSet, Skipped, load_questions, read_document, scan_records
from ..stats.stats import format_summary
from .session_runner import SessionRunner


def _build_ui() -> Dict[str, Callable[..., Any]]:
    def ask(prompt: str) -> str:
        return input(prompt)

    def inform(msg: str) -> None:
        print(msg)

    return {"ask": ask, "inform": inform, "error": inform}


def _questions_path(args: argparse.Namespace, cfg: Dict[str, Any]) -> str:
    return args.questions or cfg["quiz"]["questions_path"]


def _load_or_report(path: str) -> QuestionSet | None:
    try:
        return load_questions(path)
    except (QuestionFileError, QuestionFormatError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return None


def _cmd_run(args: argparse.Namespace) -> int:
    if args.explain:
        from .explain import enable as explain_enable
        explain_enable(True)
    cfg = validate_config(load_config(args.config))
    ui_cfg = cfg["ui"]

    if ui_cfg["show_banner"]:
        print("=== Welcome to the Terminal Quiz Game ===")

    questions = _load_or_report(_questions_path(args, cfg))
    if questions is None:
        print("Failed to load questions. Exiting.", file=sys.stderr)
        return 1
    if not questions:
        print("ERROR: No valid questions loaded. Exiting.", file=sys.stderr)
        return 1

    runner = SessionRunner(questions, show_feedback=bool(ui_cfg["show_per_question_feedback"]))
    try:
        result = runner.run(_build_ui())
    except (EOFError, KeyboardInterrupt):
        print("\nQuiz aborted.", file=sys.stderr)
        return 1

    print()
    print(format_summary(result, len(questions), precision=int(cfg["quiz"]["time_precision"])))
    print("Thank you for playing!")
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    cfg = validate_config(load_config(args.config))
    path = _questions_path(args, cfg)
    try:
        outcomes = scan_records(read_document(path))
    except (QuestionFileError, QuestionFormatError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    skipped = [o for o in outcomes if isinstance(o, Skipped)]
    for o in skipped:
        print(f"WARNING: {o.as_warning()}", file=sys.stderr)
    valid = len(outcomes) - len(skipped)
    print(f"{valid} valid question(s), {len(skipped)} skipped.")
    return 0 if valid else 1


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="quizterm", description="Terminal multiple-choice quiz")
    p.add_argument("--version", action="version", version=f"quizterm {__version__}")
    sub = p.add_subparsers(dest="cmd", required=True)

    rp = sub.add_parser("run", help="Play the quiz")
    rp.add_argument("--config", default=None, help="Path to YAML config")
    rp.add_argument("--questions", default=None, help="Question file (overrides quiz.questions_path)")
    rp.add_argument("--explain", action="store_true", help="Print trace events while playing")

    cp = sub.add_parser("check", help="Validate a question file without playing")
    cp.add_argument("--config", default=None, help="Path to YAML config")
    cp.add_argument("--questions", default=None, help="Question file (overrides quiz.questions_path)")

    args = p.parse_args(argv)

    if args.cmd == "run":
        return _cmd_run(args)
    if args.cmd == "check":
        return _cmd_check(args)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
