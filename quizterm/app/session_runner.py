from __future__ import annotations

"""Session runner: drives the interactive question loop.

Console-agnostic: all I/O goes through the ``ui`` callbacks passed to
``run`` so the loop can be driven by scripted input in tests.
"""

import re
import time
from typing import Callable, Dict, Sequence

from ..questions.errors import InputValidationError
from ..questions.schema import QuestionRecord
from ..stats.stats import SessionResult, record_answer
from .explain import trace as xtrace, trace_question

_CHOICE_RE = re.compile(r"[+-]?[0-9]+")


def parse_choice(raw: str, num_choices: int) -> int:
    """Convert a 1-based entry into a zero-based choice index.

    Raises:
        InputValidationError: entry is not an integer or not in 1..num_choices.
    """
    entry = raw.strip()
    # plain ASCII digits with an optional sign
    if not _CHOICE_RE.fullmatch(entry):
        raise InputValidationError("Invalid input, please enter a number.")
    try:
        choice = int(entry)
    except ValueError:
        raise InputValidationError("Invalid input, please enter a number.") from None
    if choice < 1 or choice > num_choices:
        raise InputValidationError(f"Please enter a number between 1 and {num_choices}.")
    return choice - 1


class SessionRunner:
    def __init__(
        self,
        questions: Sequence[QuestionRecord],
        *,
        clock: Callable[[], float] = time.perf_counter,
        show_feedback: bool = True,
    ) -> None:
        self.questions = tuple(questions)
        self.clock = clock
        self.show_feedback = show_feedback

    def _ask_choice(self, q: QuestionRecord, ask: Callable[[str], str], error: Callable[[str], None], index: int) -> int:
        n = len(q.choices)
        while True:
            ans = ask(f"Your answer (enter option number 1-{n}): ")
            try:
                return parse_choice(ans, n)
            except InputValidationError as e:
                xtrace("input_rejected", {"index": index, "input": ans})
                error(str(e))

    def run(self, ui: Dict[str, Callable]) -> SessionResult:
        ask = ui["ask"]
        inform = ui["inform"]
        error = ui.get("error", inform)

        result = SessionResult()
        total = len(self.questions)

        for i, q in enumerate(self.questions, start=1):
            inform(f"\nQuestion {i} / {total}")
            inform(q.text)
            for idx, choice in enumerate(q.choices, start=1):
                inform(f"{idx}. {choice}")
            trace_question("question_shown", i, q)

            # Only the interval up to the accepted entry counts
            start = self.clock()
            picked = self._ask_choice(q, ask, error, i)
            elapsed = self.clock() - start

            is_correct = picked == q.correct_index
            record_answer(result, is_correct, elapsed)
            trace_question("answer_graded", i, q, picked=picked, correct=is_correct, elapsed=round(elapsed, 3))

            if self.show_feedback:
                if is_correct:
                    inform("Correct!")
                else:
                    inform(f"Wrong. Correct answer was: {q.correct_choice}")

        xtrace("session_ended", {"attempts": result.total_attempts, "score": result.score, "total_time": round(result.total_time, 3)})
        return result
