from __future__ import annotations

"""Session stats: per-question accumulation and summary formatting."""

from dataclasses import dataclass, field
from typing import List


@dataclass
class SessionResult:
    """Running totals for one quiz session."""

    total_attempts: int = 0
    score: int = 0
    per_question_time: List[float] = field(default_factory=list)

    @property
    def total_time(self) -> float:
        return sum(self.per_question_time)

    @property
    def average_time(self) -> float:
        if self.total_attempts > 0:
            return self.total_time / self.total_attempts
        return 0.0


def record_answer(result: SessionResult, correct: bool, elapsed: float) -> None:
    """Update stats for a single accepted answer."""
    result.per_question_time.append(float(elapsed))
    result.total_attempts += 1
    if correct:
        result.score += 1


def format_summary(result: SessionResult, total_questions: int, precision: int = 2) -> str:
    """Return a human-readable summary of a session."""
    lines = [
        "=== Quiz Summary ===",
        f"Total Questions: {total_questions}",
        f"Attempts: {result.total_attempts}",
        f"Score: {result.score}",
        f"Total Time Taken: {result.total_time:.{precision}f} seconds",
        f"Average Time per Question: {result.average_time:.{precision}f} seconds",
    ]
    return "\n".join(lines)
