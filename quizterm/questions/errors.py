from __future__ import annotations

"""Error taxonomy for loading and playing a quiz.

File-level errors are fatal to the run; record-level and input-level
problems are recovered where they happen and never leave their loop.
"""


class QuizError(Exception):
    """Base class for quizterm errors."""


class QuestionFileError(QuizError, OSError):
    """The question file is missing or cannot be read."""


class QuestionFormatError(QuizError, ValueError):
    """The question file is not a parseable array of records."""


class RecordValidationWarning(UserWarning):
    """A single record was dropped during a scan."""


class InputValidationError(QuizError, ValueError):
    """The user's entry is not an acceptable choice number."""
