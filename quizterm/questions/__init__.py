from .errors import (
    QuizError,
    QuestionFileError,
    QuestionFormatError,
    RecordValidationWarning,
    InputValidationError,
)
from .schema import QuestionRecord
from .loader import QuestionSet, Valid, Skipped, read_document, scan_records, load_questions

__all__ = [
    "QuizError",
    "QuestionFileError",
    "QuestionFormatError",
    "RecordValidationWarning",
    "InputValidationError",
    "QuestionRecord",
    "QuestionSet",
    "Valid",
    "Skipped",
    "read_document",
    "scan_records",
    "load_questions",
]
