from __future__ import annotations

"""Question loading: read a question file and keep the playable records.

Two failure levels are kept apart on purpose:

- the file as a whole (unreadable, unparseable, top level not an array)
  raises and nothing is returned;
- a single record (missing or mistyped field, answer index out of
  range) is skipped with a warning and the scan moves on.

An empty result is still a successful load. Whether zero questions is
fatal is up to the caller.
"""

import json
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, List, Tuple, Union

import yaml
from pydantic import ValidationError

from ..app.explain import trace as xtrace
from .errors import QuestionFileError, QuestionFormatError, RecordValidationWarning
from .schema import QuestionRecord, describe_validation_error

QuestionSet = Tuple[QuestionRecord, ...]

YAML_SUFFIXES = {".yml", ".yaml"}


@dataclass(frozen=True)
class Valid:
    index: int
    record: QuestionRecord


@dataclass(frozen=True)
class Skipped:
    index: int
    reason: str

    def as_warning(self) -> RecordValidationWarning:
        return RecordValidationWarning(f"question #{self.index + 1} skipped: {self.reason}")


ScanOutcome = Union[Valid, Skipped]


def _print_warning(w: RecordValidationWarning) -> None:
    print(f"WARNING: {w}", file=sys.stderr)


def read_document(path: Union[str, Path]) -> Any:
    """Read and parse a question file.

    ``.yml``/``.yaml`` files are parsed as YAML, everything else as JSON.

    Raises:
        QuestionFileError: the file cannot be opened or read.
        QuestionFormatError: the content is not valid UTF-8 or cannot be parsed.
    """
    p = Path(path)
    try:
        raw = p.read_bytes()
    except OSError as e:
        raise QuestionFileError(f"Could not open questions file: {p} ({e.strerror or e})") from e

    try:
        text = raw.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise QuestionFormatError(f"Questions file is not valid UTF-8: {p} ({e})") from e

    if p.suffix.lower() in YAML_SUFFIXES:
        try:
            return yaml.safe_load(text)
        except (yaml.YAMLError, ValueError, RecursionError) as e:
            raise QuestionFormatError(f"Error parsing YAML in {p}: {e}") from e
    try:
        return json.loads(text)
    except (ValueError, RecursionError) as e:
        raise QuestionFormatError(f"Error parsing JSON in {p}: {e}") from e


def scan_records(document: Any) -> List[ScanOutcome]:
    """Validate each element of a parsed document, in order.

    Raises:
        QuestionFormatError: the top level is not an array.
    """
    if not isinstance(document, list):
        raise QuestionFormatError(
            f"Invalid questions format. Expected an array, got {type(document).__name__}."
        )

    outcomes: List[ScanOutcome] = []
    for i, item in enumerate(document):
        if not isinstance(item, dict):
            outcomes.append(Skipped(i, f"record is not an object ({type(item).__name__})"))
            continue
        try:
            record = QuestionRecord.model_validate(item)
        except ValidationError as e:
            outcomes.append(Skipped(i, describe_validation_error(e)))
            continue
        outcomes.append(Valid(i, record))
    return outcomes


def load_questions(
    path: Union[str, Path],
    *,
    warn: Callable[[RecordValidationWarning], None] = _print_warning,
) -> QuestionSet:
    """Load the playable questions from ``path`` in file order.

    Skipped records are reported through ``warn``. File-level errors
    propagate; no partial result is returned in that case.
    """
    outcomes = scan_records(read_document(path))

    records: List[QuestionRecord] = []
    for outcome in outcomes:
        if isinstance(outcome, Skipped):
            xtrace("record_skipped", {"index": outcome.index, "reason": outcome.reason})
            warn(outcome.as_warning())
            continue
        records.append(outcome.record)

    xtrace("questions_loaded", {"path": str(path), "valid": len(records), "skipped": len(outcomes) - len(records)})
    return tuple(records)
