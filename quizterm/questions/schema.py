from __future__ import annotations

"""Pydantic model for a single quiz question."""

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, ValidationError, model_validator


class QuestionRecord(BaseModel):
    """A validated multiple-choice question.

    File records use the keys ``question``, ``choices`` and ``answer``;
    ``answer`` is the zero-based index of the correct choice.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    text: StrictStr = Field(alias="question")
    choices: Tuple[StrictStr, ...] = Field(min_length=1)
    correct_index: StrictInt = Field(alias="answer")

    @model_validator(mode="after")
    def _answer_in_bounds(self) -> "QuestionRecord":
        if not (0 <= self.correct_index < len(self.choices)):
            raise ValueError(
                f"answer index {self.correct_index} out of range for {len(self.choices)} choice(s)"
            )
        return self

    @property
    def correct_choice(self) -> str:
        return self.choices[self.correct_index]


def describe_validation_error(exc: ValidationError) -> str:
    """Condense a pydantic error into a one-line skip reason."""
    parts = []
    for err in exc.errors():
        if err["type"] == "missing":
            parts.append(f"missing field '{err['loc'][0]}'")
            continue
        if err["type"] == "value_error":
            msg = str(err.get("ctx", {}).get("error", err["msg"]))
        else:
            msg = err["msg"]
        loc = ".".join(str(p) for p in err["loc"])
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts)
