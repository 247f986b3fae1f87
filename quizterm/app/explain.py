from __future__ import annotations

"""Explain mode: terse trace lines at quiz milestones.

Enabled with the ``--explain`` CLI flag. Each event is one line of JSON
on stdout so a run can be followed without a debugger. Question records
in a payload are written with their file keys (``question``, ``choices``,
``answer``).
"""

import json
from pathlib import Path
from typing import Any, Dict

from pydantic import BaseModel

_ENABLED = False


def enable(flag: bool = True) -> None:
    global _ENABLED
    _ENABLED = bool(flag)


def enabled() -> bool:
    return _ENABLED


def _encode(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True, mode="json")
    if isinstance(value, Path):
        return value.as_posix()
    return str(value)


def format_event(event: str, payload: Dict[str, Any] | None = None) -> str:
    body = json.dumps(payload or {}, separators=(",", ":"), default=_encode)
    return f"[EXPLAIN] {event} :: {body}"


def trace(event: str, payload: Dict[str, Any] | None = None) -> None:
    if not _ENABLED:
        return
    print(format_event(event, payload))


def trace_question(event: str, index: int, question: BaseModel, **extra: Any) -> None:
    """Trace an event tied to the ``index``-th question (1-based)."""
    if not _ENABLED:
        return
    trace(event, {"index": index, "question": question, **extra})
