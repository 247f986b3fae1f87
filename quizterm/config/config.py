from __future__ import annotations

"""Configuration loading and validation for quizterm.

This module loads YAML configuration, applies defaults, and validates
that values are sane for the CLI.
"""

from pathlib import Path
from typing import Any, Dict, Optional

import sys

import yaml


DEFAULT_QUESTIONS_PATH = "questions.json"
DEFAULT_TIME_PRECISION = 2
MAX_TIME_PRECISION = 6


def _load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        print(f"ERROR: Config file not found: {path}", file=sys.stderr)
        sys.exit(1)
    except yaml.YAMLError as e:
        print(f"ERROR: Config file is not valid YAML: {path} ({e})", file=sys.stderr)
        sys.exit(1)
    if not isinstance(data, dict):
        print(f"ERROR: Config file must contain a mapping: {path}", file=sys.stderr)
        sys.exit(1)
    return data


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Load configuration from YAML or defaults.

    Args:
        path: Optional path to a YAML config. If None, use package defaults.

    Returns:
        A dictionary with configuration values.
    """
    if path:
        cfg = _load_yaml(Path(path))
    else:
        default_path = Path(__file__).with_name("defaults.yml")
        cfg = _load_yaml(default_path)
    return cfg


def _as_section(cfg: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = cfg.get(name)
    if section is None:
        section = {}
    elif not isinstance(section, dict):
        print(f"WARNING: Config section '{name}' is not a mapping, using defaults.")
        section = {}
    cfg[name] = section
    return section


def validate_config(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """Apply defaults and validate configuration values.

    Unsupported values are reported with a warning and replaced by the
    default rather than aborting the run.

    Args:
        cfg: The raw configuration dictionary.

    Returns:
        The validated and merged configuration dictionary.
    """
    quiz = _as_section(cfg, "quiz")
    ui = _as_section(cfg, "ui")

    # Apply section defaults
    quiz.setdefault("questions_path", DEFAULT_QUESTIONS_PATH)
    quiz.setdefault("time_precision", DEFAULT_TIME_PRECISION)

    ui.setdefault("show_banner", True)
    ui.setdefault("show_per_question_feedback", True)

    questions_path = quiz.get("questions_path")
    if not isinstance(questions_path, str) or not questions_path.strip():
        print(f"WARNING: Invalid questions_path '{questions_path}', using '{DEFAULT_QUESTIONS_PATH}'.")
        quiz["questions_path"] = DEFAULT_QUESTIONS_PATH

    precision = quiz.get("time_precision")
    if isinstance(precision, bool) or not isinstance(precision, int) or not (0 <= precision <= MAX_TIME_PRECISION):
        print(f"WARNING: Unsupported time_precision '{precision}', using {DEFAULT_TIME_PRECISION}.")
        quiz["time_precision"] = DEFAULT_TIME_PRECISION

    for flag in ("show_banner", "show_per_question_feedback"):
        if not isinstance(ui.get(flag), bool):
            print(f"WARNING: ui.{flag} must be true or false, using true.")
            ui[flag] = True

    return cfg
