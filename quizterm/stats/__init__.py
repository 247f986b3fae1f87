from .stats import SessionResult, record_answer, format_summary

__all__ = ["SessionResult", "record_answer", "format_summary"]
