"""Diagnostic logging utilities."""

from .diagnostics import (
    LEVEL_ERROR,
    LEVEL_WARNING,
    DiagnosticEvent,
    DiagnosticLog,
    utc_timestamp,
)

__all__ = ["DiagnosticEvent", "DiagnosticLog", "LEVEL_ERROR", "LEVEL_WARNING", "utc_timestamp"]
