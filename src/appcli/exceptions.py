"""
Custom exception hierarchy for appcli.

Runtime failures raised by command handlers carry context and suggestions
so the dispatcher can print an actionable message before exiting non-zero.

Example::

    from appcli.exceptions import ConfigurationError

    raise ConfigurationError(
        "Report data directory is not configured",
        context={"variable": "APP_DATA_DIR"},
        suggestions=["Export APP_DATA_DIR=/path/to/writable/dir"],
    )
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional, Union


class AppError(Exception):
    """
    Base exception for all appcli runtime errors.

    Attributes:
        message: Short description of what went wrong
        context: Dictionary of contextual information (path, variable, etc.)
        suggestions: List of actionable suggestions for fixing the error
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        self.message = message
        self.context = context or {}
        self.suggestions = suggestions or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with context and suggestions."""
        parts = [self.message]

        if self.context:
            parts.append("\n\nContext:")
            for key, value in self.context.items():
                parts.append(f"\n  {key}: {value}")

        if self.suggestions:
            parts.append("\n\nSuggestions:")
            for suggestion in self.suggestions:
                parts.append(f"\n  - {suggestion}")

        return "".join(parts)

    def __str__(self) -> str:
        return self._format_message()


class ConfigurationError(AppError):
    """
    Configuration is missing or invalid.

    Raised before any side effect happens, e.g. when ``generate-report``
    runs without a data directory or ``APP_ENV`` holds an unknown value.

    Example::

        raise ConfigurationError(
            "Invalid application environment",
            context={"APP_ENV": "staging", "allowed": "dev, ci, prod"},
        )
    """

    pass


class ReportWriteError(AppError):
    """
    Writing the report file failed.

    Wraps the underlying ``OSError`` and records the target path.

    Example::

        raise ReportWriteError(
            "Cannot write report",
            path="/var/data/report.txt",
            reason="Permission denied",
        )
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
        path: Optional[Union[str, Path]] = None,
        reason: Optional[str] = None,
    ):
        ctx = context or {}
        if path is not None and "path" not in ctx:
            ctx["path"] = str(path)
        if reason and "reason" not in ctx:
            ctx["reason"] = reason

        super().__init__(message, ctx, suggestions)


__all__ = [
    "AppError",
    "ConfigurationError",
    "ReportWriteError",
]
