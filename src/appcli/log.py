"""
Logging configuration for appcli.

All package loggers live under the ``appcli`` namespace. Output is silent
until the CLI (or a caller) enables it, and always goes to stderr so that
command output on stdout stays clean.
"""

import logging

_logger = logging.getLogger("appcli")
_logger.addHandler(logging.NullHandler())  # Default: no output

DEFAULT_FORMAT = "[%(levelname)s] %(message)s"


def enable_verbose(level: str = "INFO", format: str | None = None) -> None:
    """Enable logging output to stderr.

    Args:
        level: Logging level - "DEBUG", "INFO", "WARNING", "ERROR"
        format: Optional custom format string
    """
    _logger.setLevel(getattr(logging, level.upper()))

    # Remove existing handlers
    for handler in _logger.handlers[:]:
        if not isinstance(handler, logging.NullHandler):
            _logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setLevel(getattr(logging, level.upper()))
    handler.setFormatter(logging.Formatter(format or DEFAULT_FORMAT))
    _logger.addHandler(handler)


def disable_verbose() -> None:
    """Remove stderr handlers and restore the default level."""
    _logger.setLevel(logging.WARNING)
    for handler in _logger.handlers[:]:
        if not isinstance(handler, logging.NullHandler):
            _logger.removeHandler(handler)


def configure_from_flags(verbose: bool = False, quiet: bool = False) -> None:
    """Map the global -v/-q flags onto a logging level.

    quiet wins over verbose; with neither, only warnings and errors are shown.
    """
    if quiet:
        enable_verbose("ERROR")
    elif verbose:
        enable_verbose("DEBUG")
    else:
        enable_verbose("WARNING")
