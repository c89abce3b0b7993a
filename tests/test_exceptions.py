"""Tests for appcli.exceptions and error formatting."""

import pytest

from appcli.exceptions import AppError, ConfigurationError, ReportWriteError


class TestAppError:
    """Tests for the base exception class."""

    def test_basic_message(self):
        """Test basic error message."""
        err = AppError("Something went wrong")
        assert str(err) == "Something went wrong"
        assert err.message == "Something went wrong"
        assert err.context == {}
        assert err.suggestions == []

    def test_with_context_and_suggestions(self):
        """Context and suggestions are rendered in order."""
        err = AppError(
            "Operation failed",
            context={"variable": "APP_DATA_DIR"},
            suggestions=["Set the variable"],
        )
        msg = str(err)
        assert msg.index("Operation failed") < msg.index("Context:") < msg.index("Suggestions:")
        assert "variable: APP_DATA_DIR" in msg
        assert "  - Set the variable" in msg

    def test_subclasses(self):
        """Specific errors derive from AppError."""
        assert issubclass(ConfigurationError, AppError)
        assert issubclass(ReportWriteError, AppError)

        with pytest.raises(AppError):
            raise ConfigurationError("missing")


class TestReportWriteError:
    """Tests for ReportWriteError convenience parameters."""

    def test_path_and_reason_in_context(self):
        """path and reason are added to the context."""
        err = ReportWriteError("Cannot write report", path="/x/report.txt", reason="denied")
        assert err.context == {"path": "/x/report.txt", "reason": "denied"}
        assert "path: /x/report.txt" in str(err)

    def test_explicit_context_wins(self):
        """Explicit context keys are not overwritten."""
        err = ReportWriteError("fail", context={"path": "given"}, path="/other")
        assert err.context["path"] == "given"


class TestErrorFormatting:
    """Tests for CLI error output helpers."""

    def test_format_app_error(self):
        """AppError is prefixed with Error:."""
        from appcli.cli.utils import format_error

        assert format_error(ConfigurationError("bad")) == "Error: bad"

    def test_format_other_error(self):
        """Other exceptions include their type name."""
        from appcli.cli.utils import format_error

        assert format_error(ValueError("nope")) == "Error: ValueError: nope"

    def test_print_error_plain(self, capsys):
        """Plain output goes to stderr."""
        from appcli.cli.utils import print_error

        print_error(ConfigurationError("bad", context={"k": "v"}), use_rich=False)
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.startswith("Error: bad")
        assert "k: v" in captured.err

    def test_print_error_rich_keeps_brackets(self, capsys):
        """Rich output does not treat [brackets] in messages as markup."""
        from rich.console import Console

        from appcli.cli import utils

        console = Console(stderr=True, force_terminal=False, color_system=None, width=200)
        utils._error_console = console
        try:
            utils.print_error(ConfigurationError("bad [report] section"), use_rich=True)
        finally:
            utils._error_console = None

        assert "Error: bad [report] section" in capsys.readouterr().err
