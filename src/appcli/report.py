"""
Static timestamped report written by the generate-report command.

Usage::

    from datetime import datetime
    from appcli.report import Report, write_report

    report = Report(generated_at=datetime.now())
    write_report(report, Path("var/data/report.txt"))
"""

from __future__ import annotations

import logging
import os
import tempfile
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from appcli.exceptions import ReportWriteError

logger = logging.getLogger(__name__)

HEADER = "======= REPORT ======="
DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M:%S"
REPORT_MODE = 0o644


@dataclass(frozen=True)
class Report:
    """A report captured from a single timestamp snapshot.

    Attributes:
        generated_at: Local wall-clock time the report was taken at. DATE
            and TIME are both derived from this one value.
    """

    generated_at: datetime

    @property
    def date(self) -> str:
        return self.generated_at.strftime(DATE_FORMAT)

    @property
    def time(self) -> str:
        return self.generated_at.strftime(TIME_FORMAT)

    def render(self) -> str:
        """Render the report body.

        The trailing ``...`` line is part of the template.
        """
        lines = [
            HEADER,
            f"DATE: {self.date}",
            f"TIME: {self.time}",
            "...",
        ]
        return "\n".join(lines) + "\n"


def write_report(report: Report, path: Path) -> Path:
    """
    Write a report to ``path``, replacing any existing file.

    The body is written to a temporary file in the same directory and then
    moved over the target, so readers see either the old or the new report.
    The parent directory must already exist; it is never created.

    Args:
        report: Report to render
        path: Target file path

    Returns:
        The path written to

    Raises:
        ReportWriteError: If the directory is missing, not a directory, or
            the file cannot be written
    """
    directory = path.parent
    if not directory.exists():
        raise ReportWriteError(
            "Report directory does not exist",
            path=directory,
            suggestions=["Create the directory or point APP_DATA_DIR at an existing one"],
        )
    if not directory.is_dir():
        raise ReportWriteError(
            "Report directory is not a directory",
            path=directory,
        )

    body = report.render()
    tmp_name = None
    try:
        fd, tmp_name = tempfile.mkstemp(dir=directory, prefix=".report-", suffix=".tmp")
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            f.write(body)
        # mkstemp creates the file 0600
        os.chmod(tmp_name, REPORT_MODE)
        os.replace(tmp_name, path)
        tmp_name = None
    except OSError as e:
        raise ReportWriteError(
            "Cannot write report",
            path=path,
            reason=e.strerror or str(e),
            suggestions=["Check that the data directory is writable by the current user"],
        ) from e
    finally:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)

    logger.debug("Wrote %d bytes to %s", len(body.encode("utf-8")), path)
    return path
