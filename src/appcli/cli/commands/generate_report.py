"""Generate-report command: write a timestamped report to the data directory.

The target directory comes from ``Settings.report.data_dir`` (normally the
APP_DATA_DIR environment variable). Each run replaces ``report.txt`` in
that directory. Concurrent runs race and the last writer wins; there is no
locking.
"""

import argparse
import logging

from appcli.cli.context import InvocationContext
from appcli.config import ENV_DATA_DIR
from appcli.exceptions import ConfigurationError
from appcli.report import Report, write_report

logger = logging.getLogger(__name__)


class GenerateReportCommand:
    """Write report.txt into the configured data directory."""

    name = "generate-report"
    help = "Generate a report file in the data directory"
    uses_settings = True

    @staticmethod
    def add_arguments(parser: argparse.ArgumentParser) -> None:
        pass

    @staticmethod
    def run(args: argparse.Namespace, ctx: InvocationContext) -> int:
        report_settings = ctx.settings.report
        path = report_settings.path
        if path is None:
            raise ConfigurationError(
                "Report data directory is not configured",
                context={
                    "variable": ENV_DATA_DIR,
                    "source": ctx.settings.get_source("report.data_dir"),
                },
                suggestions=[
                    f"Set {ENV_DATA_DIR} to an existing, writable directory",
                    "Or set data_dir in the [report] section of .appcli.toml",
                ],
            )

        report = Report(generated_at=ctx.clock())
        logger.info("Generating report for %s %s", report.date, report.time)
        write_report(report, path)
        logger.info("Report written to %s", path)

        ctx.writeln("Report generated!")
        return 0
