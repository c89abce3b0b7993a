"""
Command-line interface for appcli.

Provides the `appcli` command:

    appcli hello <username>     - Print a greeting
    appcli generate-report      - Write report.txt into $APP_DATA_DIR
    appcli list                 - List available commands
    appcli config <options>     - View and manage configuration

Examples:
    appcli hello world
    APP_DATA_DIR=var/data appcli generate-report
    appcli config --show
"""

import argparse
import logging
import sys
from typing import List, NoReturn, Optional

from appcli import __version__
from appcli.cli.context import InvocationContext
from appcli.cli.registry import COMMANDS, register_commands
from appcli.cli.utils import print_error
from appcli.config import ConfigError, Settings
from appcli.exceptions import AppError
from appcli.log import configure_from_flags

__all__ = ["main", "build_parser", "AppArgumentParser"]

logger = logging.getLogger(__name__)


class AppArgumentParser(argparse.ArgumentParser):
    """Argument parser that shows full help on usage errors.

    Subparsers inherit this class, so a command's own help (naming its
    arguments) is shown when that command is misused.
    """

    def error(self, message: str) -> NoReturn:
        self.print_help(sys.stderr)
        self.exit(2, f"\n{self.prog}: error: {message}\n")


def build_parser() -> AppArgumentParser:
    """Build the top-level parser with every registered command."""
    parser = AppArgumentParser(
        prog="appcli",
        description="Command-line application shell",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--version", action="version", version=f"appcli {__version__}")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging and tracebacks"
    )
    parser.add_argument("-q", "--quiet", action="store_true", help="Only log errors")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")
    register_commands(subparsers)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for appcli CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    cmd_class = COMMANDS[args._command_name]

    try:
        # Commands that never read settings must not fail on unrelated config
        settings = Settings.load() if cmd_class.uses_settings else Settings()
        configure_from_flags(
            verbose=args.verbose or settings.defaults.verbose,
            quiet=args.quiet or settings.defaults.quiet,
        )
        ctx = InvocationContext(settings=settings)

        logger.debug("Dispatching %s (env=%s)", args.command, settings.app.env)
        return cmd_class.run(args, ctx)
    except (AppError, ConfigError) as e:
        print_error(e, verbose=args.verbose)
        return 1
