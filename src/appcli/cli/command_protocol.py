"""Command protocol for the appcli CLI.

Defines the interface every CLI command implements. A command owns its
argument definitions and its handler, so the dispatcher never has to know
what arguments a command takes.

Usage:
    from appcli.cli.command_protocol import Command

    class MyCommand:
        name = "my-command"
        help = "Description of my command"
        uses_settings = False

        @staticmethod
        def add_arguments(parser: argparse.ArgumentParser) -> None:
            parser.add_argument("input", help="Input value")

        @staticmethod
        def run(args: argparse.Namespace, ctx: InvocationContext) -> int:
            ctx.writeln(f"Processing {args.input}")
            return 0
"""

import argparse
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from appcli.cli.context import InvocationContext


@runtime_checkable
class Command(Protocol):
    """Protocol for CLI commands.

    Attributes:
        name: The subcommand name (e.g., "hello", "generate-report").
        help: Brief help text shown in the top-level --help output.
        uses_settings: Whether run() reads ctx.settings. When False the
            dispatcher passes default settings and never reads config
            files or the environment.

    Methods:
        add_arguments: Register arguments on the provided subparser.
        run: Execute the command with the parsed arguments and context.
    """

    name: str
    help: str
    uses_settings: bool

    @staticmethod
    def add_arguments(parser: argparse.ArgumentParser) -> None:
        """Add command-specific arguments to the parser.

        Args:
            parser: The argparse subparser for this command.
        """
        ...

    @staticmethod
    def run(args: argparse.Namespace, ctx: "InvocationContext") -> int:
        """Execute the command.

        Args:
            args: Parsed arguments. Everything added in add_arguments()
                  is available as an attribute.
            ctx: Output sink, settings and clock for this invocation.

        Returns:
            Exit code (0 for success, non-zero for errors).
        """
        ...
