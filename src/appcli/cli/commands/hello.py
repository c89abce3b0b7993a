"""Hello command: greet a user by name."""

import argparse

from appcli.cli.context import InvocationContext


class HelloCommand:
    """Print a greeting for the given user name."""

    name = "hello"
    help = "Greet a user"
    uses_settings = False

    @staticmethod
    def add_arguments(parser: argparse.ArgumentParser) -> None:
        parser.add_argument("username", help="Name to greet")

    @staticmethod
    def run(args: argparse.Namespace, ctx: InvocationContext) -> int:
        # Printed verbatim: no trimming, escaping or validation
        ctx.writeln(f"Hello {args.username}!")
        return 0
