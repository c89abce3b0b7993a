"""List command: show every registered command with its help line."""

import argparse

from appcli.cli.context import InvocationContext


class ListCommand:
    """Print the available commands."""

    name = "list"
    help = "List available commands"
    uses_settings = False

    @staticmethod
    def add_arguments(parser: argparse.ArgumentParser) -> None:
        pass

    @staticmethod
    def run(args: argparse.Namespace, ctx: InvocationContext) -> int:
        # registry imports this module at load time
        from appcli.cli.registry import get_registry

        commands = get_registry()
        width = max(len(name.value) for name in commands)

        ctx.writeln("Available commands:")
        for name, cmd_class in commands.items():
            ctx.writeln(f"  {name.value:<{width}}  {cmd_class.help}")
        return 0
