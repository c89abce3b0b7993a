"""Command registry for the appcli CLI.

The set of commands is closed: every command has a ``CommandName`` member
and exactly one class in ``COMMANDS``. The registry is built once at import
time and cannot be modified afterwards.

Usage:
    from appcli.cli.registry import COMMANDS, CommandName, register_commands

    # Register every command on an argparse subparsers group
    register_commands(subparsers)

    # Look up a command by name
    hello = COMMANDS[CommandName.HELLO]
"""

import argparse
from collections.abc import Iterable, Mapping
from enum import Enum
from types import MappingProxyType

from appcli.cli.command_protocol import Command
from appcli.cli.commands.config import ConfigCommand
from appcli.cli.commands.generate_report import GenerateReportCommand
from appcli.cli.commands.hello import HelloCommand
from appcli.cli.commands.list_cmd import ListCommand


class CommandName(str, Enum):
    """Names of all commands the CLI can dispatch to."""

    HELLO = "hello"
    GENERATE_REPORT = "generate-report"
    LIST = "list"
    CONFIG = "config"


class RegistryError(Exception):
    """The command registry is inconsistent."""

    pass


def build_registry(classes: Iterable[type[Command]]) -> Mapping[CommandName, type[Command]]:
    """Build an immutable name -> command class mapping.

    Args:
        classes: Command classes to register.

    Returns:
        Read-only mapping keyed by CommandName, in CommandName order.

    Raises:
        RegistryError: If a class has a name outside CommandName, two
            classes share a name, or a CommandName has no class.
    """
    commands: dict[CommandName, type[Command]] = {}

    for cmd_class in classes:
        try:
            key = CommandName(cmd_class.name)
        except ValueError:
            raise RegistryError(f"Command '{cmd_class.name}' has no CommandName member") from None
        if key in commands:
            raise RegistryError(
                f"Duplicate command name '{key.value}': "
                f"{commands[key].__name__} and {cmd_class.__name__}"
            )
        commands[key] = cmd_class

    missing = [member.value for member in CommandName if member not in commands]
    if missing:
        raise RegistryError(f"No command registered for: {', '.join(missing)}")

    return MappingProxyType({member: commands[member] for member in CommandName})


COMMANDS: Mapping[CommandName, type[Command]] = build_registry(
    [HelloCommand, GenerateReportCommand, ListCommand, ConfigCommand]
)


def get_registry() -> Mapping[CommandName, type[Command]]:
    """Return the command registry."""
    return COMMANDS


def register_commands(
    subparsers: argparse._SubParsersAction,
    commands: Mapping[CommandName, type[Command]] = COMMANDS,
) -> None:
    """Register commands on an argparse subparsers group.

    For each command, creates a subparser and calls the command's
    add_arguments() method to populate it. Sets a ``_command_name``
    default on the subparser so dispatch can find the right run() method.

    Args:
        subparsers: The _SubParsersAction from parser.add_subparsers().
        commands: Mapping of CommandName -> command class.
    """
    for name, cmd_class in commands.items():
        sub = subparsers.add_parser(name.value, help=cmd_class.help, description=cmd_class.help)
        cmd_class.add_arguments(sub)
        sub.set_defaults(_command_name=name)
