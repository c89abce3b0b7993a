"""
Config command: view and initialise appcli configuration.

Usage:
    appcli config --show          Show effective configuration with sources
    appcli config --paths         Show config file paths
    appcli config --init [--user] Create template config file
    appcli config get <key>       Get a specific config value
"""

import argparse
import sys
from dataclasses import fields
from pathlib import Path

from appcli import config as app_config
from appcli.cli.context import InvocationContext
from appcli.config import CONFIG_FILENAMES, KNOWN_KEYS, generate_template, get_config_paths


class ConfigCommand:
    """View and manage appcli configuration."""

    name = "config"
    help = "View and manage configuration"
    uses_settings = True

    @staticmethod
    def add_arguments(parser: argparse.ArgumentParser) -> None:
        action_group = parser.add_mutually_exclusive_group()
        action_group.add_argument(
            "--show",
            action="store_true",
            help="Show effective configuration with sources",
        )
        action_group.add_argument(
            "--init",
            action="store_true",
            help="Create template config file in current directory",
        )
        action_group.add_argument(
            "--paths",
            action="store_true",
            help="Show config file paths",
        )
        parser.add_argument(
            "--user",
            action="store_true",
            help="Use user config (~/.config/appcli/config.toml) for --init",
        )
        parser.add_argument(
            "action",
            nargs="?",
            choices=["get"],
            help="Config action",
        )
        parser.add_argument(
            "key",
            nargs="?",
            help="Config key (e.g., report.data_dir)",
        )

    @staticmethod
    def run(args: argparse.Namespace, ctx: InvocationContext) -> int:
        if args.init:
            return _init_config(ctx, args.user)
        if args.paths:
            return _show_paths(ctx)
        if args.action == "get":
            if not args.key:
                print("Error: 'get' requires a key argument", file=sys.stderr)
                return 1
            return _get_config(ctx, args.key)
        # Default to showing config
        return _show_config(ctx)


def _format_value(value) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return f'"{value}"'
    if value is None:
        return "# not set"
    return str(value)


def _show_config(ctx: InvocationContext) -> int:
    """Show effective configuration with sources."""
    settings = ctx.settings

    ctx.writeln("# Effective appcli configuration")
    for section, known in KNOWN_KEYS.items():
        section_obj = getattr(settings, section)
        ctx.writeln()
        ctx.writeln(f"[{section}]")
        for f in fields(section_obj):
            if f.name not in known:
                continue
            source = settings.get_source(f"{section}.{f.name}")
            # Show just the filename for file sources
            if source != "default" and not source.startswith("env:"):
                source = Path(source).name
            value = _format_value(getattr(section_obj, f.name))
            ctx.writeln(f"{f.name} = {value}  # from: {source}")

    return 0


def _show_paths(ctx: InvocationContext) -> int:
    """Show config file paths."""
    paths = get_config_paths()

    ctx.writeln("Config file paths:")
    ctx.writeln()
    ctx.writeln(f"User config: {app_config.USER_CONFIG_PATH}")
    ctx.writeln("  Status: exists" if paths["user"] else "  Status: not found")
    ctx.writeln()
    ctx.writeln(f"Project config search: {', '.join(CONFIG_FILENAMES)}")
    if paths["project"]:
        ctx.writeln(f"  Found: {paths['project']}")
    else:
        ctx.writeln("  Status: not found")

    return 0


def _init_config(ctx: InvocationContext, user: bool = False) -> int:
    """Create a template config file."""
    if user:
        target = app_config.USER_CONFIG_PATH
        target.parent.mkdir(parents=True, exist_ok=True)
    else:
        target = Path.cwd() / CONFIG_FILENAMES[0]

    if target.exists():
        print(f"Error: Config file already exists: {target}", file=sys.stderr)
        print("Remove it first or edit manually.", file=sys.stderr)
        return 1

    try:
        target.write_text(generate_template(), encoding="utf-8")
    except OSError as e:
        print(f"Error writing config file: {e}", file=sys.stderr)
        return 1

    ctx.writeln(f"Created config template: {target}")
    ctx.writeln()
    ctx.writeln("Uncomment and modify values as needed.")
    return 0


def _get_config(ctx: InvocationContext, key: str) -> int:
    """Get a specific config value."""
    parts = key.split(".")
    if len(parts) != 2:
        print(f"Error: Invalid key format '{key}'. Use 'section.key' format.", file=sys.stderr)
        return 1

    section, attr = parts
    if section not in KNOWN_KEYS:
        print(f"Error: Unknown config section '{section}'", file=sys.stderr)
        return 1
    if attr not in KNOWN_KEYS[section]:
        print(f"Error: Unknown key '{attr}' in section '{section}'", file=sys.stderr)
        return 1

    value = getattr(getattr(ctx.settings, section), attr)
    if value is None:
        ctx.writeln("# not set")
    elif isinstance(value, bool):
        ctx.writeln("true" if value else "false")
    else:
        ctx.writeln(str(value))

    source = ctx.settings.get_source(key)
    if source != "default":
        print(f"# source: {source}", file=sys.stderr)

    return 0
