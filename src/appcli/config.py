"""
Configuration support for appcli.

Settings are resolved with the following precedence (highest first):
1. Environment variables: APP_DATA_DIR, APP_ENV
2. Project config: .appcli.toml or appcli.toml in the project root
3. User config: ~/.config/appcli/config.toml
4. Dataclass defaults

Handlers never read the environment themselves; ``Settings.load()`` is
called once by the dispatcher and passed down in the invocation context.
"""

import os
import sys
import warnings
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from appcli.exceptions import ConfigurationError

if sys.version_info >= (3, 11):
    import tomllib
else:
    try:
        import tomli as tomllib
    except ImportError:
        tomllib = None  # type: ignore[assignment]

# Config file names to search for in project directories
CONFIG_FILENAMES = [".appcli.toml", "appcli.toml"]

# User-level config path
USER_CONFIG_PATH = Path.home() / ".config" / "appcli" / "config.toml"

# Environment variables and the config keys they override
ENV_DATA_DIR = "APP_DATA_DIR"
ENV_APP_ENV = "APP_ENV"

ENV_OVERRIDES = {
    ENV_DATA_DIR: "report.data_dir",
    ENV_APP_ENV: "app.env",
}

APP_ENVIRONMENTS = ("dev", "ci", "prod")

# All known config keys for validation
KNOWN_KEYS = {
    "app": {"env"},
    "report": {"data_dir"},
    "defaults": {"verbose", "quiet"},
}


@dataclass
class AppConfig:
    """Application-wide settings."""

    env: str = "dev"


@dataclass
class ReportConfig:
    """Settings for the generate-report command."""

    data_dir: str | None = None
    filename: str = field(default="report.txt", init=False)

    @property
    def path(self) -> Path | None:
        """Full path of the report file, or None when no directory is set."""
        if not self.data_dir:
            return None
        return Path(self.data_dir) / self.filename


@dataclass
class DefaultsConfig:
    """Default options for CLI commands."""

    verbose: bool = False
    quiet: bool = False


@dataclass
class Settings:
    """Merged settings from all sources."""

    app: AppConfig = field(default_factory=AppConfig)
    report: ReportConfig = field(default_factory=ReportConfig)
    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)

    # Track which file or variable each setting came from (for --show)
    _sources: dict = field(default_factory=dict, repr=False)

    @classmethod
    def load(
        cls,
        start_dir: Path | None = None,
        environ: Mapping[str, str] | None = None,
        user_config: Path | None = None,
    ) -> "Settings":
        """
        Load settings with precedence: env > project > user > defaults.

        Args:
            start_dir: Directory to start searching from (default: current directory)
            environ: Environment mapping (default: os.environ)
            user_config: User config path (default: USER_CONFIG_PATH)

        Returns:
            Merged settings object

        Raises:
            ConfigError: If a config file is unreadable or not valid TOML
            ConfigurationError: If APP_ENV holds an unknown environment
        """
        if start_dir is None:
            start_dir = Path.cwd()
        if environ is None:
            environ = os.environ
        if user_config is None:
            user_config = USER_CONFIG_PATH

        settings = cls()
        sources: dict[str, str] = {}

        # Load user config first (lower precedence)
        if user_config.exists():
            user_data = _load_toml_file(user_config)
            if user_data:
                _merge_config(settings, user_data, str(user_config), sources)

        # Load project config (higher precedence)
        project_config = _find_project_config(start_dir)
        if project_config:
            project_data = _load_toml_file(project_config)
            if project_data:
                _merge_config(settings, project_data, str(project_config), sources)

        _apply_environment(settings, environ, sources)

        if settings.app.env not in APP_ENVIRONMENTS:
            raise ConfigurationError(
                "Invalid application environment",
                context={"env": settings.app.env, "allowed": ", ".join(APP_ENVIRONMENTS)},
                suggestions=[f"Set {ENV_APP_ENV} to one of: {', '.join(APP_ENVIRONMENTS)}"],
            )

        data_dir = settings.report.data_dir
        if data_dir is not None and not isinstance(data_dir, str):
            raise ConfigurationError(
                "report.data_dir must be a string path",
                context={"value": data_dir, "source": sources.get("report.data_dir", "default")},
            )

        settings._sources = sources
        return settings

    def get_source(self, key: str) -> str:
        """Get the source (file path or env:NAME) for a config key."""
        return self._sources.get(key, "default")


class ConfigError(Exception):
    """Configuration file errors."""

    pass


def _find_project_config(start_dir: Path) -> Path | None:
    """
    Find project config by walking up the directory tree.

    Stops at .git directory or filesystem root.

    Args:
        start_dir: Directory to start searching from

    Returns:
        Path to config file if found, None otherwise
    """
    current = start_dir.resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        # Stop at .git directory (project root)
        if (current / ".git").exists():
            break

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def _load_toml_file(path: Path) -> dict[str, Any] | None:
    """
    Load a TOML file.

    Returns:
        Parsed TOML data, or None when no TOML parser is available

    Raises:
        ConfigError: If TOML is invalid or the file cannot be read
    """
    if tomllib is None:
        warnings.warn(
            "tomli package not installed. Config file support requires 'pip install tomli' for Python < 3.11.",
            stacklevel=2,
        )
        return None

    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e


def _merge_config(
    settings: Settings, data: dict[str, Any], source: str, sources: dict[str, str]
) -> None:
    """
    Merge loaded config data into a Settings object.

    Args:
        settings: Settings object to update
        data: Raw config data from TOML
        source: Source file path (for tracking)
        sources: Dict to update with source info
    """
    for key in data:
        if key not in KNOWN_KEYS:
            warnings.warn(f"Unknown config key '{key}' in {source}", stacklevel=3)

    for section, known in KNOWN_KEYS.items():
        if section not in data:
            continue
        section_data = data[section]
        _warn_unknown_keys(section_data, known, section, source)

        section_obj = getattr(settings, section)
        for attr in sorted(known):
            if attr in section_data:
                setattr(section_obj, attr, section_data[attr])
                sources[f"{section}.{attr}"] = source


def _apply_environment(
    settings: Settings, environ: Mapping[str, str], sources: dict[str, str]
) -> None:
    """Apply environment variable overrides.

    An empty variable still counts as set, so ``APP_DATA_DIR=""`` clears a
    directory configured in a file instead of silently falling back to it.
    """
    for var, key in ENV_OVERRIDES.items():
        if var not in environ:
            continue
        section, attr = key.split(".")
        setattr(getattr(settings, section), attr, environ[var])
        sources[key] = f"env:{var}"


def _warn_unknown_keys(data: dict[str, Any], known: set[str], section: str, source: str) -> None:
    """Warn about unknown keys in a config section."""
    for key in data:
        if key not in known:
            warnings.warn(f"Unknown config key '{section}.{key}' in {source}", stacklevel=4)


def generate_template() -> str:
    """
    Generate a template config file with all options documented.

    Returns:
        Template TOML string
    """
    return """# appcli configuration file
# Place as .appcli.toml in project root or ~/.config/appcli/config.toml for user defaults
# Environment variables (APP_DATA_DIR, APP_ENV) override values set here.

[app]
# Application environment: dev, ci, prod
# env = "dev"

[report]
# Directory that generate-report writes report.txt into
# data_dir = "var/data"

[defaults]
# Enable verbose logging by default
# verbose = false

# Only log errors by default
# quiet = false
"""


def get_config_paths(
    start_dir: Path | None = None, user_config: Path | None = None
) -> dict[str, Path | None]:
    """
    Get paths to config files that would be loaded.

    Returns:
        Dict with 'user' and 'project' keys
    """
    if user_config is None:
        user_config = USER_CONFIG_PATH
    project_config = _find_project_config(start_dir or Path.cwd())

    return {
        "user": user_config if user_config.exists() else None,
        "project": project_config,
    }
