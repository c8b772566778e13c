"""
reckon.toml configuration.

Example:

    [repl]
    prompt = "> "
    exit_commands = [":q", "quit", "exit"]
    show_tokens = false

    [logging]
    level = "WARNING"
"""

import logging
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from .errors import ConfigError

CONFIG_FILENAME = "reckon.toml"
LOG_LEVEL_ENV = "RECKON_LOG_LEVEL"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ReplConfig:
    """Interactive loop settings."""

    prompt: str = "> "
    exit_commands: list[str] = field(default_factory=lambda: [":q", "quit", "exit"])
    show_tokens: bool = False  # Echo the token stream before evaluating


@dataclass
class LoggingConfig:
    """Logging settings."""

    level: str = "WARNING"

    @property
    def level_number(self) -> int:
        return logging.getLevelNamesMapping()[self.level]


@dataclass
class ReckonConfig:
    """Top-level configuration."""

    repl: ReplConfig = field(default_factory=ReplConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    path: Path | None = None  # File the config was loaded from, if any


def _expect(value: object, kind: type, key: str) -> None:
    if not isinstance(value, kind):
        raise ConfigError(f"{key} must be of type {kind.__name__}, got {type(value).__name__}")


def _normalise_level(level: str, key: str) -> str:
    upper = level.upper()
    if upper not in _LOG_LEVELS:
        raise ConfigError(f"{key} must be one of {', '.join(_LOG_LEVELS)}, got {level!r}")
    return upper


def load_config(path: Path) -> ReckonConfig:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    repl_data = data.get("repl", {})
    _expect(repl_data, dict, "repl")
    logging_data = data.get("logging", {})
    _expect(logging_data, dict, "logging")

    prompt = repl_data.get("prompt", "> ")
    _expect(prompt, str, "repl.prompt")

    exit_commands = repl_data.get("exit_commands", [":q", "quit", "exit"])
    _expect(exit_commands, list, "repl.exit_commands")
    for command in exit_commands:
        _expect(command, str, "repl.exit_commands[]")

    show_tokens = repl_data.get("show_tokens", False)
    _expect(show_tokens, bool, "repl.show_tokens")

    level = logging_data.get("level", "WARNING")
    _expect(level, str, "logging.level")

    return ReckonConfig(
        repl=ReplConfig(prompt=prompt, exit_commands=exit_commands, show_tokens=show_tokens),
        logging=LoggingConfig(level=_normalise_level(level, "logging.level")),
        path=path,
    )


def apply_env_overrides(config: ReckonConfig) -> ReckonConfig:
    """Apply ``RECKON_LOG_LEVEL`` on top of a loaded configuration."""
    env_level = os.environ.get(LOG_LEVEL_ENV)
    if env_level:
        config.logging.level = _normalise_level(env_level, LOG_LEVEL_ENV)
    return config


def find_config(start: Path | None = None) -> ReckonConfig:
    """
    Load reckon.toml from ``start`` (default: cwd), or return defaults.

    ``RECKON_LOG_LEVEL`` overrides ``[logging].level`` either way.
    """
    candidate = (start or Path.cwd()) / CONFIG_FILENAME
    config = load_config(candidate) if candidate.is_file() else ReckonConfig()
    return apply_env_overrides(config)
