"""Configuration for the todo-mvc host application."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

log = logging.getLogger(__name__)

APP_NAME = "todo-mvc"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(Exception):
    """Raised when a config file cannot be used."""


def default_config_path() -> Path:
    """Get the config file path using XDG Base Directory spec."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME", str(Path.home() / ".config"))
    return Path(xdg_config) / APP_NAME / "config.json"


def default_log_path() -> Path:
    """Get the log file path using XDG Base Directory spec."""
    xdg_state = os.environ.get("XDG_STATE_HOME", str(Path.home() / ".local" / "state"))
    log_dir = Path(xdg_state) / APP_NAME
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / f"{APP_NAME}.log"


@dataclass
class AppConfig:
    """Settings for the host application."""

    title: str = "Todo MVC"
    log_level: str = "INFO"
    log_file: str | None = None  # None means the XDG state directory
    initial_items: list[str] = field(default_factory=list)
    drop_stale_renders: bool = True  # Discard renders overtaken by a newer fetch


# Expected JSON type per field
_FIELD_TYPES: dict[str, tuple[type, ...]] = {
    "title": (str,),
    "log_level": (str,),
    "log_file": (str, type(None)),
    "initial_items": (list,),
    "drop_stale_renders": (bool,),
}


def config_from_dict(data: dict[str, Any]) -> tuple[AppConfig, list[str]]:
    """Build an AppConfig from decoded JSON.

    Raises ConfigError for wrong types or an unknown log level.
    Returns the config and a list of non-critical warnings.
    """
    if not isinstance(data, dict):
        raise ConfigError(f"Config must be a JSON object, got {type(data).__name__}")

    warnings = []
    known = {f.name for f in fields(AppConfig)}
    for key in sorted(data.keys() - known):
        warnings.append(f"Unknown config key '{key}' ignored")

    values = {}
    for name in known & data.keys():
        value = data[name]
        if not isinstance(value, _FIELD_TYPES[name]):
            raise ConfigError(f"Config key '{name}' has wrong type: {type(value).__name__}")
        values[name] = value

    items = values.get("initial_items", [])
    if not all(isinstance(item, str) for item in items):
        raise ConfigError("Config key 'initial_items' must be a list of strings")

    if "log_level" in values:
        level = values["log_level"].upper()
        if level not in LOG_LEVELS:
            raise ConfigError(f"Unknown log level '{values['log_level']}'")
        values["log_level"] = level

    return AppConfig(**values), warnings


def load_config(path: Path | None = None) -> tuple[AppConfig, list[str]]:
    """Load config from a JSON file.

    A missing file at the default location yields the defaults. A missing file
    that was asked for explicitly is an error.
    """
    explicit = path is not None
    path = path or default_config_path()
    if not path.exists():
        if explicit:
            raise ConfigError(f"Config file not found: {path}")
        log.debug("No config at %s, using defaults", path)
        return AppConfig(), []

    try:
        data = json.loads(path.read_text())
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    config, warnings = config_from_dict(data)
    log.info("Loaded config from %s", path)
    return config, warnings


def configure_logging(config: AppConfig) -> Path:
    """Send log output to a file; the terminal belongs to the TUI.

    Returns the log file path.
    """
    log_path = Path(config.log_file).expanduser() if config.log_file else default_log_path()
    logging.basicConfig(
        filename=str(log_path),
        level=getattr(logging, config.log_level),
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )
    return log_path
