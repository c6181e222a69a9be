"""Configuration file management for tripane."""

from __future__ import annotations

import copy
import sys
from pathlib import Path
from typing import Any, Dict

try:
    import tomllib  # Python 3.11+
except ModuleNotFoundError:
    import tomli as tomllib  # type: ignore

import tomli_w

# Default configuration file location
CONFIG_FILE = Path.home() / ".tripane.toml"

# Default configuration
DEFAULT_CONFIG = {
    "browser": {
        "show_hidden": True,
        "poll_interval_ms": 16,
        "max_entries": 0,  # 0 means no limit
    },
    "session": {
        "restore": False,
        "last_directory": ".",
    },
    "logging": {
        "level": "WARNING",
        "file": "",  # empty means ~/.tripane.log
    },
}


def load_config() -> Dict[str, Any]:
    """Load configuration from file or return defaults."""
    if not CONFIG_FILE.exists():
        return copy.deepcopy(DEFAULT_CONFIG)

    try:
        with open(CONFIG_FILE, "rb") as f:
            config = tomllib.load(f)
        # Merge with defaults to ensure all keys exist
        return _merge_config(DEFAULT_CONFIG, config)
    except (OSError, tomllib.TOMLDecodeError):
        # If config is corrupted, return defaults
        return copy.deepcopy(DEFAULT_CONFIG)


def save_config(config: Dict[str, Any]) -> None:
    """Save configuration to file."""
    try:
        CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
        with open(CONFIG_FILE, "wb") as f:
            tomli_w.dump(config, f)
    except (OSError, TypeError, ValueError) as err:
        # Don't break the app if config save fails, but inform the user
        print(f"Warning: Failed to save configuration to {CONFIG_FILE}: {err}", file=sys.stderr)


def _merge_config(default: Dict[str, Any], user: Dict[str, Any]) -> Dict[str, Any]:
    """Merge user config with defaults, preserving user values."""
    result = copy.deepcopy(default)
    for key, value in user.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _merge_config(result[key], value)
        else:
            result[key] = value
    return result


def get_browser_settings() -> Dict[str, Any]:
    """Get browser behaviour settings with sane values."""
    config = load_config()
    settings = config.get("browser", {})
    defaults = DEFAULT_CONFIG["browser"]

    show_hidden = settings.get("show_hidden", defaults["show_hidden"])
    poll_interval_ms = settings.get("poll_interval_ms", defaults["poll_interval_ms"])
    max_entries = settings.get("max_entries", defaults["max_entries"])

    if not isinstance(poll_interval_ms, int) or poll_interval_ms <= 0:
        poll_interval_ms = defaults["poll_interval_ms"]
    if not isinstance(max_entries, int) or max_entries < 0:
        max_entries = defaults["max_entries"]

    return {
        "show_hidden": bool(show_hidden),
        "poll_interval_ms": poll_interval_ms,
        "max_entries": max_entries,
    }


def get_logging_settings() -> Dict[str, str]:
    """Get logging level and log file path."""
    config = load_config()
    settings = config.get("logging", {})
    level = str(settings.get("level", DEFAULT_CONFIG["logging"]["level"])).upper()
    log_file = str(settings.get("file", "")) or str(Path.home() / ".tripane.log")
    return {"level": level, "file": log_file}


def create_default_config() -> None:
    """Create default configuration file if it doesn't exist."""
    if CONFIG_FILE.exists():
        return

    save_config(DEFAULT_CONFIG)


def should_restore_session() -> bool:
    config = load_config()
    return bool(config.get("session", {}).get("restore", False))


def get_last_directory() -> str:
    """Get the directory the previous session ended in."""
    config = load_config()
    session = config.get("session", {})
    return str(session.get("last_directory", "."))


def save_last_directory(directory: str) -> None:
    """Remember the directory the session ended in."""
    config = load_config()
    if "session" not in config:
        config["session"] = {}
    config["session"]["last_directory"] = directory
    save_config(config)


__all__ = [
    "CONFIG_FILE",
    "DEFAULT_CONFIG",
    "create_default_config",
    "get_browser_settings",
    "get_last_directory",
    "get_logging_settings",
    "load_config",
    "save_config",
    "save_last_directory",
    "should_restore_session",
]
