"""Configuration loading from CLI args, env vars, and an optional YAML file."""

import logging
import os
from dataclasses import dataclass

import yaml

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Mailbox names that say nothing about the message: the default inbox and the
# personal catch-all folder.
DEFAULT_IGNORABLE_LIST_NAMES = ("ads", "INBOX")


def _parse_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("true", "1", "yes")


class ConfigError(ValueError):
    """Raised for unreadable or invalid configuration."""


@dataclass(frozen=True)
class Config:
    ignorable_list_names: tuple[str, ...] = DEFAULT_IGNORABLE_LIST_NAMES
    log_level: str = "WARNING"
    timestamps_only: bool = False


def load_yaml_config(path: str | None) -> dict:
    """Load settings from a YAML file. Returns empty dict if no path."""
    if not path:
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.warning("Config file %s not found, using defaults", path)
        return {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    logger.debug("Loaded YAML config from %s", path)
    return data


def _normalize_names(names) -> tuple[str, ...]:
    """Strip names, drop empty ones and duplicates, keep order."""
    seen = []
    for name in names:
        if not isinstance(name, str):
            raise ConfigError(f"List names must be strings, got {name!r}")
        name = name.strip()
        if name and name not in seen:
            seen.append(name)
    return tuple(seen)


def _parse_level(value: str) -> str:
    level = str(value).strip().upper()
    if level not in LOG_LEVELS:
        raise ConfigError(f"Unknown log level {value!r}; expected one of {', '.join(LOG_LEVELS)}")
    return level


def load_config(cli_args=None, yaml_data: dict | None = None) -> Config:
    """Build Config from defaults, YAML data, env vars, then CLI args."""
    yaml_data = yaml_data or {}

    names = yaml_data.get("ignorable_list_names", DEFAULT_IGNORABLE_LIST_NAMES)
    if isinstance(names, str):
        names = [names]
    level = yaml_data.get("log_level", Config.log_level)
    timestamps_only = yaml_data.get("timestamps_only", Config.timestamps_only)

    env_names = os.environ.get("INDEX_FORMAT_IGNORABLE_LISTS")
    if env_names is not None:
        names = env_names.split(",")
    level = os.environ.get("INDEX_FORMAT_LOG_LEVEL", level)
    timestamps_only = os.environ.get("INDEX_FORMAT_TIMESTAMPS_ONLY", timestamps_only)

    if cli_args is not None:
        names = list(names) + list(getattr(cli_args, "ignore_list", None) or [])
        if getattr(cli_args, "debug", False):
            level = "DEBUG"
        elif getattr(cli_args, "verbose", False):
            level = "INFO"
        if getattr(cli_args, "timestamps_only", False):
            timestamps_only = True

    return Config(
        ignorable_list_names=_normalize_names(names),
        log_level=_parse_level(level),
        timestamps_only=_parse_bool(timestamps_only),
    )
