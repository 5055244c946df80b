"""Configuration loading and management."""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path


class ConfigError(ValueError):
    """A configuration value that cannot be used."""


@dataclass
class AppConfig:
    """Application configuration with sensible defaults."""

    # Where the instance snapshot JSON comes from: a file or a command's stdout
    source_path: str = ""
    source_command: str = ""
    source_timeout: float = 5.0

    # Instance to select on startup (first instance when empty)
    instance: str = ""

    # Refresh intervals (seconds)
    poll_interval: float = 1.0
    rate_interval: float = 2.0

    # Display
    si_units: bool = False
    precision: int = 1
    portal_help_url: str = "https://github.com/EasyTier/EasyTier"

    # Logging
    log_file: str = ""
    log_level: str = "INFO"

    @classmethod
    def load(
        cls,
        config_path: str | None = None,
        cli_overrides: dict | None = None,
    ) -> AppConfig:
        """Load config from TOML file with CLI overrides.

        Resolution order: CLI flag > env var > config file > defaults
        """
        config = cls()

        toml_path = _resolve_config_path(config_path)
        if toml_path and toml_path.exists():
            with open(toml_path, "rb") as f:
                data = tomllib.load(f)
            _apply_toml(config, data)

        _apply_env(config)

        if cli_overrides:
            _apply_overrides(config, cli_overrides)

        _validate(config)
        return config


def _resolve_config_path(explicit_path: str | None) -> Path | None:
    """Resolve config file path."""
    if explicit_path:
        return Path(explicit_path)
    xdg = os.environ.get("XDG_CONFIG_HOME", str(Path.home() / ".config"))
    candidates = [
        Path(xdg) / "meshgaze" / "config.toml",
        Path.home() / ".meshgaze.toml",
    ]
    for p in candidates:
        if p.exists():
            return p
    return None


def _apply_toml(config: AppConfig, data: dict) -> None:
    """Apply TOML data to config."""
    # (section, key in section) -> attribute
    section_map = {
        "source": {"path": "source_path", "command": "source_command", "timeout": "source_timeout"},
        "refresh": {"poll_interval": "poll_interval", "rate_interval": "rate_interval"},
        "display": {
            "si_units": "si_units",
            "precision": "precision",
            "portal_help_url": "portal_help_url",
        },
        "logging": {"file": "log_file", "level": "log_level"},
    }

    for key in ("instance", "source_path", "source_command"):
        if key in data:
            setattr(config, key, data[key])

    for section, keys in section_map.items():
        if section not in data:
            continue
        for short_key, attr in keys.items():
            if short_key in data[section]:
                setattr(config, attr, data[section][short_key])

    try:
        for attr in ("poll_interval", "rate_interval", "source_timeout"):
            setattr(config, attr, float(getattr(config, attr)))
        config.precision = int(config.precision)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"invalid number in config file: {exc}") from exc


def _truthy(value: str) -> bool:
    return value.lower() in ("1", "true", "yes")


def _apply_env(config: AppConfig) -> None:
    """Apply environment variable overrides (MESHGAZE_ prefix)."""
    env_map = {
        "MESHGAZE_SOURCE_PATH": ("source_path", str),
        "MESHGAZE_SOURCE_COMMAND": ("source_command", str),
        "MESHGAZE_INSTANCE": ("instance", str),
        "MESHGAZE_RATE_INTERVAL": ("rate_interval", float),
        "MESHGAZE_POLL_INTERVAL": ("poll_interval", float),
        "MESHGAZE_SI_UNITS": ("si_units", _truthy),
        "MESHGAZE_LOG_FILE": ("log_file", str),
        "MESHGAZE_LOG_LEVEL": ("log_level", str),
    }
    for env_key, (attr, converter) in env_map.items():
        val = os.environ.get(env_key)
        if val is not None:
            try:
                setattr(config, attr, converter(val))
            except ValueError as exc:
                raise ConfigError(f"{env_key}: {exc}") from exc


def _apply_overrides(config: AppConfig, overrides: dict) -> None:
    """Apply CLI argument overrides."""
    for key, value in overrides.items():
        if value is not None and hasattr(config, key):
            setattr(config, key, value)


def _validate(config: AppConfig) -> None:
    """Reject values the timers and formatter cannot work with."""
    for attr in ("poll_interval", "rate_interval", "source_timeout"):
        value = getattr(config, attr)
        if value <= 0:
            raise ConfigError(f"{attr} must be positive, got {value}")
    if config.precision < 0:
        raise ConfigError(f"precision must not be negative, got {config.precision}")
