"""Configuration management module.

Handles loading, saving, and accessing the corpmail configuration.
Config is stored at ~/.config/corpmail/config.toml

Usage:
    from corpmail.config import load_config, get_data_file

    config = load_config()
    data_file = get_data_file(config)
"""

import logging
import tomllib
from pathlib import Path

import tomli_w

from corpmail.accounts.models import DEFAULT_MAIL_CAPACITY
from corpmail.accounts.service import INITIAL_PASSWORD_LENGTH

from .paths import CONFIG_FILE, DEFAULT_DATA_FILE, ensure_config_dir
from .schema import CorpmailConfig, DefaultsConfig
from .template import CONFIG_TEMPLATE

# Re-export for convenience
__all__ = [
    "load_config",
    "save_config",
    "init_config",
    "get_data_file",
    "get_defaults",
    "get_log_level",
    "set_config_value",
    "CONFIG_FILE",
]

logger = logging.getLogger(__name__)

# Known integer fields and their minimum values
INT_FIELDS = {"mail_capacity": 0, "password_length": 1}

# Module-level cache for loaded config.
# Avoids repeated disk reads during a single CLI invocation.
_cached_config: CorpmailConfig | None = None


def load_config(*, force_reload: bool = False) -> CorpmailConfig:
    """Load configuration from disk.

    Returns empty dict if config file doesn't exist.
    Uses module-level caching to avoid repeated disk reads.

    Args:
        force_reload: Bypass cache and read from disk (useful after saving).

    Returns:
        The configuration dictionary.
    """
    global _cached_config

    if _cached_config is not None and not force_reload:
        return _cached_config

    if not CONFIG_FILE.exists():
        _cached_config = {}
        return _cached_config

    with open(CONFIG_FILE, "rb") as f:
        _cached_config = tomllib.load(f)

    return _cached_config


def save_config(config: CorpmailConfig) -> None:
    """Save configuration to disk.

    Creates config directory if needed. Updates the module cache.
    """
    global _cached_config

    ensure_config_dir()

    with open(CONFIG_FILE, "wb") as f:
        tomli_w.dump(config, f)

    _cached_config = config


def init_config(*, overwrite: bool = False) -> bool:
    """Initialize config directory and create template config file.

    Args:
        overwrite: If True, overwrite existing config file.

    Returns:
        True if config was created, False if it already existed.
    """
    ensure_config_dir()

    if CONFIG_FILE.exists() and not overwrite:
        return False

    CONFIG_FILE.write_text(CONFIG_TEMPLATE)
    return True


def get_data_file(config: CorpmailConfig) -> Path:
    """Get the account data file path, with ~ expanded."""
    data_file = config.get("storage", {}).get("data_file")
    if not data_file:
        return DEFAULT_DATA_FILE
    return Path(data_file).expanduser()


def get_defaults(config: CorpmailConfig) -> DefaultsConfig:
    """Get new-account defaults, filling in anything the config leaves out.

    Out-of-range or non-integer values are logged and replaced by the
    built-in default.
    """
    configured = config.get("defaults", {})
    defaults: DefaultsConfig = {
        "mail_capacity": DEFAULT_MAIL_CAPACITY,
        "password_length": INITIAL_PASSWORD_LENGTH,
    }

    for key in defaults:
        if key not in configured:
            continue
        try:
            defaults[key] = _check_int_field(key, configured[key])
        except ValueError as e:
            logger.warning("Ignoring defaults.%s in %s: %s", key, CONFIG_FILE, e)

    return defaults


def get_log_level(config: CorpmailConfig) -> str:
    """Get the configured log level name (defaults to WARNING)."""
    return config.get("logging", {}).get("level", "WARNING").upper()


def set_config_value(key: str, value: str) -> None:
    """Set a configuration value using dot notation.

    Examples:
        set_config_value("defaults.mail_capacity", "1000")
        set_config_value("storage.data_file", "~/accounts.jsonl")

    Args:
        key: Dot-separated key path (e.g., "defaults.mail_capacity").
        value: Value to set (will be type-converted for known fields).

    Raises:
        ValueError: If value cannot be converted to expected type.
    """
    config = load_config(force_reload=True)

    parts = key.split(".")

    # Navigate to parent dict, creating intermediate dicts as needed
    current: dict = config
    for part in parts[:-1]:
        if part not in current:
            current[part] = {}
        current = current[part]

    final_key = parts[-1]
    current[final_key] = _convert_value(final_key, value)

    save_config(config)


def _convert_value(key: str, value: str) -> str | int:
    """Convert string value to appropriate type based on field name.

    Known integer fields are converted to int, everything else stays str.

    Raises:
        ValueError: If value cannot be converted, or is a negative
            capacity or a password length below 1.
    """
    if key not in INT_FIELDS:
        return value

    return _check_int_field(key, int(value))


def _check_int_field(key: str, value: object) -> int:
    """Check a known integer field is an int within its allowed range.

    Raises:
        ValueError: If the value is not an integer or is out of range.
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValueError(f"{key} must be an integer, got {value!r}")
    if value < INT_FIELDS[key]:
        raise ValueError(f"{key} must be at least {INT_FIELDS[key]}, got {value}")
    return value
