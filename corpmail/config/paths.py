"""Path constants and directory utilities for corpmail.

Follows the XDG Base Directory specification:
- Config: ~/.config/corpmail/
- Data: ~/.local/share/corpmail/
"""

from pathlib import Path


# XDG-compliant config directory
CONFIG_DIR = Path.home() / ".config" / "corpmail"
CONFIG_FILE = CONFIG_DIR / "config.toml"

# Account records live in the data directory, not alongside the config
DATA_DIR = Path.home() / ".local" / "share" / "corpmail"
DEFAULT_DATA_FILE = DATA_DIR / "accounts.jsonl"


def ensure_config_dir() -> Path:
    """Create config directory if it doesn't exist.

    Returns the config directory path.
    """
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    return CONFIG_DIR
