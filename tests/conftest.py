"""Shared fixtures.

Points the config file at a temporary directory so tests never read or
write the real ~/.config/corpmail.
"""

from pathlib import Path

import pytest

import corpmail.config
import corpmail.config.paths


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Redirect config paths to tmp_path and clear the config cache."""
    config_dir = tmp_path / "config"
    config_file = config_dir / "config.toml"

    monkeypatch.setattr(corpmail.config.paths, "CONFIG_DIR", config_dir)
    monkeypatch.setattr(corpmail.config, "CONFIG_FILE", config_file)
    monkeypatch.setattr(corpmail.config, "_cached_config", None)
    monkeypatch.setattr(
        corpmail.config, "DEFAULT_DATA_FILE", tmp_path / "data" / "accounts.jsonl"
    )

    return config_file
