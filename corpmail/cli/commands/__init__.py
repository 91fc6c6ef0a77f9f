"""CLI commands module."""

from . import account, config, session

__all__ = ["account", "config", "session"]
