"""Configuration schema definitions.

Uses TypedDict for type safety without runtime overhead.
These types match the structure of config.toml.
"""

from typing import TypedDict


class DefaultsConfig(TypedDict, total=False):
    """Defaults applied to newly created accounts.

    Attributes:
        mail_capacity: Initial mailbox capacity in megabytes.
        password_length: Length of the generated initial password.
    """

    mail_capacity: int
    password_length: int


class StorageConfig(TypedDict, total=False):
    """Where account records are stored.

    Attributes:
        data_file: Path of the account data file (e.g., "~/accounts.jsonl").
    """

    data_file: str


class LoggingConfig(TypedDict, total=False):
    """Logging settings.

    Attributes:
        level: Log level name ("DEBUG", "INFO", "WARNING", ...).
    """

    level: str


class CorpmailConfig(TypedDict, total=False):
    """Root configuration structure."""

    defaults: DefaultsConfig
    storage: StorageConfig
    logging: LoggingConfig
