"""Helpers shared by the account and session commands."""

from pathlib import Path

import typer

from corpmail.accounts import AccountRecord, OperationResult, Outcome
from corpmail.config import get_data_file, load_config
from corpmail.storage import RecordStore


def open_store(data_file: Path | None = None) -> RecordStore:
    """Open the record store at data_file, or at the configured location."""
    if data_file is None:
        data_file = get_data_file(load_config())
    return RecordStore(data_file)


def format_account_info(record: AccountRecord) -> str:
    """Render an account for display."""
    alternate = record.alter_email or "none"
    return "\n".join(
        [
            f"NAME: {record.first_name} {record.last_name}",
            f"DEPARTMENT: {record.department.value}",
            f"EMAIL: {record.email}",
            f"PASSWORD: {record.password}",
            f"MAILBOX CAPACITY: {record.mail_capacity}mb",
            f"ALTERNATIVE EMAIL: {alternate}",
        ]
    )


def echo_storage_warning(result: OperationResult) -> None:
    """Warn on stderr if the data file could not be fully read or written."""
    if result.outcome is Outcome.STORAGE_DEGRADED:
        typer.echo(f"Warning: account data may be incomplete: {result.reason}", err=True)
