"""Account command implementation.

Scriptable, non-interactive counterparts of the session menu. Every
command that changes an account saves it back to the data file.
"""

from pathlib import Path

import typer
from typing_extensions import Annotated

from corpmail.accounts import (
    AccountRecord,
    Department,
    OperationResult,
    change_password,
    create_account,
    find_by_email,
    set_alternate_email,
    set_capacity,
)
from corpmail.cli.common import echo_storage_warning, format_account_info, open_store
from corpmail.config import get_defaults, load_config
from corpmail.storage import RecordStore

app = typer.Typer(help="Create, inspect and update accounts")

DataFileOption = Annotated[
    Path | None,
    typer.Option("--data-file", help="Account data file (defaults to config)"),
]
EmailOption = Annotated[str, typer.Option("--email", "-e", help="Account email")]
PasswordOption = Annotated[
    str,
    typer.Option(
        "--password", "-p", help="Account password", prompt=True, hide_input=True
    ),
]


def _parse_department(value: str) -> Department:
    """Accept a department name or its menu number."""
    try:
        if value.strip().isdigit():
            return Department.from_choice(int(value))
        return Department.from_name(value)
    except ValueError as e:
        raise typer.BadParameter(str(e))


def _require_account(store: RecordStore, email: str, password: str) -> AccountRecord:
    """Load the account matching these credentials or exit with an error."""
    loaded = store.load_all()
    if loaded.degraded:
        echo_storage_warning(OperationResult.degraded("; ".join(loaded.errors)))

    record = store.find_by_credentials(loaded.records, email, password)
    if record is None:
        typer.echo("No such user found", err=True)
        raise typer.Exit(1)
    return record


def _apply_and_save(
    store: RecordStore, record: AccountRecord, result: OperationResult, message: str
) -> None:
    """Save the record if the change was accepted, otherwise exit with the reason."""
    if not result.ok:
        typer.echo(result.reason, err=True)
        raise typer.Exit(1)

    saved = store.upsert(record)
    if not saved.ok:
        echo_storage_warning(saved)
        raise typer.Exit(1)

    typer.echo(message)


@app.command()
def create(
    first_name: Annotated[str, typer.Argument(help="User's first name")],
    last_name: Annotated[str, typer.Argument(help="User's last name")],
    department: Annotated[
        str,
        typer.Option(
            "--department",
            "-d",
            help="Administration, Development, Accounting, Sales or None (or 1-4, 0)",
        ),
    ] = Department.NONE.value,
    data_file: DataFileOption = None,
):
    """Create a new account and save it.

    Prints the derived email address and the generated initial password.
    """
    dept = _parse_department(department)
    defaults = get_defaults(load_config())

    record = create_account(
        first_name,
        last_name,
        dept,
        password_length=defaults["password_length"],
        mail_capacity=defaults["mail_capacity"],
    )

    store = open_store(data_file)
    if find_by_email(store.load_all().records, record.email) is not None:
        typer.echo(
            f"Warning: {record.email} already exists and will be overwritten.",
            err=True,
        )

    saved = store.upsert(record)
    if not saved.ok:
        echo_storage_warning(saved)
        raise typer.Exit(1)

    typer.echo(f"New user: {first_name} {last_name}")
    typer.echo(f"Email: {record.email}")
    typer.echo(f"Password: {record.password}")


@app.command()
def show(
    email: EmailOption,
    password: PasswordOption,
    data_file: DataFileOption = None,
):
    """Display account details."""
    store = open_store(data_file)
    record = _require_account(store, email, password)
    typer.echo(format_account_info(record))


@app.command("passwd")
def passwd(
    email: EmailOption,
    password: PasswordOption,
    new_password: Annotated[
        str,
        typer.Option(
            "--new-password",
            help="New password",
            prompt=True,
            hide_input=True,
            confirmation_prompt=True,
        ),
    ],
    data_file: DataFileOption = None,
):
    """Change an account's password."""
    store = open_store(data_file)
    record = _require_account(store, email, password)
    result = change_password(record, password, new_password)
    _apply_and_save(store, record, result, "PASSWORD CHANGED SUCCESSFULLY!")


@app.command()
def capacity(
    value: Annotated[int, typer.Argument(help="New mailbox capacity in mb")],
    email: EmailOption,
    password: PasswordOption,
    data_file: DataFileOption = None,
):
    """Change the mailbox capacity."""
    store = open_store(data_file)
    record = _require_account(store, email, password)
    result = set_capacity(record, value)
    _apply_and_save(store, record, result, "MAILBOX CAPACITY CHANGED SUCCESSFULLY!")


@app.command()
def alternate(
    address: Annotated[str, typer.Argument(help="Alternate email address")],
    email: EmailOption,
    password: PasswordOption,
    data_file: DataFileOption = None,
):
    """Set the alternate email address."""
    store = open_store(data_file)
    record = _require_account(store, email, password)
    result = set_alternate_email(record, address)
    _apply_and_save(store, record, result, "ALTERNATE EMAIL SET SUCCESSFULLY!")


@app.command("list")
def list_accounts(data_file: DataFileOption = None):
    """List stored accounts (email and department only)."""
    store = open_store(data_file)
    loaded = store.load_all()
    if loaded.degraded:
        echo_storage_warning(OperationResult.degraded("; ".join(loaded.errors)))

    if not loaded.records:
        typer.echo("No accounts stored.")
        return

    for record in loaded.records:
        typer.echo(f"{record.email}  ({record.department.value})")
