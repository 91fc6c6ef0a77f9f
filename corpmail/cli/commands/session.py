"""Interactive session command.

Asks whether the operator is a new user, creates or loads the account,
then loops over the action menu until Exit is chosen.
"""

from pathlib import Path

import typer
from typing_extensions import Annotated

from corpmail.accounts import (
    AccountRecord,
    Department,
    Outcome,
    change_password,
    create_account,
    parse_capacity,
    reload_account,
    set_alternate_email,
    set_capacity,
)
from corpmail.accounts.models import DEPARTMENT_CHOICES
from corpmail.cli.common import echo_storage_warning, format_account_info, open_store
from corpmail.config import get_defaults, load_config
from corpmail.storage import RecordStore

MENU = """
**********
ENTER YOUR CHOICE
1. Show Info
2. Change Password
3. Change Mailbox Capacity
4. Set Alternate Email
5. Read Data from a File
6. Store Data in File
7. Exit"""

EXIT_CHOICE = 7


def session(
    data_file: Annotated[
        Path | None,
        typer.Option("--data-file", help="Account data file (defaults to config)"),
    ] = None,
):
    """Start an interactive account session."""
    store = open_store(data_file)

    record = None
    while record is None:
        answer = _prompt_yes_no("Are you a new user? (Y/N) ")
        if answer:
            record = _create_new_user()
        elif not store.exists:
            typer.echo("No data found.")
        else:
            record = _load_existing_user(store)
            if record is None:
                typer.echo("No such user found")

    _handle_user_interactions(record, store)


def _prompt_yes_no(text: str) -> bool:
    """Ask until the answer starts with Y or N."""
    while True:
        choice = typer.prompt(text, prompt_suffix=": ").strip()[:1].lower()
        if choice == "y":
            return True
        if choice == "n":
            return False
        typer.echo("**ENTER A VALID CHOICE**")


def _choose_department() -> Department:
    typer.echo("DEPARTMENTS:")
    for number, department in DEPARTMENT_CHOICES.items():
        typer.echo(f"{number}. {department.value}")

    while True:
        choice = typer.prompt("Enter the Department", type=int)
        try:
            return Department.from_choice(choice)
        except ValueError:
            typer.echo("**INVALID CHOICE**")


def _create_new_user() -> AccountRecord:
    first_name = typer.prompt("Enter your firstname")
    last_name = typer.prompt("Enter your lastname")
    typer.echo(f"New user: {first_name} {last_name}")

    department = _choose_department()
    defaults = get_defaults(load_config())
    return create_account(
        first_name,
        last_name,
        department,
        password_length=defaults["password_length"],
        mail_capacity=defaults["mail_capacity"],
    )


def _load_existing_user(store: RecordStore) -> AccountRecord | None:
    loaded = store.load_all()
    if loaded.degraded:
        typer.echo(f"Error reading emails: {'; '.join(loaded.errors)}")
    if not loaded.records:
        return None

    email = typer.prompt("Enter your email").strip()
    password = typer.prompt("Enter your password", hide_input=True)
    return store.find_by_credentials(loaded.records, email, password)


def _change_password(record: AccountRecord) -> None:
    if not _prompt_yes_no("ARE YOU SURE YOU WANT TO CHANGE YOUR PASSWORD? (Y/N) "):
        typer.echo("PASSWORD CHANGE CANCELED!")
        return

    current = typer.prompt("Enter your current password", hide_input=True)
    new_password = typer.prompt("Enter the new password", hide_input=True)
    result = change_password(record, current, new_password)
    typer.echo("PASSWORD CHANGED SUCCESSFULLY!" if result.ok else result.reason)


def _change_capacity(record: AccountRecord) -> None:
    typer.echo(f"Current capacity = {record.mail_capacity}mb")

    while True:
        text = typer.prompt("Enter new capacity")
        try:
            value = parse_capacity(text)
        except ValueError:
            typer.echo("Invalid input. Please enter a valid integer value.")
            continue

        result = set_capacity(record, value)
        if result.ok:
            break
        typer.echo(result.reason)

    typer.echo("MAILBOX CAPACITY CHANGED SUCCESSFULLY!")


def _set_alternate_email(record: AccountRecord) -> None:
    while True:
        candidate = typer.prompt("Enter new alternate email").strip()
        result = set_alternate_email(record, candidate)
        if result.ok:
            break
        typer.echo(result.reason)

    typer.echo("ALTERNATE EMAIL SET SUCCESSFULLY!")


def _read_from_file(record: AccountRecord, store: RecordStore) -> None:
    result = reload_account(record, store)
    if result.ok:
        typer.echo("Email read from file and updated.")
    elif result.outcome is Outcome.STORAGE_DEGRADED:
        echo_storage_warning(result)
        typer.echo("Email not found.")
    else:
        typer.echo(result.reason)


def _store_in_file(record: AccountRecord, store: RecordStore) -> None:
    result = store.upsert(record)
    if result.ok:
        typer.echo("Email written to file.")
    elif result.outcome is Outcome.STORAGE_DEGRADED:
        echo_storage_warning(result)


def _handle_user_interactions(record: AccountRecord, store: RecordStore) -> None:
    """Run the action menu until the operator exits."""
    while True:
        typer.echo(MENU)
        choice = typer.prompt("Enter your choice", type=int)

        if choice == 1:
            typer.echo(format_account_info(record))
        elif choice == 2:
            _change_password(record)
        elif choice == 3:
            _change_capacity(record)
        elif choice == 4:
            _set_alternate_email(record)
        elif choice == 5:
            _read_from_file(record, store)
        elif choice == 6:
            _store_in_file(record, store)
        elif choice == EXIT_CHOICE:
            typer.echo("\nThank you for using our service.")
            return
        else:
            typer.echo("INVALID CHOICE! ENTER AGAIN!")
