"""Account operations: creation, password generation and field updates.

Mutations return an OperationResult and leave the record untouched when
rejected.

Usage:
    from corpmail.accounts import create_account, set_capacity

    record = create_account("Jane", "Doe", Department.DEVELOPMENT)
    result = set_capacity(record, 1000)
"""

import logging
import secrets
import string
from typing import TYPE_CHECKING

from .models import (
    DEFAULT_MAIL_CAPACITY,
    AccountRecord,
    Department,
    derive_email,
    is_valid_alternate_email,
)
from .results import OperationResult

if TYPE_CHECKING:
    from corpmail.storage.records import RecordStore

logger = logging.getLogger(__name__)

CAPITAL_CHARS = string.ascii_uppercase
SMALL_CHARS = string.ascii_lowercase
NUMBERS = string.digits
SYMBOLS = "!@#$%&?"
PASSWORD_ALPHABET = CAPITAL_CHARS + SMALL_CHARS + NUMBERS + SYMBOLS

INITIAL_PASSWORD_LENGTH = 8


def generate_password(length: int = INITIAL_PASSWORD_LENGTH) -> str:
    """Generate a random password from upper, lower, digit and symbol characters.

    Args:
        length: Number of characters.

    Raises:
        ValueError: If length is less than 1.
    """
    if length < 1:
        raise ValueError(f"Password length must be at least 1, got {length}")
    return "".join(secrets.choice(PASSWORD_ALPHABET) for _ in range(length))


def create_account(
    first_name: str,
    last_name: str,
    department: Department,
    *,
    password_length: int = INITIAL_PASSWORD_LENGTH,
    mail_capacity: int = DEFAULT_MAIL_CAPACITY,
) -> AccountRecord:
    """Create a new account with a generated password and derived email.

    Args:
        first_name: User's first name.
        last_name: User's last name.
        department: Department the user belongs to.
        password_length: Length of the generated initial password.
        mail_capacity: Initial mailbox capacity in megabytes.

    Returns:
        The new, unsaved account record.

    Raises:
        ValueError: If mail_capacity is negative or password_length below 1.
    """
    if mail_capacity < 0:
        raise ValueError(f"Mail capacity cannot be negative, got {mail_capacity}")

    record = AccountRecord(
        first_name=first_name,
        last_name=last_name,
        department=department,
        email=derive_email(first_name, last_name, department),
        password=generate_password(password_length),
        mail_capacity=mail_capacity,
    )
    logger.info("Created account %s", record.email)
    return record


def change_password(
    record: AccountRecord, current_attempt: str, new_password: str
) -> OperationResult:
    """Replace the password if the current one is confirmed."""
    if current_attempt != record.password:
        logger.info("Password change rejected for %s", record.email)
        return OperationResult.rejected("INCORRECT PASSWORD!")

    if not new_password:
        return OperationResult.rejected("Password cannot be empty.")

    record.password = new_password
    return OperationResult.accepted()


def set_capacity(record: AccountRecord, new_value: int) -> OperationResult:
    """Set the mailbox capacity in megabytes."""
    if new_value < 0:
        return OperationResult.rejected(
            "Capacity cannot be negative. Please enter a non-negative value."
        )

    record.mail_capacity = new_value
    return OperationResult.accepted()


def set_alternate_email(record: AccountRecord, candidate: str) -> OperationResult:
    """Set the alternate email if it has a valid format."""
    if not is_valid_alternate_email(candidate):
        return OperationResult.rejected(
            "Invalid email format. Please enter a valid email address."
        )

    record.alter_email = candidate
    return OperationResult.accepted()


def parse_capacity(text: str) -> int:
    """Parse a capacity typed at the console.

    Raises:
        ValueError: If the text is not an integer.
    """
    return int(text.strip())


def reload_account(record: AccountRecord, store: "RecordStore") -> OperationResult:
    """Refresh a record in place from the stored copy with the same credentials.

    The stored account is matched on the record's current email and
    password. On a match every field is copied onto the record.
    """
    loaded = store.load_all()
    stored = store.find_by_credentials(
        loaded.records, record.email, record.password
    )

    if stored is None:
        if loaded.degraded:
            return OperationResult.degraded("; ".join(loaded.errors))
        return OperationResult.rejected("Email not found.")

    record.update_from(stored)
    return OperationResult.accepted()
