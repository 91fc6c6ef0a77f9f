"""Account model and operations.

Usage:
    from corpmail.accounts import Department, create_account

    record = create_account("Jane", "Doe", Department.DEVELOPMENT)
"""

from .models import (
    AccountRecord,
    Department,
    derive_email,
    find_by_email,
    is_valid_alternate_email,
)
from .results import OperationResult, Outcome
from .service import (
    change_password,
    create_account,
    generate_password,
    parse_capacity,
    reload_account,
    set_alternate_email,
    set_capacity,
)

__all__ = [
    "AccountRecord",
    "Department",
    "OperationResult",
    "Outcome",
    "change_password",
    "create_account",
    "derive_email",
    "find_by_email",
    "generate_password",
    "is_valid_alternate_email",
    "parse_capacity",
    "reload_account",
    "set_alternate_email",
    "set_capacity",
]
