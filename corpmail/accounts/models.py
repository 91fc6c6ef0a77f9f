"""Data models for corporate email accounts.

An account is identified by its derived email address:
<first>.<last>@<department>.company.com, all lowercase.
"""

import re
from dataclasses import asdict, dataclass
from enum import Enum


COMPANY_DOMAIN = "company.com"
DEFAULT_MAIL_CAPACITY = 500

# Pattern an alternate email must fully match
ALTERNATE_EMAIL_PATTERN = re.compile(r"^[A-Za-z0-9._]+@\w{3,}\.(org|com)$", re.ASCII)


class Department(str, Enum):
    """Departments an account can belong to."""

    ADMINISTRATION = "Administration"
    DEVELOPMENT = "Development"
    ACCOUNTING = "Accounting"
    SALES = "Sales"
    NONE = "None"

    @classmethod
    def from_choice(cls, choice: int) -> "Department":
        """Map a console menu number to a department.

        Menu numbers are 1-4 for the named departments and 0 for None.

        Raises:
            ValueError: If the number is not on the menu.
        """
        if choice in DEPARTMENT_CHOICES:
            return DEPARTMENT_CHOICES[choice]
        raise ValueError(f"Invalid department choice: {choice}")

    @classmethod
    def from_name(cls, name: str) -> "Department":
        """Look up a department by name, ignoring case.

        Raises:
            ValueError: If no department has this name.
        """
        for department in cls:
            if department.value.lower() == str(name).strip().lower():
                return department
        raise ValueError(f"Unknown department: {name}")


DEPARTMENT_CHOICES = {
    1: Department.ADMINISTRATION,
    2: Department.DEVELOPMENT,
    3: Department.ACCOUNTING,
    4: Department.SALES,
    0: Department.NONE,
}


def derive_email(first_name: str, last_name: str, department: Department) -> str:
    """Build the primary email address for an account."""
    return (
        f"{first_name.lower()}.{last_name.lower()}"
        f"@{department.value.lower()}.{COMPANY_DOMAIN}"
    )


def is_valid_alternate_email(candidate: str) -> bool:
    """Check that an address looks like name@domain.(org|com).

    The domain label must be at least three word characters long.
    """
    return ALTERNATE_EMAIL_PATTERN.fullmatch(candidate) is not None


@dataclass
class AccountRecord:
    """A single corporate email account.

    Dataclass equality compares every field. Use find_by_email() when
    looking an account up by its email key.
    """

    first_name: str
    last_name: str
    department: Department
    email: str
    password: str
    mail_capacity: int = DEFAULT_MAIL_CAPACITY
    alter_email: str | None = None

    def derive_email(self) -> str:
        """Recompute the primary email from this record's name and department."""
        return derive_email(self.first_name, self.last_name, self.department)

    def update_from(self, other: "AccountRecord") -> None:
        """Copy every field of another record onto this one."""
        self.first_name = other.first_name
        self.last_name = other.last_name
        self.department = other.department
        self.email = other.email
        self.password = other.password
        self.mail_capacity = other.mail_capacity
        self.alter_email = other.alter_email

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        data = asdict(self)
        data["department"] = self.department.value
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "AccountRecord":
        """Build a record from its serialized form.

        Raises:
            KeyError: If a required field is missing.
            ValueError: If the department, capacity or alternate email is invalid.
            TypeError: If a field has the wrong type.
        """
        capacity = data.get("mail_capacity", DEFAULT_MAIL_CAPACITY)
        if not isinstance(capacity, int) or isinstance(capacity, bool):
            raise TypeError(f"mail_capacity must be an integer, got {capacity!r}")
        if capacity < 0:
            raise ValueError(f"mail_capacity cannot be negative: {capacity}")

        for key in ("first_name", "last_name", "email", "password"):
            if not isinstance(data[key], str):
                raise TypeError(f"{key} must be a string")

        if not data["password"]:
            raise ValueError("password cannot be empty")

        alter_email = data.get("alter_email") or None
        if alter_email is not None:
            if not isinstance(alter_email, str):
                raise TypeError("alter_email must be a string")
            if not is_valid_alternate_email(alter_email):
                raise ValueError(f"Invalid alter_email: {alter_email}")

        return cls(
            first_name=data["first_name"],
            last_name=data["last_name"],
            department=Department.from_name(data["department"]),
            email=data["email"],
            password=data["password"],
            mail_capacity=capacity,
            alter_email=alter_email,
        )


def find_by_email(records: list[AccountRecord], email: str) -> int | None:
    """Return the index of the first record with this email, or None."""
    for index, record in enumerate(records):
        if record.email == email:
            return index
    return None
