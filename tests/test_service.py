"""Tests for account operations."""

from pathlib import Path
from unittest.mock import patch

import pytest

from corpmail.accounts import (
    AccountRecord,
    Department,
    Outcome,
    change_password,
    create_account,
    generate_password,
    parse_capacity,
    reload_account,
    set_alternate_email,
    set_capacity,
)
from corpmail.accounts.service import PASSWORD_ALPHABET
from corpmail.storage import RecordStore


@pytest.fixture
def record() -> AccountRecord:
    return AccountRecord(
        first_name="Jane",
        last_name="Doe",
        department=Department.DEVELOPMENT,
        email="jane.doe@development.company.com",
        password="Secret1!",
    )


@pytest.fixture
def store(tmp_path: Path) -> RecordStore:
    return RecordStore(tmp_path / "accounts.jsonl")


class TestGeneratePassword:
    """Tests for generate_password."""

    def test_alphabet_has_69_characters(self):
        """26 upper + 26 lower + 10 digits + 7 symbols."""
        assert len(PASSWORD_ALPHABET) == 69
        assert len(set(PASSWORD_ALPHABET)) == 69

    @pytest.mark.parametrize("length", [1, 8, 64])
    def test_length_and_alphabet(self, length: int):
        """Passwords have exactly the requested length, drawn from the alphabet."""
        password = generate_password(length)
        assert len(password) == length
        assert set(password) <= set(PASSWORD_ALPHABET)

    def test_default_length(self):
        assert len(generate_password()) == 8

    @pytest.mark.parametrize("length", [0, -3])
    def test_rejects_empty(self, length: int):
        """A password is never empty."""
        with pytest.raises(ValueError):
            generate_password(length)


class TestCreateAccount:
    """Tests for create_account."""

    def test_builds_record(self):
        """New account gets derived email, generated password and defaults."""
        with patch(
            "corpmail.accounts.service.generate_password", return_value="Init123!"
        ) as mock_gen:
            record = create_account("Jane", "Doe", Department.DEVELOPMENT)

        mock_gen.assert_called_once_with(8)
        assert record.email == "jane.doe@development.company.com"
        assert record.password == "Init123!"
        assert record.department is Department.DEVELOPMENT
        assert record.mail_capacity == 500
        assert record.alter_email is None

    def test_custom_defaults(self):
        record = create_account(
            "Bob", "Smith", Department.SALES, password_length=12, mail_capacity=1000
        )
        assert len(record.password) == 12
        assert record.mail_capacity == 1000

    def test_rejects_negative_capacity(self):
        """A new account never starts with a negative capacity."""
        with pytest.raises(ValueError, match="cannot be negative"):
            create_account("Jane", "Doe", Department.SALES, mail_capacity=-5)

    def test_accepts_zero_capacity(self):
        record = create_account("Jane", "Doe", Department.SALES, mail_capacity=0)
        assert record.mail_capacity == 0

    def test_rejects_empty_password_length(self):
        with pytest.raises(ValueError):
            create_account("Jane", "Doe", Department.SALES, password_length=0)


class TestChangePassword:
    """Tests for change_password."""

    def test_accepts_correct_current_password(self, record: AccountRecord):
        result = change_password(record, "Secret1!", "NewPass2?")

        assert result.ok
        assert record.password == "NewPass2?"

    def test_rejects_wrong_current_password(self, record: AccountRecord):
        """Wrong confirmation leaves the password unchanged."""
        result = change_password(record, "secret1!", "NewPass2?")

        assert result.outcome is Outcome.REJECTED
        assert result.reason == "INCORRECT PASSWORD!"
        assert record.password == "Secret1!"

    def test_rejects_empty_new_password(self, record: AccountRecord):
        result = change_password(record, "Secret1!", "")

        assert result.outcome is Outcome.REJECTED
        assert record.password == "Secret1!"


class TestSetCapacity:
    """Tests for set_capacity."""

    def test_rejects_negative(self, record: AccountRecord):
        result = set_capacity(record, -1)

        assert result.outcome is Outcome.REJECTED
        assert record.mail_capacity == 500

    def test_accepts_zero(self, record: AccountRecord):
        result = set_capacity(record, 0)

        assert result.ok
        assert record.mail_capacity == 0

    def test_accepts_positive(self, record: AccountRecord):
        assert set_capacity(record, 2048).ok
        assert record.mail_capacity == 2048


class TestParseCapacity:
    """Tests for parse_capacity."""

    def test_parses_integer(self):
        assert parse_capacity(" 750 ") == 750
        assert parse_capacity("-2") == -2

    @pytest.mark.parametrize("text", ["abc", "1.5", ""])
    def test_rejects_non_integer(self, text: str):
        with pytest.raises(ValueError):
            parse_capacity(text)


class TestSetAlternateEmail:
    """Tests for set_alternate_email."""

    def test_accepts_valid(self, record: AccountRecord):
        result = set_alternate_email(record, "jane@home.org")

        assert result.ok
        assert record.alter_email == "jane@home.org"

    def test_rejects_invalid(self, record: AccountRecord):
        record.alter_email = "old@home.org"

        result = set_alternate_email(record, "a@b.net")

        assert result.outcome is Outcome.REJECTED
        assert record.alter_email == "old@home.org"


class TestReloadAccount:
    """Tests for reload_account."""

    def test_hydrates_from_store(self, record: AccountRecord, store: RecordStore):
        """Unsaved in-memory changes are replaced by the stored values."""
        record.alter_email = "jane@home.org"
        store.upsert(record)

        record.mail_capacity = 10
        record.alter_email = None
        result = reload_account(record, store)

        assert result.ok
        assert record.mail_capacity == 500
        assert record.alter_email == "jane@home.org"

    def test_not_found_when_password_differs(
        self, record: AccountRecord, store: RecordStore
    ):
        """Matching requires both email and password."""
        store.upsert(record)
        record.password = "Changed9?"

        result = reload_account(record, store)

        assert result.outcome is Outcome.REJECTED
        assert result.reason == "Email not found."
        assert record.password == "Changed9?"

    def test_not_found_without_file(self, record: AccountRecord, store: RecordStore):
        result = reload_account(record, store)
        assert result.outcome is Outcome.REJECTED

    def test_degraded_when_file_corrupt(
        self, record: AccountRecord, store: RecordStore
    ):
        store.path.write_text("{not json\n")

        result = reload_account(record, store)

        assert result.outcome is Outcome.STORAGE_DEGRADED
        assert "line 1" in result.reason


class TestEndToEnd:
    """Create, save and reload an account."""

    def test_create_save_reload(self, store: RecordStore):
        record = create_account("Jane", "Doe", Department.DEVELOPMENT)
        initial_password = record.password

        assert record.email == "jane.doe@development.company.com"
        assert record.mail_capacity == 500
        assert record.alter_email is None

        assert store.upsert(record).ok

        loaded = store.load_all()
        found = RecordStore.find_by_credentials(
            loaded.records, "jane.doe@development.company.com", initial_password
        )

        assert found is not None
        assert found == record
        assert found is not record
