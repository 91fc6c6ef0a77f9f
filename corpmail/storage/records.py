"""Flat-file storage for account records.

The data file holds one JSON object per line, one line per account:

    {"first_name": "Jane", "last_name": "Doe", "department": "Development",
     "email": "jane.doe@development.company.com", "password": "...",
     "mail_capacity": 500, "alter_email": null}

Every save reads the whole collection, replaces or appends the record
keyed by its email, and rewrites the whole file. There is no locking:
two processes saving at the same time race, and the last full rewrite
wins.
"""

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from corpmail.accounts.models import AccountRecord, find_by_email
from corpmail.accounts.results import OperationResult


logger = logging.getLogger(__name__)


@dataclass
class LoadResult:
    """Records parsed from the data file and any errors hit along the way.

    A non-empty errors list means the records are a best-effort subset
    of what the file contains.
    """

    records: list[AccountRecord] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def degraded(self) -> bool:
        return bool(self.errors)

    def add_error(self, error: str) -> None:
        logger.warning("Error reading accounts: %s", error)
        self.errors.append(error)


class RecordStore:
    """Whole-collection persistence of account records in a single file.

    Errors never escape: they are logged and reported through LoadResult
    or a STORAGE_DEGRADED OperationResult.

    Example:
        store = RecordStore(Path("~/.local/share/corpmail/accounts.jsonl"))
        store.upsert(record)
        loaded = store.load_all()
        match = RecordStore.find_by_credentials(loaded.records, email, password)
    """

    def __init__(self, path: Path):
        """Initialize the store.

        Args:
            path: Data file location. Created on first save if missing.
        """
        self._path = Path(path).expanduser()

    @property
    def path(self) -> Path:
        """Get the data file path."""
        return self._path

    @property
    def exists(self) -> bool:
        """Whether the data file is present."""
        return self._path.is_file()

    def ensure_file_exists(self) -> bool:
        """Create the data file and its parent directories if needed.

        Safe to call multiple times.

        Returns:
            True if the file exists afterwards, False if it could not be created.
        """
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.touch(exist_ok=True)
        except OSError as e:
            logger.error("Error creating the directory or the file: %s", e)
            return False
        return True

    def load_all(self) -> LoadResult:
        """Read every account from the data file.

        A missing or empty file yields no records. Lines that cannot be
        decoded are logged and skipped; the rest are still returned.
        """
        result = LoadResult()

        if not self._path.exists():
            return result

        try:
            content = self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            result.add_error(str(e))
            return result

        for line_number, line in enumerate(content.splitlines(), start=1):
            if not line.strip():
                continue
            try:
                data = json.loads(line)
                if not isinstance(data, dict):
                    raise TypeError("expected a JSON object")
                result.records.append(AccountRecord.from_dict(data))
            except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
                result.add_error(f"line {line_number}: {e}")

        logger.debug("Loaded %d accounts from %s", len(result.records), self._path)
        return result

    @staticmethod
    def find_by_credentials(
        records: list[AccountRecord], email: str, password: str
    ) -> AccountRecord | None:
        """Find the first record matching both email and password exactly."""
        for record in records:
            if record.email == email and record.password == password:
                return record
        return None

    def upsert(self, record: AccountRecord) -> OperationResult:
        """Save a record, replacing any stored record with the same email.

        Reads the full collection, overwrites the matching entry in place
        or appends, then rewrites the whole file.

        Returns:
            ACCEPTED on success. STORAGE_DEGRADED if the file could not be
            written, or if it was only partly readable (in which case the
            unreadable entries are dropped from the rewritten file).
        """
        if not self.ensure_file_exists():
            return OperationResult.degraded(f"Cannot create {self._path}")

        loaded = self.load_all()
        records = loaded.records

        index = find_by_email(records, record.email)
        if index is None:
            records.append(record)
        else:
            records[index] = record

        try:
            self._write_all(records)
        except OSError as e:
            logger.error("Error writing email to file: %s", e)
            return OperationResult.degraded(str(e))

        logger.info("Saved %s to %s", record.email, self._path)

        if loaded.degraded:
            return OperationResult.degraded("; ".join(loaded.errors))
        return OperationResult.accepted()

    def _write_all(self, records: list[AccountRecord]) -> None:
        """Rewrite the data file with the given records.

        Writes to a temporary sibling first, then renames it over the
        data file.
        """
        tmp_path = self._path.with_name(self._path.name + ".tmp")
        lines = [json.dumps(record.to_dict()) for record in records]
        try:
            tmp_path.write_text("".join(line + "\n" for line in lines), encoding="utf-8")
            # Plaintext passwords: owner read/write only
            tmp_path.chmod(0o600)
            os.replace(tmp_path, self._path)
        except OSError:
            try:
                tmp_path.unlink(missing_ok=True)
            except OSError as e:
                logger.warning("Could not remove %s: %s", tmp_path, e)
            raise
