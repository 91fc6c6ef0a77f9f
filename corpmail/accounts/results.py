"""Outcome of an account or storage operation."""

from dataclasses import dataclass
from enum import Enum


class Outcome(str, Enum):
    """How an operation ended."""

    ACCEPTED = "accepted"
    REJECTED = "rejected"
    STORAGE_DEGRADED = "storage_degraded"


@dataclass(frozen=True)
class OperationResult:
    """Result of a mutation, lookup or save.

    REJECTED means the record was left unchanged. STORAGE_DEGRADED means
    the data file could not be fully read or written; reason carries
    the details.
    """

    outcome: Outcome
    reason: str = ""

    @property
    def ok(self) -> bool:
        return self.outcome is Outcome.ACCEPTED

    @classmethod
    def accepted(cls) -> "OperationResult":
        return cls(Outcome.ACCEPTED)

    @classmethod
    def rejected(cls, reason: str) -> "OperationResult":
        return cls(Outcome.REJECTED, reason)

    @classmethod
    def degraded(cls, reason: str) -> "OperationResult":
        return cls(Outcome.STORAGE_DEGRADED, reason)
