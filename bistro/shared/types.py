"""Value types, identifiers, timestamps and errors shared by every context."""

from __future__ import annotations

import secrets
from dataclasses import dataclass
from datetime import datetime, timezone

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


class DomainError(Exception):
    """A business rule was violated."""


class NotFoundError(DomainError):
    """The requested entity does not exist."""


def new_id() -> str:
    """Return a fresh random identifier of 32 lower-case hex digits."""
    return secrets.token_hex(16)


def utc_timestamp() -> str:
    """Return the current UTC time as an ISO 8601 string with second precision."""
    return datetime.now(timezone.utc).strftime(TIMESTAMP_FORMAT)


@dataclass(frozen=True, order=True)
class Money:
    """An amount of money held as whole cents."""

    cents: int = 0

    def __add__(self, other: object) -> Money:
        if not isinstance(other, Money):
            return NotImplemented
        return Money(self.cents + other.cents)

    def __sub__(self, other: object) -> Money:
        if not isinstance(other, Money):
            return NotImplemented
        return Money(self.cents - other.cents)

    def to_dollars(self) -> float:
        """The amount in dollars."""
        return self.cents / 100.0