"""The floor's model: tables, menu items, seatings and the covers they hold.

A cover is one guest seated at a table.  It has no class of its own: the
number of covers lives on each ``Seating`` as ``cover_count``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from bistro.shared.events import DomainEvent
from bistro.shared.types import DomainError, Money, utc_timestamp


class TableStatus(Enum):
    """Whether a table can take a party."""

    AVAILABLE = "available"
    OCCUPIED = "occupied"
    RESERVED = "reserved"

    @classmethod
    def parse(cls, text: str) -> TableStatus:
        """Look up a status by its stored text."""
        try:
            return cls(text)
        except ValueError:
            raise ValueError(f"Unknown table status: {text}") from None


@dataclass
class Table:
    """A table in the dining room."""

    id: str
    table_number: int
    capacity: int
    status: TableStatus = TableStatus.AVAILABLE

    def occupy(self) -> None:
        """Seat a party; only an available or reserved table can take one."""
        if self.status not in (TableStatus.AVAILABLE, TableStatus.RESERVED):
            raise DomainError("Table is not available or reserved")
        self.status = TableStatus.OCCUPIED

    def turn(self) -> None:
        """Clear the table for the next party."""
        self.status = TableStatus.AVAILABLE

    def reserve(self) -> None:
        """Hold the table for a reservation."""
        self.status = TableStatus.RESERVED


@dataclass
class MenuItem:
    """The floor's view of an item: what guests see and whether they can have it."""

    id: str
    name: str
    description: str
    price: Money
    available: bool = True

    def mark_sold_out(self) -> None:
        self.available = False

    def restore(self) -> None:
        self.available = True


@dataclass
class Seating:
    """A party at a table, from the moment it sits until the table is cleared."""

    id: str
    table_id: str
    cover_count: int
    is_walk_in: bool
    reservation_name: str
    seated_at: str
    cleared_at: str = ""

    @classmethod
    def walk_in(cls, seating_id: str, table_id: str, cover_count: int) -> Seating:
        """Seat a party that arrived without a reservation, now."""
        return cls(seating_id, table_id, cover_count, True, "", utc_timestamp())

    @classmethod
    def reservation(
        cls, seating_id: str, table_id: str, cover_count: int, name: str
    ) -> Seating:
        """Seat a party under a reservation name, now."""
        return cls(seating_id, table_id, cover_count, False, name, utc_timestamp())

    def clear(self) -> None:
        """Record that the party has left."""
        self.cleared_at = utc_timestamp()


@dataclass(frozen=True)
class WalkIn:
    """A party that arrives without a reservation."""

    party_size: int


@dataclass(frozen=True)
class WalkInSeated(DomainEvent):
    table_id: str
    cover_count: int


@dataclass(frozen=True)
class ReservationSeated(DomainEvent):
    table_id: str
    name: str
    cover_count: int


@dataclass(frozen=True)
class TableTurned(DomainEvent):
    table_id: str
    cover_count: int


@dataclass(frozen=True)
class MenuItemSoldOut(DomainEvent):
    menu_item_id: str
    name: str