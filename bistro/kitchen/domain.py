"""The kitchen's model: dishes, stations and fire orders."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from bistro.shared.events import DomainEvent
from bistro.shared.types import DomainError, NotFoundError, utc_timestamp


class Station(Enum):
    """A station on the line."""

    GRILL = "grill"
    SAUCE = "sauce"
    COLD = "cold"
    PASTRY = "pastry"

    @classmethod
    def parse(cls, text: str) -> Station:
        """Look up a station by its stored text."""
        try:
            return cls(text)
        except ValueError:
            raise ValueError(f"Unknown station: {text}") from None


class FireLineStatus(Enum):
    """Where a single dish of a fire order stands."""

    WAITING = "waiting"
    FIRED = "fired"
    PLATED = "plated"

    @classmethod
    def parse(cls, text: str) -> FireLineStatus:
        """Look up a line status by its stored text."""
        try:
            return cls(text)
        except ValueError:
            raise ValueError(f"Unknown fire line status: {text}") from None


class FireOrderStatus(Enum):
    """Where a fire order as a whole stands."""

    COORDINATING = "coordinating"
    IN_PROGRESS = "in_progress"
    PLATED = "plated"

    @classmethod
    def parse(cls, text: str) -> FireOrderStatus:
        """Look up an order status by its stored text."""
        try:
            return cls(text)
        except ValueError:
            raise ValueError(f"Unknown fire order status: {text}") from None


@dataclass
class Dish:
    """The kitchen's view of a menu item."""

    id: str
    name: str
    prep_time_minutes: int
    cooking_method: str
    station: Station
    available: bool = True

    def mark_out_of_stock(self) -> None:
        self.available = False

    def restore(self) -> None:
        self.available = True


@dataclass
class FireOrderLine:
    """One dish within a fire order, fired at an offset from the order start."""

    id: str
    dish_id: str
    fire_at_offset_minutes: int
    status: FireLineStatus = FireLineStatus.WAITING
    fired_at: str = ""
    plated_at: str = ""

    def fire(self) -> None:
        self.status = FireLineStatus.FIRED
        self.fired_at = utc_timestamp()

    def plate(self) -> None:
        self.status = FireLineStatus.PLATED
        self.plated_at = utc_timestamp()


@dataclass
class FireOrder:
    """The dishes for one table, coordinated so they reach the pass together."""

    id: str
    table_number: int
    created_at: str
    status: FireOrderStatus = FireOrderStatus.COORDINATING
    lines: list[FireOrderLine] = field(default_factory=list)

    def add_line(self, line_id: str, dish_id: str, fire_at_offset_minutes: int) -> FireOrderLine:
        """Append a waiting line and return it."""
        line = FireOrderLine(line_id, dish_id, fire_at_offset_minutes)
        self.lines.append(line)
        return line

    def line(self, line_id: str) -> FireOrderLine:
        """Return the line with this id, or raise NotFoundError."""
        for candidate in self.lines:
            if candidate.id == line_id:
                return candidate
        raise NotFoundError(f"Line not found: {line_id}")

    def fire_dish(self, line_id: str) -> FireOrderLine:
        """Fire a waiting line; the order is then in progress."""
        line = self.line(line_id)
        if line.status in (FireLineStatus.FIRED, FireLineStatus.PLATED):
            raise DomainError("Dish already fired")
        line.fire()
        self.status = FireOrderStatus.IN_PROGRESS
        return line

    def plate_dish(self, line_id: str) -> FireOrderLine:
        """Plate a fired line; once every line is plated so is the order."""
        line = self.line(line_id)
        if line.status is not FireLineStatus.FIRED:
            raise DomainError("Dish has not been fired yet")
        line.plate()
        if self.all_plated():
            self.status = FireOrderStatus.PLATED
        return line

    def all_plated(self) -> bool:
        """True when the order has lines and all of them are plated."""
        return bool(self.lines) and all(
            line.status is FireLineStatus.PLATED for line in self.lines
        )


@dataclass(frozen=True)
class DishFired(DomainEvent):
    fire_order_id: str
    line_id: str
    dish_id: str


@dataclass(frozen=True)
class DishPlated(DomainEvent):
    fire_order_id: str
    line_id: str


@dataclass(frozen=True)
class AllDishesPlated(DomainEvent):
    table_number: int


@dataclass(frozen=True)
class DishMarkedOutOfStock(DomainEvent):
    dish_id: str
    dish_name: str