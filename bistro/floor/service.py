"""Use cases of the floor context."""

from __future__ import annotations

from bistro.floor.domain import (
    MenuItem,
    MenuItemSoldOut,
    ReservationSeated,
    Seating,
    Table,
    TableTurned,
    WalkInSeated,
)
from bistro.floor.repository import FloorRepository
from bistro.shared.events import EventPublisher
from bistro.shared.types import Money, NotFoundError, new_id


class FloorService:
    """Seating guests, turning tables and keeping the menu current."""

    def __init__(self, repo: FloorRepository, events: EventPublisher) -> None:
        self._repo = repo
        self._events = events

    # Tables

    def list_tables(self) -> list[Table]:
        return self._repo.all_tables()

    def add_table(self, table_number: int, capacity: int) -> str:
        """Store a new, available table and return its id."""
        table = Table(new_id(), table_number, capacity)
        self._repo.save_table(table)
        return table.id

    def _require_table(self, table_id: str) -> Table:
        table = self._repo.find_table(table_id)
        if table is None:
            raise NotFoundError("Table not found")
        return table

    def _seat(self, table_id: str, seating: Seating) -> None:
        table = self._require_table(table_id)
        table.occupy()
        self._repo.save_seating(seating)
        self._repo.update_table(table)

    def seat_walk_in(self, table_id: str, party_size: int) -> None:
        """Seat a party without a reservation at the table."""
        self._seat(table_id, Seating.walk_in(new_id(), table_id, party_size))
        self._events.publish(WalkInSeated(table_id, party_size))

    def seat_reservation(self, table_id: str, party_size: int, name: str) -> None:
        """Seat a party under a reservation name at the table."""
        self._seat(table_id, Seating.reservation(new_id(), table_id, party_size, name))
        self._events.publish(ReservationSeated(table_id, name, party_size))

    def turn_table(self, table_id: str) -> None:
        """Clear the table's current seating, if any, and make it available."""
        table = self._require_table(table_id)
        seating = self._repo.find_active_seating(table_id)
        cover_count = 0
        if seating is not None:
            cover_count = seating.cover_count
            seating.clear()
            self._repo.update_seating(seating)
        table.turn()
        self._repo.update_table(table)
        self._events.publish(TableTurned(table_id, cover_count))

    # Menu

    def list_menu_items(self) -> list[MenuItem]:
        return self._repo.all_menu_items()

    def add_menu_item(self, name: str, description: str, price_cents: int) -> str:
        """Store a new, available menu item and return its id."""
        item = MenuItem(new_id(), name, description, Money(price_cents))
        self._repo.save_menu_item(item)
        return item.id

    def update_menu_item(
        self, item_id: str, name: str, description: str, price_cents: int
    ) -> None:
        """Change an item's name, description and price, keeping its availability."""
        item = self._repo.find_menu_item(item_id)
        if item is None:
            raise NotFoundError("Menu item not found")
        self._repo.update_menu_item(
            MenuItem(item_id, name, description, Money(price_cents), item.available)
        )

    def _sell_out(self, item: MenuItem | None) -> None:
        if item is None:
            raise NotFoundError("Menu item not found")
        item.mark_sold_out()
        self._repo.update_menu_item(item)
        self._events.publish(MenuItemSoldOut(item.id, item.name))

    def mark_sold_out(self, item_id: str) -> None:
        """Take the item off the menu."""
        self._sell_out(self._repo.find_menu_item(item_id))

    def mark_sold_out_by_name(self, name: str) -> None:
        """Take the item with this name off the menu."""
        self._sell_out(self._repo.find_menu_item_by_name(name))

    def count_covers_tonight(self) -> int:
        return self._repo.count_covers_today()