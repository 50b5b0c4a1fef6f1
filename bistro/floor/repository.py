"""Persistence for the floor context over the shared SQLite tables.

Tables and seatings have tables of their own.  Menu items live in the shared
``items`` table, of which only the floor's columns (name, description, price
and availability) are read or written here.
"""

from __future__ import annotations

import sqlite3
from typing import Any, Protocol

from bistro.floor.domain import MenuItem, Seating, Table, TableStatus
from bistro.shared.db import Database
from bistro.shared.types import Money


class FloorRepository(Protocol):
    """Where the floor context keeps its tables, menu items and seatings."""

    def save_table(self, table: Table) -> None: ...

    def update_table(self, table: Table) -> None: ...

    def find_table(self, table_id: str) -> Table | None: ...

    def all_tables(self) -> list[Table]: ...

    def save_menu_item(self, item: MenuItem) -> None: ...

    def update_menu_item(self, item: MenuItem) -> None: ...

    def find_menu_item(self, item_id: str) -> MenuItem | None: ...

    def find_menu_item_by_name(self, name: str) -> MenuItem | None: ...

    def all_menu_items(self) -> list[MenuItem]: ...

    def save_seating(self, seating: Seating) -> None: ...

    def update_seating(self, seating: Seating) -> None: ...

    def find_active_seating(self, table_id: str) -> Seating | None: ...

    def count_covers_today(self) -> int: ...


_TABLE_COLUMNS = "id, table_number, capacity, status"
_MENU_COLUMNS = "id, name, description, price_cents, is_available"
_SEATING_COLUMNS = (
    "id, table_id, cover_count, is_walk_in, reservation_name, seated_at, cleared_at"
)


def _table(row: tuple[Any, ...]) -> Table:
    table_id, number, capacity, status = row
    return Table(table_id, int(number or 0), int(capacity or 0), TableStatus.parse(status))


def _menu_item(row: tuple[Any, ...]) -> MenuItem:
    item_id, name, description, price, available = row
    return MenuItem(item_id, name, description or "", Money(price or 0), bool(available))


def _seating(row: tuple[Any, ...]) -> Seating:
    seating_id, table_id, covers, walk_in, name, seated_at, cleared_at = row
    return Seating(
        seating_id,
        table_id,
        int(covers or 0),
        bool(walk_in),
        name or "",
        seated_at or "",
        cleared_at or "",
    )


class SqliteFloorRepository:
    """The floor repository backed by SQLite."""

    def __init__(self, database: Database) -> None:
        self._db = database

    def _run(self, label: str, sql: str, params: tuple[Any, ...] = ()) -> sqlite3.Cursor:
        try:
            return self._db.connection.execute(sql, params)
        except sqlite3.Error as exc:
            raise RuntimeError(f"{label}: {exc}") from exc

    # Tables

    def save_table(self, table: Table) -> None:
        self._run(
            "save_table",
            "INSERT INTO tables (id, table_number, capacity, status) VALUES (?, ?, ?, ?);",
            (table.id, table.table_number, table.capacity, table.status.value),
        )

    def update_table(self, table: Table) -> None:
        self._run(
            "update_table",
            "UPDATE tables SET table_number = ?, capacity = ?, status = ? WHERE id = ?;",
            (table.table_number, table.capacity, table.status.value, table.id),
        )

    def find_table(self, table_id: str) -> Table | None:
        row = self._run(
            "find_table",
            f"SELECT {_TABLE_COLUMNS} FROM tables WHERE id = ?;",
            (table_id,),
        ).fetchone()
        return _table(row) if row else None

    def all_tables(self) -> list[Table]:
        rows = self._run("all_tables", f"SELECT {_TABLE_COLUMNS} FROM tables;")
        return [_table(row) for row in rows]

    # Menu items

    def save_menu_item(self, item: MenuItem) -> None:
        self._run(
            "save_menu_item",
            "INSERT INTO items (id, name, description, price_cents, prep_time_minutes, "
            "cooking_method, station, ingredient_cost_cents, supplier_price_cents, "
            "is_available) VALUES (?, ?, ?, ?, 0, '', '', 0, 0, ?);",
            (item.id, item.name, item.description, item.price.cents, int(item.available)),
        )

    def update_menu_item(self, item: MenuItem) -> None:
        """Write the floor's columns only; kitchen and finance columns stay as they are."""
        self._run(
            "update_menu_item",
            "UPDATE items SET name = ?, description = ?, price_cents = ?, "
            "is_available = ? WHERE id = ?;",
            (item.name, item.description, item.price.cents, int(item.available), item.id),
        )

    def find_menu_item(self, item_id: str) -> MenuItem | None:
        row = self._run(
            "find_menu_item",
            f"SELECT {_MENU_COLUMNS} FROM items WHERE id = ?;",
            (item_id,),
        ).fetchone()
        return _menu_item(row) if row else None

    def find_menu_item_by_name(self, name: str) -> MenuItem | None:
        row = self._run(
            "find_menu_item_by_name",
            f"SELECT {_MENU_COLUMNS} FROM items WHERE name = ?;",
            (name,),
        ).fetchone()
        return _menu_item(row) if row else None

    def all_menu_items(self) -> list[MenuItem]:
        rows = self._run("all_menu_items", f"SELECT {_MENU_COLUMNS} FROM items;")
        return [_menu_item(row) for row in rows]

    # Seatings

    def save_seating(self, seating: Seating) -> None:
        self._run(
            "save_seating",
            f"INSERT INTO seatings ({_SEATING_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?, ?);",
            (
                seating.id,
                seating.table_id,
                seating.cover_count,
                int(seating.is_walk_in),
                seating.reservation_name,
                seating.seated_at,
                seating.cleared_at or None,
            ),
        )

    def update_seating(self, seating: Seating) -> None:
        self._run(
            "update_seating",
            "UPDATE seatings SET cover_count = ?, is_walk_in = ?, reservation_name = ?, "
            "seated_at = ?, cleared_at = ? WHERE id = ?;",
            (
                seating.cover_count,
                int(seating.is_walk_in),
                seating.reservation_name,
                seating.seated_at,
                seating.cleared_at or None,
                seating.id,
            ),
        )

    def find_active_seating(self, table_id: str) -> Seating | None:
        """The seating at the table that has not been cleared yet, if any."""
        row = self._run(
            "find_active_seating",
            f"SELECT {_SEATING_COLUMNS} FROM seatings "
            "WHERE table_id = ? AND cleared_at IS NULL;",
            (table_id,),
        ).fetchone()
        return _seating(row) if row else None

    def count_covers_today(self) -> int:
        """Covers seated since midnight UTC."""
        row = self._run(
            "count_covers_today",
            "SELECT COALESCE(SUM(cover_count), 0) FROM seatings "
            "WHERE date(seated_at) = date('now');",
        ).fetchone()
        return int(row[0]) if row else 0