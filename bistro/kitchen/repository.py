"""Persistence for the kitchen context over the shared SQLite tables.

Dishes live in the shared ``items`` table, of which only the kitchen's columns
are read or written here.  Fire orders map to ``orders`` and ``order_lines``.
"""

from __future__ import annotations

import sqlite3
from typing import Any, Protocol

from bistro.kitchen.domain import Dish, FireLineStatus, FireOrder, Station
from bistro.shared.db import Database


class KitchenRepository(Protocol):
    """Where the kitchen context keeps its dishes and fire orders."""

    def save_dish(self, dish: Dish) -> None: ...

    def update_dish(self, dish: Dish) -> None: ...

    def find_dish(self, dish_id: str) -> Dish | None: ...

    def find_dish_by_name(self, name: str) -> Dish | None: ...

    def all_dishes(self) -> list[Dish]: ...

    def save_fire_order(self, order: FireOrder) -> None: ...

    def update_fire_order(self, order: FireOrder) -> None: ...

    def find_fire_order(self, order_id: str) -> FireOrder | None: ...

    def all_fire_orders(self) -> list[FireOrder]: ...


_DISH_COLUMNS = "id, name, prep_time_minutes, cooking_method, station, is_available"


def _dish(row: tuple[Any, ...]) -> Dish:
    dish_id, name, prep_time, method, station, available = row
    return Dish(
        dish_id,
        name,
        int(prep_time or 0),
        method or "",
        Station.parse(station or ""),
        bool(available),
    )


class SqliteKitchenRepository:
    """The kitchen repository backed by SQLite."""

    def __init__(self, database: Database) -> None:
        self._db = database

    def _run(self, label: str, sql: str, params: tuple[Any, ...] = ()) -> sqlite3.Cursor:
        try:
            return self._db.connection.execute(sql, params)
        except sqlite3.Error as exc:
            raise RuntimeError(f"{label}: {exc}") from exc

    # Dishes

    def save_dish(self, dish: Dish) -> None:
        self._run(
            "save_dish",
            "INSERT INTO items (id, name, description, price_cents, prep_time_minutes, "
            "cooking_method, station, ingredient_cost_cents, supplier_price_cents, "
            "is_available) VALUES (?, ?, '', 0, ?, ?, ?, 0, 0, ?);",
            (
                dish.id,
                dish.name,
                dish.prep_time_minutes,
                dish.cooking_method,
                dish.station.value,
                int(dish.available),
            ),
        )

    def update_dish(self, dish: Dish) -> None:
        """Write the kitchen's columns only; floor and finance columns stay as they are."""
        self._run(
            "update_dish",
            "UPDATE items SET name = ?, prep_time_minutes = ?, cooking_method = ?, "
            "station = ?, is_available = ? WHERE id = ?;",
            (
                dish.name,
                dish.prep_time_minutes,
                dish.cooking_method,
                dish.station.value,
                int(dish.available),
                dish.id,
            ),
        )

    def find_dish(self, dish_id: str) -> Dish | None:
        row = self._run(
            "find_dish",
            f"SELECT {_DISH_COLUMNS} FROM items WHERE id = ?;",
            (dish_id,),
        ).fetchone()
        return _dish(row) if row else None

    def find_dish_by_name(self, name: str) -> Dish | None:
        row = self._run(
            "find_dish_by_name",
            f"SELECT {_DISH_COLUMNS} FROM items WHERE name = ?;",
            (name,),
        ).fetchone()
        return _dish(row) if row else None

    def all_dishes(self) -> list[Dish]:
        """Every item that has a station and a cooking method."""
        rows = self._run(
            "all_dishes",
            f"SELECT {_DISH_COLUMNS} FROM items "
            "WHERE station != '' AND cooking_method != '';",
        )
        return [_dish(row) for row in rows]

    # Fire orders

    def save_fire_order(self, order: FireOrder) -> None:
        self._run(
            "save_fire_order",
            "INSERT INTO orders (id, table_number, status, created_at) VALUES (?, ?, ?, ?);",
            (order.id, order.table_number, order.status.value, order.created_at),
        )
        for line in order.lines:
            self._run(
                "save_fire_order line",
                "INSERT INTO order_lines (id, order_id, item_id, status, "
                "fire_at_offset_minutes, fired_at, plated_at) "
                "VALUES (?, ?, ?, ?, ?, ?, ?);",
                (
                    line.id,
                    order.id,
                    line.dish_id,
                    line.status.value,
                    line.fire_at_offset_minutes,
                    line.fired_at or None,
                    line.plated_at or None,
                ),
            )

    def update_fire_order(self, order: FireOrder) -> None:
        self._run(
            "update_fire_order",
            "UPDATE orders SET status = ? WHERE id = ?;",
            (order.status.value, order.id),
        )
        for line in order.lines:
            self._run(
                "update_fire_order line",
                "UPDATE order_lines SET status = ?, fired_at = ?, plated_at = ? "
                "WHERE id = ?;",
                (line.status.value, line.fired_at or None, line.plated_at or None, line.id),
            )

    def find_fire_order(self, order_id: str) -> FireOrder | None:
        """Rebuild the order, replaying each line's stored progress on the aggregate."""
        row = self._run(
            "find_fire_order",
            "SELECT id, table_number, status, created_at FROM orders WHERE id = ?;",
            (order_id,),
        ).fetchone()
        if row is None:
            return None
        stored_id, table_number, _status, created_at = row
        order = FireOrder(stored_id, int(table_number or 0), created_at or "")

        lines = self._run(
            "find_fire_order lines",
            "SELECT id, item_id, status, fire_at_offset_minutes FROM order_lines "
            "WHERE order_id = ?;",
            (order_id,),
        ).fetchall()
        for line_id, dish_id, _line_status, offset in lines:
            order.add_line(line_id, dish_id, int(offset or 0))

        for line_id, _dish_id, line_status, _offset in lines:
            if line_status == FireLineStatus.FIRED.value:
                order.fire_dish(line_id)
            elif line_status == FireLineStatus.PLATED.value:
                order.fire_dish(line_id)
                order.plate_dish(line_id)
        return order

    def all_fire_orders(self) -> list[FireOrder]:
        ids = [row[0] for row in self._run("all_fire_orders", "SELECT id FROM orders;")]
        orders = (self.find_fire_order(order_id) for order_id in ids)
        return [order for order in orders if order is not None]