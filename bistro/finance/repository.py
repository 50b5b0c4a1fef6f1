"""Persistence for the finance context over the shared SQLite tables.

Cost items live in the shared ``items`` table; only the cost-relevant
columns are read or written here.  Waste lives in ``waste_records``.
"""

from __future__ import annotations

import sqlite3
from typing import Any, Protocol

from bistro.finance.domain import CostItem, FoodCostRatio, WasteRecord
from bistro.shared.db import Database
from bistro.shared.types import Money


class FinanceRepository(Protocol):
    """Where the finance context keeps its cost items and waste records."""

    def save_cost_item(self, item: CostItem) -> None: ...

    def update_cost_item(self, item: CostItem) -> None: ...

    def find_cost_item(self, item_id: str) -> CostItem | None: ...

    def all_cost_items(self) -> list[CostItem]: ...

    def save_waste_record(self, record: WasteRecord) -> None: ...

    def all_waste_records(self) -> list[WasteRecord]: ...

    def waste_records_between(self, start: str, end: str) -> list[WasteRecord]: ...

    def food_cost_ratio(self) -> FoodCostRatio: ...


_COST_COLUMNS = "id, name, ingredient_cost_cents, supplier_price_cents, price_cents"
_WASTE_COLUMNS = "id, item_id, quantity, unit, reason, recorded_at"


def _cost_item(row: tuple[Any, ...]) -> CostItem:
    item_id, name, ingredient, supplier, selling = row
    return CostItem(
        item_id,
        name,
        Money(ingredient or 0),
        Money(supplier or 0),
        Money(selling or 0),
    )


def _waste_record(row: tuple[Any, ...]) -> WasteRecord:
    record_id, item_id, quantity, unit, reason, recorded_at = row
    return WasteRecord(
        record_id, item_id, float(quantity or 0.0), unit, reason, recorded_at or ""
    )


class SqliteFinanceRepository:
    """The finance repository backed by SQLite."""

    def __init__(self, database: Database) -> None:
        self._db = database

    def _run(self, label: str, sql: str, params: tuple[Any, ...] = ()) -> sqlite3.Cursor:
        try:
            return self._db.connection.execute(sql, params)
        except sqlite3.Error as exc:
            raise RuntimeError(f"{label}: {exc}") from exc

    def save_cost_item(self, item: CostItem) -> None:
        self._run(
            "save_cost_item",
            "INSERT INTO items (id, name, description, price_cents, prep_time_minutes, "
            "cooking_method, station, ingredient_cost_cents, supplier_price_cents, "
            "is_available) VALUES (?, ?, '', ?, 0, '', '', ?, ?, 1);",
            (
                item.id,
                item.name,
                item.selling_price.cents,
                item.ingredient_cost.cents,
                item.supplier_price.cents,
            ),
        )

    def update_cost_item(self, item: CostItem) -> None:
        self._run(
            "update_cost_item",
            "UPDATE items SET ingredient_cost_cents = ?, supplier_price_cents = ? "
            "WHERE id = ?;",
            (item.ingredient_cost.cents, item.supplier_price.cents, item.id),
        )

    def find_cost_item(self, item_id: str) -> CostItem | None:
        row = self._run(
            "find_cost_item",
            f"SELECT {_COST_COLUMNS} FROM items WHERE id = ?;",
            (item_id,),
        ).fetchone()
        return _cost_item(row) if row else None

    def all_cost_items(self) -> list[CostItem]:
        rows = self._run("all_cost_items", f"SELECT {_COST_COLUMNS} FROM items;")
        return [_cost_item(row) for row in rows]

    def save_waste_record(self, record: WasteRecord) -> None:
        self._run(
            "save_waste_record",
            "INSERT INTO waste_records (id, item_id, quantity, unit, reason, recorded_at) "
            "VALUES (?, ?, ?, ?, ?, ?);",
            (
                record.id,
                record.cost_item_id,
                record.quantity,
                record.unit,
                record.reason,
                record.recorded_at,
            ),
        )

    def all_waste_records(self) -> list[WasteRecord]:
        rows = self._run(
            "all_waste_records", f"SELECT {_WASTE_COLUMNS} FROM waste_records;"
        )
        return [_waste_record(row) for row in rows]

    def waste_records_between(self, start: str, end: str) -> list[WasteRecord]:
        """Waste recorded from ``start`` to ``end``, both inclusive."""
        rows = self._run(
            "waste_records_between",
            f"SELECT {_WASTE_COLUMNS} FROM waste_records "
            "WHERE recorded_at >= ? AND recorded_at <= ?;",
            (start, end),
        )
        return [_waste_record(row) for row in rows]

    def food_cost_ratio(self) -> FoodCostRatio:
        """Total ingredient cost against total selling price over every item."""
        row = self._run(
            "food_cost_ratio",
            "SELECT COALESCE(SUM(ingredient_cost_cents), 0), "
            "COALESCE(SUM(price_cents), 0) FROM items;",
        ).fetchone()
        ingredient, revenue = row if row else (0, 0)
        return FoodCostRatio(Money(int(ingredient)), Money(int(revenue)))