"""Use cases of the finance context."""

from __future__ import annotations

from bistro.finance.domain import CostItem, FoodCostRatio, WasteRecord, WasteRecorded
from bistro.finance.repository import FinanceRepository
from bistro.shared.events import EventPublisher
from bistro.shared.types import Money, NotFoundError, new_id


class FinanceService:
    """Costing, margins and waste tracking."""

    def __init__(self, repo: FinanceRepository, events: EventPublisher) -> None:
        self._repo = repo
        self._events = events

    def list_cost_items(self) -> list[CostItem]:
        return self._repo.all_cost_items()

    def add_cost_item(
        self,
        name: str,
        ingredient_cost_cents: int,
        supplier_price_cents: int,
        selling_price_cents: int,
    ) -> str:
        """Store a new cost item and return its id."""
        item = CostItem(
            new_id(),
            name,
            Money(ingredient_cost_cents),
            Money(supplier_price_cents),
            Money(selling_price_cents),
        )
        self._repo.save_cost_item(item)
        return item.id

    def _require(self, item_id: str) -> CostItem:
        item = self._repo.find_cost_item(item_id)
        if item is None:
            raise NotFoundError("Cost item not found")
        return item

    def update_cost_item(
        self, item_id: str, ingredient_cost_cents: int, supplier_price_cents: int
    ) -> None:
        """Change an item's ingredient cost and supplier price."""
        item = self._require(item_id)
        item.ingredient_cost = Money(ingredient_cost_cents)
        item.supplier_price = Money(supplier_price_cents)
        self._repo.update_cost_item(item)

    def calculate_margin(self, item_id: str) -> float:
        """The item's margin in percent."""
        return self._require(item_id).margin_percent()

    def record_waste(
        self, cost_item_id: str, quantity: float, unit: str, reason: str
    ) -> str:
        """Record wasted stock, announce it and return the record's id."""
        record = WasteRecord(new_id(), cost_item_id, quantity, unit, reason)
        self._repo.save_waste_record(record)
        self._events.publish(WasteRecorded(cost_item_id, quantity, unit, reason))
        return record.id

    def list_waste(self) -> list[WasteRecord]:
        return self._repo.all_waste_records()

    def food_cost_report(self) -> FoodCostRatio:
        return self._repo.food_cost_ratio()