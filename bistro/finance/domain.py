"""The finance model: cost items, waste and food-cost ratios."""

from __future__ import annotations

from dataclasses import dataclass

from bistro.shared.events import DomainEvent
from bistro.shared.types import Money, utc_timestamp


@dataclass
class CostItem:
    """Finance's view of a menu item: what it costs and what it sells for."""

    id: str
    name: str
    ingredient_cost: Money
    supplier_price: Money
    selling_price: Money

    def margin_percent(self) -> float:
        """Gross margin on the selling price, in percent; 0 when unpriced."""
        if self.selling_price.cents == 0:
            return 0.0
        gross = self.selling_price.cents - self.ingredient_cost.cents
        return gross / self.selling_price.cents * 100.0


@dataclass
class WasteRecord:
    """A quantity of a cost item that was thrown away."""

    id: str
    cost_item_id: str
    quantity: float
    unit: str
    reason: str
    recorded_at: str = ""

    def __post_init__(self) -> None:
        if not self.recorded_at:
            self.recorded_at = utc_timestamp()


@dataclass(frozen=True)
class FoodCostRatio:
    """Total ingredient cost set against total revenue."""

    ingredient_cost: Money
    revenue: Money

    def percent(self) -> float:
        """Ingredient cost as a percentage of revenue; 0 without revenue."""
        if self.revenue.cents == 0:
            return 0.0
        return self.ingredient_cost.cents / self.revenue.cents * 100.0


@dataclass(frozen=True)
class WasteRecorded(DomainEvent):
    cost_item_id: str
    quantity: float
    unit: str
    reason: str