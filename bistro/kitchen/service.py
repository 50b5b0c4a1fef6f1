"""Use cases of the kitchen context."""

from __future__ import annotations

from dataclasses import dataclass, field

from bistro.kitchen.domain import (
    AllDishesPlated,
    Dish,
    DishFired,
    DishMarkedOutOfStock,
    DishPlated,
    FireOrder,
    FireOrderStatus,
    Station,
)
from bistro.kitchen.repository import KitchenRepository
from bistro.shared.events import EventPublisher
from bistro.shared.types import NotFoundError, new_id, utc_timestamp


@dataclass(frozen=True)
class DishTiming:
    """A dish to fire, and how many minutes after the order starts."""

    dish_id: str
    fire_at_offset_minutes: int


@dataclass
class CreateFireOrderRequest:
    """The dishes one table wants, with their firing offsets."""

    table_number: int
    dishes: list[DishTiming] = field(default_factory=list)


class KitchenService:
    """Managing dishes and coordinating fire orders on the line."""

    def __init__(self, repo: KitchenRepository, events: EventPublisher) -> None:
        self._repo = repo
        self._events = events

    # Dishes

    def list_dishes(self) -> list[Dish]:
        return self._repo.all_dishes()

    def get_dish(self, dish_id: str) -> Dish | None:
        return self._repo.find_dish(dish_id)

    def add_dish(
        self, name: str, prep_time_minutes: int, cooking_method: str, station: str
    ) -> str:
        """Store a new, available dish and return its id."""
        dish = Dish(new_id(), name, prep_time_minutes, cooking_method, Station.parse(station))
        self._repo.save_dish(dish)
        return dish.id

    def _require_dish(self, dish_id: str) -> Dish:
        dish = self._repo.find_dish(dish_id)
        if dish is None:
            raise NotFoundError("Dish not found")
        return dish

    def mark_dish_out_of_stock(self, dish_id: str) -> None:
        """Mark the dish unavailable and announce it."""
        dish = self._require_dish(dish_id)
        dish.mark_out_of_stock()
        self._repo.update_dish(dish)
        self._events.publish(DishMarkedOutOfStock(dish.id, dish.name))

    def restore_dish(self, dish_id: str) -> None:
        """Make the dish available again."""
        dish = self._require_dish(dish_id)
        dish.restore()
        self._repo.update_dish(dish)

    # Fire orders

    def create_fire_order(self, request: CreateFireOrderRequest) -> str:
        """Store a new fire order with one waiting line per dish and return its id."""
        order = FireOrder(new_id(), request.table_number, utc_timestamp())
        for timing in request.dishes:
            order.add_line(new_id(), timing.dish_id, timing.fire_at_offset_minutes)
        self._repo.save_fire_order(order)
        return order.id

    def list_fire_orders(self) -> list[FireOrder]:
        return self._repo.all_fire_orders()

    def get_fire_order(self, order_id: str) -> FireOrder | None:
        return self._repo.find_fire_order(order_id)

    def _require_order(self, order_id: str) -> FireOrder:
        order = self._repo.find_fire_order(order_id)
        if order is None:
            raise NotFoundError("Fire order not found")
        return order

    def fire_dish(self, order_id: str, line_id: str) -> None:
        """Fire one line of the order and announce it."""
        order = self._require_order(order_id)
        line = order.fire_dish(line_id)
        self._repo.update_fire_order(order)
        self._events.publish(DishFired(order.id, line.id, line.dish_id))

    def plate_dish(self, order_id: str, line_id: str) -> None:
        """Plate one line; announce it, and the whole table once everything is plated."""
        order = self._require_order(order_id)
        order.plate_dish(line_id)
        self._repo.update_fire_order(order)
        self._events.publish(DishPlated(order.id, line_id))
        if order.status is FireOrderStatus.PLATED:
            self._events.publish(AllDishesPlated(order.table_number))