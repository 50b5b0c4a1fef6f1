"""HTTP routes of the kitchen context."""

from __future__ import annotations

import json
from typing import Any

from flask import Blueprint, jsonify, request

from bistro.kitchen.domain import FireOrder
from bistro.kitchen.service import CreateFireOrderRequest, DishTiming, KitchenService
from bistro.shared.types import DomainError, NotFoundError


def _body() -> dict[str, Any]:
    try:
        body = json.loads(request.get_data(as_text=True))
    except json.JSONDecodeError as exc:
        raise ValueError(f"invalid JSON: {exc}") from None
    if not isinstance(body, dict):
        raise ValueError("request body must be a JSON object")
    return body


def _field(body: dict[str, Any], key: str, kind: type) -> Any:
    if not isinstance(body, dict):
        raise ValueError("expected a JSON object")
    if key not in body:
        raise ValueError(f"missing field: {key}")
    value = body[key]
    if kind is str:
        if not isinstance(value, str):
            raise ValueError(f"field {key} must be a string")
        return value
    if kind is list:
        if not isinstance(value, list):
            raise ValueError(f"field {key} must be an array")
        return value
    if not isinstance(value, (int, float)):
        raise ValueError(f"field {key} must be a number")
    return kind(value)


def _error(message: str, status: int):
    return jsonify({"error": message}), status


def _order_json(order: FireOrder) -> dict[str, Any]:
    return {
        "id": order.id,
        "tableNumber": order.table_number,
        "status": order.status.value,
        "createdAt": order.created_at,
        "lines": [
            {
                "id": line.id,
                "dishId": line.dish_id,
                "fireAtOffsetMinutes": line.fire_at_offset_minutes,
                "status": line.status.value,
                "firedAt": line.fired_at,
                "platedAt": line.plated_at,
            }
            for line in order.lines
        ],
    }


def kitchen_blueprint(service: KitchenService) -> Blueprint:
    """Routes under /api/kitchen backed by ``service``."""
    bp = Blueprint("kitchen", __name__)

    @bp.get("/api/kitchen/dishes")
    def list_dishes():
        return jsonify(
            [
                {
                    "id": dish.id,
                    "name": dish.name,
                    "prepTimeMinutes": dish.prep_time_minutes,
                    "cookingMethod": dish.cooking_method,
                    "station": dish.station.value,
                    "isAvailable": dish.available,
                }
                for dish in service.list_dishes()
            ]
        )

    @bp.post("/api/kitchen/dishes")
    def add_dish():
        try:
            body = _body()
            dish_id = service.add_dish(
                _field(body, "name", str),
                _field(body, "prepTimeMinutes", int),
                _field(body, "cookingMethod", str),
                _field(body, "station", str),
            )
        except Exception as exc:
            return _error(str(exc), 422)
        return jsonify({"id": dish_id}), 201

    @bp.post("/api/kitchen/dishes/<dish_id>/out-of-stock")
    def mark_out_of_stock(dish_id: str):
        try:
            service.mark_dish_out_of_stock(dish_id)
        except NotFoundError as exc:
            return _error(str(exc), 404)
        return jsonify({"status": "out_of_stock"})

    @bp.post("/api/kitchen/dishes/<dish_id>/restore")
    def restore_dish(dish_id: str):
        try:
            service.restore_dish(dish_id)
        except NotFoundError as exc:
            return _error(str(exc), 404)
        return jsonify({"status": "available"})

    @bp.post("/api/kitchen/fire-orders")
    def create_fire_order():
        try:
            body = _body()
            fire_request = CreateFireOrderRequest(
                _field(body, "tableNumber", int),
                [
                    DishTiming(
                        _field(entry, "dishId", str),
                        _field(entry, "fireAtOffsetMinutes", int),
                    )
                    for entry in _field(body, "dishes", list)
                ],
            )
            order_id = service.create_fire_order(fire_request)
        except Exception as exc:
            return _error(str(exc), 422)
        return jsonify({"id": order_id}), 201

    @bp.get("/api/kitchen/fire-orders")
    def list_fire_orders():
        return jsonify([_order_json(order) for order in service.list_fire_orders()])

    @bp.get("/api/kitchen/fire-orders/<order_id>")
    def get_fire_order(order_id: str):
        order = service.get_fire_order(order_id)
        if order is None:
            return _error("Fire order not found", 404)
        return jsonify(_order_json(order))

    @bp.post("/api/kitchen/fire-orders/<order_id>/lines/<line_id>/fire")
    def fire_line(order_id: str, line_id: str):
        try:
            service.fire_dish(order_id, line_id)
        except DomainError as exc:
            return _error(str(exc), 422)
        return jsonify({"status": "fired"})

    @bp.post("/api/kitchen/fire-orders/<order_id>/lines/<line_id>/plate")
    def plate_line(order_id: str, line_id: str):
        try:
            service.plate_dish(order_id, line_id)
        except DomainError as exc:
            return _error(str(exc), 422)
        return jsonify({"status": "plated"})

    return bp