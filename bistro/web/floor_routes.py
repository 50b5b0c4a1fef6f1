"""HTTP routes of the floor context."""

from __future__ import annotations

import json
from typing import Any

from flask import Blueprint, jsonify, request

from bistro.floor.service import FloorService
from bistro.shared.types import NotFoundError


def _body() -> dict[str, Any]:
    try:
        body = json.loads(request.get_data(as_text=True))
    except json.JSONDecodeError as exc:
        raise ValueError(f"invalid JSON: {exc}") from None
    if not isinstance(body, dict):
        raise ValueError("request body must be a JSON object")
    return body


def _field(body: dict[str, Any], key: str, kind: type) -> Any:
    if key not in body:
        raise ValueError(f"missing field: {key}")
    value = body[key]
    if kind is str:
        if not isinstance(value, str):
            raise ValueError(f"field {key} must be a string")
        return value
    if not isinstance(value, (int, float)):
        raise ValueError(f"field {key} must be a number")
    return kind(value)


def _error(message: str, status: int):
    return jsonify({"error": message}), status


def floor_blueprint(service: FloorService) -> Blueprint:
    """Routes under /api/floor backed by ``service``."""
    bp = Blueprint("floor", __name__)

    @bp.get("/api/floor/tables")
    def list_tables():
        return jsonify(
            [
                {
                    "id": table.id,
                    "tableNumber": table.table_number,
                    "capacity": table.capacity,
                    "status": table.status.value,
                }
                for table in service.list_tables()
            ]
        )

    @bp.post("/api/floor/tables")
    def add_table():
        try:
            body = _body()
            table_id = service.add_table(
                _field(body, "table_number", int), _field(body, "capacity", int)
            )
        except Exception as exc:
            return _error(str(exc), 422)
        return jsonify({"id": table_id}), 201

    @bp.post("/api/floor/tables/<table_id>/seat-walk-in")
    def seat_walk_in(table_id: str):
        try:
            body = _body()
            service.seat_walk_in(table_id, _field(body, "party_size", int))
        except NotFoundError as exc:
            return _error(str(exc), 404)
        except Exception as exc:
            return _error(str(exc), 422)
        return jsonify({"status": "seated"})

    @bp.post("/api/floor/tables/<table_id>/seat-reservation")
    def seat_reservation(table_id: str):
        try:
            body = _body()
            party_size = _field(body, "party_size", int)
            name = _field(body, "reservation_name", str)
            service.seat_reservation(table_id, party_size, name)
        except NotFoundError as exc:
            return _error(str(exc), 404)
        except Exception as exc:
            return _error(str(exc), 422)
        return jsonify({"status": "seated"})

    @bp.post("/api/floor/tables/<table_id>/turn")
    def turn_table(table_id: str):
        try:
            service.turn_table(table_id)
        except NotFoundError as exc:
            return _error(str(exc), 404)
        return jsonify({"status": "turned"})

    @bp.get("/api/floor/menu-items")
    def list_menu_items():
        return jsonify(
            [
                {
                    "id": item.id,
                    "name": item.name,
                    "description": item.description,
                    "priceCents": item.price.cents,
                    "isAvailable": item.available,
                }
                for item in service.list_menu_items()
            ]
        )

    @bp.post("/api/floor/menu-items")
    def add_menu_item():
        try:
            body = _body()
            item_id = service.add_menu_item(
                _field(body, "name", str),
                _field(body, "description", str),
                _field(body, "price_cents", int),
            )
        except Exception as exc:
            return _error(str(exc), 422)
        return jsonify({"id": item_id}), 201

    @bp.put("/api/floor/menu-items/<item_id>")
    def update_menu_item(item_id: str):
        try:
            body = _body()
            service.update_menu_item(
                item_id,
                _field(body, "name", str),
                _field(body, "description", str),
                _field(body, "price_cents", int),
            )
        except NotFoundError as exc:
            return _error(str(exc), 404)
        except Exception as exc:
            return _error(str(exc), 422)
        return jsonify({"status": "updated"})

    @bp.post("/api/floor/menu-items/<item_id>/sold-out")
    def mark_sold_out(item_id: str):
        try:
            service.mark_sold_out(item_id)
        except NotFoundError as exc:
            return _error(str(exc), 404)
        return jsonify({"status": "sold_out"})

    @bp.get("/api/floor/covers/tonight")
    def covers_tonight():
        return jsonify({"covers": service.count_covers_tonight()})

    return bp