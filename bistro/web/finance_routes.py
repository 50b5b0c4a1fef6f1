"""HTTP routes of the finance context."""

from __future__ import annotations

import json
from typing import Any

from flask import Blueprint, jsonify, request

from bistro.finance.service import FinanceService
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


def finance_blueprint(service: FinanceService) -> Blueprint:
    """Routes under /api/finance backed by ``service``."""
    bp = Blueprint("finance", __name__)

    @bp.get("/api/finance/cost-items")
    def list_cost_items():
        return jsonify(
            [
                {
                    "id": item.id,
                    "name": item.name,
                    "ingredient_cost_cents": item.ingredient_cost.cents,
                    "supplier_price_cents": item.supplier_price.cents,
                    "selling_price_cents": item.selling_price.cents,
                    "margin_percent": item.margin_percent(),
                }
                for item in service.list_cost_items()
            ]
        )

    @bp.post("/api/finance/cost-items")
    def add_cost_item():
        try:
            body = _body()
            item_id = service.add_cost_item(
                _field(body, "name", str),
                _field(body, "ingredient_cost_cents", int),
                _field(body, "supplier_price_cents", int),
                _field(body, "selling_price_cents", int),
            )
        except Exception as exc:
            return _error(str(exc), 422)
        return jsonify({"id": item_id}), 201

    @bp.put("/api/finance/cost-items/<item_id>")
    def update_cost_item(item_id: str):
        try:
            body = _body()
            service.update_cost_item(
                item_id,
                _field(body, "ingredient_cost_cents", int),
                _field(body, "supplier_price_cents", int),
            )
        except NotFoundError as exc:
            return _error(str(exc), 404)
        except Exception as exc:
            return _error(str(exc), 422)
        return jsonify({"status": "updated"})

    @bp.get("/api/finance/cost-items/<item_id>/margin")
    def cost_item_margin(item_id: str):
        try:
            margin = service.calculate_margin(item_id)
        except NotFoundError:
            return _error("Cost item not found", 404)
        return jsonify({"margin_percent": margin})

    @bp.post("/api/finance/waste")
    def record_waste():
        try:
            body = _body()
            record_id = service.record_waste(
                _field(body, "cost_item_id", str),
                _field(body, "quantity", float),
                _field(body, "unit", str),
                _field(body, "reason", str),
            )
        except Exception as exc:
            return _error(str(exc), 422)
        return jsonify({"id": record_id}), 201

    @bp.get("/api/finance/waste")
    def list_waste():
        return jsonify(
            [
                {
                    "id": record.id,
                    "cost_item_id": record.cost_item_id,
                    "quantity": record.quantity,
                    "unit": record.unit,
                    "reason": record.reason,
                    "recorded_at": record.recorded_at,
                }
                for record in service.list_waste()
            ]
        )

    @bp.get("/api/finance/reports/food-cost-ratio")
    def food_cost_ratio():
        ratio = service.food_cost_report()
        return jsonify({"food_cost_ratio_percent": ratio.percent()})

    return bp