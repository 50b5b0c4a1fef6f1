import pytest

from bistro.kitchen.domain import (
    Dish,
    FireLineStatus,
    FireOrder,
    FireOrderStatus,
    Station,
)
from bistro.kitchen.repository import SqliteKitchenRepository
from bistro.shared.db import Database

SCHEMA = """
CREATE TABLE items (
    id TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    description TEXT,
    price_cents INTEGER,
    prep_time_minutes INTEGER,
    cooking_method TEXT,
    station TEXT,
    ingredient_cost_cents INTEGER,
    supplier_price_cents INTEGER,
    is_available INTEGER
);
CREATE TABLE orders (
    id TEXT PRIMARY KEY,
    table_number INTEGER,
    status TEXT,
    created_at TEXT
);
CREATE TABLE order_lines (
    id TEXT PRIMARY KEY,
    order_id TEXT,
    item_id TEXT,
    status TEXT,
    fire_at_offset_minutes INTEGER,
    fired_at TEXT,
    plated_at TEXT
);
"""


@pytest.fixture
def database(tmp_path):
    db = Database(tmp_path / "kitchen.db")
    db.execute(SCHEMA)
    yield db
    db.close()


@pytest.fixture
def repo(database):
    return SqliteKitchenRepository(database)


def _order_with_lines():
    order = FireOrder("order-1", 7, "2024-01-01T18:00:00Z")
    order.add_line("line-a", "dish-a", 0)
    order.add_line("line-b", "dish-b", 10)
    return order


def test_dish_round_trip(repo):
    dish = Dish("dish-1", "Ribeye", 25, "seared", Station.GRILL)
    repo.save_dish(dish)
    assert repo.find_dish("dish-1") == dish


def test_missing_dish_is_none(repo):
    assert repo.find_dish("nope") is None
    assert repo.find_dish_by_name("nope") is None


def test_find_dish_by_name(repo):
    dish = Dish("dish-2", "Tart", 40, "baked", Station.PASTRY)
    repo.save_dish(dish)
    assert repo.find_dish_by_name("Tart") == dish


def test_update_dish_persists_availability(repo):
    dish = Dish("dish-3", "Salad", 5, "tossed", Station.COLD)
    repo.save_dish(dish)
    dish.mark_out_of_stock()
    repo.update_dish(dish)
    assert repo.find_dish("dish-3").available is False


def test_update_dish_leaves_price_untouched(repo, database):
    database.execute(
        "INSERT INTO items VALUES ('x', 'Soup', 'hot', 900, 10, 'simmered', 'sauce', 200, 150, 1);"
    )
    dish = repo.find_dish("x")
    dish.mark_out_of_stock()
    repo.update_dish(dish)
    row = database.connection.execute(
        "SELECT price_cents, description FROM items WHERE id = 'x'"
    ).fetchone()
    assert row == (900, "hot")


def test_all_dishes_skips_items_without_station(repo, database):
    repo.save_dish(Dish("dish-4", "Ribeye", 25, "seared", Station.GRILL))
    database.execute(
        "INSERT INTO items VALUES ('menu', 'Bread', '', 300, 0, '', '', 0, 0, 1);"
    )
    assert [dish.id for dish in repo.all_dishes()] == ["dish-4"]


def test_save_dish_twice_raises(repo):
    dish = Dish("dup", "Ribeye", 25, "seared", Station.GRILL)
    repo.save_dish(dish)
    with pytest.raises(RuntimeError, match="save_dish"):
        repo.save_dish(dish)


def test_fire_order_round_trip(repo):
    repo.save_fire_order(_order_with_lines())
    loaded = repo.find_fire_order("order-1")
    assert loaded.table_number == 7
    assert loaded.created_at == "2024-01-01T18:00:00Z"
    assert loaded.status is FireOrderStatus.COORDINATING
    assert [(line.id, line.dish_id, line.fire_at_offset_minutes) for line in loaded.lines] == [
        ("line-a", "dish-a", 0),
        ("line-b", "dish-b", 10),
    ]
    assert all(line.status is FireLineStatus.WAITING for line in loaded.lines)
    assert all(line.fired_at == "" for line in loaded.lines)


def test_missing_fire_order_is_none(repo):
    assert repo.find_fire_order("nope") is None


def test_update_fire_order_restores_progress(repo):
    order = _order_with_lines()
    repo.save_fire_order(order)
    order.fire_dish("line-a")
    order.plate_dish("line-a")
    order.fire_dish("line-b")
    repo.update_fire_order(order)

    loaded = repo.find_fire_order("order-1")
    assert loaded.line("line-a").status is FireLineStatus.PLATED
    assert loaded.line("line-b").status is FireLineStatus.FIRED
    assert loaded.status is FireOrderStatus.IN_PROGRESS
    assert loaded.line("line-a").plated_at


def test_fully_plated_order_reloads_as_plated(repo):
    order = _order_with_lines()
    repo.save_fire_order(order)
    for line_id in ("line-a", "line-b"):
        order.fire_dish(line_id)
        order.plate_dish(line_id)
    repo.update_fire_order(order)
    assert repo.find_fire_order("order-1").status is FireOrderStatus.PLATED


def test_all_fire_orders(repo):
    repo.save_fire_order(_order_with_lines())
    repo.save_fire_order(FireOrder("order-2", 3, "2024-01-01T19:00:00Z"))
    orders = repo.all_fire_orders()
    assert sorted(order.id for order in orders) == ["order-1", "order-2"]