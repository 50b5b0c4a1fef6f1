import pytest

from bistro.floor.domain import MenuItem, Seating, Table, TableStatus
from bistro.floor.repository import SqliteFloorRepository
from bistro.shared.db import Database
from bistro.shared.types import Money

SCHEMA = """
CREATE TABLE tables (
    id TEXT PRIMARY KEY,
    table_number INTEGER NOT NULL,
    capacity INTEGER NOT NULL,
    status TEXT NOT NULL
);
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
CREATE TABLE seatings (
    id TEXT PRIMARY KEY,
    table_id TEXT NOT NULL,
    cover_count INTEGER NOT NULL,
    is_walk_in INTEGER NOT NULL,
    reservation_name TEXT,
    seated_at TEXT NOT NULL,
    cleared_at TEXT
);
"""


@pytest.fixture
def database():
    db = Database(":memory:")
    db.execute(SCHEMA)
    yield db
    db.close()


@pytest.fixture
def repo(database):
    return SqliteFloorRepository(database)


def test_table_round_trip(repo):
    table = Table("t1", 7, 4, TableStatus.RESERVED)
    repo.save_table(table)
    assert repo.find_table("t1") == table


def test_missing_table_is_none(repo):
    assert repo.find_table("nope") is None


def test_update_table(repo):
    table = Table("t1", 1, 2)
    repo.save_table(table)
    table.occupy()
    table.capacity = 6
    repo.update_table(table)
    found = repo.find_table("t1")
    assert found.status is TableStatus.OCCUPIED
    assert found.capacity == 6


def test_all_tables(repo):
    repo.save_table(Table("a", 1, 2))
    repo.save_table(Table("b", 2, 4))
    assert sorted(t.id for t in repo.all_tables()) == ["a", "b"]


def test_duplicate_table_raises(repo):
    repo.save_table(Table("a", 1, 2))
    with pytest.raises(RuntimeError, match="save_table"):
        repo.save_table(Table("a", 1, 2))


def test_menu_item_round_trip(repo):
    item = MenuItem("m1", "Soup", "Hot", Money(950), False)
    repo.save_menu_item(item)
    assert repo.find_menu_item("m1") == item
    assert repo.find_menu_item_by_name("Soup") == item
    assert repo.all_menu_items() == [item]


def test_missing_menu_item_is_none(repo):
    assert repo.find_menu_item("x") is None
    assert repo.find_menu_item_by_name("Nothing") is None


def test_null_description_reads_as_empty(repo, database):
    database.connection.execute(
        "INSERT INTO items (id, name, description, price_cents, is_available) "
        "VALUES ('m2', 'Bread', NULL, 300, 1)"
    )
    assert repo.find_menu_item("m2").description == ""


def test_update_menu_item_leaves_kitchen_columns(repo, database):
    database.connection.execute(
        "INSERT INTO items VALUES ('m3', 'Steak', '', 2500, 20, 'sear', 'grill', 800, 700, 1)"
    )
    item = repo.find_menu_item("m3")
    item.mark_sold_out()
    item.description = "Aged"
    repo.update_menu_item(item)
    row = database.connection.execute(
        "SELECT prep_time_minutes, cooking_method, station, ingredient_cost_cents "
        "FROM items WHERE id = 'm3'"
    ).fetchone()
    assert row == (20, "sear", "grill", 800)
    found = repo.find_menu_item("m3")
    assert found.available is False
    assert found.description == "Aged"


def test_active_seating_round_trip(repo):
    seating = Seating.reservation("s1", "t1", 3, "Smith")
    repo.save_seating(seating)
    assert repo.find_active_seating("t1") == seating


def test_cleared_seating_is_not_active(repo):
    seating = Seating.walk_in("s1", "t1", 2)
    repo.save_seating(seating)
    seating.clear()
    repo.update_seating(seating)
    assert repo.find_active_seating("t1") is None


def test_walk_in_seating_flags(repo):
    repo.save_seating(Seating.walk_in("s1", "t9", 5))
    found = repo.find_active_seating("t9")
    assert found.is_walk_in is True
    assert found.reservation_name == ""
    assert found.cleared_at == ""
    assert found.cover_count == 5


def test_count_covers_today_ignores_other_days(repo):
    assert repo.count_covers_today() == 0
    repo.save_seating(Seating.walk_in("s1", "t1", 4))
    repo.save_seating(Seating.reservation("s2", "t2", 2, "Lee"))
    repo.save_seating(
        Seating("s3", "t3", 10, True, "", "2000-01-01T12:00:00Z")
    )
    assert repo.count_covers_today() == 4 + 2