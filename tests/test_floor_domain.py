import re

import pytest

from bistro.floor.domain import (
    MenuItem,
    MenuItemSoldOut,
    ReservationSeated,
    Seating,
    Table,
    TableStatus,
    TableTurned,
    WalkIn,
    WalkInSeated,
)
from bistro.shared.types import DomainError, Money

TIMESTAMP_RE = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}Z$")


@pytest.mark.parametrize(
    "text, status",
    [
        ("available", TableStatus.AVAILABLE),
        ("occupied", TableStatus.OCCUPIED),
        ("reserved", TableStatus.RESERVED),
    ],
)
def test_table_status_parse(text, status):
    assert TableStatus.parse(text) is status
    assert status.value == text


def test_table_status_parse_unknown():
    with pytest.raises(ValueError, match="Unknown table status: closed"):
        TableStatus.parse("closed")


def test_new_table_is_available():
    table = Table("t1", 4, 2)
    assert table.status is TableStatus.AVAILABLE


def test_occupy_available_table():
    table = Table("t1", 4, 2)
    table.occupy()
    assert table.status is TableStatus.OCCUPIED


def test_occupy_reserved_table():
    table = Table("t1", 4, 2)
    table.reserve()
    assert table.status is TableStatus.RESERVED
    table.occupy()
    assert table.status is TableStatus.OCCUPIED


def test_occupy_occupied_table_fails():
    table = Table("t1", 4, 2, TableStatus.OCCUPIED)
    with pytest.raises(DomainError, match="Table is not available or reserved"):
        table.occupy()
    assert table.status is TableStatus.OCCUPIED


def test_turn_makes_table_available():
    table = Table("t1", 4, 2, TableStatus.OCCUPIED)
    table.turn()
    assert table.status is TableStatus.AVAILABLE
    table.occupy()
    assert table.status is TableStatus.OCCUPIED


def test_menu_item_sold_out_and_restore():
    item = MenuItem("m1", "Soup", "Hot soup", Money(650))
    assert item.available is True
    item.mark_sold_out()
    assert item.available is False
    item.restore()
    assert item.available is True


def test_walk_in_seating():
    seating = Seating.walk_in("s1", "t1", 3)
    assert seating.is_walk_in is True
    assert seating.reservation_name == ""
    assert seating.cover_count == 3
    assert seating.table_id == "t1"
    assert seating.cleared_at == ""
    assert TIMESTAMP_RE.match(seating.seated_at)


def test_reservation_seating():
    seating = Seating.reservation("s2", "t2", 5, "Smith")
    assert seating.is_walk_in is False
    assert seating.reservation_name == "Smith"
    assert seating.cover_count == 5
    assert seating.cleared_at == ""


def test_clear_sets_cleared_at():
    seating = Seating.walk_in("s1", "t1", 2)
    seating.clear()
    assert TIMESTAMP_RE.match(seating.cleared_at)
    assert seating.cleared_at >= seating.seated_at


def test_walk_in_party_size():
    assert WalkIn(4).party_size == 4


def test_event_types_and_fields():
    seated = WalkInSeated("t1", 3)
    assert seated.type == "WalkInSeated"
    assert seated.cover_count == 3
    reservation = ReservationSeated("t1", "Smith", 2)
    assert reservation.type == "ReservationSeated"
    assert reservation.name == "Smith"
    assert TableTurned("t1", 4).type == "TableTurned"
    sold_out = MenuItemSoldOut("m1", "Soup")
    assert sold_out.type == "MenuItemSoldOut"
    assert sold_out.menu_item_id == "m1"


def test_events_get_distinct_ids():
    first = TableTurned("t1", 1)
    second = TableTurned("t1", 1)
    assert first.event_id != second.event_id
    assert TIMESTAMP_RE.match(first.timestamp)