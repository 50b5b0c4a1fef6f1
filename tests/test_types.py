from datetime import datetime

import pytest

from bistro.shared.types import (
    DomainError,
    Money,
    NotFoundError,
    new_id,
    utc_timestamp,
)


def test_new_id_is_32_hex_digits():
    value = new_id()
    assert len(value) == 32
    assert set(value) <= set("0123456789abcdef")


def test_new_ids_are_distinct():
    ids = {new_id() for _ in range(200)}
    assert len(ids) == 200


def test_utc_timestamp_format():
    stamp = utc_timestamp()
    parsed = datetime.strptime(stamp, "%Y-%m-%dT%H:%M:%SZ")
    assert parsed.strftime("%Y-%m-%dT%H:%M:%SZ") == stamp


def test_money_defaults_to_zero():
    assert Money().cents == 0
    assert Money() == Money(0)


def test_money_add_then_subtract_round_trips():
    a, b = Money(1234), Money(567)
    assert (a + b) - b == a
    assert (a - b) + b == a


def test_money_addition_is_commutative():
    assert Money(10) + Money(32) == Money(32) + Money(10)


def test_money_add_rejects_plain_int():
    with pytest.raises(TypeError):
        Money(5) + 5


def test_money_to_dollars():
    assert Money(250).to_dollars() == 2.5
    assert Money(0).to_dollars() == 0.0


def test_money_ordering():
    assert Money(1) < Money(2)


def test_not_found_is_a_domain_error():
    error = NotFoundError("missing")
    assert isinstance(error, DomainError)
    assert str(error) == "missing"