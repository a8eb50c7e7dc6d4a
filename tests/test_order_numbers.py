import re

import pytest

from services import order_numbers
from services.order_numbers import get_order_number_generator, timestamp_order_number, uuid_order_number


def test_timestamp_number_uses_milliseconds(monkeypatch):
    monkeypatch.setattr(order_numbers.time, "time", lambda: 1718000000.1234)

    assert timestamp_order_number() == "ORD1718000000123"
    assert timestamp_order_number("SKN") == "SKN1718000000123"


def test_uuid_numbers_are_distinct():
    numbers = {uuid_order_number() for _ in range(50)}

    assert len(numbers) == 50
    assert all(re.fullmatch(r"ORD[0-9A-F]{12}", n) for n in numbers)


def test_generator_lookup():
    assert get_order_number_generator("timestamp") is timestamp_order_number
    assert get_order_number_generator("uuid") is uuid_order_number
    with pytest.raises(ValueError):
        get_order_number_generator("snowflake")
