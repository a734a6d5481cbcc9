from datetime import datetime, timedelta, timezone

import pytest
import pytz

from habit_tracker.utils.datetime_utils import days_between, parse_timestamp
from habit_tracker.utils.validators import is_confirmation, parse_int


@pytest.mark.parametrize("text, expected", [("3", 3), (" 12 ", 12), ("-1", -1), ("abc", None), ("", None), (None, None)])
def test_parse_int(text, expected):
    assert parse_int(text) == expected


def test_is_confirmation():
    assert is_confirmation("Да")
    assert is_confirmation("yes")
    assert not is_confirmation("нет")
    assert not is_confirmation(None)


def test_parse_timestamp__z_suffix_and_offsets():
    expected = datetime(2026, 10, 1, 9, 0, tzinfo=pytz.utc)

    assert parse_timestamp("2026-10-01T09:00:00Z") == expected
    assert parse_timestamp("2026-10-01T12:00:00+03:00") == expected
    assert parse_timestamp(expected) is expected


def test_parse_timestamp__localizes_naive_values():
    tz = pytz.timezone("Europe/Moscow")

    parsed = parse_timestamp(datetime(2026, 10, 1, 12, 0), tz)

    assert parsed.utcoffset() == timedelta(hours=3)


def test_parse_timestamp__rejects_garbage():
    with pytest.raises(ValueError):
        parse_timestamp("yesterday")
    with pytest.raises(ValueError):
        parse_timestamp(42)


def test_days_between():
    start = datetime(2026, 10, 1, 12, 0, tzinfo=timezone.utc)

    assert days_between(start, start + timedelta(days=2, hours=23)) == 2
