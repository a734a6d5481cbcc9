from datetime import datetime

import pytest
import pytz

from habit_tracker.core import HabitTracker, PersistenceStore

NOW = datetime(2026, 10, 19, 12, 0, 0, tzinfo=pytz.utc)


@pytest.fixture()
def now():
    return NOW


@pytest.fixture()
def data_file(tmp_path):
    return tmp_path / "data" / "habits-data.json"


@pytest.fixture()
def store(data_file):
    return PersistenceStore(data_file)


@pytest.fixture()
def tracker(store):
    return HabitTracker(store, clock=lambda: NOW).load()
