import json
from datetime import datetime, timedelta

import pytest
import pytz

from habit_tracker.core import Habit, ParseError, PersistenceStore, StorageError, TrackerState, UserProfile


def _state(now):
    read = Habit.create(1, "Read", 3, now - timedelta(days=10))
    read.record_completion(now - timedelta(days=2, microseconds=1500))
    read.record_completion(now - timedelta(days=9))
    run = Habit.create(2, "Run", 0, now - timedelta(days=1))
    return TrackerState(habits=[read, run], user_profile=UserProfile.create("Ann", now - timedelta(days=10)))


def test_load__missing_file_returns_empty_state(store):
    assert store.load() == TrackerState(habits=[], user_profile=None)


@pytest.mark.parametrize("content", ["", "   \n\t"])
def test_load__blank_file_returns_empty_state(store, data_file, content):
    data_file.parent.mkdir(parents=True)
    data_file.write_text(content, encoding="utf-8")

    assert store.load() == TrackerState()


_CREATED = '"createdAt": "2026-10-01T00:00:00Z"'


@pytest.mark.parametrize("content", [
    "{not json",
    "[1, 2]",
    '{"habits": 5}',
    '{"habits": [{"id": 1}]}',
    '{"habits": [{"id": 1, "targetFrequency": "3", ' + _CREATED + "}]}",
    '{"habits": [{"id": 1, "targetFrequency": 2.5, ' + _CREATED + "}]}",
    '{"habits": [{"id": 1, "targetFrequency": true, ' + _CREATED + "}]}",
    '{"habits": [{"id": "1", "targetFrequency": 3, ' + _CREATED + "}]}",
])
def test_load__malformed_content_raises_parse_error(store, data_file, content):
    data_file.parent.mkdir(parents=True)
    data_file.write_text(content, encoding="utf-8")

    with pytest.raises(ParseError) as exc_info:
        store.load()

    assert isinstance(exc_info.value, StorageError)
    assert exc_info.value.path == data_file


def test_load__null_target_frequency_is_kept_as_none(store, data_file, now):
    data_file.parent.mkdir(parents=True)
    data_file.write_text('{"habits": [{"id": 4, "targetFrequency": null, ' + _CREATED + "}]}", encoding="utf-8")

    habit = store.load().habits[0]

    assert habit.id == 4
    assert habit.target_frequency is None
    assert habit.progress_percentage(now) == 0


def test_round_trip__preserves_state(store, now):
    state = _state(now)

    store.save(state)

    assert store.load() == state


def test_round_trip__empty_state(store):
    store.save(TrackerState())

    assert store.load() == TrackerState(habits=[], user_profile=None)


def test_round_trip__preserves_window_decisions(store, now):
    state = _state(now)
    store.save(state)

    loaded = store.load()

    assert [h.window_count(now) for h in loaded.habits] == [1, 0]
    assert all(isinstance(c, datetime) for c in loaded.habits[0].completions)


def test_save__writes_expected_shape(store, data_file, now):
    store.save(_state(now))

    data = json.loads(data_file.read_text(encoding="utf-8"))

    assert set(data) == {"habits", "userProfile"}
    assert data["habits"][0]["targetFrequency"] == 3
    assert data["userProfile"]["name"] == "Ann"
    assert not data_file.with_name(data_file.name + ".tmp").exists()


def test_save__overwrites_previous_content(store, now):
    store.save(_state(now))
    store.save(TrackerState())

    assert store.load() == TrackerState()


def test_load__reads_files_written_with_z_timestamps(store, data_file):
    data_file.parent.mkdir(parents=True)
    data_file.write_text(
        json.dumps(
            {
                "habits": [
                    {
                        "id": 1,
                        "name": "Read",
                        "targetFrequency": 3,
                        "completions": ["2026-10-18T08:30:00.123Z"],
                        "createdAt": "2026-10-01T00:00:00.000Z",
                    },
                    {"id": 2, "name": "Walk", "targetFrequency": 1, "createdAt": "2026-10-02T00:00:00.000Z"},
                ],
                "userProfile": {"name": "Ann", "joinedAt": "2026-09-30T10:00:00.000Z"},
            }
        ),
        encoding="utf-8",
    )

    state = store.load()

    assert state.habits[0].completions == [datetime(2026, 10, 18, 8, 30, 0, 123000, tzinfo=pytz.utc)]
    assert state.habits[1].completions == []
    assert state.user_profile.joined_at == datetime(2026, 9, 30, 10, 0, tzinfo=pytz.utc)


def test_load__naive_timestamps_use_store_timezone(data_file):
    tz = pytz.timezone("Europe/Moscow")
    data_file.parent.mkdir(parents=True)
    data_file.write_text(
        json.dumps({"habits": [], "userProfile": {"name": "Ann", "joinedAt": "2026-10-01T12:00:00"}}),
        encoding="utf-8",
    )

    state = PersistenceStore(data_file, tz=tz).load()

    assert state.user_profile.joined_at == tz.localize(datetime(2026, 10, 1, 12, 0))


def test_load__partial_profile_is_treated_as_absent(store, data_file):
    data_file.parent.mkdir(parents=True)
    data_file.write_text(json.dumps({"habits": [], "userProfile": {"name": "Ann"}}), encoding="utf-8")

    assert store.load().user_profile is None


def test_save__failed_write_leaves_previous_file(store, data_file, now, monkeypatch):
    store.save(TrackerState())
    original = data_file.read_text(encoding="utf-8")

    def broken_replace(self, target):
        raise OSError("disk full")

    monkeypatch.setattr(type(data_file), "replace", broken_replace)

    with pytest.raises(OSError):
        store.save(_state(now))

    assert data_file.read_text(encoding="utf-8") == original
    assert not data_file.with_name(data_file.name + ".tmp").exists()
