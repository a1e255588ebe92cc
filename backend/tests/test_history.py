"""Tests for services/history.py - Bounded search history."""
import json
from unittest.mock import MagicMock, patch

import pytest
import redis

from scholar_search.services.history import HistoryStore


class TestHistoryStore:
    """Test the HistoryStore class."""

    def test_load_empty_when_nothing_stored(self, history_store):
        assert history_store.load() == []

    def test_record_inserts_at_front(self, history_store):
        history_store.record("first", 3)
        latest = history_store.record("second", 7)

        entries = history_store.load()
        assert [e.query for e in entries] == ["second", "first"]
        assert entries[0] == latest
        assert entries[0].results == 7

    def test_never_exceeds_capacity(self, history_store):
        for i in range(25):
            entry = history_store.record(f"query {i}", i)
            entries = history_store.load()

            assert len(entries) <= 10
            assert entries[0].id == entry.id

        entries = history_store.load()
        assert len(entries) == 10
        assert entries[0].query == "query 24"
        assert entries[-1].query == "query 15"

    def test_ids_are_unique_and_increasing(self, history_store):
        ids = [history_store.record("same millisecond", 0).id for _ in range(5)]

        assert len(set(ids)) == 5
        assert ids == sorted(ids)

    def test_timestamp_is_iso_format(self, history_store):
        from datetime import datetime

        entry = history_store.record("aging", 1)

        assert datetime.fromisoformat(entry.timestamp)

    def test_persists_json_array_under_key(self, history_store, fake_redis):
        history_store.record("metformin", 4)

        stored = json.loads(fake_redis.data["test:searchHistory"])
        assert isinstance(stored, list)
        assert stored[0]["query"] == "metformin"
        assert set(stored[0]) == {"id", "query", "timestamp", "results"}

    def test_corrupt_storage_reads_as_empty(self, history_store, fake_redis):
        fake_redis.data["test:searchHistory"] = "{not json"

        assert history_store.load() == []

    def test_wrong_shape_reads_as_empty(self, history_store, fake_redis):
        fake_redis.data["test:searchHistory"] = json.dumps([{"query": "missing fields"}])

        assert history_store.load() == []

    def test_record_recovers_from_corrupt_storage(self, history_store, fake_redis):
        fake_redis.data["test:searchHistory"] = "garbage"

        history_store.record("fresh", 2)

        assert [e.query for e in history_store.load()] == ["fresh"]

    def test_clear_removes_history(self, history_store):
        history_store.record("to be cleared", 1)

        assert history_store.clear() is True
        assert history_store.load() == []


class TestHistoryStoreBackends:
    """Test Redis connection handling."""

    def test_falls_back_to_memory_without_redis(self):
        with patch("scholar_search.services.history.redis.Redis") as mock_redis:
            mock_redis.return_value.ping.side_effect = redis.ConnectionError("Connection refused")

            store = HistoryStore()

        assert store.is_connected is False
        store.record("offline", 1)
        assert [e.query for e in store.load()] == ["offline"]

    def test_read_error_reads_as_empty(self):
        client = MagicMock()
        client.get.side_effect = redis.ConnectionError("gone")

        store = HistoryStore(client=client)

        assert store.load() == []

    def test_write_error_still_returns_entry(self):
        client = MagicMock()
        client.get.return_value = None
        client.set.side_effect = redis.TimeoutError("slow")

        store = HistoryStore(client=client)
        entry = store.record("unsaved", 5)

        assert entry.query == "unsaved"
        assert entry.results == 5


class TestHistoryStoreReadFailures:
    """A backend read failure must never wipe stored history."""

    def test_read_error_during_record_keeps_existing_entries(self, history_store, fake_redis):
        for i in range(5):
            history_store.record(f"query {i}", i)

        original_get = fake_redis.get
        calls = {"n": 0}

        def flaky_get(key):
            calls["n"] += 1
            if calls["n"] == 1:
                raise redis.ConnectionError("blip")
            return original_get(key)

        fake_redis.get = flaky_get

        entry = history_store.record("during blip", 1)

        assert entry.query == "during blip"
        assert [e.query for e in history_store.load()] == [f"query {i}" for i in range(4, -1, -1)]

        history_store.record("after blip", 1)
        entries = history_store.load()
        assert len(entries) == 6
        assert entries[0].query == "after blip"

    def test_corrupt_value_is_still_overwritten(self, history_store, fake_redis):
        fake_redis.data["test:searchHistory"] = "[{broken"

        history_store.record("replacement", 0)

        assert [e.query for e in history_store.load()] == ["replacement"]


class TestHistoryStoreCapacity:
    """Test capacity handling."""

    def test_zero_capacity_is_rejected(self, fake_redis):
        with pytest.raises(ValueError):
            HistoryStore(client=fake_redis, capacity=0)

    def test_explicit_small_capacity_is_kept(self, fake_redis):
        store = HistoryStore(client=fake_redis, key="small", capacity=2)

        for i in range(4):
            store.record(f"q{i}", i)

        assert [e.query for e in store.load()] == ["q3", "q2"]
