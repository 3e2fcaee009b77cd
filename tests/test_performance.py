"""Tests for record-to-entry conversion and the in-memory store."""

from __future__ import annotations

import pytest

from perfscan.helpers.storage import StorageManager
from perfscan.models import PerformanceEntry, PerformanceRecord
from perfscan.performance import (
    to_float_or_zero,
    to_int_or_zero,
    to_optional_int,
    to_performance_entry,
)


class TestNumberConversion:
    """Lenient string-to-number conversion with zero defaults."""

    @pytest.mark.parametrize("value, expected", [
        ("15", 15),
        (" 7 ", 7),
        ("8.5", 8),
        ("12abc", 12),
        ("", 0),
        ("abc", 0),
        (None, 0),
        (3, 3),
    ])
    def test_to_int_or_zero(self, value, expected):
        assert to_int_or_zero(value) == expected

    @pytest.mark.parametrize("value, expected", [
        ("3200", 3200.0),
        ("8.5", 8.5),
        ("6.", 6.0),
        (".5", 0.5),
        ("1.5min", 1.5),
        ("", 0.0),
        ("n/a", 0.0),
        (None, 0.0),
    ])
    def test_to_float_or_zero(self, value, expected):
        assert to_float_or_zero(value) == pytest.approx(expected)

    def test_optional_int_blank_is_none(self):
        assert to_optional_int("") is None
        assert to_optional_int(None) is None
        assert to_optional_int("3") == 3


class TestToPerformanceEntry:
    """Parsed OCR rows become typed entries."""

    def test_converts_fields(self):
        record = PerformanceRecord("Player1", "15", "5", "3200", "8.5")
        entry = to_performance_entry(
            record, team_id="team-1", player_id="user-1",
            match_number=2, slot=1, map_name="Erangel", added_by="user-1",
        )
        assert entry.kills == 15
        assert entry.assists == 5
        assert entry.damage == 3200.0
        assert entry.survival_time == 8.5
        assert entry.match_number == 2
        assert entry.slot == 1
        assert entry.map == "Erangel"
        assert entry.placement is None
        assert entry.added_by == "user-1"
        assert entry.id
        assert entry.created_at

    def test_garbage_becomes_zero(self):
        record = PerformanceRecord("Player1", "x", "", "--", "?")
        entry = to_performance_entry(record, "t", "p", 1, 1, "Miramar")
        assert (entry.kills, entry.assists, entry.damage, entry.survival_time) == (0, 0, 0.0, 0.0)


class TestStorageManager:
    """In-memory performance store."""

    def _entry(self, team="team-1", match=1, slot=1):
        return PerformanceEntry(team_id=team, player_id="p", match_number=match, slot=slot, map="Erangel")

    def test_store_and_get(self):
        store = StorageManager()
        entry = self._entry()
        pid = store.store_performance(entry)
        assert pid == entry.id
        assert store.get_performance(pid) is entry

    def test_get_missing(self):
        with pytest.raises(KeyError):
            StorageManager().get_performance("nope")

    def test_bulk_store_keeps_order(self):
        store = StorageManager()
        entries = [self._entry(slot=i) for i in range(1, 4)]
        ids = store.store_performances(entries)
        assert ids == [e.id for e in entries]
        assert [e.slot for e in store.list_performances()] == [1, 2, 3]

    def test_filters(self):
        store = StorageManager()
        store.store_performances([
            self._entry(team="a", match=1),
            self._entry(team="a", match=2),
            self._entry(team="b", match=1),
        ])
        assert len(store.list_performances(team_id="a")) == 2
        assert len(store.list_performances(match_number=1)) == 2
        assert len(store.list_performances(team_id="a", match_number=2)) == 1

    def test_clear(self):
        store = StorageManager()
        store.store_performance(self._entry())
        store.clear()
        assert store.list_performances() == []
