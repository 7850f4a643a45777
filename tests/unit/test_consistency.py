"""Tests for first-occurrence style inference."""

from __future__ import annotations

import pytest

from marklint.consistency import (
    CONSISTENT,
    ConsistencyState,
    ConsistencyTracker,
    preference_from_setting,
)


class TestPreferenceFromSetting:
    @pytest.mark.parametrize("setting", [None, True, CONSISTENT])
    def test_consistency_mode(self, setting: object) -> None:
        assert preference_from_setting(setting, ["a", "b"]) is None

    def test_fixed_choice(self) -> None:
        assert preference_from_setting("b", ["a", "b"]) == "b"

    @pytest.mark.parametrize("setting", ["c", 1, {"a": 1}, ["a"], False])
    def test_unknown_choice(self, setting: object) -> None:
        with pytest.raises(ValueError, match="consistent"):
            preference_from_setting(setting, ["a", "b"])


class TestConsistencyMode:
    def test_starts_undetermined(self) -> None:
        tracker: ConsistencyTracker[str] = ConsistencyTracker()
        assert tracker.state == ConsistencyState.UNDETERMINED
        assert tracker.accepted is None
        assert not tracker.fixed

    def test_first_observation_wins_silently(self) -> None:
        tracker: ConsistencyTracker[str] = ConsistencyTracker()
        assert tracker.check("unix") is None
        assert tracker.state == ConsistencyState.DETERMINED
        assert tracker.accepted == "unix"

    def test_later_deviation_reported(self) -> None:
        tracker: ConsistencyTracker[str] = ConsistencyTracker()
        observations = ["windows", "windows", "unix", "windows", "unix"]
        expected = [tracker.check(o) for o in observations]
        assert expected == [None, None, "windows", None, "windows"]
        assert tracker.accepted == "windows"

    def test_fresh_tracker_per_document(self) -> None:
        first: ConsistencyTracker[str] = ConsistencyTracker()
        first.check("unix")
        second: ConsistencyTracker[str] = ConsistencyTracker()
        assert second.check("windows") is None


class TestFixedPreference:
    def test_first_observation_checked(self) -> None:
        tracker = ConsistencyTracker("unix")
        assert tracker.fixed
        assert tracker.check("windows") == "unix"

    def test_every_mismatch_reported(self) -> None:
        tracker = ConsistencyTracker("unix")
        results = [tracker.check(o) for o in ["windows", "unix", "windows"]]
        assert results == ["unix", None, "unix"]
        assert tracker.accepted == "unix"
