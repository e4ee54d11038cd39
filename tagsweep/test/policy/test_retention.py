"""Tests for tagsweep.policy.retention."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from tagsweep.github.model import Release
from tagsweep.policy.retention import (
    TTL_RULES,
    Verdict,
    decide,
    elapsed_minutes,
    find_release,
    is_candidate,
    should_delete_now,
    ttl_minutes,
)

NOW = datetime(2026, 10, 18, 12, 0, 0, tzinfo=timezone.utc)


def _ago(minutes: float) -> datetime:
    return NOW - timedelta(minutes=minutes)


def _release(tag_name: str, minutes_ago: float, release_id: int = 1) -> Release:
    return Release(id=release_id, tag_name=tag_name, created_at=_ago(minutes_ago))


class TestIsCandidate:
    @pytest.mark.parametrize("name", ["temp_", "tmp_", "temp_3h", "tmp_25m", "temp_foo"])
    def test_temporary_prefixes(self, name: str) -> None:
        assert is_candidate(name) is True

    @pytest.mark.parametrize(
        "name",
        ["v1.0.0", "temp", "tmp", "Temp_3h", "TMP_25m", "temp-3h", "xtemp_3h", " temp_3h", ""],
    )
    def test_other_names(self, name: str) -> None:
        assert is_candidate(name) is False


class TestTtlMinutes:
    def test_hour_rule_has_priority(self) -> None:
        assert [rule.name for rule in TTL_RULES] == ["hours", "minutes"]

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("temp_1h", 60),
            ("tmp_9h", 540),
            ("temp_3hs", 180),
            ("tmp_10m", 10),
            ("temp_25m", 25),
            ("tmp_55m", 55),
        ],
    )
    def test_recognised(self, name: str, expected: int) -> None:
        assert ttl_minutes(name) == expected

    @pytest.mark.parametrize(
        "name",
        [
            "temp_0h",
            "temp_12h",
            "temp_5m",
            "temp_12m",
            "temp_60m",
            "tmp_1h30m",
            "temp_3h_extra",
            "temp_3h\n",
            "temp_foo",
            "temp_",
        ],
    )
    def test_unrecognised(self, name: str) -> None:
        assert ttl_minutes(name) is None


class TestElapsedMinutes:
    def test_whole_minutes(self) -> None:
        assert elapsed_minutes(_ago(181), NOW) == 181

    def test_fraction_truncated(self) -> None:
        assert elapsed_minutes(_ago(24.99), NOW) == 24

    def test_future_creation_truncates_toward_zero(self) -> None:
        assert elapsed_minutes(NOW + timedelta(seconds=30), NOW) == 0
        assert elapsed_minutes(NOW + timedelta(seconds=90), NOW) == -1


class TestShouldDeleteNow:
    def test_hours_elapsed(self) -> None:
        assert should_delete_now("temp_3h", _ago(181), NOW) is True

    def test_hours_not_elapsed(self) -> None:
        assert should_delete_now("temp_3h", _ago(179), NOW) is False

    def test_hours_boundary_inclusive(self) -> None:
        assert should_delete_now("tmp_2hs", _ago(120), NOW) is True

    def test_minutes_boundary_inclusive(self) -> None:
        assert should_delete_now("tmp_25m", _ago(25), NOW) is True

    def test_minutes_partial_minute_not_enough(self) -> None:
        assert should_delete_now("tmp_25m", _ago(24.9), NOW) is False

    def test_out_of_range_hours_delete_immediately(self) -> None:
        assert should_delete_now("temp_12h", _ago(0), NOW) is True

    def test_no_ttl_delete_immediately(self) -> None:
        assert should_delete_now("temp_foo", _ago(0), NOW) is True


class TestDecide:
    def test_non_candidate_never_deleted(self) -> None:
        assert decide("v1.2.3", None, NOW) == Verdict(False, False)
        assert decide("v1.2.3", _release("v1.2.3", 10_000), NOW) == Verdict(False, False)

    def test_candidate_without_release_deletes_tag(self) -> None:
        verdict = decide("temp_3h", None, NOW)
        assert verdict == Verdict(delete_release=False, delete_tag=True)

    def test_expired_release_deletes_both(self) -> None:
        verdict = decide("temp_3h", _release("temp_3h", 200), NOW)
        assert verdict == Verdict(delete_release=True, delete_tag=True)

    def test_live_release_keeps_both(self) -> None:
        verdict = decide("temp_3h", _release("temp_3h", 30), NOW)
        assert verdict == Verdict(delete_release=False, delete_tag=False)
        assert verdict.keep is True

    def test_no_ttl_with_release_deletes_both(self) -> None:
        verdict = decide("tmp_build", _release("tmp_build", 0), NOW)
        assert verdict == Verdict(delete_release=True, delete_tag=True)

    @pytest.mark.parametrize("name", ["temp_3h", "tmp_build"])
    def test_unreadable_creation_time_keeps_both(self, name: str) -> None:
        release = Release(id=7, tag_name=name, created_at=None)
        assert decide(name, release, NOW).keep is True

    def test_missing_release_id_keeps_both(self) -> None:
        release = Release(id=None, tag_name="tmp_build", created_at=_ago(10_000))
        assert decide("tmp_build", release, NOW).keep is True


class TestFindRelease:
    def test_exact_match(self) -> None:
        releases = [_release("temp_1h", 5, 1), _release("temp_1hs", 5, 2)]
        found = find_release("temp_1hs", releases)
        assert found is not None
        assert found.id == 2

    def test_first_match_wins(self) -> None:
        releases = [_release("temp_1h", 5, 1), _release("temp_1h", 5, 2)]
        found = find_release("temp_1h", releases)
        assert found is not None
        assert found.id == 1

    def test_no_match(self) -> None:
        assert find_release("TEMP_1h", [_release("temp_1h", 5)]) is None
