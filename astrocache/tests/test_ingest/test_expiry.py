"""Tests for next-local-midnight expiry computation."""

from datetime import UTC, datetime, timedelta
from zoneinfo import ZoneInfo

import pytest

from astrocache.errors import ExpiryError, MalformedLocalTime, UnknownTimeZone
from astrocache.ingest.expiry import compute_expiry


class TestComputeExpiry:
    def test_vancouver_next_midnight(self):
        result = compute_expiry("2023-06-21 16:30", "America/Vancouver")
        expected = datetime(2023, 6, 22, 0, 0, tzinfo=ZoneInfo("America/Vancouver"))
        assert result == expected
        # PDT is UTC-7
        assert result == datetime(2023, 6, 22, 7, 0, tzinfo=UTC)

    def test_result_is_utc(self):
        result = compute_expiry("2023-06-21 16:30", "America/Vancouver")
        assert result.tzinfo is UTC

    def test_deterministic(self):
        a = compute_expiry("2023-06-21 16:30", "America/Vancouver")
        b = compute_expiry("2023-06-21 16:30", "America/Vancouver")
        assert a == b

    def test_just_after_midnight_rolls_to_following_day(self):
        result = compute_expiry("2023-06-21 00:00", "Europe/London")
        assert result == datetime(2023, 6, 21, 23, 0, tzinfo=UTC)

    def test_just_before_midnight(self):
        result = compute_expiry("2023-06-21 23:59", "Asia/Tokyo")
        assert result == datetime(2023, 6, 21, 15, 0, tzinfo=UTC)

    def test_month_and_year_rollover(self):
        result = compute_expiry("2023-12-31 18:00", "UTC")
        assert result == datetime(2024, 1, 1, 0, 0, tzinfo=UTC)

    def test_leap_day(self):
        result = compute_expiry("2024-02-28 12:00", "UTC")
        assert result == datetime(2024, 2, 29, 0, 0, tzinfo=UTC)

    def test_uses_location_offset_not_server(self):
        # Same wall clock reading, different zones, different instants
        tokyo = compute_expiry("2023-06-21 16:30", "Asia/Tokyo")
        vancouver = compute_expiry("2023-06-21 16:30", "America/Vancouver")
        assert vancouver - tokyo == timedelta(hours=16)

    def test_dst_change_day(self):
        # Clocks go back on 2023-11-05 in Vancouver; midnight that day is still PDT
        result = compute_expiry("2023-11-04 20:00", "America/Vancouver")
        assert result == datetime(2023, 11, 5, 7, 0, tzinfo=UTC)
        after = compute_expiry("2023-11-05 20:00", "America/Vancouver")
        assert after == datetime(2023, 11, 6, 8, 0, tzinfo=UTC)

    def test_unknown_time_zone(self):
        with pytest.raises(UnknownTimeZone):
            compute_expiry("2023-06-21 16:30", "Mars/Olympus_Mons")

    def test_empty_time_zone(self):
        with pytest.raises(UnknownTimeZone):
            compute_expiry("2023-06-21 16:30", "")

    @pytest.mark.parametrize(
        "local_time",
        [
            "",
            "2023-06-21",
            "2023-06-21T16:30",
            "21/06/2023 16:30",
            "2023-06-21 25:00",
            "2023-6-2 4:5",
            "2023-06-21 16:30:00",
            " 2023-06-21 16:30",
        ],
    )
    def test_malformed_local_time(self, local_time: str):
        with pytest.raises(MalformedLocalTime):
            compute_expiry(local_time, "America/Vancouver")

    def test_errors_share_base(self):
        with pytest.raises(ExpiryError):
            compute_expiry("garbage", "America/Vancouver")
