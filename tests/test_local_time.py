"""Tests for UTC to local time conversion."""

from datetime import datetime, timedelta

import pytest
import pytz

from wallpaper_selector.errors import ConversionError
from wallpaper_selector.local_time import current_local_time, to_local_time


class TestToLocalTime:

    def test_summer_offset(self):
        local = to_local_time("2024-07-01T12:00:00+00:00", "America/New_York")
        assert (local.hour, local.minute) == (8, 0)
        assert local.utcoffset() == timedelta(hours=-4)
        assert local.tzname() == "EDT"

    def test_winter_offset(self):
        local = to_local_time("2024-01-15T12:00:00+00:00", "America/New_York")
        assert local.hour == 7
        assert local.utcoffset() == timedelta(hours=-5)

    def test_offset_follows_dst_transition(self):
        # US clocks sprang forward at 07:00 UTC on 2024-03-10
        before = to_local_time("2024-03-10T06:59:59+00:00", "America/New_York")
        after = to_local_time("2024-03-10T07:00:00+00:00", "America/New_York")
        assert before.utcoffset() == timedelta(hours=-5)
        assert after.utcoffset() == timedelta(hours=-4)
        assert after - before == timedelta(seconds=1)

    def test_southern_hemisphere(self):
        local = to_local_time("2024-01-10T00:00:00+00:00", "Australia/Sydney")
        assert local.utcoffset() == timedelta(hours=11)

    def test_half_hour_zone(self):
        local = to_local_time("2024-06-01T00:00:00+00:00", "Asia/Kolkata")
        assert (local.hour, local.minute) == (5, 30)

    def test_zulu_suffix(self):
        local = to_local_time("2024-06-01T10:05:35Z", "UTC")
        assert local == datetime(2024, 6, 1, 10, 5, 35, tzinfo=pytz.utc)

    def test_naive_timestamp_is_utc(self):
        local = to_local_time("2024-06-01T10:00:00", "Europe/Berlin")
        assert local.hour == 12

    def test_same_instant_compares_equal_across_zones(self):
        a = to_local_time("2024-06-01T10:00:00+00:00", "Asia/Tokyo")
        b = to_local_time("2024-06-01T10:00:00+00:00", "America/Chicago")
        assert a == b

    def test_ordering_is_preserved(self):
        earlier = to_local_time("2024-06-01T23:00:00+00:00", "Pacific/Auckland")
        later = to_local_time("2024-06-02T01:00:00+00:00", "Pacific/Auckland")
        assert earlier < later

    @pytest.mark.parametrize("value", ["", "yesterday", "2024-13-01T00:00:00+00:00", None])
    def test_malformed_timestamp(self, value):
        with pytest.raises(ConversionError):
            to_local_time(value, "UTC")

    def test_unknown_timezone(self):
        with pytest.raises(ConversionError, match="Unknown timezone"):
            to_local_time("2024-06-01T10:00:00+00:00", "Mars/Olympus_Mons")


class TestCurrentLocalTime:

    def test_converts_given_instant(self):
        now = pytz.utc.localize(datetime(2024, 7, 1, 18, 30, 0))
        local = current_local_time("Europe/Paris", now)
        assert (local.hour, local.minute) == (20, 30)
        assert local.tzinfo.zone == "Europe/Paris"

    def test_truncates_to_whole_seconds(self):
        now = pytz.utc.localize(datetime(2024, 6, 1, 6, 0, 0, 999999))
        local = current_local_time("UTC", now)
        assert local == to_local_time("2024-06-01T06:00:00+00:00", "UTC")

    def test_defaults_to_clock(self):
        before = datetime.now(pytz.utc).replace(microsecond=0)
        local = current_local_time("Asia/Tokyo")
        after = datetime.now(pytz.utc)
        assert before <= local <= after
        assert local.microsecond == 0

    def test_rejects_naive_now(self):
        with pytest.raises(ConversionError):
            current_local_time("UTC", datetime(2024, 6, 1))

    def test_unknown_timezone(self):
        with pytest.raises(ConversionError):
            current_local_time("Not/A_Zone")
