"""
tests/dates/test_dates.py

Covers:
  - Reading datetime / date / duck-typed objects
  - jd_to_date without an existing object (midnight, new datetime)
  - jd_to_date with an existing object (time of day and tzinfo kept,
    argument left untouched)
  - Years datetime cannot represent
"""

from datetime import date, datetime, timezone
from types import SimpleNamespace

import numpy as np
import pytest

from jdtools.dates import (
    date_to_ad_month,
    date_to_iso_hm,
    date_to_iso_hms,
    date_to_iso_ymd,
    date_to_jd,
    date_to_minutes,
    jd_to_date,
)
from jdtools.julian import ymd_to_jd


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def stamp():
    return datetime(2015, 1, 26, 10, 30, 15)


@pytest.fixture
def aware_stamp():
    return datetime(2015, 1, 26, 7, 5, 9, tzinfo=timezone.utc)


# ── Reading date objects ──────────────────────────────────────────────────────

class TestReaders:

    def test_date_to_jd(self, stamp):
        assert date_to_jd(stamp) == 2457049

    def test_date_to_jd_plain_date(self):
        assert date_to_jd(date(2000, 1, 1)) == 2451545

    def test_date_to_ad_month(self, stamp):
        assert date_to_ad_month(stamp) == 24180

    def test_date_to_iso_ymd(self):
        assert date_to_iso_ymd(date(2015, 3, 7)) == "2015-03-07"

    def test_date_to_iso_hm(self, stamp):
        assert date_to_iso_hm(stamp) == "10:30"

    def test_date_to_iso_hms(self, aware_stamp):
        assert date_to_iso_hms(aware_stamp) == "07:05:09"

    def test_date_to_minutes(self, stamp):
        assert date_to_minutes(stamp) == 630

    def test_duck_typed_object(self):
        obj = SimpleNamespace(year=2015, month=1, day=27, hour=0, minute=1, second=2)
        assert date_to_jd(obj) == 2457050
        assert date_to_iso_hms(obj) == "00:01:02"


# ── Building date objects ─────────────────────────────────────────────────────

class TestJDtoDate:

    def test_new_object_at_midnight(self):
        result = jd_to_date(2457050)
        assert result == datetime(2015, 1, 27)
        assert (result.hour, result.minute, result.second) == (0, 0, 0)

    def test_existing_object_keeps_time(self, stamp):
        result = jd_to_date(ymd_to_jd(2016, 2, 29), stamp)
        assert result == datetime(2016, 2, 29, 10, 30, 15)

    def test_existing_object_untouched(self, stamp):
        jd_to_date(2451545, stamp)
        assert stamp == datetime(2015, 1, 26, 10, 30, 15)

    def test_existing_object_keeps_tzinfo(self, aware_stamp):
        result = jd_to_date(2451545, aware_stamp)
        assert result.tzinfo is timezone.utc
        assert (result.year, result.month, result.day) == (2000, 1, 1)
        assert (result.hour, result.minute, result.second) == (7, 5, 9)

    def test_existing_plain_date(self):
        result = jd_to_date(2451545, date(1999, 5, 5))
        assert type(result) is date
        assert result == date(2000, 1, 1)

    def test_numpy_integer_jd(self):
        assert jd_to_date(np.int64(2451545)) == datetime(2000, 1, 1)

    def test_round_trip(self, stamp):
        assert jd_to_date(date_to_jd(stamp), stamp) == stamp

    def test_year_outside_datetime_range(self):
        with pytest.raises(ValueError):
            jd_to_date(0)
