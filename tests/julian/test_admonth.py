"""
tests/julian/test_admonth.py

Covers:
  - (year, month) ↔ absolute month, including negative counts
  - Absolute month → JD of the first day
  - JD → absolute month
"""

import numpy as np
import pytest

from jdtools.julian import (
    ad_month_to_jd,
    ad_month_to_ym,
    jd_to_ad_month,
    ym_to_ad_month,
    ymd_to_jd,
)


class TestAbsoluteMonth:

    def test_january_2015(self):
        assert ym_to_ad_month(2015, 1) == 24180

    def test_missing_and_zero_month_are_january(self):
        assert ym_to_ad_month(2015) == 24180
        assert ym_to_ad_month(2015, 0) == 24180

    def test_month_zero_is_january_year_zero(self):
        assert ad_month_to_ym(0) == (0, 1)

    def test_negative_month_is_december_of_year_minus_one(self):
        assert ad_month_to_ym(-1) == (-1, 12)

    def test_round_trip(self):
        n = np.arange(-30_000, 30_000)
        np.testing.assert_array_equal(ym_to_ad_month(*ad_month_to_ym(n)), n)


class TestJulianDay:

    @pytest.mark.parametrize("n", [-13, -1, 0, 1, 11, 12, 24180, 24191])
    def test_first_day_of_month(self, n):
        assert ad_month_to_jd(n) == ymd_to_jd(n // 12, n % 12 + 1, 1)

    def test_vectorized_first_day(self):
        n = np.arange(-2_400, 30_000)
        np.testing.assert_array_equal(
            ad_month_to_jd(n), ymd_to_jd(n // 12, n % 12 + 1, 1)
        )

    def test_jd_to_ad_month(self):
        assert jd_to_ad_month(ymd_to_jd(2015, 1, 26)) == 24180
        assert jd_to_ad_month(ymd_to_jd(2015, 12, 31)) == 24191

    def test_jd_to_ad_month_inverts_first_day(self):
        n = np.arange(0, 30_000)
        np.testing.assert_array_equal(jd_to_ad_month(ad_month_to_jd(n)), n)
