# src/jdtools/julian/__init__.py
"""
jdtools.julian
~~~~~~~~~~~~~~

Calendar arithmetic pivoting on the Julian Day number (JD).  Civil dates,
ISO week-dates and absolute months all convert to and from a JD.

Basic usage::

    from jdtools.julian import ymd_to_jd, jd_to_ymd, ymd_to_iso_week

    jd = ymd_to_jd(2000, 1, 1)             # → 2451545
    jd_to_ymd(jd)                          # → (2000, 1, 1)
    ymd_to_iso_week(2016, 1, 1)            # → (2015, 53, 5)

NumPy arrays are accepted everywhere a scalar is::

    import numpy as np
    jds = ymd_to_jd(np.array([2000, 2015]), np.array([1, 1]), np.array([1, 26]))
    years, months, days = jd_to_ymd(jds)

Public API
----------
ymd_to_jd, jd_to_ymd                    Civil date ↔ JD.
ymd_to_day_of_week, jd_to_day_of_week  Weekday, 0 = Sunday.
jd_to_iso_weekday                      Weekday, 1 = Monday.
week_one_jd, ywdow_to_jd               ISO week-date → JD.
ymd_to_iso_week, jd_to_iso_week        Date → (ISO year, week, weekday).
ymd_to_week_number, jd_to_week_number  ISO week number only.
ym_to_ad_month, ad_month_to_ym         Absolute month ↔ (year, month).
ad_month_to_jd, jd_to_ad_month         Absolute month ↔ JD.
"""

from __future__ import annotations

from jdtools.julian.admonth import (
    ad_month_to_jd,
    ad_month_to_ym,
    jd_to_ad_month,
    ym_to_ad_month,
)
from jdtools.julian.isoweek import (
    jd_to_iso_week,
    jd_to_week_number,
    week_one_jd,
    ymd_to_iso_week,
    ymd_to_week_number,
    ywdow_to_jd,
)
from jdtools.julian.julian import (
    jd_to_day_of_week,
    jd_to_iso_weekday,
    jd_to_ymd,
    ymd_to_day_of_week,
    ymd_to_jd,
)

__all__ = [
    "ymd_to_jd",
    "jd_to_ymd",
    "ymd_to_day_of_week",
    "jd_to_day_of_week",
    "jd_to_iso_weekday",
    "week_one_jd",
    "ywdow_to_jd",
    "ymd_to_iso_week",
    "jd_to_iso_week",
    "ymd_to_week_number",
    "jd_to_week_number",
    "ym_to_ad_month",
    "ad_month_to_ym",
    "ad_month_to_jd",
    "jd_to_ad_month",
]
