# src/jdtools/__init__.py
"""
jdtools
~~~~~~~

Calendar conversions over the proleptic Gregorian calendar, pivoting on the
Julian Day number.

Subpackages
-----------
jdtools.julian  Civil dates, ISO week-dates and absolute months ↔ JD.
jdtools.clock   Time-of-day arithmetic.
jdtools.iso     ISO-8601 string parsing and formatting.
jdtools.dates   Adapters for datetime-like objects.

The public API of every subpackage is re-exported here::

    import jdtools

    jdtools.iso_to_jd("2015-W05-2") == jdtools.ymd_to_jd(2015, 1, 27)
"""

from __future__ import annotations

from jdtools import clock, dates, iso, julian
from jdtools._exceptions import ISOFormatError, JDToolsError
from jdtools.clock import (
    LAST_SECOND_OF_DAY,
    hm_to_minutes,
    hms_to_percents,
    hms_to_seconds,
    minutes_to_hm,
)
from jdtools.dates import (
    date_to_ad_month,
    date_to_iso_hm,
    date_to_iso_hms,
    date_to_iso_ymd,
    date_to_jd,
    date_to_minutes,
    jd_to_date,
)
from jdtools.iso import (
    abs_month_to_iso_ym,
    abs_month_to_jd,
    ad_month_to_iso_ym,
    iso_hm_to_minutes,
    iso_hms_to_percents,
    iso_hms_to_seconds,
    iso_to_ad_month,
    iso_to_jd,
    iso_ym_to_abs_month,
    iso_ymd_to_day_of_week,
    jd_to_iso_ym,
    jd_to_iso_ymd,
    jd_to_iso_yw,
    minutes_to_iso_hm,
    ymd_to_iso_yw,
    ymd_to_iso_ywd,
)
from jdtools.julian import (
    ad_month_to_jd,
    ad_month_to_ym,
    jd_to_ad_month,
    jd_to_day_of_week,
    jd_to_iso_week,
    jd_to_iso_weekday,
    jd_to_week_number,
    jd_to_ymd,
    week_one_jd,
    ym_to_ad_month,
    ymd_to_day_of_week,
    ymd_to_iso_week,
    ymd_to_jd,
    ymd_to_week_number,
    ywdow_to_jd,
)

__version__ = "0.1.0"

__all__ = [
    "JDToolsError",
    "ISOFormatError",
    *julian.__all__,
    *clock.__all__,
    *[name for name in iso.__all__ if name != "ISOFormatError"],
    *dates.__all__,
]
