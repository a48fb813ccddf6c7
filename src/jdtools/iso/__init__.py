# src/jdtools/iso/__init__.py
"""
jdtools.iso
~~~~~~~~~~~

ISO-8601 strings on top of :mod:`jdtools.julian` and :mod:`jdtools.clock`.

Basic usage::

    from jdtools.iso import iso_to_jd, jd_to_iso_ymd, ymd_to_iso_ywd

    iso_to_jd("2015-W05-2")          # → 2457050
    jd_to_iso_ymd(2457050)           # → "2015-01-27"
    ymd_to_iso_ywd(2015, 1, 27)      # → "2015-W05-2"

Malformed strings raise :class:`ISOFormatError` (a ``ValueError``).

Public API
----------
iso_to_jd, iso_ymd_to_day_of_week          Parse dates.
jd_to_iso_ymd, jd_to_iso_ym                Format calendar dates.
ymd_to_iso_yw, ymd_to_iso_ywd, jd_to_iso_yw
                                           Format ISO week-dates.
iso_to_ad_month, ad_month_to_iso_ym        Absolute months.
iso_hm_to_minutes, iso_hms_to_seconds,
iso_hms_to_percents, minutes_to_iso_hm     Time of day.
iso_ym_to_abs_month, abs_month_to_iso_ym,
abs_month_to_jd                            Deprecated aliases.
ISOFormatError                             Raised on malformed input.
"""

from __future__ import annotations

from jdtools._exceptions import ISOFormatError
from jdtools.iso.iso import (
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

__all__ = [
    "ISOFormatError",
    "iso_to_jd",
    "iso_ymd_to_day_of_week",
    "jd_to_iso_ymd",
    "jd_to_iso_ym",
    "ymd_to_iso_yw",
    "ymd_to_iso_ywd",
    "jd_to_iso_yw",
    "iso_to_ad_month",
    "ad_month_to_iso_ym",
    "iso_hm_to_minutes",
    "iso_hms_to_seconds",
    "iso_hms_to_percents",
    "minutes_to_iso_hm",
    "iso_ym_to_abs_month",
    "abs_month_to_iso_ym",
    "abs_month_to_jd",
]
