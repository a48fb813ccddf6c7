# src/jdtools/dates/__init__.py
"""
jdtools.dates
~~~~~~~~~~~~~

Adapters between date objects and the JD / ISO representations.  Any object
exposing ``year``, ``month`` (1-12), ``day`` and, for the time helpers,
``hour``, ``minute`` and ``second`` works: ``datetime.datetime``,
``datetime.date`` (date helpers only), ``pandas.Timestamp``, ...

Basic usage::

    from datetime import datetime
    from jdtools.dates import date_to_jd, jd_to_date

    stamp = datetime(2015, 1, 26, 10, 30)
    jd = date_to_jd(stamp)                 # → 2457049
    jd_to_date(jd + 1, stamp)              # → datetime(2015, 1, 27, 10, 30)
    jd_to_date(jd)                         # → datetime(2015, 1, 26, 0, 0)

Public API
----------
date_to_jd, date_to_ad_month, date_to_iso_ymd,
date_to_iso_hm, date_to_iso_hms, date_to_minutes   Read a date object.
jd_to_date                                         Build or re-date one.
"""

from __future__ import annotations

from jdtools.dates.dates import (
    date_to_ad_month,
    date_to_iso_hm,
    date_to_iso_hms,
    date_to_iso_ymd,
    date_to_jd,
    date_to_minutes,
    jd_to_date,
)

__all__ = [
    "date_to_jd",
    "date_to_ad_month",
    "date_to_iso_ymd",
    "date_to_iso_hm",
    "date_to_iso_hms",
    "date_to_minutes",
    "jd_to_date",
]
