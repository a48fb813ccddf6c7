from __future__ import annotations

from datetime import datetime
from typing import Any, Optional, TypeVar

from jdtools.clock import hm_to_minutes
from jdtools.julian import jd_to_ymd, ym_to_ad_month, ymd_to_jd

# Anything with datetime-style year/month/day(/hour/minute/second) attributes.
DateLike = Any
D = TypeVar("D")


def date_to_jd(date: DateLike) -> int:
    return ymd_to_jd(date.year, date.month, date.day)


def date_to_ad_month(date: DateLike) -> int:
    return ym_to_ad_month(date.year, date.month)


def date_to_iso_ymd(date: DateLike) -> str:
    return f"{date.year}-{date.month:02d}-{date.day:02d}"


def date_to_iso_hm(date: DateLike) -> str:
    return f"{date.hour:02d}:{date.minute:02d}"


def date_to_iso_hms(date: DateLike) -> str:
    return f"{date.hour:02d}:{date.minute:02d}:{date.second:02d}"


def date_to_minutes(date: DateLike) -> int:
    """Minutes since midnight."""
    return hm_to_minutes(date.hour, date.minute)


def jd_to_date(jd: int, date: Optional[D] = None) -> D | datetime:
    """
    Calendar date of `jd` as a date object.

    Without `date` a new naive ``datetime`` at midnight is returned.  With
    `date`, a copy of it is returned with year, month and day replaced; the
    time of day and tzinfo are kept.  ``datetime`` objects are immutable, so
    the argument itself is never modified.

    Raises ValueError (from ``datetime``) for years outside 1..9999.
    """
    year, month, day = (int(v) for v in jd_to_ymd(jd))
    if date is None:
        return datetime(year, month, day)
    return date.replace(year=year, month=month, day=day)  # type: ignore[attr-defined]
