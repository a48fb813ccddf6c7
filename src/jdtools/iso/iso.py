from __future__ import annotations

import logging
import warnings
from typing import Any, Optional

from jdtools._exceptions import ISOFormatError
from jdtools.clock import hm_to_minutes, hms_to_percents, hms_to_seconds, minutes_to_hm
from jdtools.julian import (
    ad_month_to_jd,
    ad_month_to_ym,
    jd_to_iso_week,
    jd_to_ymd,
    ym_to_ad_month,
    ymd_to_day_of_week,
    ymd_to_iso_week,
    ymd_to_jd,
    ywdow_to_jd,
)

logger = logging.getLogger(__name__)


# ── parsing helpers ──────────────────────────────────────────────────────

def _reject(text: Any, reason: str) -> ISOFormatError:
    logger.debug("Rejected ISO-8601 value %r: %s", text, reason)
    return ISOFormatError(f"Invalid ISO-8601 value {text!r}: {reason}.")


def _number(token: str, text: str) -> int:
    if not (token.isascii() and token.isdigit()):
        raise _reject(text, f"expected digits, got {token!r}")
    return int(token)


def _date_part(text: Any) -> str:
    """Strip a ``T…`` time-of-day suffix."""
    if not isinstance(text, str):
        raise _reject(text, "expected a string")
    return text.split("T", 1)[0]


def _date_fields(text: str) -> list[int]:
    fields = _date_part(text).split("-")
    if len(fields) > 3:
        raise _reject(text, "expected YYYY[-MM[-DD]]")
    return [_number(f, text) for f in fields]


def _time_fields(text: Any) -> list[int]:
    if not isinstance(text, str):
        raise _reject(text, "expected a string")
    fields = text.split(":")
    if len(fields) > 3:
        raise _reject(text, "expected HH[:MM[:SS]]")
    return [_number(f, text) for f in fields]


def _pad(n: Any) -> str:
    return f"{int(n):02d}"


def _year(n: Any) -> str:
    return str(int(n))


# ── dates ────────────────────────────────────────────────────────────────

def iso_to_jd(text: str) -> int:
    """
    Julian Day number of an ISO-8601 date.

    Accepted forms: ``YYYY-Www-D``, ``YYYY-Www``, ``YYYY-MM-DD``, ``YYYY-MM``
    and ``YYYY``, each optionally followed by a ``T…`` time suffix which is
    ignored.  Missing trailing parts default to 1.
    """
    date = _date_part(text)
    if "W" not in date:
        return ymd_to_jd(*_date_fields(text))

    fields = date.split("-")
    if len(fields) not in (2, 3) or not fields[1].startswith("W"):
        raise _reject(text, "expected YYYY-Www[-D]")
    year = _number(fields[0], text)
    week = _number(fields[1][1:], text)
    dow = _number(fields[2], text) if len(fields) == 3 else None
    return ywdow_to_jd(year, week, dow)


def iso_ymd_to_day_of_week(text: str) -> int:
    """0 = Sunday … 6 = Saturday."""
    return ymd_to_day_of_week(*_date_fields(text))


def jd_to_iso_ymd(jd: int) -> str:
    year, month, day = jd_to_ymd(jd)
    return f"{_year(year)}-{_pad(month)}-{_pad(day)}"


def jd_to_iso_ym(jd: int) -> str:
    year, month, _ = jd_to_ymd(jd)
    return f"{_year(year)}-{_pad(month)}"


# ── ISO week-dates ───────────────────────────────────────────────────────

def ymd_to_iso_yw(
    year: int, month: Optional[int] = None, day: Optional[int] = None
) -> str:
    iso_year, week, _ = ymd_to_iso_week(year, month, day)
    return f"{_year(iso_year)}-W{_pad(week)}"


def ymd_to_iso_ywd(
    year: int, month: Optional[int] = None, day: Optional[int] = None
) -> str:
    iso_year, week, dow = ymd_to_iso_week(year, month, day)
    return f"{_year(iso_year)}-W{_pad(week)}-{int(dow)}"


def jd_to_iso_yw(jd: int) -> str:
    iso_year, week, _ = jd_to_iso_week(jd)
    return f"{_year(iso_year)}-W{_pad(week)}"


# ── absolute months ──────────────────────────────────────────────────────

def iso_to_ad_month(text: str) -> int:
    """Absolute month of ``YYYY[-MM[-DD]][T…]``; the day is ignored."""
    fields = _date_fields(text)
    return ym_to_ad_month(*fields[:2])


def ad_month_to_iso_ym(ad_month: int) -> str:
    year, month = ad_month_to_ym(ad_month)
    return f"{_year(year)}-{_pad(month)}"


def _deprecated(old: str, new: str) -> None:
    warnings.warn(
        f"{old}() is deprecated; use {new}() instead.",
        DeprecationWarning,
        stacklevel=3,
    )


def iso_ym_to_abs_month(text: str) -> int:
    _deprecated("iso_ym_to_abs_month", "iso_to_ad_month")
    return iso_to_ad_month(text)


def abs_month_to_iso_ym(ad_month: int) -> str:
    _deprecated("abs_month_to_iso_ym", "ad_month_to_iso_ym")
    return ad_month_to_iso_ym(ad_month)


def abs_month_to_jd(ad_month: int) -> int:
    _deprecated("abs_month_to_jd", "ad_month_to_jd")
    return ad_month_to_jd(ad_month)


# ── time of day ──────────────────────────────────────────────────────────

def iso_hm_to_minutes(text: str) -> int:
    """``"HH:MM"`` → minutes since midnight.  Seconds, if present, are ignored."""
    return hm_to_minutes(*_time_fields(text)[:2])


def iso_hms_to_seconds(text: str) -> int:
    return hms_to_seconds(*_time_fields(text))


def iso_hms_to_percents(text: str) -> float:
    return hms_to_percents(*_time_fields(text))


def minutes_to_iso_hm(minutes: int) -> str:
    hours, mins = minutes_to_hm(minutes)
    return f"{_pad(hours)}:{_pad(mins)}"
