from __future__ import annotations

from typing import Optional, Tuple

from jdtools._vector import IntLike, as_number, or_default, where
from jdtools.julian.julian import jd_to_iso_weekday, jd_to_ymd, ymd_to_jd


def week_one_jd(year: IntLike) -> IntLike:
    """
    JD of the Monday that opens ISO week 1 of `year`.

    Week 1 is the week holding the year's first Thursday: when January 1st
    falls on Tuesday–Thursday the week starts in late December of the
    previous year, otherwise on or after January 1st.
    """
    jan1 = ymd_to_jd(as_number(year), 1, 1)
    dow = jd_to_iso_weekday(jan1)
    return where(dow <= 4, jan1 - (dow - 1), jan1 + (8 - dow))


def ywdow_to_jd(
    year: IntLike,
    week: IntLike,
    dow: Optional[IntLike] = None,
) -> IntLike:
    """JD of ISO week-date `year`-W`week`-`dow` (dow: 1 = Monday … 7 = Sunday)."""
    dow = or_default(dow, 1)
    return week_one_jd(year) + 7 * (as_number(week) - 1) + dow - 1


def jd_to_iso_week(jd: IntLike) -> Tuple[IntLike, IntLike, IntLike]:
    """Split a JD into (ISO year, ISO week, ISO weekday)."""
    jd = as_number(jd)
    year = jd_to_ymd(jd)[0]

    this_start = week_one_jd(year)
    next_start = week_one_jd(year + 1)
    prev_start = week_one_jd(year - 1)

    after = jd >= next_start
    before = jd < this_start
    iso_year = where(after, year + 1, where(before, year - 1, year))
    start = where(after, next_start, where(before, prev_start, this_start))

    offset = jd - start
    return iso_year, 1 + offset // 7, 1 + offset % 7


def ymd_to_iso_week(
    year: IntLike,
    month: Optional[IntLike] = None,
    day: Optional[IntLike] = None,
) -> Tuple[IntLike, IntLike, IntLike]:
    return jd_to_iso_week(ymd_to_jd(year, month, day))


def ymd_to_week_number(
    year: IntLike,
    month: Optional[IntLike] = None,
    day: Optional[IntLike] = None,
) -> IntLike:
    return ymd_to_iso_week(year, month, day)[1]


def jd_to_week_number(jd: IntLike) -> IntLike:
    return jd_to_iso_week(jd)[1]
