from __future__ import annotations

from typing import Optional, Tuple

from jdtools._vector import IntLike, as_number, or_default

# JD 0 is Monday, November 24, 4714 BC (proleptic Gregorian).
JD_EPOCH_OFFSET: int = 32045


def ymd_to_jd(
    year: IntLike,
    month: Optional[IntLike] = None,
    day: Optional[IntLike] = None,
) -> IntLike:
    """
    Julian Day number of a proleptic Gregorian date.

    A missing or zero `month` / `day` counts as 1, so ``ymd_to_jd(2015)`` is
    January 1st and ``ymd_to_jd(2015, 3, 0)`` is March 1st.
    """
    year = as_number(year)
    month = or_default(month, 1)
    day = or_default(day, 1)

    a = (14 - month) // 12
    y = year + 4800 - a
    m = month + 12 * a - 3
    return (
        day
        + (153 * m + 2) // 5
        + 365 * y
        + y // 4
        - y // 100
        + y // 400
        - JD_EPOCH_OFFSET
    )


def jd_to_ymd(jd: IntLike) -> Tuple[IntLike, IntLike, IntLike]:
    """Inverse of ymd_to_jd (Fliegel–Van Flandern)."""
    jd = as_number(jd)

    a = jd + JD_EPOCH_OFFSET - 1
    b = (4 * a + 3) // 146097
    c = a - 146097 * b // 4
    d = (4 * c + 3) // 1461
    e = c - 1461 * d // 4
    m = (5 * e + 2) // 153

    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + m // 10
    return year, month, day


def jd_to_day_of_week(jd: IntLike) -> IntLike:
    """0 = Sunday … 6 = Saturday."""
    return (as_number(jd) + 1) % 7


def jd_to_iso_weekday(jd: IntLike) -> IntLike:
    """1 = Monday … 7 = Sunday."""
    return as_number(jd) % 7 + 1


def ymd_to_day_of_week(
    year: IntLike,
    month: Optional[IntLike] = None,
    day: Optional[IntLike] = None,
) -> IntLike:
    return jd_to_day_of_week(ymd_to_jd(year, month, day))
