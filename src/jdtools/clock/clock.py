from __future__ import annotations

from typing import Optional, Tuple

from jdtools._vector import IntLike, NumberLike, as_number, or_default

# Index of the last second of a day; percent-of-day divides by this, so
# 23:59:59 is exactly 100 %.
LAST_SECOND_OF_DAY: int = 86399


def hm_to_minutes(hours: IntLike, minutes: Optional[IntLike] = 0) -> IntLike:
    """Minutes since midnight."""
    return as_number(hours) * 60 + or_default(minutes, 0)


def hms_to_seconds(
    hours: IntLike,
    minutes: Optional[IntLike] = 0,
    seconds: Optional[IntLike] = 0,
) -> IntLike:
    """Seconds since midnight."""
    minutes = or_default(minutes, 0)
    seconds = or_default(seconds, 0)
    return as_number(hours) * 3600 + minutes * 60 + seconds


def hms_to_percents(
    hours: IntLike,
    minutes: Optional[IntLike] = 0,
    seconds: Optional[IntLike] = 0,
) -> NumberLike:
    return hms_to_seconds(hours, minutes, seconds) * 100 / LAST_SECOND_OF_DAY


def minutes_to_hm(minutes: IntLike) -> Tuple[IntLike, IntLike]:
    minutes = as_number(minutes)
    return minutes // 60, minutes % 60
