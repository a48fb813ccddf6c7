# src/jdtools/clock/__init__.py
"""
jdtools.clock
~~~~~~~~~~~~~

Time-of-day arithmetic.  No calendar involved, no wrap-around: values of
24 hours or more simply carry on.

Basic usage::

    from jdtools.clock import hm_to_minutes, hms_to_percents

    hm_to_minutes(10, 30)          # → 630
    hms_to_percents(23, 59, 59)    # → 100.0

Public API
----------
hm_to_minutes       (hours, minutes) → minutes since midnight.
hms_to_seconds      (hours, minutes, seconds) → seconds since midnight.
hms_to_percents     (hours, minutes, seconds) → percent of the day.
minutes_to_hm       minutes since midnight → (hours, minutes).
LAST_SECOND_OF_DAY  Divisor used by hms_to_percents (86399).
"""

from __future__ import annotations

from jdtools.clock.clock import (
    LAST_SECOND_OF_DAY,
    hm_to_minutes,
    hms_to_percents,
    hms_to_seconds,
    minutes_to_hm,
)

__all__ = [
    "LAST_SECOND_OF_DAY",
    "hm_to_minutes",
    "hms_to_seconds",
    "hms_to_percents",
    "minutes_to_hm",
]
