"""
Absolute ("AD") month numbers: months elapsed since January of year 0,
``year * 12 + (month - 1)``.  Month arithmetic becomes integer arithmetic.
"""

from __future__ import annotations

from typing import Optional, Tuple

from jdtools._vector import IntLike, as_number, or_default
from jdtools.julian.julian import jd_to_ymd, ymd_to_jd


def ym_to_ad_month(year: IntLike, month: Optional[IntLike] = None) -> IntLike:
    month = or_default(month, 1)
    return as_number(year) * 12 + month - 1


def ad_month_to_ym(ad_month: IntLike) -> Tuple[IntLike, IntLike]:
    ad_month = as_number(ad_month)
    return ad_month // 12, ad_month % 12 + 1


def ad_month_to_jd(ad_month: IntLike) -> IntLike:
    """JD of the first day of the month."""
    year, month = ad_month_to_ym(ad_month)
    return ymd_to_jd(year, month, 1)


def jd_to_ad_month(jd: IntLike) -> IntLike:
    year, month, _ = jd_to_ymd(jd)
    return ym_to_ad_month(year, month)
