from __future__ import annotations
from typing import Optional

from mmcal.core.constants import AKYA_OFFSET_OLD, AKYA_OFFSET_SE3, MO, SE3, SY
from mmcal.core.time import round_half_up
from mmcal.core.types import ThingyanTime


def thingyan_time(ty: int, *, era_year: Optional[int] = None) -> ThingyanTime:
    """
    Atat (year change) and akya times of the Thingyan that begins Myanmar year ty.

    era_year selects the akya offset (the post-1312 value from SE3 on) and
    defaults to ty. The holiday lookup passes the Myanmar year of the day
    being labelled, which differs from ty during late Tagu and late Kason.
    """
    if era_year is None:
        era_year = ty
    ja = SY * ty + MO
    jk = ja - (AKYA_OFFSET_SE3 if era_year >= SE3 else AKYA_OFFSET_OLD)
    return ThingyanTime(ja=ja, jk=jk, atat=round_half_up(ja), akya=round_half_up(jk))
