"""
mmcal.engines.myanmar
---------------------
Julian Day Number <-> Myanmar date.

The month of a day within the year is found with the calibrated
29.544 / 29.26 polynomial of the traditional algorithm; m2j runs the same
polynomial backwards. Both take the year resolver as a parameter so batch
callers can pass YearCache.get.
"""

from __future__ import annotations

import math
from typing import Callable

from mmcal.core.constants import MO, SY
from mmcal.core.time import round_half_up
from mmcal.core.types import MyanmarDate, YearInfo
from mmcal.engines.year import resolve_year, year_length

YearResolver = Callable[[int], YearInfo]


def jdn_to_myanmar(jdn: float, resolve: YearResolver = resolve_year) -> MyanmarDate:
    jdn = round_half_up(jdn)
    # Years change at the atat time of Thingyan.
    my = math.floor((jdn - 0.5 - MO) / SY)
    yo = resolve(my)
    myt = int(yo.year_type)

    dd = jdn - yo.tagu1 + 1
    b = myt // 2
    c = 1 // (myt + 1)
    myl = year_length(myt)
    # Days past the year length fall in late Tagu / late Kason.
    mmt = (dd - 1) // myl
    dd -= mmt * myl

    a = (dd + 423) // 512
    mm = math.floor((dd - b * a + c * a * 30 + 29.26) / 29.544)
    e = (mm + 12) // 16
    f = (mm + 11) // 16
    md = dd - math.floor(29.544 * mm - 29.26) - b * e + c * f * 30
    mm += f * 3 - e * 4 + 12 * mmt
    return MyanmarDate(year_type=yo.year_type, year=my, month=mm, day=md)


def myanmar_to_jdn(my: int, mm: int, md: int, resolve: YearResolver = resolve_year) -> int:
    yo = resolve(my)
    myt = int(yo.year_type)

    mmt = mm // 13
    mm = (mm % 13) + mmt
    b = myt // 2
    c = 1 - (myt + 1) // 2
    mm += 4 - ((mm + 15) // 16) * 4 + (mm + 12) // 16
    dd = md + math.floor(29.544 * mm - 29.26) - c * ((mm + 11) // 16) * 30 + b * ((mm + 12) // 16)
    dd += mmt * year_length(myt)
    return dd + yo.tagu1 - 1
