"""
mmcal.engines.year
------------------
Intercalary month (watat) search and Myanmar year classification.

A year is watat when its excess days over twelve lunar months cross the
era's threshold (third and second eras) or, in the first era, by position
in the 19-year Metonic cycle. The year type (common / little / big watat)
follows from the full-moon gap to the previous watat year.
"""

from __future__ import annotations

import logging
import math
from typing import Dict

from mmcal.core.constants import LM, MO, SY
from mmcal.core.errors import ConstantTableError
from mmcal.core.time import round_half_up
from mmcal.core.types import WatatResult, YearInfo, YearType
from mmcal.engines.eras import era_constants

logger = logging.getLogger(__name__)

# How far back to look for the previous watat year
MAX_LOOKBACK = 3


def resolve_watat(my: int) -> WatatResult:
    """Watat status and (second) Waso full-moon JDN of Myanmar year my."""
    c = era_constants(my)
    ta = (SY / 12 - LM) * (12 - c.nm)
    ed = math.fmod(SY * (my + 3739), LM)
    if ed < ta:
        ed += LM
    x = SY * my + MO - ed + 4.5 * LM + c.wo
    if not math.isfinite(x):
        raise ConstantTableError(f"Non-finite full moon for year {my}: constants {c}")
    fm = round_half_up(x)

    if c.ei >= 2:
        tw = LM - (SY / 12 - LM) * c.nm
        watat = 1 if ed >= tw else 0
    else:
        watat = ((my * 7 + 2) % 19) // 12
    watat ^= c.ew
    return WatatResult(full_moon=fm, watat=watat)


def resolve_year(my: int) -> YearInfo:
    """
    Classify Myanmar year my and locate its first day of Tagu.

    A watat year whose full moon lies neither 30 nor 31 days (mod 354) after
    the previous watat year's is flagged with werr; the best-effort year
    type is still returned.
    """
    y2 = resolve_watat(my)
    yd = 0
    while True:
        yd += 1
        y1 = resolve_watat(my - yd)
        if y1.watat or yd >= MAX_LOOKBACK:
            break

    werr = False
    if y2.watat:
        nd = (y2.full_moon - y1.full_moon) % 354
        year_type = YearType(min(nd // 31 + 1, YearType.BIG_WATAT))
        fm = y2.full_moon
        if nd not in (30, 31):
            werr = True
            logger.debug("Watat gap of %d days for year %d (previous watat year %d)", nd, my, my - yd)
    else:
        year_type = YearType.COMMON
        fm = y1.full_moon + 354 * yd

    tagu1 = y1.full_moon + 354 * yd - 102
    return YearInfo(year_type=year_type, tagu1=tagu1, full_moon=fm, werr=werr)


def year_length(year_type: int) -> int:
    """Days in a Myanmar year: 354 common, 384 little watat, 385 big watat."""
    return 354 + (1 - 1 // (year_type + 1)) * 30 + year_type // 2


class YearCache:
    """
    Caller-owned memo of resolve_year. Every day of a Myanmar year shares
    the same YearInfo, so batch computations resolve each year once.
    """

    def __init__(self) -> None:
        self._years: Dict[int, YearInfo] = {}

    def get(self, my: int) -> YearInfo:
        info = self._years.get(my)
        if info is None:
            info = resolve_year(my)
            self._years[my] = info
        return info

    def clear(self) -> None:
        self._years.clear()

    def __len__(self) -> int:
        return len(self._years)

    def __contains__(self, my: object) -> bool:
        return my in self._years
