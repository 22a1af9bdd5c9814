"""
mmcal.engines.eras
------------------
Historical era constants of the Myanmar calendar.

Each era band carries its own base constants (era index, watat offset,
month count for the excess-day threshold) plus per-year watat-offset
adjustments and an explicit list of years whose watat status is flipped.
These encode recorded historical calendars and are not derivable.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from mmcal.core.search import find_key
from mmcal.core.types import EraConstants


@dataclass(frozen=True)
class WoAdjustment:
    year: int
    offset: float


@dataclass(frozen=True)
class EraBand:
    start_year: int
    ei: float
    wo: float
    nm: int
    # Sorted by year; keys are unique.
    wo_adjustments: Tuple[WoAdjustment, ...] = ()
    watat_exceptions: Tuple[int, ...] = ()


def _adj(*pairs: Tuple[int, float]) -> Tuple[WoAdjustment, ...]:
    return tuple(WoAdjustment(y, o) for y, o in pairs)


# Newest first; the first band whose start_year <= my applies.
ERA_BANDS: Tuple[EraBand, ...] = (
    # Third era (since independence, ME 1312)
    EraBand(
        start_year=1312, ei=3, wo=-0.5, nm=8,
        wo_adjustments=_adj((1377, 1)),
        watat_exceptions=(1344, 1345),
    ),
    # Second era, Mandalay / British period
    EraBand(
        start_year=1217, ei=2, wo=-1, nm=4,
        wo_adjustments=_adj((1234, 1), (1261, -1)),
        watat_exceptions=(1263, 1264),
    ),
    # First era, Konbaung
    EraBand(
        start_year=1100, ei=1.3, wo=-0.85, nm=-1,
        wo_adjustments=_adj((1120, 1), (1126, -1), (1150, 1), (1172, -1), (1207, 1)),
        watat_exceptions=(1201, 1202),
    ),
    # First era, Taungoo
    EraBand(
        start_year=798, ei=1.2, wo=-1.1, nm=-1,
        wo_adjustments=_adj(
            (813, -1), (849, -1), (851, -1), (854, -1), (927, -1), (933, -1), (936, -1),
            (938, -1), (949, -1), (952, -1), (963, -1), (968, -1), (1039, -1),
        ),
    ),
    # First era, before Taungoo
    EraBand(
        start_year=0, ei=1.1, wo=-1.1, nm=-1,
        wo_adjustments=_adj(
            (205, 1), (246, 1), (471, 1), (572, -1), (651, 1), (653, 2), (656, 1),
            (672, 1), (729, 1), (767, -1),
        ),
    ),
)


def era_band(my: int) -> EraBand:
    for band in ERA_BANDS:
        if my >= band.start_year:
            return band
    # Years before ME 0 use the oldest band.
    return ERA_BANDS[-1]


def era_constants(my: int) -> EraConstants:
    """Resolve the calendrical constants in force for Myanmar year my."""
    band = era_band(my)
    wo = band.wo
    i = find_key(band.wo_adjustments, my, key_of=lambda a: a.year)
    if i >= 0:
        wo += band.wo_adjustments[i].offset
    ew = 1 if find_key(band.watat_exceptions, my) >= 0 else 0
    return EraConstants(ei=band.ei, wo=wo, nm=band.nm, ew=ew)
