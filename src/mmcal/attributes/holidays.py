"""
mmcal.attributes.holidays
-------------------------
Public holidays (primary) and cultural observances (secondary).

Each group is a first-match chain, so a day carries at most one Gregorian
and one lunar entry per list. Holidays are gated on the year they were
introduced (Gregorian year for civil holidays, Myanmar year for lunar ones).
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from mmcal.core.constants import BGNTG
from mmcal.core.types import Holiday, MoonPhase, MyanmarDate, MyanmarMonth as M, WesternDate
from mmcal.engines.moon import moon_phase
from mmcal.engines.thingyan import thingyan_time

# (first Gregorian year, month, day, holiday)
GREGORIAN_HOLIDAYS: Tuple[Tuple[int, int, int, Holiday], ...] = (
    (1948, 1, 4, Holiday.INDEPENDENCE),
    (1947, 2, 12, Holiday.UNION),
    (1958, 3, 2, Holiday.PEASANTS),
    (1945, 3, 27, Holiday.RESISTANCE),
    (1923, 5, 1, Holiday.LABOUR),
    (1947, 7, 19, Holiday.MARTYRS),
    (1752, 12, 25, Holiday.CHRISTMAS),
)

# Lunar holidays on the full moon of a month
FULL_MOON_HOLIDAYS: Tuple[Tuple[int, Holiday], ...] = (
    (M.KASON, Holiday.BUDDHA),
    (M.WASO, Holiday.LENT_START),
    (M.THADINGYUT, Holiday.LENT_END),
    (M.TAZAUNGMON, Holiday.TAZAUNGDAING),
)

NATIONAL_DAY_FROM = 1282
AUNG_SAN_BD_FROM = 1915
AUTHORS_DAY_FROM = 1306
MOTHERS_DAY_FROM = 1356
FATHERS_DAY_FROM = 1370


def _thingyan(jdn: int, d: MyanmarDate) -> List[Holiday]:
    # Late Tagu / late Kason days belong to the Thingyan of the next year.
    mmt = d.month // 13
    th = thingyan_time(d.year + mmt, era_year=d.year)
    out: List[Holiday] = []
    if jdn == th.atat + 1:
        out.append(Holiday.NEW_YEAR)
    if d.year + mmt >= BGNTG:
        if jdn == th.atat:
            out.append(Holiday.THINGYAN_ATAT)
        elif th.akya < jdn < th.atat:
            out.append(Holiday.THINGYAN_AKYAT)
        elif jdn == th.akya:
            out.append(Holiday.THINGYAN_AKYA)
        elif jdn == th.akya - 1:
            out.append(Holiday.THINGYAN_AKYO)
    return out


def _gregorian(civil: WesternDate) -> Optional[Holiday]:
    for since, gm, gd, holiday in GREGORIAN_HOLIDAYS:
        if civil.year >= since and civil.month == gm and civil.day == gd:
            return holiday
    return None


def _lunar(d: MyanmarDate, mp: MoonPhase) -> Optional[Holiday]:
    if mp == MoonPhase.FULL:
        for mm, holiday in FULL_MOON_HOLIDAYS:
            if d.month == mm:
                return holiday
    if d.year >= NATIONAL_DAY_FROM and d.month == M.TAZAUNGMON and d.day == 25:
        return Holiday.NATIONAL
    if d.month == M.PYATHO and d.day == 1:
        return Holiday.KAREN_NEW_YEAR
    if d.month == M.TABAUNG and mp == MoonPhase.FULL:
        return Holiday.TABAUNG_PWE
    return None


def primary_holidays(jdn: int, d: MyanmarDate, civil: WesternDate) -> Tuple[Holiday, ...]:
    """Thingyan and new year, then the civil holiday, then the lunar holiday."""
    out = _thingyan(jdn, d)
    for h in (_gregorian(civil), _lunar(d, moon_phase(d.day, d.month, d.year_type))):
        if h is not None:
            out.append(h)
    return tuple(out)


def secondary_holidays(d: MyanmarDate, civil: WesternDate) -> Tuple[Holiday, ...]:
    mp = moon_phase(d.day, d.month, d.year_type)
    full = mp == MoonPhase.FULL
    if civil.year >= AUNG_SAN_BD_FROM and civil.month == 2 and civil.day == 13:
        return (Holiday.AUNG_SAN_BIRTHDAY,)
    if d.month == M.NADAW and d.day == 1:
        if d.year >= AUTHORS_DAY_FROM:
            return (Holiday.SHAN_NEW_YEAR, Holiday.AUTHORS)
        return (Holiday.SHAN_NEW_YEAR,)
    if d.month == M.NAYON and full:
        return (Holiday.MAHATHAMAYA,)
    if d.month == M.TAWTHALIN and full:
        return (Holiday.GARUDHAMMA,)
    if d.year >= MOTHERS_DAY_FROM and d.month == M.PYATHO and full:
        return (Holiday.MOTHERS,)
    if d.year >= FATHERS_DAY_FROM and d.month == M.TABAUNG and full:
        return (Holiday.FATHERS,)
    if d.month == M.WAGAUNG and full:
        return (Holiday.METTA,)
    return ()
