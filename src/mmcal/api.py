from __future__ import annotations

from typing import List, Optional

from .config import DEFAULT_CONFIG, CalendarConfig
from .core.constants import BRITISH_SWITCHOVER_JDN
from .core import time as _time
from .core.types import CalendarDayInfo, CalendarType, MyanmarDate, ThingyanTime, WesternDate, YearInfo
from .engines.calendar import MyanmarCalendar
from .engines.myanmar import jdn_to_myanmar as _j2m, myanmar_to_jdn as _m2j
from .engines.thingyan import thingyan_time as _thingyan_time
from .engines.year import YearCache, resolve_year


def _calendar(config: Optional[CalendarConfig], cache: Optional[YearCache] = None) -> MyanmarCalendar:
    return MyanmarCalendar(config if config is not None else DEFAULT_CONFIG, cache=cache)

# ============================================================
# Conversions
# ============================================================

def civil_to_jdn(
    y: int,
    m: int,
    d: int,
    h: float = 12,
    n: float = 0,
    s: float = 0,
    calendar_type: CalendarType = CalendarType.AUTO,
    switchover: float = BRITISH_SWITCHOVER_JDN,
) -> float:
    return _time.civil_to_jdn(y, m, d, h, n, s, calendar_type, switchover)

def jdn_to_civil(
    jd: float,
    calendar_type: CalendarType = CalendarType.AUTO,
    switchover: float = BRITISH_SWITCHOVER_JDN,
) -> WesternDate:
    return _time.jdn_to_civil(jd, calendar_type, switchover)

def jdn_to_myanmar(jdn: float, *, cache: Optional[YearCache] = None) -> MyanmarDate:
    return _j2m(jdn, cache.get if cache is not None else resolve_year)

def myanmar_to_jdn(my: int, mm: int, md: int, *, cache: Optional[YearCache] = None) -> int:
    return _m2j(my, mm, md, cache.get if cache is not None else resolve_year)

def year_info(my: int) -> YearInfo:
    """Year type, first day of Tagu, Waso full moon and werr flag of Myanmar year my."""
    return resolve_year(my)

def thingyan_time(my: int) -> ThingyanTime:
    return _thingyan_time(my)

# ============================================================
# Day records
# ============================================================

def day_info(jdn: float, *, config: Optional[CalendarConfig] = None) -> CalendarDayInfo:
    return _calendar(config).day_info(jdn)

def day_range(first: int, stop: int, *, config: Optional[CalendarConfig] = None, cache: Optional[YearCache] = None) -> List[CalendarDayInfo]:
    """Day records for first <= jdn < stop (one year resolution per Myanmar year)."""
    return _calendar(config, cache).day_range(first, stop)

def month_range(gy: int, gm: int, *, config: Optional[CalendarConfig] = None, cache: Optional[YearCache] = None) -> List[CalendarDayInfo]:
    return _calendar(config, cache).month_range(gy, gm)
