"""
mmcal.engines.calendar
----------------------
The Orchestrator. Binds civil date conversion, the Myanmar year resolver
and the per-day rule sets into one CalendarDayInfo per Julian Day Number.
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, List, Optional

from mmcal.attributes import astro
from mmcal.attributes.holidays import primary_holidays, secondary_holidays
from mmcal.attributes.standard import astro_markers
from mmcal.config import DEFAULT_CONFIG, CalendarConfig
from mmcal.core.time import civil_to_jdn, jdn_to_civil, round_half_up, weekday
from mmcal.core.types import CalendarDayInfo, CalendarType, MyanmarDate, ThingyanTime, WesternDate, YearInfo
from mmcal.engines.moon import fortnight_day, moon_phase, sabbath
from mmcal.engines.myanmar import jdn_to_myanmar, myanmar_to_jdn
from mmcal.engines.thingyan import thingyan_time
from mmcal.engines.year import YearCache, resolve_year


class MyanmarCalendar:
    """
    Translates Julian Day Numbers to Myanmar dates and full day records.

    Day records carry the proleptic Gregorian date whatever the config; the
    config only governs civil_to_jdn / jdn_to_civil.

    Without a cache every year is resolved afresh. Pass a YearCache (owned
    by the caller) to share year resolution across many calls; batch
    methods create their own when none was given.
    """
    def __init__(self, config: CalendarConfig = DEFAULT_CONFIG, cache: Optional[YearCache] = None):
        self.config = config
        self.cache = cache

    def _resolver(self, cache: Optional[YearCache] = None):
        cache = cache if cache is not None else self.cache
        return cache.get if cache is not None else resolve_year

    # ---------------------------------------------------------
    # Civil dates
    # ---------------------------------------------------------

    def civil_to_jdn(self, y: int, m: int, d: int, h: float = 12, n: float = 0, s: float = 0) -> float:
        return civil_to_jdn(y, m, d, h, n, s, self.config.calendar_type, self.config.switchover_jdn)

    def jdn_to_civil(self, jd: float) -> WesternDate:
        return jdn_to_civil(jd, self.config.calendar_type, self.config.switchover_jdn)

    # ---------------------------------------------------------
    # Myanmar dates
    # ---------------------------------------------------------

    def year_info(self, my: int) -> YearInfo:
        return self._resolver()(my)

    def to_myanmar(self, jdn: float) -> MyanmarDate:
        return jdn_to_myanmar(jdn, self._resolver())

    def to_jdn(self, my: int, mm: int, md: int) -> int:
        return myanmar_to_jdn(my, mm, md, self._resolver())

    def thingyan(self, my: int) -> ThingyanTime:
        return thingyan_time(my)

    # ---------------------------------------------------------
    # Day records
    # ---------------------------------------------------------

    def _day_info(self, jdn: float, cache: Optional[YearCache]) -> CalendarDayInfo:
        jdn = round_half_up(jdn)
        civil = jdn_to_civil(jdn, CalendarType.GREGORIAN)
        resolve = self._resolver(cache)
        d = jdn_to_myanmar(jdn, resolve)
        wd = weekday(jdn)

        return CalendarDayInfo(
            jdn=jdn,
            civil=civil,
            myanmar=d,
            moon_phase=moon_phase(d.day, d.month, d.year_type),
            fortnight_day=fortnight_day(d.day),
            weekday=wd,
            sabbath=sabbath(d.day, d.month, d.year_type),
            yatyaza=astro.yatyaza(d.month, wd),
            pyathada=astro.pyathada(d.month, wd),
            mahabote=astro.mahabote(d.year, wd),
            nakhat=astro.nakhat(d.year),
            nagahle=astro.nagahle(d.month),
            sasana_year=astro.sasana_year(d.year),
            markers=astro_markers(d, wd),
            primary_holidays=primary_holidays(jdn, d, civil),
            secondary_holidays=secondary_holidays(d, civil),
            year_error=resolve(d.year).werr,
        )

    def day_info(self, jdn: float) -> CalendarDayInfo:
        return self._day_info(jdn, self.cache if self.cache is not None else YearCache())

    def iter_days(self, first: int, stop: int) -> Iterator[CalendarDayInfo]:
        """Day records for first <= jdn < stop."""
        cache = self.cache if self.cache is not None else YearCache()
        for jdn in range(first, stop):
            yield self._day_info(jdn, cache)

    def day_range(self, first: int, stop: int) -> List[CalendarDayInfo]:
        return list(self.iter_days(first, stop))

    def month_range(self, gy: int, gm: int) -> List[CalendarDayInfo]:
        """Every day of proleptic Gregorian month gy-gm."""
        first = round_half_up(civil_to_jdn(gy, gm, 1, calendar_type=CalendarType.GREGORIAN))
        ny, nm = (gy + 1, 1) if gm == 12 else (gy, gm + 1)
        stop = round_half_up(civil_to_jdn(ny, nm, 1, calendar_type=CalendarType.GREGORIAN))
        return self.day_range(first, stop)

    def info(self) -> Dict[str, Any]:
        return {
            "calendar_type": self.config.calendar_type.name.lower(),
            "switchover_jdn": self.config.switchover_jdn,
            "cached_years": len(self.cache) if self.cache is not None else None,
        }
