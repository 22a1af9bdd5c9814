"""mmcal public API.

Conversions, day records and the derived-fact accessors, re-exported flat.
"""

from .api import (
    civil_to_jdn,
    jdn_to_civil,
    jdn_to_myanmar,
    myanmar_to_jdn,
    year_info,
    thingyan_time,
    day_info,
    day_range,
    month_range,
)
from .attributes.astro import (
    yatyaza,
    pyathada,
    nagahle,
    mahabote,
    nakhat,
    sasana_year,
    thamanyo,
    amyeittasote,
    warameittugyi,
    warameittunge,
    yatpote,
    thamaphyu,
    nagapor,
    yatyotema,
    mahayatkyan,
    shanyat,
)
from .attributes.standard import astro_markers
from .config import CalendarConfig, DEFAULT_CONFIG
from .core.time import weekday
from .core.types import (
    CalendarDayInfo,
    CalendarType,
    Holiday,
    Mahabote,
    Marker,
    MoonPhase,
    MyanmarDate,
    MyanmarMonth,
    Nagahle,
    Nakhat,
    Pyathada,
    SabbathState,
    WesternDate,
    YearType,
    month_key,
)
from .engines.calendar import MyanmarCalendar
from .engines.moon import fortnight_day, month_day, month_length, moon_phase, sabbath
from .engines.year import YearCache, year_length

__all__ = [
    "civil_to_jdn",
    "jdn_to_civil",
    "jdn_to_myanmar",
    "myanmar_to_jdn",
    "year_info",
    "thingyan_time",
    "day_info",
    "day_range",
    "month_range",
    "weekday",
    "moon_phase",
    "fortnight_day",
    "month_day",
    "month_length",
    "year_length",
    "sabbath",
    "yatyaza",
    "pyathada",
    "nagahle",
    "mahabote",
    "nakhat",
    "sasana_year",
    "thamanyo",
    "amyeittasote",
    "warameittugyi",
    "warameittunge",
    "yatpote",
    "thamaphyu",
    "nagapor",
    "yatyotema",
    "mahayatkyan",
    "shanyat",
    "astro_markers",
    "month_key",
    "MyanmarCalendar",
    "YearCache",
    "CalendarConfig",
    "DEFAULT_CONFIG",
    "CalendarDayInfo",
    "CalendarType",
    "Holiday",
    "Mahabote",
    "Marker",
    "MoonPhase",
    "MyanmarDate",
    "MyanmarMonth",
    "Nagahle",
    "Nakhat",
    "Pyathada",
    "SabbathState",
    "WesternDate",
    "YearType",
]
