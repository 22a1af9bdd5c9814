from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from enum import Enum, IntEnum
from typing import Tuple


class CalendarType(IntEnum):
    AUTO = 0        # Julian before the switchover JDN, Gregorian after
    GREGORIAN = 1
    JULIAN = 2


class YearType(IntEnum):
    COMMON = 0
    LITTLE_WATAT = 1   # extra month (first Waso)
    BIG_WATAT = 2      # extra month plus an extra day in Nayon


class MyanmarMonth(IntEnum):
    FIRST_WASO = 0
    TAGU = 1
    KASON = 2
    NAYON = 3
    WASO = 4
    WAGAUNG = 5
    TAWTHALIN = 6
    THADINGYUT = 7
    TAZAUNGMON = 8
    NADAW = 9
    PYATHO = 10
    TABODWE = 11
    TABAUNG = 12
    LATE_TAGU = 13
    LATE_KASON = 14


class MoonPhase(IntEnum):
    WAXING = 0
    FULL = 1
    WANING = 2
    NEW = 3


class SabbathState(IntEnum):
    NONE = 0
    SABBATH = 1
    SABBATH_EVE = 2


class Pyathada(IntEnum):
    NONE = 0
    PYATHADA = 1
    AFTERNOON = 2


class Mahabote(IntEnum):
    BINGA = 0
    ATUN = 1
    YAZA = 2
    ADIPATI = 3
    MARANA = 4
    THIKE = 5
    PUTI = 6


class Nakhat(IntEnum):
    OGRE = 0
    ELF = 1
    HUMAN = 2


class Nagahle(IntEnum):
    WEST = 0
    NORTH = 1
    EAST = 2
    SOUTH = 3


class Marker(str, Enum):
    THAMANYO = "Thamanyo"
    AMYEITTASOTE = "Amyeittasote"
    WARAMEITTUGYI = "Warameittugyi"
    WARAMEITTUNGE = "Warameittunge"
    YATPOTE = "Yatpote"
    THAMAPHYU = "Thamaphyu"
    NAGAPOR = "Nagapor"
    YATYOTEMA = "Yatyotema"
    MAHAYATKYAN = "Mahayatkyan"
    SHANYAT = "Shanyat"


class Holiday(str, Enum):
    # primary
    NEW_YEAR = "Myanmar New Year's Day"
    THINGYAN_ATAT = "Thingyan Atat"
    THINGYAN_AKYAT = "Thingyan Akyat"
    THINGYAN_AKYA = "Thingyan Akya"
    THINGYAN_AKYO = "Thingyan Akyo"
    INDEPENDENCE = "Independence Day"
    UNION = "Union Day"
    PEASANTS = "Peasants' Day"
    RESISTANCE = "Resistance Day"
    LABOUR = "Labour Day"
    MARTYRS = "Martyrs' Day"
    CHRISTMAS = "Christmas Day"
    BUDDHA = "Buddha Day"
    LENT_START = "Start of Buddhist Lent"
    LENT_END = "End of Buddhist Lent"
    TAZAUNGDAING = "Tazaungdaing"
    NATIONAL = "National Day"
    KAREN_NEW_YEAR = "Karen New Year's Day"
    TABAUNG_PWE = "Tabaung Pwe"
    # secondary
    AUNG_SAN_BIRTHDAY = "G. Aung San BD"
    SHAN_NEW_YEAR = "Shan New Year's Day"
    AUTHORS = "Authors' Day"
    MAHATHAMAYA = "Mahathamaya Day"
    GARUDHAMMA = "Garudhamma Day"
    MOTHERS = "Mothers' Day"
    FATHERS = "Fathers' Day"
    METTA = "Metta Day"


MONTH_KEYS: Tuple[str, ...] = (
    "First Waso", "Tagu", "Kason", "Nayon", "Waso", "Wagaung", "Tawthalin",
    "Thadingyut", "Tazaungmon", "Nadaw", "Pyatho", "Tabodwe", "Tabaung",
    "Late Tagu", "Late Kason",
)


def month_key(mm: int, year_type: int) -> str:
    """Stable month identifier; Waso of a watat year is the second Waso."""
    if not 0 <= mm < len(MONTH_KEYS):
        return f"Month {mm}"
    key = MONTH_KEYS[mm]
    if mm == MyanmarMonth.WASO and year_type > 0:
        key = f"Second {key}"
    return key


@dataclass(frozen=True)
class WesternDate:
    year: int
    month: int
    day: int
    hour: int = 12
    minute: int = 0
    second: float = 0.0

    @property
    def date(self) -> date:
        return date(self.year, self.month, self.day)


@dataclass(frozen=True)
class MyanmarDate:
    year_type: YearType
    year: int
    month: int   # 0 = first Waso, 1..12 = Tagu..Tabaung, 13/14 = late Tagu/Kason
    day: int


@dataclass(frozen=True)
class EraConstants:
    ei: float    # era index
    wo: float    # watat offset (days)
    nm: int      # number of months to find excess days
    ew: int      # 1 if the watat status of the year is an exception


@dataclass(frozen=True)
class WatatResult:
    full_moon: int   # JDN of the (second) Waso full moon
    watat: int       # 1 if the year has an intercalary month


@dataclass(frozen=True)
class YearInfo:
    year_type: YearType
    tagu1: int       # JDN of the first day of Tagu
    full_moon: int   # JDN of the (second) Waso full moon
    werr: bool       # watat gap to the previous watat year is not 30/31 days


@dataclass(frozen=True)
class ThingyanTime:
    ja: float     # atat time
    jk: float     # akya time
    atat: int
    akya: int


@dataclass(frozen=True)
class CalendarDayInfo:
    jdn: int
    civil: WesternDate
    myanmar: MyanmarDate
    moon_phase: MoonPhase
    fortnight_day: int
    weekday: int    # 0=Saturday, 1=Sunday, ..., 6=Friday
    sabbath: SabbathState
    yatyaza: bool
    pyathada: Pyathada
    mahabote: Mahabote
    nakhat: Nakhat
    nagahle: Nagahle
    sasana_year: int
    markers: Tuple[Marker, ...] = ()
    primary_holidays: Tuple[Holiday, ...] = ()
    secondary_holidays: Tuple[Holiday, ...] = ()
    year_error: bool = False

    @property
    def month_key(self) -> str:
        return month_key(self.myanmar.month, self.myanmar.year_type)

    @property
    def holidays(self) -> Tuple[Holiday, ...]:
        return self.primary_holidays + self.secondary_holidays
