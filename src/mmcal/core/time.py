from __future__ import annotations
import math

from .constants import BRITISH_SWITCHOVER_JDN
from .types import CalendarType, WesternDate


def round_half_up(x: float) -> int:
    """Nearest integer, halves rounded up (not Python's round-half-even)."""
    return math.floor(x + 0.5)


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
    """
    Western civil date to Julian date. h=12, n=0, s=0 gives an integral JDN.
    Inputs are not validated; out-of-range months or days still give a
    mathematically consistent day count.
    """
    a = (14 - m) // 12
    y = y + 4800 - a
    m = m + 12 * a - 3
    base = d + (153 * m + 2) // 5 + 365 * y + y // 4
    if calendar_type == CalendarType.GREGORIAN:
        jd = base - y // 100 + y // 400 - 32045
    elif calendar_type == CalendarType.JULIAN:
        jd = base - 32083
    else:
        jd = base - y // 100 + y // 400 - 32045
        if jd < switchover:
            jd = base - 32083
            if jd > switchover:
                jd = switchover
    return jd + (h - 12) / 24 + n / 1440 + s / 86400


def jdn_to_civil(
    jd: float,
    calendar_type: CalendarType = CalendarType.AUTO,
    switchover: float = BRITISH_SWITCHOVER_JDN,
) -> WesternDate:
    """Julian date to Western civil date, fractional day split into h:m:s."""
    j = math.floor(jd + 0.5)
    jf = jd + 0.5 - j
    if calendar_type == CalendarType.JULIAN or (calendar_type == CalendarType.AUTO and jd < switchover):
        b = j + 1524
        c = math.floor((b - 122.1) / 365.25)
        f = math.floor(365.25 * c)
        e = math.floor((b - f) / 30.6001)
        month = e - 13 if e > 13 else e - 1
        day = b - f - math.floor(30.6001 * e)
        year = c - 4715 if month < 3 else c - 4716
    else:
        j -= 1721119
        year = (4 * j - 1) // 146097
        j = 4 * j - 1 - 146097 * year
        day = j // 4
        j = (4 * day + 3) // 1461
        day = 4 * day + 3 - 1461 * j
        day = (day + 4) // 4
        month = (5 * day - 3) // 153
        day = 5 * day - 3 - 153 * month
        day = (day + 5) // 5
        year = 100 * year + j
        if month < 10:
            month += 3
        else:
            month -= 9
            year += 1

    jf *= 24
    hour = math.floor(jf)
    jf = (jf - hour) * 60
    minute = math.floor(jf)
    second = (jf - minute) * 60
    return WesternDate(year, month, day, hour, minute, second)


def weekday(jdn: int) -> int:
    """Myanmar weekday index: 0=Saturday, 1=Sunday, ..., 6=Friday."""
    return (jdn + 2) % 7
