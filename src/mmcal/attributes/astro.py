"""
mmcal.attributes.astro
----------------------
Traditional Myanmar astrological day and year classifications.

Each rule is a closed-form function of (month, day, weekday) or
(year, weekday). The lookup tables are fixed historical rules; weekday
indices are 0=Saturday .. 6=Friday.
"""

from __future__ import annotations

from mmcal.core.constants import SASANA_OFFSET
from mmcal.core.types import Mahabote, Nagahle, Nakhat, Pyathada
from mmcal.engines.moon import fortnight_day


def true_month(mm: int) -> int:
    """Fold first Waso / late Tagu / late Kason (0, 13, 14) onto Waso, Tagu, Kason."""
    mm = (mm % 13) + mm // 13
    return 4 if mm <= 0 else mm


def sasana_year(my: int) -> int:
    return my + SASANA_OFFSET


# ---------------------------------------------------------
# Year rules
# ---------------------------------------------------------

def mahabote(my: int, wd: int) -> Mahabote:
    return Mahabote((my - wd) % 7)


def nakhat(my: int) -> Nakhat:
    return Nakhat(my % 3)


# ---------------------------------------------------------
# Month / weekday rules
# ---------------------------------------------------------

def yatyaza(mm: int, wd: int) -> bool:
    m1 = mm % 4
    wd1 = m1 // 2 + 4
    wd2 = (1 - m1 // 2 + m1 % 2) * (1 + 2 * (m1 % 2))
    return wd in (wd1, wd2)


_PYATHADA_WD = (1, 3, 3, 0, 2, 1, 2)


def pyathada(mm: int, wd: int) -> Pyathada:
    m1 = mm % 4
    p = Pyathada.NONE
    if m1 == 0 and wd == 4:
        p = Pyathada.AFTERNOON
    if m1 == _PYATHADA_WD[wd]:
        p = Pyathada.PYATHADA
    return p


def nagahle(mm: int) -> Nagahle:
    """Direction of the dragon head for the month."""
    if mm <= 0:
        mm = 4
    return Nagahle((mm % 12) // 3)


def thamanyo(mm: int, wd: int) -> bool:
    mm = true_month(mm)
    m1 = mm - 1 - mm // 9
    wd1 = (m1 * 2 - m1 // 8) % 7
    wd2 = (wd + 7 - wd1) % 7
    return wd2 <= 1


# ---------------------------------------------------------
# Fortnight day / weekday rules
# ---------------------------------------------------------

_AMYEITTASOTE_FD = (5, 8, 3, 7, 2, 4, 1)
_WARAMEITTUGYI_FD = (7, 1, 4, 8, 9, 6, 3)
_YATPOTE_FD = (8, 1, 4, 6, 9, 8, 7)
_THAMAPHYU_FD_A = (1, 2, 6, 6, 5, 6, 7)
_THAMAPHYU_FD_B = (0, 1, 0, 0, 0, 3, 3)


def amyeittasote(md: int, wd: int) -> bool:
    return fortnight_day(md) == _AMYEITTASOTE_FD[wd]


def warameittugyi(md: int, wd: int) -> bool:
    return fortnight_day(md) == _WARAMEITTUGYI_FD[wd]


def warameittunge(md: int, wd: int) -> bool:
    wn = (wd + 6) % 7
    return 12 - fortnight_day(md) == wn


def yatpote(md: int, wd: int) -> bool:
    return fortnight_day(md) == _YATPOTE_FD[wd]


def thamaphyu(md: int, wd: int) -> bool:
    mf = fortnight_day(md)
    return mf == _THAMAPHYU_FD_A[wd] or mf == _THAMAPHYU_FD_B[wd] or (mf == 4 and wd == 5)


# Nagapor is keyed on the day of the month, not the fortnight day.
_NAGAPOR_MD_A = (26, 21, 2, 10, 18, 2, 21)
_NAGAPOR_MD_B = (17, 19, 1, 0, 9, 0, 0)


def nagapor(md: int, wd: int) -> bool:
    if md == _NAGAPOR_MD_A[wd] or md == _NAGAPOR_MD_B[wd]:
        return True
    return (md == 2 and wd == 1) or (md in (12, 4, 18) and wd == 2)


# ---------------------------------------------------------
# Month / fortnight day rules
# ---------------------------------------------------------

def yatyotema(mm: int, md: int) -> bool:
    mm = true_month(mm)
    m1 = mm if mm % 2 else (mm + 9) % 12
    m2 = (m1 + 4) % 12 + 1
    return fortnight_day(md) == m2


def mahayatkyan(mm: int, md: int) -> bool:
    if mm <= 0:
        mm = 4
    m1 = ((mm % 12) // 2 + 4) % 6 + 1
    return fortnight_day(md) == m1


_SHANYAT_FD = (8, 8, 2, 2, 9, 3, 3, 5, 1, 4, 7, 4)


def shanyat(mm: int, md: int) -> bool:
    mm = true_month(mm)
    return fortnight_day(md) == _SHANYAT_FD[mm - 1]
