# tests/test_moon.py

import pytest

from mmcal.core.types import MoonPhase, MyanmarMonth as M, SabbathState, YearType
from mmcal.engines.moon import fortnight_day, month_day, month_length, moon_phase, sabbath


def test_month_length():
    assert month_length(M.TAGU, YearType.COMMON) == 29
    assert month_length(M.KASON, YearType.COMMON) == 30
    assert month_length(M.NAYON, YearType.COMMON) == 29
    assert month_length(M.NAYON, YearType.LITTLE_WATAT) == 29
    assert month_length(M.NAYON, YearType.BIG_WATAT) == 30
    assert month_length(M.FIRST_WASO, YearType.LITTLE_WATAT) == 30
    assert month_length(M.LATE_TAGU, YearType.COMMON) == 29
    assert month_length(M.LATE_KASON, YearType.COMMON) == 30


def test_moon_phase():
    assert moon_phase(1, M.TAGU, 0) == MoonPhase.WAXING
    assert moon_phase(14, M.TAGU, 0) == MoonPhase.WAXING
    assert moon_phase(15, M.TAGU, 0) == MoonPhase.FULL
    assert moon_phase(16, M.TAGU, 0) == MoonPhase.WANING
    assert moon_phase(28, M.TAGU, 0) == MoonPhase.WANING
    assert moon_phase(29, M.TAGU, 0) == MoonPhase.NEW
    assert moon_phase(29, M.KASON, 0) == MoonPhase.WANING
    assert moon_phase(30, M.KASON, 0) == MoonPhase.NEW
    assert moon_phase(30, M.NAYON, YearType.BIG_WATAT) == MoonPhase.NEW


def test_fortnight_day():
    assert fortnight_day(1) == 1
    assert fortnight_day(15) == 15
    assert fortnight_day(16) == 1
    assert fortnight_day(30) == 15


@pytest.mark.parametrize("yt", list(YearType))
def test_month_day_inverts_phase(yt):
    for mm in range(15):
        for md in range(1, month_length(mm, yt) + 1):
            mp = moon_phase(md, mm, yt)
            assert month_day(fortnight_day(md), mp, mm, yt) == md


def test_month_day_special_phases():
    # Full and new moon ignore the fortnight day
    assert month_day(3, MoonPhase.FULL, M.KASON, 0) == 15
    assert month_day(3, MoonPhase.NEW, M.KASON, 0) == 30
    assert month_day(3, MoonPhase.NEW, M.TAGU, 0) == 29
    assert month_day(3, MoonPhase.WANING, M.TAGU, 0) == 18


def test_sabbath_30_day_month():
    for md in (8, 15, 23, 30):
        assert sabbath(md, M.KASON, 0) == SabbathState.SABBATH
    for md in (7, 14, 22, 29):
        assert sabbath(md, M.KASON, 0) == SabbathState.SABBATH_EVE
    assert sabbath(9, M.KASON, 0) == SabbathState.NONE


def test_sabbath_29_day_month():
    assert sabbath(29, M.TAGU, 0) == SabbathState.SABBATH
    assert sabbath(28, M.TAGU, 0) == SabbathState.SABBATH_EVE
    assert sabbath(30, M.NAYON, YearType.BIG_WATAT) == SabbathState.SABBATH
    assert sabbath(29, M.NAYON, YearType.BIG_WATAT) == SabbathState.SABBATH_EVE
    assert sabbath(29, M.NAYON, YearType.COMMON) == SabbathState.SABBATH


def test_four_sabbaths_per_month():
    for mm in range(15):
        n = sum(1 for md in range(1, month_length(mm, 0) + 1) if sabbath(md, mm, 0) == SabbathState.SABBATH)
        assert n == 4


def test_moon_phase_out_of_range_day():
    # Garbage in, garbage out: no exception for days past the month end
    assert moon_phase(31, M.KASON, 0) == 4
    assert not isinstance(moon_phase(31, M.KASON, 0), MoonPhase)
    assert moon_phase(45, M.TAGU, 0) == 5
