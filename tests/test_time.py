# tests/test_time.py

import pytest
import random

from mmcal.core import time as t
from mmcal.core.types import CalendarType


def test_round_half_up():
    assert t.round_half_up(2.5) == 3
    assert t.round_half_up(-2.5) == -2
    assert t.round_half_up(2.4999) == 2


def test_known_epochs():
    # J2000.0 civil date is January 1, 2000 (a Saturday)
    assert t.civil_to_jdn(2000, 1, 1) == 2451545
    assert t.weekday(2451545) == 0
    # Myanmar New Year 1386
    assert t.civil_to_jdn(2024, 4, 17) == 2460418


def test_switchover():
    # 1752-09-02 (Julian) is followed by 1752-09-14 (Gregorian)
    assert t.civil_to_jdn(1752, 9, 2) == 2361221
    assert t.civil_to_jdn(1752, 9, 14) == 2361222
    # Dates inside the gap clamp to the switchover
    assert t.civil_to_jdn(1752, 9, 5) == 2361222

    w = t.jdn_to_civil(2361221)
    assert (w.year, w.month, w.day) == (1752, 9, 2)
    w = t.jdn_to_civil(2361222)
    assert (w.year, w.month, w.day) == (1752, 9, 14)


def test_calendar_types():
    # Julian dates run 13 days behind in the 20th and 21st centuries
    assert t.civil_to_jdn(2024, 4, 4, calendar_type=CalendarType.JULIAN) == 2460418
    assert t.civil_to_jdn(1000, 1, 1, calendar_type=CalendarType.JULIAN) == t.civil_to_jdn(1000, 1, 1)

    w = t.jdn_to_civil(2460418, CalendarType.JULIAN)
    assert (w.year, w.month, w.day) == (2024, 4, 4)
    w = t.jdn_to_civil(2361221, CalendarType.GREGORIAN)
    assert (w.year, w.month, w.day) == (1752, 9, 13)

    # A custom switchover (Pope Gregory, 1582-10-15)
    assert t.civil_to_jdn(1582, 10, 15, switchover=2299161) == 2299161
    assert t.civil_to_jdn(1582, 10, 4, switchover=2299161) == 2299160


def test_time_of_day():
    jd = t.civil_to_jdn(2000, 1, 1, 18, 30, 0)
    assert jd == pytest.approx(2451545.0 + 6.5 / 24)

    w = t.jdn_to_civil(jd)
    assert (w.year, w.month, w.day) == (2000, 1, 1)
    # 1e-6 hours is a few milliseconds
    assert w.hour + w.minute / 60 + w.second / 3600 == pytest.approx(18.5, abs=1e-6)


def test_civil_roundtrip():
    random.seed(42)
    for _ in range(5000):
        jdn_in = random.randint(1500000, 3000000)
        w = t.jdn_to_civil(jdn_in)
        assert t.civil_to_jdn(w.year, w.month, w.day) == jdn_in


def test_weekday_cycle():
    # 2024-04-17 was a Wednesday
    assert t.weekday(2460418) == 4
    for j in range(2460418, 2460418 + 50):
        assert t.weekday(j + 7) == t.weekday(j)
        assert t.weekday(j + 1) == (t.weekday(j) + 1) % 7
