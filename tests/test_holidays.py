# tests/test_holidays.py

import mmcal
from mmcal.attributes.holidays import primary_holidays, secondary_holidays
from mmcal.core.types import Holiday, MyanmarDate, WesternDate, YearType


def _primary(y, m, d):
    return mmcal.day_info(mmcal.civil_to_jdn(y, m, d)).primary_holidays


def test_thingyan_2024():
    assert _primary(2024, 4, 12) == ()
    assert Holiday.THINGYAN_AKYO in _primary(2024, 4, 13)
    assert Holiday.THINGYAN_AKYA in _primary(2024, 4, 14)
    assert Holiday.THINGYAN_AKYAT in _primary(2024, 4, 15)
    assert Holiday.THINGYAN_ATAT in _primary(2024, 4, 16)
    assert Holiday.NEW_YEAR in _primary(2024, 4, 17)
    assert _primary(2024, 4, 18) == ()


def test_thingyan_matches_thingyan_time():
    th = mmcal.thingyan_time(1386)
    assert th.atat == 2460417
    assert th.akya == 2460415
    assert mmcal.day_info(th.atat + 1).myanmar.year == 1386


def test_gregorian_holidays():
    assert Holiday.INDEPENDENCE in _primary(2024, 1, 4)
    assert Holiday.INDEPENDENCE not in _primary(1947, 1, 4)
    assert Holiday.UNION in _primary(2024, 2, 12)
    assert Holiday.LABOUR in _primary(2024, 5, 1)
    assert Holiday.MARTYRS in _primary(2024, 7, 19)
    assert Holiday.CHRISTMAS in _primary(2024, 12, 25)


def test_buddha_day_2024():
    days = [info for info in mmcal.month_range(2024, 5) if Holiday.BUDDHA in info.primary_holidays]
    assert len(days) == 1
    info = days[0]
    assert info.civil.day == 22
    assert (info.myanmar.month, info.myanmar.day) == (2, 15)


def test_lent_start_in_second_waso():
    info = mmcal.day_info(2460158)
    assert Holiday.LENT_START in info.primary_holidays
    assert info.month_key == "Second Waso"
    # No lent on the first Waso full moon
    assert Holiday.LENT_START not in mmcal.day_info(2460128).primary_holidays


def test_lunar_chain():
    far = 0
    civil = WesternDate(2024, 12, 31)
    assert primary_holidays(far, MyanmarDate(YearType.COMMON, 1386, 10, 1), civil) == (Holiday.KAREN_NEW_YEAR,)
    assert primary_holidays(far, MyanmarDate(YearType.COMMON, 1386, 8, 25), civil) == (Holiday.NATIONAL,)
    assert primary_holidays(far, MyanmarDate(YearType.COMMON, 1250, 8, 25), civil) == ()
    assert primary_holidays(far, MyanmarDate(YearType.COMMON, 1386, 12, 15), civil) == (Holiday.TABAUNG_PWE,)


def test_secondary_holidays():
    civil = WesternDate(2024, 12, 2)
    assert secondary_holidays(MyanmarDate(YearType.COMMON, 1386, 9, 1), civil) == (
        Holiday.SHAN_NEW_YEAR, Holiday.AUTHORS)
    assert secondary_holidays(MyanmarDate(YearType.COMMON, 1300, 9, 1), civil) == (Holiday.SHAN_NEW_YEAR,)
    assert secondary_holidays(MyanmarDate(YearType.COMMON, 1386, 10, 15), civil) == (Holiday.MOTHERS,)
    assert secondary_holidays(MyanmarDate(YearType.COMMON, 1350, 10, 15), civil) == ()
    assert secondary_holidays(MyanmarDate(YearType.COMMON, 1386, 12, 15), civil) == (Holiday.FATHERS,)
    assert secondary_holidays(MyanmarDate(YearType.COMMON, 1386, 5, 15), civil) == (Holiday.METTA,)


def test_aung_san_birthday():
    info = mmcal.day_info(mmcal.civil_to_jdn(2024, 2, 13))
    assert info.secondary_holidays == (Holiday.AUNG_SAN_BIRTHDAY,)
    assert info.holidays == info.primary_holidays + info.secondary_holidays
