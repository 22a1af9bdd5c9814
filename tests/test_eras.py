# tests/test_eras.py

import pytest

from mmcal.core.search import find_key
from mmcal.engines.eras import ERA_BANDS, era_band, era_constants


def test_find_key():
    table = (1, 3, 5, 7, 11)
    assert find_key(table, 1) == 0
    assert find_key(table, 7) == 3
    assert find_key(table, 11) == 4
    assert find_key(table, 4) == -1
    assert find_key(table, 12) == -1
    assert find_key((), 1) == -1
    rows = (("a", 10), ("b", 20))
    assert find_key(rows, 20, key_of=lambda r: r[1]) == 1


def test_bands_are_sorted():
    starts = [b.start_year for b in ERA_BANDS]
    assert starts == sorted(starts, reverse=True)
    for band in ERA_BANDS:
        years = [a.year for a in band.wo_adjustments]
        assert years == sorted(set(years))
        assert list(band.watat_exceptions) == sorted(set(band.watat_exceptions))


def test_era_boundaries():
    assert era_band(1312).start_year == 1312
    assert era_band(1311).start_year == 1217
    assert era_band(1217).start_year == 1217
    assert era_band(1216).start_year == 1100
    assert era_band(1099).start_year == 798
    assert era_band(797).start_year == 0
    # Years before ME 0 fall back to the oldest band
    assert era_band(-10).start_year == 0


def test_era_constants():
    c = era_constants(1386)
    assert (c.ei, c.wo, c.nm, c.ew) == (3, -0.5, 8, 0)

    c = era_constants(1300)
    assert (c.ei, c.wo, c.nm) == (2, -1, 4)

    assert era_constants(1150).ei == 1.3
    assert era_constants(900).ei == 1.2
    assert era_constants(500).ei == 1.1


def test_wo_adjustments():
    assert era_constants(1377).wo == pytest.approx(0.5)
    assert era_constants(1378).wo == pytest.approx(-0.5)
    assert era_constants(1234).wo == pytest.approx(0.0)
    assert era_constants(1261).wo == pytest.approx(-2.0)
    assert era_constants(1120).wo == pytest.approx(0.15)
    assert era_constants(653).wo == pytest.approx(0.9)
    assert era_constants(1039).wo == pytest.approx(-2.1)


def test_watat_exceptions():
    for my in (1344, 1345, 1263, 1264, 1201, 1202):
        assert era_constants(my).ew == 1
    for my in (1343, 1346, 1262, 1200):
        assert era_constants(my).ew == 0
