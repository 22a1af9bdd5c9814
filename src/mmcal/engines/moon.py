from __future__ import annotations

from mmcal.core.types import MoonPhase, MyanmarMonth, SabbathState


def month_length(mm: int, year_type: int) -> int:
    """29 days for odd months, 30 for even; Nayon gains a day in a big watat year."""
    mml = 30 - mm % 2
    if mm == MyanmarMonth.NAYON:
        mml += year_type // 2
    return mml


def moon_phase(md: int, mm: int, year_type: int) -> MoonPhase | int:
    """Days past the month end give the raw phase index, not a MoonPhase."""
    mml = month_length(mm, year_type)
    mp = (md + 1) // 16 + md // 16 + md // mml
    return MoonPhase(mp) if 0 <= mp <= MoonPhase.NEW else mp


def fortnight_day(md: int) -> int:
    """1..15 within the waxing or waning half of the month."""
    return md - 15 * (md // 16)


def month_day(fd: int, mp: int, mm: int, year_type: int) -> int:
    """
    Inverse of (fortnight_day, moon_phase): day of month for fortnight day fd
    in phase mp. Full and new moon ignore fd and give day 15 / the last day.
    """
    mml = month_length(mm, year_type)
    m1 = mp % 2
    m2 = mp // 2
    return m1 * (15 + m2 * (mml - 15)) + (1 - m1) * (fd + 15 * m2)


def sabbath(md: int, mm: int, year_type: int) -> SabbathState:
    mml = month_length(mm, year_type)
    s = SabbathState.NONE
    if md in (8, 15, 23, mml):
        s = SabbathState.SABBATH
    if md in (7, 14, 22, mml - 1):
        s = SabbathState.SABBATH_EVE
    return s
