from __future__ import annotations

import argparse

import mmcal
from mmcal.core.types import CalendarDayInfo, MoonPhase


def dow_header() -> str:
    return "Sa     Su     Mo     Tu     We     Th     Fr"


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def print_grid(title: str, weeks: list[list[tuple[str, str]]]) -> None:
    print(title)
    print(dow_header())
    print("-" * len(dow_header()))
    for wk in weeks:
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    print()


def _phase_tag(info: CalendarDayInfo) -> str:
    if info.moon_phase == MoonPhase.FULL:
        return "o"
    if info.moon_phase == MoonPhase.NEW:
        return "*"
    return "+" if info.moon_phase == MoonPhase.WAXING else "-"


def build_weeks(days: list[tuple[CalendarDayInfo, str, str]]) -> list[list[tuple[str, str]]]:
    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = []
    if days:
        pad = days[0][0].weekday  # Saturday=0
        for _ in range(pad):
            wk.append(cell("", ""))
    for _, top, bot in days:
        wk.append(cell(top, bot))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)
    return weeks


def myanmar_month_calendar(my: int, mm: int) -> None:
    cache = mmcal.YearCache()
    first = mmcal.myanmar_to_jdn(my, mm, 1, cache=cache)
    yt = cache.get(my).year_type
    stop = first + mmcal.month_length(mm, yt)

    days = []
    for info in mmcal.day_range(first, stop, cache=cache):
        c = info.civil
        top = f"{info.myanmar.day:2d}{_phase_tag(info)}"
        bot = f"{c.month:02d}-{c.day:02d}"
        days.append((info, top, bot))

    w0, w1 = days[0][0].civil, days[-1][0].civil
    title = (f"Myanmar month  ME {my}  {mmcal.month_key(mm, yt)}   "
             f"({w0.year:04d}-{w0.month:02d}-{w0.day:02d} .. {w1.year:04d}-{w1.month:02d}-{w1.day:02d})")
    print_grid(title, build_weeks(days))


def gregorian_month_calendar(gy: int, gm: int) -> None:
    days = []
    for info in mmcal.month_range(gy, gm):
        top = f"{info.civil.day:2d}"
        if info.holidays:
            top += "!"
        bot = f"{info.myanmar.month:02d}-{info.myanmar.day:02d}"
        days.append((info, top, bot))

    title = f"Gregorian month  {gy}-{gm:02d}"
    print_grid(title, build_weeks(days))


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a Myanmar-month calendar and/or a Gregorian-month calendar with paired labels."
    )
    p.add_argument("--myanmar", nargs=2, type=int, metavar=("MY", "MM"),
                   help="Myanmar month to print: MY MM (e.g. 1386 2)")
    p.add_argument("--greg", nargs=2, type=int, metavar=("GY", "GM"),
                   help="Gregorian month to print: GY GM (e.g. 2024 4)")
    args = p.parse_args(argv)

    if not args.myanmar and not args.greg:
        myanmar_month_calendar(1386, 1)
        gregorian_month_calendar(2024, 4)
        return 0

    if args.myanmar:
        my, mm = args.myanmar
        myanmar_month_calendar(my, mm)

    if args.greg:
        gy, gm = args.greg
        gregorian_month_calendar(gy, gm)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
