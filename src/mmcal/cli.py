from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys

from mmcal.config import CalendarConfig
from mmcal.core.errors import ConfigError
from mmcal.core.types import CalendarDayInfo, month_key


_DATE_RE = re.compile(r"^-?\d{1,4}-\d{2}-\d{2}$")

DIAG_TOOLS = {
    "pretty-month": "mmcal.diagnostics.pretty_month",
    "new-years": "mmcal.diagnostics.new_years_table",
    "round-trip": "mmcal.diagnostics.round_trip",
    "watat-years": "mmcal.diagnostics.watat_years",
    "thingyan-scatter": "mmcal.diagnostics.thingyan_scatter",
}


def _parse_ymd(s: str) -> tuple[int, int, int]:
    sign = -1 if s.startswith("-") else 1
    y, m, d = map(int, s.lstrip("-").split("-"))
    return sign * y, m, d


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _add_calendar_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--calendar", choices=["auto", "gregorian", "julian"], default="auto",
                   help="Western calendar for civil dates (default: auto)")
    p.add_argument("--switchover", type=float, default=None,
                   help="First Gregorian JDN in auto mode (default: 2361222, 1752-09-14)")


def _config(args: argparse.Namespace) -> CalendarConfig:
    cfg = CalendarConfig.named(args.calendar)
    if args.switchover is not None:
        cfg = cfg.tweak(switchover_jdn=args.switchover)
    return cfg


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def format_day(info: CalendarDayInfo) -> str:
    c, d = info.civil, info.myanmar
    lines = [
        f"JDN            {info.jdn}",
        f"Civil          {c.year:04d}-{c.month:02d}-{c.day:02d}",
        f"Myanmar        ME {d.year} {month_key(d.month, d.year_type)} {d.day} "
        f"({info.moon_phase.name.lower()} {info.fortnight_day})",
        f"Year type      {d.year_type.name.lower()}" + ("  [werr]" if info.year_error else ""),
        f"Sasana year    {info.sasana_year}",
        f"Weekday        {info.weekday}",
        f"Sabbath        {info.sabbath.name.lower()}",
        f"Yatyaza        {'yes' if info.yatyaza else 'no'}",
        f"Pyathada       {info.pyathada.name.lower()}",
        f"Mahabote       {info.mahabote.name.lower()}",
        f"Nakhat         {info.nakhat.name.lower()}",
        f"Nagahle        {info.nagahle.name.lower()}",
        f"Markers        {', '.join(m.value for m in info.markers) or '-'}",
        f"Holidays       {', '.join(h.value for h in info.primary_holidays) or '-'}",
        f"Observances    {', '.join(h.value for h in info.secondary_holidays) or '-'}",
    ]
    return "\n".join(lines)


def cmd_day(argv: list[str]) -> int:
    from mmcal.engines.calendar import MyanmarCalendar

    p = argparse.ArgumentParser(prog="mmcal day", description="Civil date -> Myanmar day info")
    p.add_argument("date", help="YYYY-MM-DD")
    _add_calendar_args(p)
    args = p.parse_args(argv)

    cal = MyanmarCalendar(_config(args))
    y, m, d = _parse_ymd(args.date)
    print(format_day(cal.day_info(cal.civil_to_jdn(y, m, d))))
    return 0


def cmd_jdn(argv: list[str]) -> int:
    from mmcal.engines.calendar import MyanmarCalendar

    p = argparse.ArgumentParser(prog="mmcal jdn", description="Julian Day Number -> Myanmar day info")
    p.add_argument("jdn", type=float)
    _add_calendar_args(p)
    args = p.parse_args(argv)

    print(format_day(MyanmarCalendar(_config(args)).day_info(args.jdn)))
    return 0


def cmd_myanmar(argv: list[str]) -> int:
    from mmcal.engines.calendar import MyanmarCalendar

    p = argparse.ArgumentParser(prog="mmcal myanmar", description="Myanmar date -> civil date")
    p.add_argument("year", type=int, help="Myanmar year (ME)")
    p.add_argument("month", type=int, help="0=first Waso, 1..12=Tagu..Tabaung, 13/14=late Tagu/Kason")
    p.add_argument("day", type=int, help="day of month 1..30")
    _add_calendar_args(p)
    args = p.parse_args(argv)

    cal = MyanmarCalendar(_config(args))
    jdn = cal.to_jdn(args.year, args.month, args.day)
    c = cal.jdn_to_civil(jdn)
    print(f"{c.year:04d}-{c.month:02d}-{c.day:02d}  (JDN {jdn})")
    return 0


def cmd_month(argv: list[str]) -> int:
    from mmcal.engines.calendar import MyanmarCalendar

    p = argparse.ArgumentParser(prog="mmcal month", description="One line per day of a Gregorian month")
    p.add_argument("year", type=int)
    p.add_argument("month", type=int)
    _add_calendar_args(p)
    args = p.parse_args(argv)

    for info in MyanmarCalendar(_config(args)).month_range(args.year, args.month):
        c, d = info.civil, info.myanmar
        tags = [h.value for h in info.holidays]
        if info.sabbath:
            tags.append(info.sabbath.name.lower())
        print(f"{c.year:04d}-{c.month:02d}-{c.day:02d}  ME {d.year} {info.month_key:<12} {d.day:2d}  "
              f"{info.moon_phase.name.lower():<6}  {'; '.join(tags)}".rstrip())
    return 0


def cmd_year(argv: list[str]) -> int:
    from mmcal.engines.calendar import MyanmarCalendar
    from mmcal.engines.year import year_length

    p = argparse.ArgumentParser(prog="mmcal year", description="Myanmar year summary")
    p.add_argument("year", type=int, help="Myanmar year (ME)")
    _add_calendar_args(p)
    args = p.parse_args(argv)

    cal = MyanmarCalendar(_config(args))
    yi = cal.year_info(args.year)
    th = cal.thingyan(args.year)

    def civil(j: int) -> str:
        c = cal.jdn_to_civil(j)
        return f"{c.year:04d}-{c.month:02d}-{c.day:02d}"

    print(f"ME {args.year}")
    print(f"  year type   {yi.year_type.name.lower()} ({year_length(yi.year_type)} days)")
    print(f"  tagu 1      {civil(yi.tagu1)}  (JDN {yi.tagu1})")
    print(f"  full moon   {civil(yi.full_moon)}  (JDN {yi.full_moon})")
    print(f"  werr        {'yes' if yi.werr else 'no'}")
    print(f"  akya        {civil(th.akya)}  (jk {th.jk:.6f})")
    print(f"  atat        {civil(th.atat)}  (ja {th.ja:.6f})")
    print(f"  new year    {civil(th.atat + 1)}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `mmcal YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_day(argv)

    p = argparse.ArgumentParser(prog="mmcal", description="Myanmar calendar toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("day", help="Civil date -> Myanmar day info")
    sub.add_parser("jdn", help="Julian Day Number -> Myanmar day info")
    sub.add_parser("myanmar", help="Myanmar date -> civil date")
    sub.add_parser("month", help="List a civil month")
    sub.add_parser("year", help="Myanmar year summary (watat, Tagu 1, Thingyan)")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument("tool", choices=sorted(DIAG_TOOLS), help="Which diagnostic to run")

    args, rest = p.parse_known_args(argv)
    _configure_logging(args.verbose)

    commands = {
        "day": cmd_day,
        "jdn": cmd_jdn,
        "myanmar": cmd_myanmar,
        "month": cmd_month,
        "year": cmd_year,
    }
    try:
        if args.cmd in commands:
            return commands[args.cmd](rest)
        if args.cmd == "diag":
            return _run_module_main(DIAG_TOOLS[args.tool], rest)
    except ConfigError as e:
        raise SystemExit(f"mmcal: {e}") from e

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
