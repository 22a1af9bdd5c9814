from __future__ import annotations

import argparse

import mmcal
from mmcal.core.types import WesternDate


def mmdd(w: WesternDate) -> str:
    return f"{w.month:02d}-{w.day:02d}"


def iso(w: WesternDate) -> str:
    return f"{w.year:04d}-{w.month:02d}-{w.day:02d}"


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print the Thingyan (Myanmar New Year) table for a range of Myanmar years."
    )
    p.add_argument("--from-year", type=int, default=1380, help="First Myanmar year (ME).")
    p.add_argument("--to-year", type=int, default=1400, help="Last Myanmar year (ME).")
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="mmdd",
        help="Display format in table columns (default: mmdd).",
    )
    p.add_argument(
        "--list-day",
        type=int,
        default=None,
        help="After the table, list years whose New Year's Day falls on this April day.",
    )
    args = p.parse_args(argv)

    fmt = mmdd if args.dates == "mmdd" else iso

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    headers = ["ME", "Akyo", "Akya", "Atat", "New Year", "Year type"]
    colw = [5] + [max(10 if args.dates == "iso" else 5, len(h)) for h in headers[1:]]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    hits: list[tuple[int, WesternDate]] = []

    for Y in range(Y0, Y1 + 1):
        th = mmcal.thingyan_time(Y)
        yi = mmcal.year_info(Y)
        new_year = mmcal.jdn_to_civil(th.atat + 1)
        cells = [
            str(Y),
            fmt(mmcal.jdn_to_civil(th.akya - 1)),
            fmt(mmcal.jdn_to_civil(th.akya)),
            fmt(mmcal.jdn_to_civil(th.atat)),
            fmt(new_year),
            yi.year_type.name.lower() + (" (werr)" if yi.werr else ""),
        ]
        print("  ".join(c.ljust(w) for c, w in zip(cells, colw)))
        if args.list_day is not None and new_year.month == 4 and new_year.day == args.list_day:
            hits.append((Y, new_year))

    if args.list_day is None:
        return 0

    print(f"\nNew Year's Day on April {args.list_day}:")
    if not hits:
        print("(none)")
        return 0
    for Y, w in hits:
        print(f"{iso(w)}  (ME {Y})")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
