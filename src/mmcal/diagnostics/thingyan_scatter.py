#!/usr/bin/env python3
from __future__ import annotations

from typing import Tuple, Optional, List

import argparse

import mmcal


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "mmcal[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "mmcal[diagnostics]"') from e


def day_of_year(jdn: int) -> int:
    w = mmcal.jdn_to_civil(jdn)
    return jdn - int(mmcal.civil_to_jdn(w.year, 1, 1)) + 1


def rolling_median(np, y, win: int = 11):
    """Centered rolling median with edge padding."""
    if win < 3:
        return y.astype(float)
    if win % 2 == 0:
        win += 1
    k = win // 2
    ypad = np.pad(y, (k, k), mode="edge")
    out = np.empty_like(y, dtype=float)
    for i in range(len(y)):
        out[i] = float(np.median(ypad[i : i + win]))
    return out


def build_series(np, start_year: int, end_year: int, *, event: str) -> Tuple["np.ndarray", "np.ndarray"]:
    """Gregorian year and day-of-year of a Thingyan event for each Myanmar year."""
    years = np.arange(start_year, end_year + 1, dtype=int)
    gy = np.empty_like(years)
    doy = np.empty_like(years, dtype=float)

    for i, my in enumerate(years):
        th = mmcal.thingyan_time(int(my))
        if event == "new-year":
            j = th.atat + 1
        elif event == "akya":
            j = th.akya
        else:
            raise ValueError("event must be 'new-year' or 'akya'")
        gy[i] = mmcal.jdn_to_civil(j).year
        doy[i] = float(day_of_year(j))

    return gy, doy


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Scatter plot of Thingyan dates against the Gregorian year.")
    p.add_argument("--start-year", type=int, default=1100, help="First Myanmar year (ME).")
    p.add_argument("--end-year", type=int, default=1500, help="Last Myanmar year (ME).")
    p.add_argument("--event", choices=("new-year", "akya"), default="new-year")
    p.add_argument("--show-trend", action="store_true")
    p.add_argument("--trend-win", type=int, default=11, help="Rolling median window (odd recommended).")
    p.add_argument("--outbase", default="thingyan_scatter", help="Output base name (writes .png)")
    args = p.parse_args(argv)

    np = _need_numpy()
    plt = _need_matplotlib()

    if args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")

    plt.rcParams.update({
        "font.size": 10,
        "axes.labelsize": 11,
        "axes.titlesize": 12,
        "legend.fontsize": 10,
        "axes.linewidth": 0.8,
    })

    fig, ax = plt.subplots(figsize=(9.2, 4.8), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)
    ax.minorticks_off()

    ax.set_xlabel("Gregorian year")
    ax.set_ylabel("Day-of-year (Jan 1 = 1)")
    label = "Myanmar New Year's Day" if args.event == "new-year" else "Thingyan Akya"
    ax.set_title(f"{label}, ME {args.start_year}..{args.end_year}")

    x, y = build_series(np, args.start_year, args.end_year, event=args.event)
    ax.scatter(x, y, s=12, marker="o", c="tab:blue", linewidths=0.0, alpha=0.45, label=label)

    if args.show_trend:
        y_med = rolling_median(np, y, win=int(args.trend_win))
        ax.plot(x, y_med, color="0.30", linewidth=1.8, alpha=0.95, label="rolling median")

    ax.legend(loc="upper left", frameon=False)

    outbase = args.outbase
    fig.savefig(outbase + ".png", dpi=300)
    print(f"Saved: {outbase}.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
