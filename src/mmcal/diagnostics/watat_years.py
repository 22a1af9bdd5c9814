#!/usr/bin/env python3
from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import mmcal
from mmcal.core.types import YearType


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


@dataclass(frozen=True)
class Style:
    label: str
    marker: str
    size: float
    hollow: bool
    color: str = "0.15"
    lw: float = 1.2
    alpha: float = 0.95


STYLES: Dict[YearType, Style] = {
    YearType.LITTLE_WATAT: Style("Little watat", marker="o", size=60, hollow=True),
    YearType.BIG_WATAT: Style("Big watat", marker="o", size=22, hollow=False),
}


def year_types(np, start_year: int, end_year: int) -> Tuple["np.ndarray", "np.ndarray", "np.ndarray"]:
    years = np.arange(start_year, end_year + 1, dtype=int)
    types = np.empty_like(years)
    werr = np.zeros_like(years, dtype=bool)
    for i, my in enumerate(years):
        yi = mmcal.year_info(int(my))
        types[i] = int(yi.year_type)
        werr[i] = yi.werr
    return years, types, werr


def cycle_counts(np, years, types) -> List[Tuple[int, int]]:
    """Watat years per 19-year cycle, cycles aligned on the first year."""
    out = []
    for k in range(0, len(years) - 18, 19):
        out.append((int(years[k]), int(np.count_nonzero(types[k:k + 19]))))
    return out


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(
        description="Watat (intercalary) year barcode and cycle statistics."
    )
    p.add_argument("--start-year", type=int, default=1300, help="First Myanmar year (ME).")
    p.add_argument("--end-year", type=int, default=1400, help="Last Myanmar year (ME).")
    p.add_argument("--out", default="watat_barcode.png")
    p.add_argument("--title", default="Watat years of the Myanmar calendar")
    p.add_argument("--no-plot", action="store_true", help="Print statistics only.")
    p.add_argument(
        "--year-step",
        type=int,
        default=10,
        help="Label every k years (default: 10).",
    )
    args = p.parse_args(argv)

    np = _need_numpy()

    start_year, end_year = args.start_year, args.end_year
    if end_year < start_year:
        raise SystemExit("--end-year must be >= --start-year")

    years, types, werr = year_types(np, start_year, end_year)
    lengths = np.array([mmcal.year_length(int(t)) for t in types])

    print(f"ME {start_year}..{end_year}: {len(years)} years")
    for yt in YearType:
        print(f"  {yt.name.lower():<13} {int(np.count_nonzero(types == int(yt)))}")
    print(f"  mean year length  {lengths.mean():.6f} days")
    if werr.any():
        print(f"  werr years        {', '.join(str(int(y)) for y in years[werr])}")
    counts = cycle_counts(np, years, types)
    if counts:
        print("  watat years per 19-year cycle:")
        for y0, n in counts:
            print(f"    ME {y0}..{y0 + 18}: {n}")

    if args.no_plot:
        return 0

    plt = _need_matplotlib()
    fig, ax = plt.subplots(figsize=(16, 2.8))

    ax.set_xlim(start_year - 0.5, end_year + 0.5)
    ax.set_ylim(0.5, 2.5)
    ax.grid(False)
    ax.tick_params(axis="both", which="both", length=0)

    step = max(1, int(args.year_step))
    xt = list(range(start_year, end_year + 1, step))
    ax.set_xticks(xt)
    ax.set_xticklabels([str(y) for y in xt])
    ax.set_xlabel("Myanmar year (ME)")
    ax.set_yticks([1, 2])
    ax.set_yticklabels(["little", "big"])

    for yt, st in STYLES.items():
        x = years[types == int(yt)]
        y = np.full(x.shape, int(yt))
        if st.hollow:
            ax.scatter(x, y, s=st.size, marker=st.marker, facecolors="none",
                       edgecolors=st.color, linewidths=st.lw, alpha=st.alpha, label=st.label, zorder=5)
        else:
            ax.scatter(x, y, s=st.size, marker=st.marker, c=st.color,
                       linewidths=0.0, alpha=st.alpha, label=st.label, zorder=5)

    if werr.any():
        ax.scatter(years[werr], types[werr], s=140, marker="x", c="tab:red", label="werr", zorder=6)

    ax.set_title(args.title)
    ax.legend(loc="center left", bbox_to_anchor=(1.01, 0.5), frameon=False)
    fig.tight_layout()
    fig.savefig(args.out, dpi=250)
    print(f"Saved: {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
