#!/usr/bin/env python3
from __future__ import annotations

import argparse
from datetime import date, timedelta
from typing import Dict, List, Optional, Tuple

import multical
from multical.core.time import jdn_to_instant, to_jdn
from multical.core.types import CalendarSystem

CN = CalendarSystem.CHINESE

# Chinese extended year whose new year falls in Gregorian year 1 (ICU numbering).
EXTENDED_YEAR_OFFSET = 2637

# Shorter than any lunar month, so every month is sampled at least once.
SAMPLE_STEP_DAYS = 15


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "multical[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "multical[diagnostics]"') from e


def leap_months(start_year: int, end_year: int) -> Dict[int, int]:
    """
    Gregorian year of the Chinese new year -> number of the leap month in that Chinese year.
    Years without a leap month are omitted. Reads go straight to the provider, so the
    engine's leap-month cache is left untouched.
    """
    provider = multical.get_engine().providers.for_calendar(CN)
    out: Dict[int, int] = {}
    day = date(start_year, 1, 1)
    stop = date(end_year + 1, 12, 31)
    while day <= stop:
        f = provider.read(CN, jdn_to_instant(to_jdn(day.year, day.month, day.day)))
        g_year = f.year - EXTENDED_YEAR_OFFSET
        if f.is_leap_month and start_year <= g_year <= end_year:
            out[g_year] = f.month
        day += timedelta(days=SAMPLE_STEP_DAYS)
    return out


def build_points(np, table: Dict[int, int]) -> Tuple["np.ndarray", "np.ndarray"]:
    years = sorted(table)
    return np.array(years, dtype=int), np.array([table[y] for y in years], dtype=int)


def print_table(table: Dict[int, int], start_year: int, end_year: int) -> None:
    print("year  leap month")
    for y in range(start_year, end_year + 1):
        m = table.get(y)
        print(f"{y:4d}  {m if m is not None else '-'}")


def plot_barcode(table: Dict[int, int], start_year: int, end_year: int, args) -> None:
    np = _need_numpy()
    plt = _need_matplotlib()
    from matplotlib.colors import ListedColormap

    fig, ax = plt.subplots(figsize=(16, 3.6))

    # square cell grid only
    x_edges = np.arange(start_year - 0.5, end_year + 1.5, 1.0)
    y_edges = np.arange(0.5, 13.5, 1.0)
    Z = np.zeros((12, end_year - start_year + 1), dtype=float)

    ax.pcolormesh(
        x_edges,
        y_edges,
        Z,
        shading="flat",
        cmap=ListedColormap(["white"]),
        vmin=0, vmax=1,
        edgecolors=args.cell_edge,
        linewidth=float(args.cell_lw),
        antialiased=True,
        zorder=0,
    )

    ax.set_xlim(start_year - 0.5, end_year + 0.5)
    ax.set_ylim(0.5, 12.5)
    ax.grid(False)
    ax.tick_params(axis="both", which="both", length=0)

    step = max(1, int(args.year_step))
    xt = list(range(start_year, end_year + 1, step))
    ax.set_xticks(xt)
    ax.set_xticklabels([str(y) for y in xt])
    ax.set_xlabel("Gregorian year of Chinese new year")
    ax.set_yticks([1, 3, 6, 9, 12])
    ax.set_ylabel("Leap month number")

    x, m = build_points(np, table)
    ax.scatter(x, m, s=40, marker="o", c="0.15", linewidths=0.0, alpha=0.95, label="Chinese (ICU)", zorder=5)

    ax.set_title(args.title)
    ax.legend(loc="center left", bbox_to_anchor=(1.01, 0.5), frameon=False)
    fig.tight_layout()
    fig.savefig(args.out, dpi=250)
    print(f"Saved: {args.out}")


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Chinese leap months per year (table, or barcode diagram with --plot).")
    p.add_argument("--start-year", type=int, default=1960)
    p.add_argument("--end-year", type=int, default=2030)
    p.add_argument("--plot", action="store_true", help="Save a barcode diagram instead of printing a table.")
    p.add_argument("--out", default="leapmonth_barcode.png")
    p.add_argument("--title", default="Chinese leap month pattern")
    p.add_argument("--year-step", type=int, default=5, help="Label every k years (default: 5).")
    p.add_argument("--cell-edge", default="0.88", help="Cell border color (matplotlib gray string).")
    p.add_argument("--cell-lw", type=float, default=0.6, help="Cell border line width.")
    args = p.parse_args(argv)

    start_year, end_year = args.start_year, args.end_year
    if end_year < start_year:
        raise SystemExit("--end-year must be >= --start-year")

    table = leap_months(start_year, end_year)
    if args.plot:
        plot_barcode(table, start_year, end_year, args)
    else:
        print_table(table, start_year, end_year)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
