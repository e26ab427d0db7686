#!/usr/bin/env python3
"""
ephemcore.diagnostics.plot_deltat
---------------------------------
Plot ΔT (TT - UT) for the registered models over a range of years.

    python -m ephemcore.diagnostics.plot_deltat --y0 1600 --y1 2100 --model table
"""

from __future__ import annotations

import argparse
import importlib
import logging
from typing import Sequence

from ..engines import deltat as engine_deltat
from ..reference import deltat as ref_deltat
from ..reference.time_scales import calendar_to_ut

logger = logging.getLogger(__name__)


def _optional(module: str):
    try:
        return importlib.import_module(module)
    except ImportError as e:
        raise RuntimeError(f'Plotting needs {module.split(".")[0]}. Install: pip install "ephemcore[diagnostics]"') from e


def _year_to_ut(y: float) -> float:
    year = int(y // 1)
    start = calendar_to_ut(year, 1, 1)
    return start + (y - year) * (calendar_to_ut(year + 1, 1, 1) - start)


def plot_models(ax, specs: Sequence[str], years) -> None:
    """Draw one curve per model spec on `ax`, sampled at decimal `years`."""
    uts = [_year_to_ut(float(y)) for y in years]
    for spec in specs:
        model = engine_deltat.make_delta_t_model(spec)
        ax.plot(years, [model.delta_t_seconds(ut) for ut in uts], linewidth=1.5, label=spec)


def plot_observed(ax) -> bool:
    tbl = ref_deltat.load_observed_table()
    if tbl is None:
        logger.warning("No observed ΔT table found (set %s)", ref_deltat.TABLE_ENV_VAR)
        return False
    ax.scatter(tbl.x, tbl.y, s=8, alpha=0.6, label="observed table")
    return True


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Plot ΔT (TT - UT) for ephemcore models.")
    p.add_argument("--y0", type=int, default=1600, help="first year")
    p.add_argument("--y1", type=int, default=2100, help="last year")
    p.add_argument("--step", type=float, default=0.25, help="sampling step in years")
    p.add_argument("--model", action="append", default=None,
                   help=f"model spec to plot (repeatable); known: {', '.join(engine_deltat.DELTA_T_MODELS.list())}")
    p.add_argument("--show-table", action="store_true", help="overlay observed table rows when configured")
    p.add_argument("--out", default="deltat.png", help="image file to write")
    p.add_argument("--dpi", type=int, default=150)
    args = p.parse_args(argv)

    if args.y1 < args.y0:
        raise SystemExit(f"empty year range: {args.y0}..{args.y1}")

    np = _optional("numpy")
    plt = _optional("matplotlib.pyplot")

    years = np.arange(args.y0, args.y1 + args.step / 2, args.step, dtype=float)
    fig, ax = plt.subplots(figsize=(10, 5))
    plot_models(ax, args.model or [engine_deltat.DEFAULT_MODEL], years)
    if args.show_table:
        plot_observed(ax)

    ax.set(title="ΔT = TT − UT", xlabel="Decimal year", ylabel="seconds")
    ax.grid(True, alpha=0.3)
    ax.legend(loc="upper left")
    fig.tight_layout()
    fig.savefig(args.out, dpi=args.dpi)
    plt.close(fig)
    logger.info("Wrote %s", args.out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
