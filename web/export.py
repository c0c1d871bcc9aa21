"""Static PNG export of the price/target chart using matplotlib."""
import logging
from datetime import datetime
from pathlib import Path
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import matplotlib.ticker as mticker

from web.chart_data import COLORS, SERIES_LABELS

logger = logging.getLogger("btctarget.web.export")

BG = "#F0F1F6"
CHART_BG = "#FFFFFF"
GRID = "#E4E7ED"
TEXT = "#1E272E"
TEXT_DIM = "#636E72"
SPINE = "#DFE6E9"


def _apply_theme(ax, fig):
    """Apply clean modern light theme."""
    fig.patch.set_facecolor(BG)
    ax.set_facecolor(CHART_BG)
    ax.tick_params(colors=TEXT_DIM, labelsize=9, length=0, pad=6)
    ax.title.set_color(TEXT)
    for s in ["top", "right"]:
        ax.spines[s].set_visible(False)
    for s in ["bottom", "left"]:
        ax.spines[s].set_color(SPINE)
        ax.spines[s].set_linewidth(0.5)
    ax.grid(True, alpha=0.5, color=GRID, linestyle="-", linewidth=0.5)


def _points(series):
    """(index, value) pairs for the non-empty slots of a series."""
    return [(i, v) for i, v in enumerate(series) if v is not None]


def export_chart_png(snapshot, path="data/price_target.png", current_price=None):
    """Render the three series to a PNG file and return its path."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    fig, ax = plt.subplots(figsize=(12, 6))
    _apply_theme(ax, fig)

    hist = _points(snapshot.historical)
    if hist:
        xs, ys = zip(*hist)
        ax.plot(xs, ys, color=COLORS["historical"], linewidth=2.5, marker="o",
                markersize=3, label=SERIES_LABELS["historical"])
        ax.fill_between(xs, ys, min(ys), color=COLORS["historical"], alpha=0.08)

    proj = _points(snapshot.projected)
    if proj:
        xs, ys = zip(*proj)
        ax.plot(xs, ys, color=COLORS["projected"], linewidth=2, linestyle=(0, (5, 3)),
                label=SERIES_LABELS["projected"])

    tgt = _points(snapshot.target)
    if tgt:
        xs, ys = zip(*tgt)
        ax.scatter(xs, ys, color=COLORS["target"], marker="*", s=160, zorder=5,
                   label=SERIES_LABELS["target"])
        ax.axhline(ys[-1], color=COLORS["target"], linewidth=1, linestyle=(0, (5, 5)), alpha=0.6)

    ax.set_xticks(range(len(snapshot.labels)))
    ax.set_xticklabels(snapshot.labels, rotation=45, ha="right")
    ax.yaxis.set_major_formatter(mticker.FuncFormatter(lambda v, _: f"${v:,.0f}"))
    ax.set_title("Bitcoin Price vs Target", fontsize=14, fontweight="bold")
    ax.legend(facecolor=CHART_BG, edgecolor=SPINE, labelcolor=TEXT, fontsize=9, loc="upper left")

    if current_price:
        fig.text(0.97, 0.97, f"  BTC  ${current_price:,.0f}  ",
                 fontsize=12, fontweight="bold", color="#FFFFFF",
                 ha="right", va="top", transform=fig.transFigure,
                 bbox=dict(boxstyle="round,pad=0.5", facecolor=COLORS["orange"],
                           edgecolor="none", alpha=0.92))
        fig.text(0.97, 0.915, f"as of {datetime.now().strftime('%H:%M')}",
                 fontsize=7, color=TEXT_DIM, ha="right", va="top", transform=fig.transFigure)

    fig.savefig(path, dpi=150, bbox_inches="tight", facecolor=fig.get_facecolor(),
                edgecolor="none", pad_inches=0.3)
    plt.close(fig)
    logger.info(f"Saved chart: {path}")
    return path
