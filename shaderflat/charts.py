"""Render the inclusion report of a run as an SVG chart.

One horizontal bar per included file: how many of its include occurrences
were spliced and how many were dropped as repeated once-only inclusions.
"""

import sys
from pathlib import Path

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
import matplotlib.ticker as ticker
import numpy as np

SPLICED_COLOR = "#4C72B0"
DEDUPLICATED_COLOR = "#AAAAAA"


def style_chart(ax: plt.Axes, title: str):
    ax.set_title(title, fontsize=13, fontweight="bold", pad=12)
    ax.spines["top"].set_visible(False)
    ax.spines["right"].set_visible(False)
    ax.tick_params(axis="both", which="both", labelsize=9)
    ax.xaxis.set_major_locator(ticker.MaxNLocator(integer=True))


def generate_inclusion_chart(report: dict, output: Path) -> bool:
    """Write the chart to ``output``; return False when there is nothing to plot."""
    files = report.get("files", [])
    if not files:
        print(f"Warning: no includes in {report.get('root')}, skipping chart", file=sys.stderr)
        return False

    paths = [f["path"] for f in files]
    spliced = np.array([f["spliced"] for f in files])
    deduplicated = np.array([f["deduplicated"] for f in files])
    y = np.arange(len(paths))

    fig, ax = plt.subplots(figsize=(8, max(2.5, 0.4 * len(paths) + 1.5)))
    ax.barh(y, spliced, color=SPLICED_COLOR, label="spliced")
    ax.barh(y, deduplicated, left=spliced, color=DEDUPLICATED_COLOR, label="deduplicated")
    for yi, total in zip(y, spliced + deduplicated):
        ax.text(total + 0.05, yi, str(int(total)), va="center", fontsize=7)

    ax.set_yticks(y)
    ax.set_yticklabels(paths)
    ax.invert_yaxis()
    ax.set_xlabel("Include occurrences")
    ax.legend(loc="lower right", framealpha=0.9, fontsize=9)
    style_chart(ax, f"Includes flattened into {report.get('root')}")

    output.parent.mkdir(parents=True, exist_ok=True)
    fig.tight_layout()
    fig.savefig(str(output), format="svg", bbox_inches="tight")
    plt.close(fig)
    return True
