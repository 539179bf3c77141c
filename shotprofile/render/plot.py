# shotprofile/render/plot.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Mapping

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.collections import LineCollection
from matplotlib.figure import Figure

from shotprofile.core import Analysis

from .projection import DEFAULT_DOMAINS

logger = logging.getLogger(__name__)


def _add_channel(ax: Axes, analysis: Analysis, name: str, linewidth: float) -> LineCollection:
    channel = analysis[name]
    arr = channel.to_numpy()
    lines = LineCollection(
        arr.reshape(-1, 2, 2),
        colors=channel.color,
        linewidths=linewidth,
        capstyle="round",
        label=f"{name} ({channel.unit})",
    )
    ax.add_collection(lines)
    return lines


def plot_analysis(
    analysis: Analysis,
    ax: Axes | None = None,
    *,
    title: str | None = None,
    domains: Mapping[str, tuple[float, float]] | None = None,
    linewidth: float = 1.5,
) -> Figure:
    """
    Draw the three channel traces.

    Pressure and flow share the left axis (bar / ml/s); temperature gets a
    twin axis on the right. Returns the figure that owns `ax`.
    """
    domains = {**DEFAULT_DOMAINS, **(domains or {})}

    if ax is None:
        fig, ax = plt.subplots(figsize=(10, 5))
    else:
        fig = ax.figure

    right = max(analysis.duration, 1.0)

    handles = [
        _add_channel(ax, analysis, "pressure", linewidth),
        _add_channel(ax, analysis, "flow", linewidth),
    ]
    ax.set_xlim(0.0, right)
    ax.set_ylim(*domains["pressure"])
    ax.set_xlabel("Time (s)")
    ax.set_ylabel("Pressure (bar) / Flow (ml/s)")
    ax.grid(True, alpha=0.3)

    tax = ax.twinx()
    handles.append(_add_channel(tax, analysis, "temperature", linewidth))
    tax.set_ylim(*domains["temperature"])
    tax.set_ylabel("Temperature (°C)")

    ax.legend(handles=handles, loc="upper right")
    if title:
        ax.set_title(title)

    return fig


def save_plot(
    analysis: Analysis,
    path: str | Path,
    *,
    title: str | None = None,
    domains: Mapping[str, tuple[float, float]] | None = None,
    dpi: int = 150,
) -> Path:
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    fig = plot_analysis(analysis, title=title, domains=domains)
    try:
        fig.savefig(out, dpi=dpi, bbox_inches="tight")
    finally:
        plt.close(fig)
    logger.info("Saved plot to %s", out)
    return out
