# shotprofile/render/__init__.py
"""
Geometry and drawing helpers for analyzed profiles.

- LinearScale: domain -> range mapping
- Axis / x_ticks: time axis tick placement
- Viewport / project: pixel coordinates of every segment
- plot_analysis / save_plot: matplotlib figure of the three channels
"""

from .scale import LinearScale, scale
from .axis import Axis, Direction, x_ticks
from .projection import DEFAULT_DOMAINS, Viewport, project
from .plot import plot_analysis, save_plot


__all__ = [
    "LinearScale",
    "scale",
    "Axis",
    "Direction",
    "x_ticks",
    "DEFAULT_DOMAINS",
    "Viewport",
    "project",
    "plot_analysis",
    "save_plot",
]
