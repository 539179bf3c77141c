# shotprofile/render/projection.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

import numpy as np

from shotprofile.core import CHANNEL_NAMES, Analysis

from .axis import Axis, Direction
from .scale import LinearScale


DEFAULT_DOMAINS: dict[str, tuple[float, float]] = {
    "temperature": (20.0, 100.0),
    "pressure": (0.0, 12.0),
    "flow": (0.0, 12.0),
}


@dataclass(frozen=True, slots=True)
class Viewport:
    """
    Drawing surface in pixels.

    inner = (left, top, right, bottom) is the plot area inside the canvas;
    pixel rows grow downwards, so value domains map onto (bottom, top).
    """
    width: float = 600.0
    height: float = 400.0
    inner: tuple[float, float, float, float] = (30.0, 20.0, 580.0, 370.0)
    domains: Mapping[str, tuple[float, float]] = field(
        default_factory=lambda: dict(DEFAULT_DOMAINS)
    )

    def __post_init__(self) -> None:
        left, top, right, bottom = self.inner
        if not (0 <= left < right <= self.width and 0 <= top < bottom <= self.height):
            raise ValueError(f"Viewport.inner {self.inner} does not fit {self.width}x{self.height}")
        missing = [name for name in CHANNEL_NAMES if name not in self.domains]
        if missing:
            raise ValueError(f"Viewport.domains is missing channels: {missing}")
        object.__setattr__(self, "domains", dict(self.domains))

    def x_scale(self, duration: float) -> LinearScale:
        left, _, right, _ = self.inner
        return LinearScale((0.0, duration), (left, right))

    def y_scale(self, channel: str) -> LinearScale:
        _, top, _, bottom = self.inner
        return LinearScale(self.domains[channel], (bottom, top))

    def x_axis(self, duration: float, min_unit: float = 10.0) -> Axis:
        left, _, right, _ = self.inner
        return Axis((0.0, duration), (0.0, right - left), Direction.HORIZONTAL, min_unit)

    def y_axis(self, channel: str = "pressure", min_unit: float = 1.0) -> Axis:
        _, top, _, bottom = self.inner
        return Axis(self.domains[channel], (0.0, top - bottom), Direction.VERTICAL, min_unit)


def project(analysis: Analysis, viewport: Viewport | None = None) -> dict[str, np.ndarray]:
    """Pixel coordinates of every segment: channel name -> (n, 4) array."""
    viewport = viewport or Viewport()
    x = viewport.x_scale(analysis.duration)

    out: dict[str, np.ndarray] = {}
    for name in CHANNEL_NAMES:
        arr = analysis[name].to_numpy()
        y = viewport.y_scale(name)
        projected = np.empty_like(arr)
        projected[:, [0, 2]] = x(arr[:, [0, 2]])
        projected[:, [1, 3]] = y(arr[:, [1, 3]])
        out[name] = projected
    return out
