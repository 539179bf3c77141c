# shotprofile/render/axis.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import numpy as np

from .scale import LinearScale


class Direction(str, Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


def x_ticks(domain: tuple[float, float], min_unit: float) -> list[float]:
    """Tick values min_unit, 2*min_unit, ... not beyond the domain end.

    The first tick is always emitted, even when it already lies past the end.
    """
    if min_unit <= 0:
        raise ValueError(f"min_unit must be positive, got {min_unit}")

    ticks: list[float] = []
    t = float(min_unit)
    while True:
        ticks.append(t)
        t += min_unit
        if t > domain[1]:
            break
    return ticks


@dataclass(frozen=True, slots=True)
class Axis:
    domain: tuple[float, float]
    range: tuple[float, float]
    direction: Direction = Direction.HORIZONTAL
    min_unit: float = 10.0

    @property
    def scale(self) -> LinearScale:
        return LinearScale(self.domain, self.range)

    def line(self) -> tuple[float, float, float, float]:
        """Axis line from the origin, in axis-local pixels."""
        if self.direction is Direction.HORIZONTAL:
            return 0.0, 0.0, self.range[1], 0.0
        return 0.0, 0.0, 0.0, self.range[1]

    def ticks(self) -> list[float]:
        # only the time axis carries tick marks
        if self.direction is not Direction.HORIZONTAL:
            return []
        return x_ticks(self.domain, self.min_unit)

    def tick_marks(self, length: float = 10.0) -> np.ndarray:
        """(n, 4) array of tick mark lines in axis-local pixels."""
        ticks = self.ticks()
        if not ticks:
            return np.empty((0, 4), dtype=float)
        xs = self.scale(np.asarray(ticks, dtype=float))
        zeros = np.zeros_like(xs)
        return np.column_stack([xs, zeros, xs, np.full_like(xs, length)])
