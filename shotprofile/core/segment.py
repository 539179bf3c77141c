# shotprofile/core/segment.py
from __future__ import annotations

import math
from dataclasses import astuple, dataclass
from typing import Iterator

from .exceptions import InvalidSegment


@dataclass(frozen=True, slots=True)
class Segment:
    """
    Straight line in time-vs-value space: (x1, y1) -> (x2, y2).

    x is elapsed seconds, y is the channel's physical unit.
    x1 == x2 is an instantaneous jump; otherwise a hold or a ramp.
    """
    x1: float
    y1: float
    x2: float
    y2: float

    def __post_init__(self) -> None:
        coords = []
        for name in ("x1", "y1", "x2", "y2"):
            v = getattr(self, name)
            if isinstance(v, bool) or not isinstance(v, (int, float)):
                raise InvalidSegment(f"Segment.{name} must be a number, got {v!r}")
            v = float(v)
            if not math.isfinite(v):
                raise InvalidSegment(f"Segment.{name} must be finite, got {v!r}")
            object.__setattr__(self, name, v)
            coords.append(v)

        if coords[2] < coords[0]:
            raise InvalidSegment(f"Segment runs backwards in time: x1={coords[0]} > x2={coords[2]}")

    def __iter__(self) -> Iterator[float]:
        return iter(astuple(self))

    @property
    def start(self) -> tuple[float, float]:
        return self.x1, self.y1

    @property
    def end(self) -> tuple[float, float]:
        return self.x2, self.y2

    @property
    def is_instant(self) -> bool:
        return self.x1 == self.x2

    @property
    def is_hold(self) -> bool:
        return not self.is_instant and self.y1 == self.y2

    @property
    def is_ramp(self) -> bool:
        return not self.is_instant and self.y1 != self.y2

    @property
    def duration(self) -> float:
        return self.x2 - self.x1
