# shotprofile/core/trace.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator

import numpy as np

from .exceptions import InvalidTrace
from .segment import Segment


@dataclass(frozen=True, slots=True)
class Trace:
    """Immutable ordered list of Segments for one channel."""

    segments: tuple[Segment, ...] = field(default=(), repr=False)
    unit: str | None = None
    name: str | None = None

    def __post_init__(self) -> None:
        if isinstance(self.segments, (str, bytes)) or not isinstance(self.segments, Iterable):
            raise InvalidTrace("Trace.segments must be an iterable of Segment.")

        segs = tuple(self.segments)
        prev_x1 = None
        for seg in segs:
            if not isinstance(seg, Segment):
                raise InvalidTrace(f"Trace.segments must contain Segment instances, got {seg!r}")
            if prev_x1 is not None and seg.x1 < prev_x1:
                raise InvalidTrace("Segment start times must be monotonic non-decreasing.")
            prev_x1 = seg.x1

        object.__setattr__(self, "segments", segs)

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.segments)

    def __getitem__(self, index: int) -> Segment:
        return self.segments[index]

    @property
    def n(self) -> int:
        return len(self.segments)

    @property
    def t_start(self) -> float | None:
        return None if self.n == 0 else self.segments[0].x1

    @property
    def t_end(self) -> float | None:
        return None if self.n == 0 else max(seg.x2 for seg in self.segments)

    @property
    def last_point(self) -> tuple[float, float] | None:
        return None if self.n == 0 else self.segments[-1].end

    @property
    def last_value(self) -> float | None:
        return None if self.n == 0 else self.segments[-1].y2

    def to_numpy(self) -> np.ndarray:
        """(n, 4) float array of x1, y1, x2, y2 rows."""
        if self.n == 0:
            return np.empty((0, 4), dtype=float)
        return np.array([tuple(seg) for seg in self.segments], dtype=float)

    def points(self) -> tuple[np.ndarray, np.ndarray]:
        """
        Polyline vertices (time, values).

        Consecutive segments that share an endpoint contribute that vertex once,
        so a jump followed by a hold yields three vertices, not four.
        """
        if self.n == 0:
            return np.array([]), np.array([])

        xs: list[float] = []
        ys: list[float] = []
        for seg in self.segments:
            if not xs or (xs[-1], ys[-1]) != seg.start:
                xs.append(seg.x1)
                ys.append(seg.y1)
            xs.append(seg.x2)
            ys.append(seg.y2)
        return np.asarray(xs, dtype=float), np.asarray(ys, dtype=float)

    def value_range(self) -> tuple[float, float] | None:
        if self.n == 0:
            return None
        arr = self.to_numpy()
        ys = arr[:, [1, 3]]
        return float(ys.min()), float(ys.max())
