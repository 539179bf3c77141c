# shotprofile/render/scale.py
from __future__ import annotations

from dataclasses import dataclass
from typing import overload

import numpy as np


@dataclass(frozen=True, slots=True)
class LinearScale:
    """
    Affine map from a domain interval onto a range interval.

    The range may be reversed (e.g. pixel rows grow downwards). A degenerate
    domain (d0 == d1) maps every value to the start of the range.
    Works on floats and on numpy arrays alike.
    """
    domain: tuple[float, float]
    range: tuple[float, float]

    def __post_init__(self) -> None:
        object.__setattr__(self, "domain", (float(self.domain[0]), float(self.domain[1])))
        object.__setattr__(self, "range", (float(self.range[0]), float(self.range[1])))

    @property
    def factor(self) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        if d1 == d0:
            return 0.0
        return (r1 - r0) / (d1 - d0)

    @overload
    def __call__(self, value: float) -> float: ...

    @overload
    def __call__(self, value: np.ndarray) -> np.ndarray: ...

    def __call__(self, value):
        d0 = self.domain[0]
        r0 = self.range[0]
        if isinstance(value, np.ndarray):
            return r0 + (value.astype(float) - d0) * self.factor
        return r0 + (float(value) - d0) * self.factor

    def invert(self, value: float) -> float:
        if self.factor == 0.0:
            return self.domain[0]
        return self.domain[0] + (float(value) - self.range[0]) / self.factor


def scale(domain: tuple[float, float], range_: tuple[float, float]) -> LinearScale:
    return LinearScale(domain=domain, range=range_)
