# shotprofile/core/channel.py
from __future__ import annotations

from dataclasses import dataclass, field, replace

import numpy as np

from .exceptions import InvalidChannel
from .metadata import ChannelMeta
from .trace import Trace


@dataclass(slots=True, frozen=True)
class Channel:
    name: str
    trace: Trace
    meta: ChannelMeta = field(default_factory=ChannelMeta)

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidChannel("Channel.name must be a non-empty string.")

        if not isinstance(self.trace, Trace):
            raise InvalidChannel("Channel.trace must be a Trace instance.")

        if not isinstance(self.meta, ChannelMeta):
            raise InvalidChannel("Channel.meta must be a ChannelMeta instance.")

        # If meta.unit is not provided, inherit from trace.unit (if any).
        if self.meta.unit is None and self.trace.unit is not None:
            object.__setattr__(
                self,
                "meta",
                replace(self.meta, unit=self.trace.unit, attrs=self.meta.attrs.copy()),
            )

    # Convenience accessors
    @property
    def segments(self) -> tuple:
        return self.trace.segments

    @property
    def unit(self) -> str | None:
        # Meta takes precedence
        return self.meta.unit if self.meta.unit is not None else self.trace.unit

    @property
    def color(self) -> str | None:
        return self.meta.color

    @property
    def n(self) -> int:
        return self.trace.n

    @property
    def t_start(self) -> float | None:
        return self.trace.t_start

    @property
    def t_end(self) -> float | None:
        return self.trace.t_end

    def to_numpy(self) -> np.ndarray:
        return self.trace.to_numpy()

    def points(self) -> tuple[np.ndarray, np.ndarray]:
        return self.trace.points()

    def rename(self, name: str) -> "Channel":
        return Channel(name=name, trace=self.trace, meta=self.meta.copy())

    def with_unit(self, unit: str | None) -> "Channel":
        meta = replace(self.meta, unit=unit, attrs=self.meta.attrs.copy())
        return Channel(name=self.name, trace=self.trace, meta=meta)
