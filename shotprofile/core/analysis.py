# shotprofile/core/analysis.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator

from .channel import Channel
from .exceptions import ChannelNotFound, InvalidTrace
from .metadata import FLOW_META, PRESSURE_META, TEMPERATURE_META, ChannelMeta
from .segment import Segment
from .trace import Trace


CHANNEL_NAMES: tuple[str, ...] = ("temperature", "pressure", "flow")

_CHANNEL_META: dict[str, ChannelMeta] = {
    "temperature": TEMPERATURE_META,
    "pressure": PRESSURE_META,
    "flow": FLOW_META,
}


@dataclass(frozen=True, slots=True)
class Analysis:
    """
    Result of analyzing a Profile: one Trace per channel plus the total duration.

    Unpacks like the plain result tuple:

        temperature, pressure, flow, duration = analysis

    and offers channel access by name: analysis["pressure"] -> Channel.
    """
    temperature: Trace = field(default_factory=Trace)
    pressure: Trace = field(default_factory=Trace)
    flow: Trace = field(default_factory=Trace)
    duration: float = 0.0

    def __post_init__(self) -> None:
        for name in CHANNEL_NAMES:
            if not isinstance(getattr(self, name), Trace):
                raise InvalidTrace(f"Analysis.{name} must be a Trace instance.")
        object.__setattr__(self, "duration", float(self.duration))

    def __iter__(self) -> Iterator[Any]:
        yield list(self.temperature.segments)
        yield list(self.pressure.segments)
        yield list(self.flow.segments)
        yield self.duration

    # ---- channel access ----
    def keys(self) -> Iterable[str]:
        return CHANNEL_NAMES

    def __contains__(self, name: object) -> bool:
        return name in CHANNEL_NAMES

    def __getitem__(self, name: str) -> Channel:
        if name not in CHANNEL_NAMES:
            raise ChannelNotFound(name)
        return Channel(name=name, trace=getattr(self, name), meta=_CHANNEL_META[name].copy())

    def channels(self) -> dict[str, Channel]:
        return {name: self[name] for name in CHANNEL_NAMES}

    def segments(self, name: str) -> list[Segment]:
        return list(self[name].segments)

    def to_dict(self) -> dict[str, Any]:
        """Plain JSON-serializable view."""
        return {
            "duration": self.duration,
            "channels": {
                name: {
                    "unit": ch.unit,
                    "segments": [list(seg) for seg in ch.segments],
                }
                for name, ch in self.channels().items()
            },
        }
