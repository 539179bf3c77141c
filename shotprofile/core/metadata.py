# shotprofile/core/metadata.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .exceptions import InvalidChannel


@dataclass(frozen=True, slots=True)
class ChannelMeta:
    """
    Metadata attached to a Channel.

    - unit: physical unit (°C, bar, ml/s)
    - description: human-friendly description
    - color: stroke color used when the channel is drawn
    - attrs: arbitrary additional fields
    """
    unit: str | None = None
    description: str | None = None
    color: str | None = None
    attrs: dict[str, Any] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        if self.attrs is None:
            object.__setattr__(self, "attrs", {})
        elif not isinstance(self.attrs, dict):
            raise InvalidChannel("ChannelMeta.attrs must be a dict.")

    def copy(self) -> "ChannelMeta":
        return ChannelMeta(
            unit=self.unit,
            description=self.description,
            color=self.color,
            attrs=self.attrs.copy(),
        )


TEMPERATURE_META = ChannelMeta(unit="°C", description="Water temperature", color="darkred")
PRESSURE_META = ChannelMeta(unit="bar", description="Pump pressure", color="darkgreen")
FLOW_META = ChannelMeta(unit="ml/s", description="Pump flow", color="darkblue")
