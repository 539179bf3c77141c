# shotprofile/core/properties.py
from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any

import numpy as np

from .exceptions import InvalidProperty


class TransitionKind(str, Enum):
    FAST = "fast"
    SMOOTH = "smooth"


class SensorKind(str, Enum):
    COFFEE = "coffee"
    WATER = "water"


class PumpKind(str, Enum):
    FLOW = "flow"
    PRESSURE = "pressure"


class ExitKind(str, Enum):
    PRESSURE_UNDER = "pressure_under"
    PRESSURE_OVER = "pressure_over"
    FLOW_UNDER = "flow_under"
    FLOW_OVER = "flow_over"


class PropertyKind(str, Enum):
    """Every property a step can carry; the value is the source keyword."""

    EXIT_IF = "exit_if"
    FLOW = "flow"
    VOLUME = "volume"
    MAX_FLOW_OR_PRESSURE_RANGE = "max_flow_or_pressure_range"
    TRANSITION = "transition"
    EXIT_FLOW_UNDER = "exit_flow_under"
    TEMPERATURE = "temperature"
    NAME = "name"
    PRESSURE = "pressure"
    SENSOR = "sensor"
    PUMP = "pump"
    EXIT_TYPE = "exit_type"
    EXIT_FLOW_OVER = "exit_flow_over"
    EXIT_PRESSURE_OVER = "exit_pressure_over"
    MAX_FLOW_OR_PRESSURE = "max_flow_or_pressure"
    EXIT_PRESSURE_UNDER = "exit_pressure_under"
    SECONDS = "seconds"
    UNKNOWN = "unknown"

    @property
    def keyword(self) -> str:
        return self.value


FLOAT_KINDS = frozenset(
    {
        PropertyKind.FLOW,
        PropertyKind.MAX_FLOW_OR_PRESSURE_RANGE,
        PropertyKind.EXIT_FLOW_UNDER,
        PropertyKind.TEMPERATURE,
        PropertyKind.PRESSURE,
        PropertyKind.EXIT_FLOW_OVER,
        PropertyKind.EXIT_PRESSURE_OVER,
        PropertyKind.MAX_FLOW_OR_PRESSURE,
        PropertyKind.EXIT_PRESSURE_UNDER,
        PropertyKind.SECONDS,
    }
)

ENUM_KINDS: dict[PropertyKind, type[Enum]] = {
    PropertyKind.TRANSITION: TransitionKind,
    PropertyKind.SENSOR: SensorKind,
    PropertyKind.PUMP: PumpKind,
    PropertyKind.EXIT_TYPE: ExitKind,
}

VOLUME_MAX = 0xFFFF

_BARE_STRING_RE = re.compile(r"^[^\s{}\\]+$")


def quote_string(text: str) -> str:
    """Render a string value the way the parser reads it back."""
    if _BARE_STRING_RE.match(text):
        return text
    escaped = text.replace("\\", "\\\\").replace("}", "\\}")
    return "{" + escaped + "}"


def format_number(value: float) -> str:
    # shortest positional form that reads back to the same float; "90" not "90.0"
    return np.format_float_positional(value, trim="-")


@dataclass(frozen=True, slots=True)
class Property:
    """
    One `keyword value` fact of a step.

    The value type depends on the kind:
    - EXIT_IF: bool
    - VOLUME: int in [0, 65535]
    - NAME: str
    - TRANSITION / SENSOR / PUMP / EXIT_TYPE: the matching enum
    - UNKNOWN: (keyword, text) pair kept verbatim
    - everything else: float
    """
    kind: PropertyKind
    value: Any

    def __post_init__(self) -> None:
        if not isinstance(self.kind, PropertyKind):
            raise InvalidProperty("Property.kind must be a PropertyKind.")

        kind, value = self.kind, self.value

        if kind in FLOAT_KINDS:
            # ints are accepted and widened, bools are not numbers here
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidProperty(f"{kind.keyword} expects a number, got {value!r}")
            try:
                value = float(value)
            except OverflowError as e:
                raise InvalidProperty(f"{kind.keyword} must be finite, got {value!r}") from e
            if not math.isfinite(value):
                raise InvalidProperty(f"{kind.keyword} must be finite, got {value!r}")
            # the grammar has no sign: every numeric field is unsigned
            if value < 0:
                raise InvalidProperty(f"{kind.keyword} must not be negative, got {value!r}")
            # -0.0 -> 0.0 so to_text never writes "-0"
            object.__setattr__(self, "value", value + 0.0)
        elif kind is PropertyKind.EXIT_IF:
            if not isinstance(value, bool):
                raise InvalidProperty(f"exit_if expects a bool, got {value!r}")
        elif kind is PropertyKind.VOLUME:
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidProperty(f"volume expects an int, got {value!r}")
            if not 0 <= value <= VOLUME_MAX:
                raise InvalidProperty(f"volume must fit in 16 bits, got {value}")
        elif kind is PropertyKind.NAME:
            if not isinstance(value, str):
                raise InvalidProperty(f"name expects a string, got {value!r}")
        elif kind in ENUM_KINDS:
            enum_cls = ENUM_KINDS[kind]
            if not isinstance(value, enum_cls):
                raise InvalidProperty(
                    f"{kind.keyword} expects a {enum_cls.__name__}, got {value!r}"
                )
        else:  # UNKNOWN
            if (
                not isinstance(value, tuple)
                or len(value) != 2
                or not all(isinstance(v, str) for v in value)
            ):
                raise InvalidProperty("unknown property value must be a (keyword, text) pair.")

    @property
    def keyword(self) -> str:
        if self.kind is PropertyKind.UNKNOWN:
            return self.value[0]
        return self.kind.keyword

    def to_text(self) -> str:
        """Serialize back to `keyword value` source form."""
        kind, value = self.kind, self.value
        if kind in FLOAT_KINDS:
            rendered = format_number(value)
        elif kind is PropertyKind.EXIT_IF:
            rendered = "1" if value else "0"
        elif kind is PropertyKind.VOLUME:
            rendered = str(value)
        elif kind is PropertyKind.NAME:
            rendered = quote_string(value)
        elif kind in ENUM_KINDS:
            rendered = value.value
        else:
            rendered = quote_string(value[1])
        return f"{self.keyword} {rendered}"

    def __str__(self) -> str:
        return self.to_text()
