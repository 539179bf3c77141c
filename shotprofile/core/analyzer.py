# shotprofile/core/analyzer.py
"""
Profile analyzer: reduce a Profile to per-channel line segments.

One pass over the steps, left to right. Per step, in property order:

- temperature: jump from the previous temperature (if any), then hold for the
  step duration. Transition kind does not apply.
- pressure (only when the step pumps by pressure) and flow (only when it pumps
  by flow): when the previous step pumped the other way, the other channel
  first drops to zero at its last point. Then FAST jumps and holds, SMOOTH
  ramps over the step duration. The first value of a channel starts from 0.
- flow additionally starts from the exit flow carried over from the previous
  step, when there is one.

Everything else (names, exit conditions, sensor, volume, ...) draws nothing.
"""
from __future__ import annotations

import logging
import sys

from .analysis import Analysis
from .properties import PropertyKind, PumpKind, TransitionKind
from .segment import Segment
from .step import ExitFlowDerivation, Profile, default_exit_flow
from .trace import Trace

logger = logging.getLogger(__name__)


class _ChannelBuilder:
    """Append-only segment list for one channel."""

    __slots__ = ("segments",)

    def __init__(self) -> None:
        self.segments: list[Segment] = []

    @property
    def last_point(self) -> tuple[float, float] | None:
        return self.segments[-1].end if self.segments else None

    @property
    def last_value(self) -> float | None:
        return self.segments[-1].y2 if self.segments else None

    def line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        self.segments.append(Segment(x1, y1, x2, y2))

    def drop_to_zero(self) -> None:
        point = self.last_point
        if point is None:
            return
        px, py = point
        self.line(px, py, px, 0.0)

    def build(self, name: str, unit: str) -> Trace:
        return Trace(segments=tuple(self.segments), unit=unit, name=name)


def _step_end(start: float, duration: float) -> float:
    """start + duration, saturated at the largest finite float."""
    end = start + duration
    if end > sys.float_info.max:
        logger.warning("Profile time overflows at %.3es; clamping", start)
        return sys.float_info.max
    return end


def _hold_or_ramp(
    channel: _ChannelBuilder,
    origin: float | None,
    target: float,
    start: float,
    end: float,
    transition: TransitionKind,
) -> None:
    if origin is None:
        channel.line(start, 0.0, start, target)
        channel.line(start, target, end, target)
    elif transition is TransitionKind.SMOOTH:
        channel.line(start, origin, end, target)
    else:
        channel.line(start, origin, start, target)
        channel.line(start, target, end, target)


def analyze(profile: Profile, *, exit_flow: ExitFlowDerivation = default_exit_flow) -> Analysis:
    """Synthesize temperature, pressure and flow traces for `profile`.

    Parameters
    ----------
    profile:
        Parsed profile.
    exit_flow:
        Derivation of the flow value a step hands over to the next one.
        Pass `no_exit_flow` to disable the carried-flow correction.

    Missing values never raise: no `seconds` means a zero-length step, no
    `transition` means FAST, no `pump` means the step drives neither
    pressure nor flow.
    """
    temperature = _ChannelBuilder()
    pressure = _ChannelBuilder()
    flow = _ChannelBuilder()

    elapsed = 0.0
    previous_pump: PumpKind | None = None
    previous_exit_flow: float | None = None

    for index, step in enumerate(profile):
        duration = step.duration()
        end = _step_end(elapsed, duration)
        transition = step.transition()
        pump = step.pump()

        for prop in step:
            if prop.kind is PropertyKind.TEMPERATURE:
                prev = temperature.last_value
                if prev is not None:
                    temperature.line(elapsed, prev, elapsed, prop.value)
                temperature.line(elapsed, prop.value, end, prop.value)

            elif prop.kind is PropertyKind.PRESSURE:
                if pump is not PumpKind.PRESSURE:
                    continue
                if previous_pump is PumpKind.FLOW:
                    flow.drop_to_zero()
                _hold_or_ramp(
                    pressure, pressure.last_value, prop.value, elapsed, end, transition
                )

            elif prop.kind is PropertyKind.FLOW:
                if pump is not PumpKind.FLOW:
                    continue
                if previous_pump is PumpKind.PRESSURE:
                    pressure.drop_to_zero()
                origin = flow.last_value
                if previous_exit_flow is not None and origin is not None:
                    flow.line(elapsed, origin, elapsed, previous_exit_flow)
                    origin = previous_exit_flow
                _hold_or_ramp(flow, origin, prop.value, elapsed, end, transition)

        if pump is None and (step.has(PropertyKind.PRESSURE) or step.has(PropertyKind.FLOW)):
            logger.debug("Step %d (%s) has no pump mode; pressure/flow ignored", index, step.name())

        elapsed = end
        previous_pump = pump
        previous_exit_flow = step.carried_exit_flow(exit_flow)

    logger.debug(
        "Analyzed %d steps: %.3fs, %d/%d/%d segments",
        len(profile),
        elapsed,
        len(temperature.segments),
        len(pressure.segments),
        len(flow.segments),
    )

    return Analysis(
        temperature=temperature.build("temperature", "°C"),
        pressure=pressure.build("pressure", "bar"),
        flow=flow.build("flow", "ml/s"),
        duration=elapsed,
    )
