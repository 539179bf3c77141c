# shotprofile/core/step.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Iterator, Sequence, overload

from .exceptions import InvalidProfile, InvalidStep
from .properties import ExitKind, Property, PropertyKind, PumpKind, TransitionKind


ExitFlowDerivation = Callable[["Step"], "float | None"]


def default_exit_flow(step: "Step") -> float | None:
    """Flow reading a step is assumed to end on when it exits on a flow threshold.

    Only steps with `exit_if 1` and a flow exit type carry a value:
    - flow_over  -> last exit_flow_over
    - flow_under -> last exit_flow_under
    """
    if not step.last(PropertyKind.EXIT_IF, False):
        return None
    exit_type = step.last(PropertyKind.EXIT_TYPE)
    if exit_type is ExitKind.FLOW_OVER:
        return step.last(PropertyKind.EXIT_FLOW_OVER)
    if exit_type is ExitKind.FLOW_UNDER:
        return step.last(PropertyKind.EXIT_FLOW_UNDER)
    return None


def no_exit_flow(step: "Step") -> float | None:
    return None


@dataclass(frozen=True, slots=True)
class Step:
    """
    One timed phase of a shot: properties in source order.

    Duplicated kinds are allowed; the last occurrence wins for every
    single-valued accessor.
    """
    properties: tuple[Property, ...] = ()

    def __post_init__(self) -> None:
        if isinstance(self.properties, (str, bytes)) or not isinstance(self.properties, Iterable):
            raise InvalidStep("Step.properties must be an iterable of Property.")
        props = tuple(self.properties)
        for prop in props:
            if not isinstance(prop, Property):
                raise InvalidStep(f"Step.properties must contain Property instances, got {prop!r}")
        object.__setattr__(self, "properties", props)

    # ---- sequence API ----
    def __len__(self) -> int:
        return len(self.properties)

    def __iter__(self) -> Iterator[Property]:
        return iter(self.properties)

    def __getitem__(self, index: int) -> Property:
        return self.properties[index]

    # ---- lookups ----
    def values(self, kind: PropertyKind) -> list[Any]:
        return [p.value for p in self.properties if p.kind is kind]

    def last(self, kind: PropertyKind, default: Any = None) -> Any:
        for prop in reversed(self.properties):
            if prop.kind is kind:
                return prop.value
        return default

    def has(self, kind: PropertyKind) -> bool:
        return any(p.kind is kind for p in self.properties)

    def duration(self) -> float:
        return self.last(PropertyKind.SECONDS, 0.0)

    def transition(self) -> TransitionKind:
        return self.last(PropertyKind.TRANSITION, TransitionKind.FAST)

    def pump(self) -> PumpKind | None:
        return self.last(PropertyKind.PUMP)

    def name(self) -> str | None:
        return self.last(PropertyKind.NAME)

    def carried_exit_flow(self, derive: ExitFlowDerivation = default_exit_flow) -> float | None:
        return derive(self)

    def to_text(self) -> str:
        return "{" + " ".join(p.to_text() for p in self.properties) + "}"


@dataclass(frozen=True, slots=True)
class Profile:
    """Ordered steps of a shot; the order is the timeline."""

    steps: tuple[Step, ...] = field(default=(), repr=False)

    def __post_init__(self) -> None:
        if isinstance(self.steps, (str, bytes)) or not isinstance(self.steps, Iterable):
            raise InvalidProfile("Profile.steps must be an iterable of Step.")
        steps = tuple(self.steps)
        for step in steps:
            if not isinstance(step, Step):
                raise InvalidProfile(f"Profile.steps must contain Step instances, got {step!r}")
        object.__setattr__(self, "steps", steps)

    def __len__(self) -> int:
        return len(self.steps)

    def __iter__(self) -> Iterator[Step]:
        return iter(self.steps)

    @overload
    def __getitem__(self, index: int) -> Step: ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[Step]: ...

    def __getitem__(self, index):
        return self.steps[index]

    def duration(self) -> float:
        return float(sum(step.duration() for step in self.steps))

    def names(self) -> list[str | None]:
        return [step.name() for step in self.steps]

    def to_text(self) -> str:
        return "\n".join(step.to_text() for step in self.steps)
