# shotprofile/core/__init__.py
"""
Core domain objects for shotprofile.

This module defines the parsed and the analyzed side of a shot profile:
- Property / Step / Profile: typed, immutable result of parsing
- Segment: one straight line of a channel trace
- Trace / Channel: ordered segments of one physical channel
- Analysis: temperature, pressure and flow traces plus total duration
- analyze: the single-pass profile analyzer

The core layer is independent from text formats and rendering.
"""

from .properties import (
    Property,
    PropertyKind,
    TransitionKind,
    SensorKind,
    PumpKind,
    ExitKind,
)
from .step import Step, Profile, ExitFlowDerivation, default_exit_flow, no_exit_flow
from .segment import Segment
from .trace import Trace
from .channel import Channel
from .metadata import ChannelMeta
from .analysis import Analysis, CHANNEL_NAMES
from .analyzer import analyze
from .exceptions import (
    CoreError,
    ProfileSyntaxError,
    InvalidProperty,
    InvalidStep,
    InvalidProfile,
    InvalidSegment,
    InvalidTrace,
    InvalidChannel,
    ChannelNotFound,
    PresetNotFound,
)


__all__ = [
    # parsed model
    "Property",
    "PropertyKind",
    "TransitionKind",
    "SensorKind",
    "PumpKind",
    "ExitKind",
    "Step",
    "Profile",

    # analysis
    "ExitFlowDerivation",
    "default_exit_flow",
    "no_exit_flow",
    "Segment",
    "Trace",
    "Channel",
    "ChannelMeta",
    "Analysis",
    "CHANNEL_NAMES",
    "analyze",

    # exceptions
    "CoreError",
    "ProfileSyntaxError",
    "InvalidProperty",
    "InvalidStep",
    "InvalidProfile",
    "InvalidSegment",
    "InvalidTrace",
    "InvalidChannel",
    "ChannelNotFound",
    "PresetNotFound",
]
