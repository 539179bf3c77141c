"""
shotprofile: parse espresso shot profiles and synthesize their
temperature, pressure and flow traces.

    from shotprofile import parse, analyze

    profile = parse("{temperature 90 seconds 10}\n{temperature 94 seconds 5}")
    temperature, pressure, flow, duration = analyze(profile)
"""

from shotprofile.core import (
    Analysis,
    Channel,
    Profile,
    ProfileSyntaxError,
    Property,
    PropertyKind,
    Segment,
    Step,
    Trace,
    analyze,
)
from shotprofile.io import PresetLibrary, load_profile, parse


__version__ = "0.1.0"

__all__ = [
    "Analysis",
    "Channel",
    "Profile",
    "ProfileSyntaxError",
    "Property",
    "PropertyKind",
    "Segment",
    "Step",
    "Trace",
    "analyze",
    "PresetLibrary",
    "load_profile",
    "parse",
    "__version__",
]
