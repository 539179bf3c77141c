# shotprofile/io/__init__.py
"""
Text side of shotprofile: the step grammar parser, preset files and loaders.
"""

from .parser import parse, PROPERTY_TABLE
from .presets import Preset, PresetLibrary, extract_advanced_shot
from .load import load_profile, load_analysis, read_profile_text


__all__ = [
    "parse",
    "PROPERTY_TABLE",
    "Preset",
    "PresetLibrary",
    "extract_advanced_shot",
    "load_profile",
    "load_analysis",
    "read_profile_text",
]
