# shotprofile/io/load.py
from __future__ import annotations

import logging
from pathlib import Path

from shotprofile.core import Analysis, Profile, ProfileSyntaxError, analyze

from .parser import parse
from .presets import extract_advanced_shot

logger = logging.getLogger(__name__)


def read_profile_text(path: str | Path) -> str:
    """Raw step list stored in `path`.

    `.tcl` preset files contribute their advanced_shot line; any other file
    is taken verbatim.
    """
    path_obj = Path(path)
    text = path_obj.read_text(encoding="utf-8")
    if path_obj.suffix.lower() != ".tcl":
        return text

    data = extract_advanced_shot(text)
    if data is None:
        raise ProfileSyntaxError(f"No advanced_shot steps in {path_obj}", offset=0, remainder=text)
    return data


def load_profile(path: str | Path, *, lenient: bool = False) -> Profile:
    profile = parse(read_profile_text(path), lenient=lenient)
    logger.info("Loaded %s: %d steps", path, len(profile))
    return profile


def load_analysis(path: str | Path, *, lenient: bool = False) -> Analysis:
    return analyze(load_profile(path, lenient=lenient))
