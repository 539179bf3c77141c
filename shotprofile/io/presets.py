# shotprofile/io/presets.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Iterable, Iterator, Mapping

from shotprofile.core.exceptions import InvalidProfile, PresetNotFound
from shotprofile.core.step import Profile

from .parser import parse

logger = logging.getLogger(__name__)


_ADVANCED_SHOT = "advanced_shot"
_ADVANCED_SHOT_PREFIX = "advanced_shot {"


def extract_advanced_shot(text: str) -> str | None:
    """Step list of the first non-empty `advanced_shot {...}` line of a .tcl preset.

    Returns the text between the outer braces plus a trailing newline, or
    None when the file has no (non-empty) advanced_shot entry.
    """
    for raw in text.splitlines():
        line = raw.rstrip()
        if line.startswith(_ADVANCED_SHOT) and not line.endswith("{}"):
            return line[len(_ADVANCED_SHOT_PREFIX):-1] + "\n"
    return None


@dataclass(frozen=True, slots=True)
class Preset:
    name: str
    data: str
    source: str | None = field(default=None, compare=False)

    def profile(self, *, lenient: bool = False) -> Profile:
        return parse(self.data, lenient=lenient)


@dataclass(frozen=True, slots=True)
class PresetLibrary:
    """
    Named raw profile texts.

    Built once (from the bundled presets, a directory or a mapping) and passed
    to whatever needs lookups. Dict-like: library["default"] -> Preset.

    Presets loaded from files are keyed by file stem ("default"), not by the
    full file name ("default.tcl") that Decent preset ids use.
    """
    presets: Mapping[str, Preset] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.presets, Mapping):
            raise InvalidProfile("PresetLibrary.presets must be a mapping (e.g., dict).")

        normalized: dict[str, Preset] = {}
        for key in sorted(self.presets):
            preset = self.presets[key]
            if not isinstance(preset, Preset):
                raise InvalidProfile("PresetLibrary.presets values must be Preset instances.")
            if preset.name != key:
                raise InvalidProfile(
                    f"Preset name mismatch: key '{key}' but Preset.name is '{preset.name}'."
                )
            normalized[key] = preset
        object.__setattr__(self, "presets", normalized)

    # ---- constructors ----
    @classmethod
    def from_texts(cls, texts: Mapping[str, str]) -> "PresetLibrary":
        """Library from name -> raw profile text (already a step list)."""
        return cls({name: Preset(name=name, data=data) for name, data in texts.items()})

    @classmethod
    def from_tcl_files(cls, files: Iterable[tuple[str, str, str]]) -> "PresetLibrary":
        """Library from (name, source, tcl text) triples; files without steps are skipped."""
        presets: dict[str, Preset] = {}
        for name, source, text in files:
            data = extract_advanced_shot(text)
            if data is None:
                logger.debug("Skipping %s: no advanced_shot steps", source)
                continue
            presets[name] = Preset(name=name, data=data, source=source)
        return cls(presets)

    @classmethod
    def from_directory(cls, path: str | Path, pattern: str = "*.tcl") -> "PresetLibrary":
        root = Path(path)
        if not root.is_dir():
            raise FileNotFoundError(f"Preset directory does not exist: {root}")

        files = (
            (p.stem, str(p), p.read_text(encoding="utf-8"))
            for p in sorted(root.glob(pattern))
            if p.is_file()
        )
        library = cls.from_tcl_files(files)
        logger.info("Loaded %d presets from %s", len(library), root)
        return library

    @classmethod
    def bundled(cls) -> "PresetLibrary":
        """Presets shipped with the package (shotprofile/presets/*.tcl)."""
        root = resources.files("shotprofile") / "presets"
        files = (
            (
                entry.name[: -len(".tcl")],
                f"shotprofile/presets/{entry.name}",
                entry.read_text(encoding="utf-8"),
            )
            for entry in sorted(root.iterdir(), key=lambda e: e.name)
            if entry.name.endswith(".tcl")
        )
        return cls.from_tcl_files(files)

    # ---- dict-like API ----
    def __len__(self) -> int:
        return len(self.presets)

    def __iter__(self) -> Iterator[str]:
        return iter(self.presets)

    def __contains__(self, name: object) -> bool:
        return name in self.presets

    def keys(self) -> Iterable[str]:
        return self.presets.keys()

    def items(self) -> Iterable[tuple[str, Preset]]:
        return self.presets.items()

    def values(self) -> Iterable[Preset]:
        return self.presets.values()

    def __getitem__(self, name: str) -> Preset:
        try:
            return self.presets[name]
        except KeyError as e:
            raise PresetNotFound(name) from e

    def get(self, name: str, default: Preset | None = None) -> Preset | None:
        return self.presets.get(name, default)

    def names(self) -> list[str]:
        return list(self.presets)

    def profile(self, name: str, *, lenient: bool = False) -> Profile:
        return self[name].profile(lenient=lenient)

    def merge(self, other: "PresetLibrary", *, overwrite: bool = False) -> "PresetLibrary":
        """
        Merge two libraries (by preset name).

        If overwrite=False, raises if a preset name collides.
        """
        if not isinstance(other, PresetLibrary):
            raise InvalidProfile("merge() expects a PresetLibrary instance.")

        merged = dict(self.presets)
        for name, preset in other.presets.items():
            if (name in merged) and not overwrite:
                raise InvalidProfile(f"Preset '{name}' collides (overwrite=False).")
            merged[name] = preset
        return PresetLibrary(merged)
