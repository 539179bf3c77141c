"""Configuration loading utilities."""
from __future__ import annotations

import json
import pathlib
import tomllib
from dataclasses import dataclass, field
from typing import Any, Mapping

from shotprofile.render.projection import DEFAULT_DOMAINS, Viewport


class ConfigError(RuntimeError):
    """Raised when configuration loading fails."""


def load_config(path: str | pathlib.Path) -> dict[str, Any]:
    """Load a configuration file (TOML or JSON)."""
    path_obj = pathlib.Path(path)
    if not path_obj.exists():
        raise ConfigError(f"Config path does not exist: {path_obj}")

    suffix = path_obj.suffix.lower()
    try:
        if suffix == ".toml":
            with path_obj.open("rb") as handle:
                return tomllib.load(handle)
        if suffix == ".json":
            with path_obj.open("r", encoding="utf-8") as handle:
                return json.load(handle)
    except (tomllib.TOMLDecodeError, json.JSONDecodeError) as e:
        raise ConfigError(f"Could not parse {path_obj}: {e}") from e

    raise ConfigError(f"Unsupported config format: {path_obj.suffix}")


def _flag(data: Mapping[str, Any], key: str) -> bool:
    value = data.get(key, False)
    if not isinstance(value, bool):
        raise ConfigError(f"'{key}' must be a boolean, got {value!r}")
    return value


@dataclass(frozen=True, slots=True)
class Settings:
    """
    Typed view of a config mapping.

    Recognized keys (all optional):

        log_level = "INFO"
        json_logs = false
        preset_dir = "path/to/tcl/presets"
        lenient = false

        [viewport]
        width = 600
        height = 400
        inner = [30, 20, 580, 370]

        [domains]
        temperature = [20, 100]
        pressure = [0, 12]
        flow = [0, 12]
    """
    log_level: str = "INFO"
    json_logs: bool = False
    preset_dir: pathlib.Path | None = None
    lenient: bool = False
    viewport: Viewport = field(default_factory=Viewport)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Settings":
        if not isinstance(data, Mapping):
            raise ConfigError("Configuration root must be a table/object.")

        preset_dir = data.get("preset_dir")

        vp = data.get("viewport", {})
        domains = data.get("domains", {})
        if not isinstance(vp, Mapping) or not isinstance(domains, Mapping):
            raise ConfigError("'viewport' and 'domains' must be tables/objects.")

        try:
            merged_domains = dict(DEFAULT_DOMAINS)
            for name, bounds in domains.items():
                lo, hi = bounds
                merged_domains[name] = (float(lo), float(hi))

            viewport = Viewport(
                width=float(vp.get("width", 600.0)),
                height=float(vp.get("height", 400.0)),
                inner=tuple(float(v) for v in vp.get("inner", (30.0, 20.0, 580.0, 370.0))),
                domains=merged_domains,
            )
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid viewport/domains configuration: {e}") from e

        return cls(
            log_level=str(data.get("log_level", "INFO")),
            json_logs=_flag(data, "json_logs"),
            preset_dir=pathlib.Path(preset_dir) if preset_dir else None,
            lenient=_flag(data, "lenient"),
            viewport=viewport,
        )

    @classmethod
    def load(cls, path: str | pathlib.Path | None) -> "Settings":
        if path is None:
            return cls()
        return cls.from_mapping(load_config(path))
