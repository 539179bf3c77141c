"""CLI entrypoint for shotprofile."""
from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import pathlib
import sys

from shotprofile.config import ConfigError, Settings
from shotprofile.core import (
    Analysis,
    ExitFlowDerivation,
    PresetNotFound,
    Profile,
    ProfileSyntaxError,
    analyze,
    default_exit_flow,
    no_exit_flow,
)
from shotprofile.io import PresetLibrary, load_profile, parse
from shotprofile.logging_setup import configure_logging
from shotprofile.render import project, save_plot

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_SYNTAX = 2


def _add_source_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "source",
        nargs="?",
        help="Profile file (.tcl preset or plain step list); '-' reads stdin.",
    )
    parser.add_argument("--preset", help="Use a named preset instead of a file.")
    parser.add_argument(
        "--lenient",
        action="store_true",
        help="Keep unknown keywords instead of failing.",
    )


def _add_exit_flow_arg(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--no-exit-flow",
        action="store_true",
        help="Do not carry exit-flow thresholds into the next step.",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="shotprofile")
    parser.add_argument("--config", help="Path to TOML/JSON config.")
    parser.add_argument("--log-level", help="Logging level (overrides config).")
    parser.add_argument(
        "--json-logs", action="store_true", help="Emit logs in JSON format."
    )
    parser.add_argument("--preset-dir", help="Directory of .tcl presets (overrides config).")

    subparsers = parser.add_subparsers(dest="command", required=True)

    check = subparsers.add_parser("check", help="Parse a profile and list its steps")
    _add_source_args(check)

    analyze_cmd = subparsers.add_parser("analyze", help="Print the synthesized channel segments")
    _add_source_args(analyze_cmd)
    analyze_cmd.add_argument("--json", action="store_true", help="Emit JSON.")
    analyze_cmd.add_argument(
        "--pixels", action="store_true", help="Project segments onto the configured viewport."
    )
    _add_exit_flow_arg(analyze_cmd)

    subparsers.add_parser("presets", help="List available presets")

    plot = subparsers.add_parser("plot", help="Render the channel traces to an image")
    _add_source_args(plot)
    plot.add_argument("-o", "--output", required=True, help="Output image path (.png, .svg, ...).")
    plot.add_argument("--title", help="Plot title.")
    _add_exit_flow_arg(plot)

    return parser


def _library(settings: Settings) -> PresetLibrary:
    library = PresetLibrary.bundled()
    if settings.preset_dir is not None:
        library = library.merge(PresetLibrary.from_directory(settings.preset_dir), overwrite=True)
    return library


def _load(args: argparse.Namespace, settings: Settings) -> Profile:
    lenient = args.lenient or settings.lenient
    if args.preset:
        if args.source:
            raise ValueError("Give either a source file or --preset, not both.")
        return _library(settings).profile(args.preset, lenient=lenient)
    if not args.source:
        raise ValueError("A source file (or '-') or --preset is required.")
    if args.source == "-":
        return parse(sys.stdin.read(), lenient=lenient)
    return load_profile(args.source, lenient=lenient)


def _exit_flow(args: argparse.Namespace) -> ExitFlowDerivation:
    return no_exit_flow if args.no_exit_flow else default_exit_flow


def _print_analysis(analysis: Analysis, pixels: dict | None) -> None:
    print(f"duration: {analysis.duration:g} s")
    for name, channel in analysis.channels().items():
        print(f"{name} ({channel.unit}): {channel.n} segments")
        rows = pixels[name] if pixels is not None else channel.to_numpy()
        for x1, y1, x2, y2 in rows:
            print(f"  ({x1:g}, {y1:g}) -> ({x2:g}, {y2:g})")


def _run(args: argparse.Namespace, settings: Settings) -> int:
    if args.command == "presets":
        for name, preset in _library(settings).items():
            profile = preset.profile(lenient=settings.lenient)
            print(f"{name}\t{len(profile)} steps\t{profile.duration():g} s")
        return EXIT_OK

    profile = _load(args, settings)

    if args.command == "check":
        for index, step in enumerate(profile, start=1):
            print(f"{index}: {step.to_text()}")
        print(f"ok: {len(profile)} steps, {profile.duration():g} s")
        return EXIT_OK

    if args.command == "analyze":
        analysis = analyze(profile, exit_flow=_exit_flow(args))
        pixels = project(analysis, settings.viewport) if args.pixels else None
        if args.json:
            payload = analysis.to_dict()
            if pixels is not None:
                payload["pixels"] = {name: arr.tolist() for name, arr in pixels.items()}
            print(json.dumps(payload, indent=2))
        else:
            _print_analysis(analysis, pixels)
        return EXIT_OK

    if args.command == "plot":
        out = save_plot(
            analyze(profile, exit_flow=_exit_flow(args)),
            args.output,
            title=args.title,
            domains=settings.viewport.domains,
        )
        print(str(out))
        return EXIT_OK

    raise ValueError(f"Unknown command: {args.command}")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = Settings.load(args.config)
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_FAILURE

    configure_logging(args.log_level or settings.log_level, args.json_logs or settings.json_logs)
    if args.preset_dir:
        settings = dataclasses.replace(settings, preset_dir=pathlib.Path(args.preset_dir))

    try:
        return _run(args, settings)
    except ProfileSyntaxError as exc:
        logger.error("Syntax error: %s", exc)
        print(f"syntax error: {exc}", file=sys.stderr)
        return EXIT_SYNTAX
    except PresetNotFound as exc:
        print(f"error: unknown preset {exc.args[0]!r}", file=sys.stderr)
        return EXIT_FAILURE
    except (OSError, ValueError) as exc:
        logger.error("%s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_FAILURE


if __name__ == "__main__":
    raise SystemExit(main())
