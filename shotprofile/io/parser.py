# shotprofile/io/parser.py
"""
Shot profile text -> Profile.

Grammar (whitespace = spaces, tabs, newlines):

    profile  := ws? (step ws?)* ws?
    step     := "{" ws? (property (ws property)*)? ws? "}"
    property := keyword ws value

A keyword only matches when it is followed by whitespace, so
``max_flow_or_pressure`` never eats the start of ``max_flow_or_pressure_range``.
"""
from __future__ import annotations

import logging
import re
from typing import Any, Callable

from shotprofile.core.exceptions import InvalidProperty, ProfileSyntaxError
from shotprofile.core.properties import Property, PropertyKind
from shotprofile.core.step import Profile, Step

from . import values
from .values import NoMatch

logger = logging.getLogger(__name__)


# Priority order of keyword recognizers. Order is not load-bearing for
# correctness (see the mandatory separator), but longer keywords come before
# the keywords they extend.
PROPERTY_TABLE: tuple[tuple[PropertyKind, Callable[[str, int], tuple[Any, int]]], ...] = (
    (PropertyKind.EXIT_IF, values.boolean),
    (PropertyKind.FLOW, values.number),
    (PropertyKind.VOLUME, values.unsigned_int),
    (PropertyKind.MAX_FLOW_OR_PRESSURE_RANGE, values.number),
    (PropertyKind.TRANSITION, values.transition_kind),
    (PropertyKind.EXIT_FLOW_UNDER, values.number),
    (PropertyKind.TEMPERATURE, values.number),
    (PropertyKind.NAME, values.string),
    (PropertyKind.PRESSURE, values.number),
    (PropertyKind.SENSOR, values.sensor_kind),
    (PropertyKind.PUMP, values.pump_kind),
    (PropertyKind.EXIT_TYPE, values.exit_kind),
    (PropertyKind.EXIT_FLOW_OVER, values.number),
    (PropertyKind.EXIT_PRESSURE_OVER, values.number),
    (PropertyKind.MAX_FLOW_OR_PRESSURE, values.number),
    (PropertyKind.EXIT_PRESSURE_UNDER, values.number),
    (PropertyKind.SECONDS, values.number),
)

KNOWN_KEYWORDS = frozenset(kind.keyword for kind, _ in PROPERTY_TABLE)

_IDENT_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


def keyword_property(kind: PropertyKind, reader, text: str, pos: int) -> tuple[Property, int]:
    """`keyword ws value` for one known kind."""
    _, end = values.literal(kind.keyword)(text, pos)
    _, end = values.whitespace(text, end)
    value, end = reader(text, end)
    try:
        return Property(kind, value), end
    except InvalidProperty as e:
        # keyword matched but the value does not decode (e.g. volume > 65535)
        raise NoMatch(pos, str(e)) from e


def unknown_property(text: str, pos: int) -> tuple[Property, int]:
    """`identifier ws string` for identifiers outside the known vocabulary."""
    m = _IDENT_RE.match(text, pos)
    if not m or m.group() in KNOWN_KEYWORDS:
        raise NoMatch(pos, "property keyword")
    _, end = values.whitespace(text, m.end())
    raw, end = values.string(text, end)
    return Property(PropertyKind.UNKNOWN, (m.group(), raw)), end


def property_(text: str, pos: int, *, lenient: bool = False) -> tuple[Property, int]:
    """First keyword recognizer of PROPERTY_TABLE that matches at `pos`."""
    for kind, reader in PROPERTY_TABLE:
        try:
            return keyword_property(kind, reader, text, pos)
        except NoMatch:
            continue
    if lenient:
        return unknown_property(text, pos)
    raise NoMatch(pos, "property keyword")


def step(text: str, pos: int, *, lenient: bool = False) -> tuple[Step, int]:
    _, end = values.literal("{")(text, pos)
    end = values.skip_whitespace(text, end)

    props: list[Property] = []
    try:
        prop, end = property_(text, end, lenient=lenient)
        props.append(prop)
        while True:
            try:
                _, after_ws = values.whitespace(text, end)
                prop, after_prop = property_(text, after_ws, lenient=lenient)
            except NoMatch:
                break
            props.append(prop)
            end = after_prop
    except NoMatch:
        pass

    end = values.skip_whitespace(text, end)
    _, end = values.literal("}")(text, end)
    return Step(tuple(props)), end


def steps(text: str, pos: int = 0, *, lenient: bool = False) -> tuple[list[Step], int]:
    """Greedy run of steps separated by optional whitespace.

    Never fails: returns the steps found and the position after the last one.
    Trailing whitespace is left unconsumed.
    """
    found: list[Step] = []
    end = pos
    while True:
        try:
            parsed, after = step(text, values.skip_whitespace(text, end), lenient=lenient)
        except NoMatch:
            return found, end
        found.append(parsed)
        end = after


def _line_col(text: str, offset: int) -> tuple[int, int]:
    line = text.count("\n", 0, offset) + 1
    col = offset - (text.rfind("\n", 0, offset) + 1) + 1
    return line, col


def parse(data: str | bytes, *, lenient: bool = False) -> Profile:
    """Parse a whole profile text.

    Leading and trailing whitespace is ignored; anything else left over is a
    ProfileSyntaxError carrying the offset and the unconsumed remainder.

    lenient:
        Keep unrecognized `keyword value` pairs as UNKNOWN properties
        instead of failing.
    """
    if isinstance(data, (bytes, bytearray)):
        try:
            text = bytes(data).decode("utf-8")
        except UnicodeDecodeError as e:
            raise ProfileSyntaxError(
                f"Profile is not valid UTF-8: {e}", offset=e.start, remainder=""
            ) from e
    elif isinstance(data, str):
        text = data
    else:
        raise TypeError(f"parse() expects str or bytes, got {type(data).__name__}")

    parsed, end = steps(text, 0, lenient=lenient)
    end = values.skip_whitespace(text, end)
    if end != len(text):
        line, col = _line_col(text, end)
        remainder = text[end:]
        snippet = remainder[:40].replace("\n", "\\n")
        raise ProfileSyntaxError(
            f"Syntax error at line {line}, column {col}: {snippet!r}",
            offset=end,
            remainder=remainder,
        )

    logger.debug("Parsed %d steps (%d chars)", len(parsed), len(text))
    return Profile(tuple(parsed))
