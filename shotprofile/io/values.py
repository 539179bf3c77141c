# shotprofile/io/values.py
"""
Primitive value readers for the shot profile grammar.

Every reader has the shape ``reader(text, pos) -> (value, new_pos)``: it either
consumes a prefix of ``text[pos:]`` or raises NoMatch without consuming
anything. Readers never skip leading whitespace.
"""
from __future__ import annotations

import re
from enum import Enum
from typing import Callable, TypeVar

from shotprofile.core.properties import ExitKind, PumpKind, SensorKind, TransitionKind


T = TypeVar("T")
E = TypeVar("E", bound=Enum)

Reader = Callable[[str, int], tuple[T, int]]


class NoMatch(Exception):
    """Internal failure of one grammar alternative at `pos`."""

    def __init__(self, pos: int, expected: str) -> None:
        super().__init__(f"expected {expected} at offset {pos}")
        self.pos = pos
        self.expected = expected


_UINT_RE = re.compile(r"[0-9]+")
# decimal point mandatory: "8.", "8.0", ".8"
_UFLOAT_RE = re.compile(r"[0-9]+\.[0-9]*|\.[0-9]+")
_SFLOAT_RE = re.compile(r"([+-]?)([0-9]+\.[0-9]*|\.[0-9]+)")
_BRACED_RE = re.compile(r"\{((?:\\.|[^\\}])*)\}", re.DOTALL)
_BARE_RE = re.compile(r"[^\s{}]+")
_UNESCAPE_RE = re.compile(r"\\([\\}])")
_WS_RE = re.compile(r"[ \t\r\n]+")


def whitespace(text: str, pos: int) -> tuple[str, int]:
    """One or more spaces, tabs or newlines."""
    m = _WS_RE.match(text, pos)
    if not m:
        raise NoMatch(pos, "whitespace")
    return m.group(), m.end()


def skip_whitespace(text: str, pos: int) -> int:
    m = _WS_RE.match(text, pos)
    return m.end() if m else pos


def literal(token: str) -> Reader[str]:
    def read(text: str, pos: int) -> tuple[str, int]:
        if text.startswith(token, pos):
            return token, pos + len(token)
        raise NoMatch(pos, repr(token))

    return read


def boolean(text: str, pos: int) -> tuple[bool, int]:
    ch = text[pos:pos + 1]
    if ch == "0":
        return False, pos + 1
    if ch == "1":
        return True, pos + 1
    raise NoMatch(pos, "0 or 1")


def unsigned_int(text: str, pos: int) -> tuple[int, int]:
    m = _UINT_RE.match(text, pos)
    if not m:
        raise NoMatch(pos, "unsigned integer")
    try:
        return int(m.group()), m.end()
    except ValueError as e:
        # past the interpreter's int digit limit
        raise NoMatch(pos, "unsigned integer") from e


def unsigned_float(text: str, pos: int) -> tuple[float, int]:
    m = _UFLOAT_RE.match(text, pos)
    if not m:
        raise NoMatch(pos, "decimal number")
    return float(m.group()), m.end()


def signed_float(text: str, pos: int) -> tuple[float, int]:
    m = _SFLOAT_RE.match(text, pos)
    if not m:
        raise NoMatch(pos, "signed decimal number")
    magnitude = float(m.group(2))
    return (-magnitude if m.group(1) == "-" else magnitude), m.end()


def number(text: str, pos: int) -> tuple[float, int]:
    """Decimal with a point first, plain integer widened to float second."""
    try:
        return unsigned_float(text, pos)
    except NoMatch:
        m = _UINT_RE.match(text, pos)
        if not m:
            raise NoMatch(pos, "number") from None
        # huge literals read as inf
        return float(m.group()), m.end()


def braced_string(text: str, pos: int) -> tuple[str, int]:
    m = _BRACED_RE.match(text, pos)
    if not m:
        raise NoMatch(pos, "{...}")
    return _UNESCAPE_RE.sub(r"\1", m.group(1)), m.end()


def bare_string(text: str, pos: int) -> tuple[str, int]:
    m = _BARE_RE.match(text, pos)
    if not m:
        raise NoMatch(pos, "word")
    return m.group(), m.end()


def string(text: str, pos: int) -> tuple[str, int]:
    # braces first, so "{Pressure Up}" is one value and not the word "{Pressure"
    if text.startswith("{", pos):
        return braced_string(text, pos)
    return bare_string(text, pos)


def enum_reader(enum_cls: type[E]) -> Reader[E]:
    """Reader matching the exact value spellings of `enum_cls`."""
    # longest spelling first so no literal shadows a longer one
    choices = sorted(enum_cls, key=lambda member: len(member.value), reverse=True)
    expected = " | ".join(member.value for member in enum_cls)

    def read(text: str, pos: int) -> tuple[E, int]:
        for member in choices:
            if text.startswith(member.value, pos):
                return member, pos + len(member.value)
        raise NoMatch(pos, expected)

    read.__name__ = f"read_{enum_cls.__name__}"
    return read


transition_kind = enum_reader(TransitionKind)
sensor_kind = enum_reader(SensorKind)
pump_kind = enum_reader(PumpKind)
exit_kind = enum_reader(ExitKind)
