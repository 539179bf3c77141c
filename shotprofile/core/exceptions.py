# shotprofile/core/exceptions.py
from __future__ import annotations


class CoreError(Exception):
    """Base error for all core-domain exceptions."""


# ---- Parsing errors ----
class ProfileSyntaxError(CoreError, ValueError):
    """Raised when profile text does not match the step grammar.

    `offset` is the position where parsing stopped and `remainder` is the
    unconsumed suffix of the input.
    """

    def __init__(self, message: str, *, offset: int = 0, remainder: str = "") -> None:
        super().__init__(message)
        self.offset = offset
        self.remainder = remainder


# ---- Validation / construction errors ----
class InvalidProperty(CoreError):
    """Raised when a Property is constructed with a value of the wrong type."""


class InvalidStep(CoreError):
    """Raised when a Step is constructed with invalid inputs."""


class InvalidProfile(CoreError):
    """Raised when a Profile is constructed with invalid inputs."""


class InvalidSegment(CoreError):
    """Raised when a Segment is constructed with invalid coordinates."""


class InvalidTrace(CoreError):
    """Raised when a Trace is constructed with invalid inputs (type, ordering)."""


class InvalidChannel(CoreError):
    """Raised when a Channel / ChannelMeta is constructed with invalid inputs."""


# ---- Lookup errors (also behave like KeyError for dict-like APIs) ----
class ChannelNotFound(CoreError, KeyError):
    """Raised when a requested channel name is not present."""


class PresetNotFound(CoreError, KeyError):
    """Raised when a requested preset name is not present."""
