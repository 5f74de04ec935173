"""
Errors Module — Typed failures for the availability model.

Every failure the core can surface to a caller is one of these.
Malformed slot stamps are NOT here: they are dropped at the slot level.

Taxonomy:
- InvalidTimeError / InvalidDateError: value out of declared range
- LabelParseError: room label does not match the expected pattern
- RangeThresholdError: merged-range threshold outside [0, 120] minutes
- ConfigError: configuration value that cannot be used
"""

from enum import Enum


class RoomSlotsError(Exception):
    """Base class for all roomslots errors."""

    pass


class InvalidTimeError(RoomSlotsError, ValueError):
    """Raised when an hour or minute is out of range."""

    pass


class InvalidDateError(RoomSlotsError, ValueError):
    """Raised when a month or day is out of range."""

    pass


class LabelErrorKind(Enum):
    """Why a room label could not be parsed."""

    NAME_DOES_NOT_MATCH = "name_does_not_match"
    NO_NUMBER = "no_number"
    NO_CAPACITY = "no_capacity"


class LabelParseError(RoomSlotsError):
    """Raised when a room label cannot be turned into a Room."""

    def __init__(self, kind: LabelErrorKind, label: str):
        self.kind = kind
        self.label = label
        super().__init__(f"{kind.value}: {label!r}")


class RangeThresholdError(RoomSlotsError, ValueError):
    """Raised when a minimum range length exceeds the reservation limit."""

    pass


class ConfigError(RoomSlotsError):
    """Raised when a configuration value is unusable."""

    pass
