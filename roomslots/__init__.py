# roomslots - Room reservation availability
"""
Exports for cli.py and library consumers.
"""

from .availability import (
    AvailabilityRating,
    Date,
    Room,
    Schedule,
    Time,
    TimeRange,
    TrailingBlockPolicy,
    parse_stamp,
)
from .errors import (
    ConfigError,
    InvalidDateError,
    InvalidTimeError,
    LabelErrorKind,
    LabelParseError,
    RangeThresholdError,
    RoomSlotsError,
)

__all__ = [
    "AvailabilityRating",
    "ConfigError",
    "Date",
    "InvalidDateError",
    "InvalidTimeError",
    "LabelErrorKind",
    "LabelParseError",
    "RangeThresholdError",
    "Room",
    "RoomSlotsError",
    "Schedule",
    "Time",
    "TimeRange",
    "TrailingBlockPolicy",
    "parse_stamp",
]
