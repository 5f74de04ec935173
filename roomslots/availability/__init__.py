"""
Availability Module

The core of roomslots: turns booking-page slot stamps into free time ranges.

Objects:
- Time, Date (validated value types)
- TimeRange (half-open [start, end) interval)
- Room (per-date sorted free slots + contiguous-range merge)
- Schedule (all rooms from one page)

Invariants:
- Each date's slot list stays sorted by start time
- Containment is half-open: start inclusive, end exclusive
- Malformed slot stamps are dropped, never stored
- A built Schedule is never mutated
"""

from .room import (
    MAX_RANGE_MINUTES,
    AvailabilityRating,
    Room,
    TrailingBlockPolicy,
    merge_contiguous,
    parse_room_label,
)
from .schedule import Schedule
from .time_range import TimeRange, parse_stamp
from .values import Date, Time

__all__ = [
    "MAX_RANGE_MINUTES",
    "AvailabilityRating",
    "Date",
    "Room",
    "Schedule",
    "Time",
    "TimeRange",
    "TrailingBlockPolicy",
    "merge_contiguous",
    "parse_room_label",
    "parse_stamp",
]
