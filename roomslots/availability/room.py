"""
Room — per-room availability built from booking-page slots.

A Room owns a mapping Date -> list[TimeRange] of free 30-minute slots.
Enforces invariants:
- Each date's slot list is sorted by start time after every insertion
- Slots are only ever added, never removed
- Malformed slot stamps are dropped, never stored
"""

import logging
import re
from bisect import insort
from dataclasses import dataclass, field
from enum import Enum
from functools import lru_cache
from operator import attrgetter

from roomslots.errors import LabelErrorKind, LabelParseError, RangeThresholdError

from .time_range import TimeRange, parse_stamp
from .values import Date, Time

logger = logging.getLogger(__name__)

# Longest reservation the booking system accepts.
MAX_RANGE_MINUTES = 120

DEFAULT_SLOT_MINUTES = 30

ROOM_LABEL_REGEX = r"(?P<kind>[\w ]+?) Room (?P<number>[0-9]+) - (?P<capacity>[0-9]+) Person"
ROOM_LABEL_PATTERN = re.compile(ROOM_LABEL_REGEX)


class TrailingBlockPolicy(Enum):
    """What to do with the block still open when a day's slots run out."""

    AS_OBSERVED = "as_observed"  # emit it whatever its length
    STRICT = "strict"  # emit it only if it meets the minimum


class AvailabilityRating(Enum):
    AVAILABLE = "available"
    UNAVAILABLE = "unavailable"
    NO_INFORMATION = "no_information"


@lru_cache(maxsize=16)
def _compile_label_pattern(regex: str) -> re.Pattern:
    return re.compile(regex)


def _capture(match: re.Match, name: str, index: int) -> str | None:
    if name in match.re.groupindex:
        return match.group(name)
    if match.re.groups >= index:
        return match.group(index)
    return None


def _is_decimal(text: str | None) -> bool:
    return bool(text) and text.isascii() and text.isdecimal()


def parse_room_label(label: str, pattern: re.Pattern | str | None = None) -> tuple[str, int, int]:
    """
    Split a room label into (kind, number, capacity).

    "King Study Room 204 - 4 Person" -> ("King Study", 204, 4)

    Patterns without named groups are read positionally: group 1 is the room
    number, group 2 the capacity.
    Number and capacity must be ASCII decimal digits.

    Raises:
        LabelParseError: NAME_DOES_NOT_MATCH, NO_NUMBER or NO_CAPACITY
    """
    if pattern is None:
        pattern = ROOM_LABEL_PATTERN
    elif isinstance(pattern, str):
        pattern = _compile_label_pattern(pattern)

    match = pattern.search(label)
    if match is None:
        raise LabelParseError(LabelErrorKind.NAME_DOES_NOT_MATCH, label)

    number = _capture(match, "number", 1)
    if not _is_decimal(number):
        raise LabelParseError(LabelErrorKind.NO_NUMBER, label)

    capacity = _capture(match, "capacity", 2)
    if not _is_decimal(capacity):
        raise LabelParseError(LabelErrorKind.NO_CAPACITY, label)

    kind = match.group("kind") if "kind" in pattern.groupindex else None
    return (kind or "").strip(), int(number), int(capacity)


def check_min_minutes(min_minutes: int) -> None:
    """
    Raises:
        RangeThresholdError: If min_minutes is negative or above MAX_RANGE_MINUTES
    """
    if min_minutes < 0:
        raise RangeThresholdError(f"Minimum range length cannot be negative, got {min_minutes}")
    if min_minutes > MAX_RANGE_MINUTES:
        raise RangeThresholdError(
            f"Minimum range length must be at most {MAX_RANGE_MINUTES} minutes, got {min_minutes}"
        )


def merge_contiguous(
    intervals: list[TimeRange],
    min_minutes: int,
    trailing: TrailingBlockPolicy = TrailingBlockPolicy.AS_OBSERVED,
) -> list[TimeRange]:
    """
    Merge back-to-back intervals into maximal blocks.

    Intervals must already be sorted by start. Two intervals join when the
    second starts exactly where the first ends; their lengths need not match.
    A block closed by a gap is kept only if it is at least min_minutes long.
    The block still open at the end is kept unconditionally under AS_OBSERVED
    and held to the same minimum under STRICT.
    """
    merged: list[TimeRange] = []
    block_start = block_end = None
    length = 0
    last: TimeRange | None = None

    for interval in intervals:
        if length == 0:
            block_start, block_end = interval.start, interval.end
            length = interval.length_minutes()
        elif interval.start == last.end:
            block_end = interval.end
            length += interval.length_minutes()
        else:
            if length >= min_minutes:
                merged.append(TimeRange(block_start, block_end))
            block_start, block_end = interval.start, interval.end
            length = interval.length_minutes()
        last = interval

    if length != 0:
        if trailing is TrailingBlockPolicy.AS_OBSERVED or length >= min_minutes:
            merged.append(TimeRange(block_start, block_end))

    return merged


@dataclass(eq=False)
class Room:
    """
    A bookable room and its free slots.

    Build with Room.from_label(), then feed slots through add_slot().
    """

    room_number: int
    person_capacity: int
    room_kind: str = ""
    available: dict[Date, list[TimeRange]] = field(default_factory=dict, repr=False)

    @classmethod
    def from_label(cls, label: str, pattern: re.Pattern | str | None = None) -> "Room":
        """
        Build an empty Room from its booking-page label.

        Raises:
            LabelParseError: If the label does not describe a room
        """
        kind, number, capacity = parse_room_label(label, pattern)
        return cls(room_number=number, person_capacity=capacity, room_kind=kind)

    # -------------------------------------------------------------------------
    # Building
    # -------------------------------------------------------------------------

    def add_slot(self, raw_ref: str | None, slot_minutes: int = DEFAULT_SLOT_MINUTES) -> bool:
        """
        Record one free slot starting at the stamped time.

        Unparseable stamps are dropped without error.

        Returns:
            True if the slot was stored
        """
        parsed = parse_stamp(raw_ref)
        if parsed is None:
            logger.debug("Room %s: dropped slot ref %r", self.room_number, raw_ref)
            return False

        day, start = parsed
        end = start.add(Time(slot_minutes // 60, slot_minutes % 60))
        intervals = self.available.setdefault(day, [])
        insort(intervals, TimeRange(start, end), key=attrgetter("start"))
        return True

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def is_available(self, d: Date, t: Time) -> bool:
        """True if some free slot on d contains t."""
        intervals = self.available.get(d)
        if intervals is None:
            return False
        return any(interval.contains_time(t) for interval in intervals)

    def availability_rating(self, d: Date, t: Time) -> AvailabilityRating:
        """Like is_available(), but tells a booked room from a date with no data."""
        if d not in self.available:
            return AvailabilityRating.NO_INFORMATION
        if self.is_available(d, t):
            return AvailabilityRating.AVAILABLE
        return AvailabilityRating.UNAVAILABLE

    def dates(self) -> list[Date]:
        """Dates with at least one free slot, ascending."""
        return sorted(self.available)

    def slots_on(self, d: Date) -> list[TimeRange]:
        return list(self.available.get(d, ()))

    def find_available_ranges_by_date(
        self,
        min_minutes: int,
        trailing: TrailingBlockPolicy = TrailingBlockPolicy.AS_OBSERVED,
    ) -> dict[Date, list[TimeRange]]:
        """
        Merged free ranges for each date, dates ascending.

        Dates whose merge yields nothing are left out.

        Raises:
            RangeThresholdError: If min_minutes is outside [0, 120]
        """
        check_min_minutes(min_minutes)
        by_date = {}
        for d in self.dates():
            merged = merge_contiguous(self.available[d], min_minutes, trailing)
            if merged:
                by_date[d] = merged
        return by_date

    def find_available_ranges(
        self,
        min_minutes: int,
        trailing: TrailingBlockPolicy = TrailingBlockPolicy.AS_OBSERVED,
    ) -> list[TimeRange]:
        """
        Merged free ranges of at least min_minutes, all dates in one list.

        Ranges appear date by date (ascending), each date's in start order.

        Raises:
            RangeThresholdError: If min_minutes is outside [0, 120]
        """
        ranges: list[TimeRange] = []
        for merged in self.find_available_ranges_by_date(min_minutes, trailing).values():
            ranges.extend(merged)
        return ranges

    def __str__(self) -> str:
        kind = f"{self.room_kind} " if self.room_kind else ""
        return f"{kind}Room {self.room_number} ({self.person_capacity} person)"
