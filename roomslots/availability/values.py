"""
Time and Date value types.

Both are immutable and validated on construction:
- Time: hour in [0, 23], minute in [0, 59]
- Date: month in [1, 12], day in [1, 31]

Date is deliberately not calendar-aware (every month allows day 31). Use
is_calendar_valid() / to_calendar_date() when real calendar validity matters.
"""

import datetime as dt
from dataclasses import dataclass

from roomslots.errors import InvalidDateError, InvalidTimeError

MINUTES_PER_HOUR = 60
HOURS_PER_DAY = 24


@dataclass(frozen=True, order=True)
class Time:
    """Clock time. Ordered by minutes since midnight."""

    hour: int
    minute: int

    def __post_init__(self):
        if not 0 <= self.hour <= 23:
            raise InvalidTimeError(f"Hour must be in range [0, 24), got {self.hour}")
        if not 0 <= self.minute <= 59:
            raise InvalidTimeError(f"Minute must be in range [0, 60), got {self.minute}")

    @classmethod
    def _unchecked(cls, hour: int, minute: int) -> "Time":
        # Skips __post_init__; only add() calls this.
        t = object.__new__(cls)
        object.__setattr__(t, "hour", hour)
        object.__setattr__(t, "minute", minute)
        return t

    @classmethod
    def parse(cls, value: str) -> "Time":
        """Parse 'HH:MM'."""
        hour_s, sep, minute_s = value.strip().partition(":")
        if not sep or not (hour_s + minute_s).isascii() or not hour_s.isdigit() or not minute_s.isdigit():
            raise InvalidTimeError(f"Time must look like HH:MM, got {value!r}")
        return cls(int(hour_s), int(minute_s))

    def add(self, other: "Time") -> "Time":
        """
        Add two times with minute carry.

        The hour is not wrapped: 23:30 + 01:00 is 24:30, read as "next day".
        This is the only way to get a Time with hour >= 24. A 30-minute slot
        starting at 23:30 must end at 24:00 so that half-open containment
        still covers 23:59. Use add_with_carry() for a wrapped time plus a
        day offset.
        """
        total_minutes = self.minute + other.minute
        hour = self.hour + total_minutes // MINUTES_PER_HOUR + other.hour
        return Time._unchecked(hour, total_minutes % MINUTES_PER_HOUR)

    def add_with_carry(self, other: "Time") -> tuple["Time", int]:
        """Add two times and return (time within the day, days carried)."""
        raw = self.add(other)
        return Time(raw.hour % HOURS_PER_DAY, raw.minute), raw.hour // HOURS_PER_DAY

    def as_minutes(self) -> int:
        return self.hour * MINUTES_PER_HOUR + self.minute

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"


@dataclass(frozen=True, order=True)
class Date:
    """Calendar-day key. Hashable, ordered by (year, month, day)."""

    year: int
    month: int
    day: int

    def __post_init__(self):
        if not 1 <= self.month <= 12:
            raise InvalidDateError(f"Month must be in range [1, 12], got {self.month}")
        if not 1 <= self.day <= 31:
            raise InvalidDateError(f"Day must be in range [1, 31], got {self.day}")

    @classmethod
    def parse(cls, value: str) -> "Date":
        """Parse 'YYYY-MM-DD'. Uses the same flat bounds as the constructor."""
        parts = value.strip().split("-")
        if len(parts) != 3 or not all(p.isascii() and p.isdigit() for p in parts):
            raise InvalidDateError(f"Date must look like YYYY-MM-DD, got {value!r}")
        return cls(int(parts[0]), int(parts[1]), int(parts[2]))

    @classmethod
    def from_calendar_date(cls, d: dt.date) -> "Date":
        return cls(d.year, d.month, d.day)

    def is_calendar_valid(self) -> bool:
        """True if this day exists in the proleptic Gregorian calendar."""
        try:
            self.to_calendar_date()
        except InvalidDateError:
            return False
        return True

    def to_calendar_date(self) -> dt.date:
        """
        Convert to datetime.date.

        Raises:
            InvalidDateError: If the day does not exist (e.g. 2016-02-30)
        """
        try:
            return dt.date(self.year, self.month, self.day)
        except ValueError as exc:
            raise InvalidDateError(f"{self} is not a calendar date: {exc}") from exc

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"
