"""
TimeRange — half-open interval [start, end) of Time.

Also home of parse_stamp(), the single boundary between raw slot references
from the booking page and the typed model.
"""

import logging
from dataclasses import dataclass

from roomslots.errors import InvalidDateError, InvalidTimeError

from .values import Date, Time

logger = logging.getLogger(__name__)

# YYYY MM DD HH MM
_STAMP_FIELDS = (4, 2, 2, 2, 2)
STAMP_WIDTH = sum(_STAMP_FIELDS)


@dataclass(frozen=True)
class TimeRange:
    """
    Half-open interval of clock time.

    start <= end is expected but not enforced; callers supply ranges in order.
    Ranges sort by start only.
    """

    start: Time
    end: Time

    def __lt__(self, other: "TimeRange") -> bool:
        return self.start < other.start

    def contains_time(self, t: Time) -> bool:
        """Start inclusive, end exclusive."""
        minutes = t.as_minutes()
        return self.start.as_minutes() <= minutes < self.end.as_minutes()

    def length_minutes(self) -> int:
        return self.end.as_minutes() - self.start.as_minutes()

    def as_tuple(self) -> tuple[int, int, int, int]:
        """(start_hour, start_minute, end_hour, end_minute)"""
        return (self.start.hour, self.start.minute, self.end.hour, self.end.minute)

    def __str__(self) -> str:
        return f"{self.start}-{self.end}"


def parse_stamp(stamp: str | None) -> tuple[Date, Time] | None:
    """
    Decode a slot stamp of the form YYYYMMDDHHMM...

    Anything after the first 12 characters is ignored.

    Returns:
        (Date, Time), or None if the stamp is short, has a non-numeric field,
        or names an out-of-range date or time.
    """
    if stamp is None or len(stamp) < STAMP_WIDTH:
        return None

    values = []
    pos = 0
    for width in _STAMP_FIELDS:
        field = stamp[pos : pos + width]
        pos += width
        if not (field.isascii() and field.isdigit()):
            return None
        values.append(int(field))

    year, month, day, hour, minute = values
    try:
        return Date(year, month, day), Time(hour, minute)
    except (InvalidDateError, InvalidTimeError) as exc:
        logger.debug("Rejected slot stamp %r: %s", stamp, exc)
        return None
