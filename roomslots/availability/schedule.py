"""
Schedule — every room from one booking page.

Built once from a full set of rooms and read-only afterwards: all queries
are non-mutating scans, so a finished Schedule can be shared between
threads without locking.
"""

import logging
import re
from collections.abc import Iterable, Iterator, Sequence

from roomslots.errors import LabelParseError

from .room import DEFAULT_SLOT_MINUTES, Room, TrailingBlockPolicy, check_min_minutes
from .time_range import TimeRange
from .values import Date, Time

logger = logging.getLogger(__name__)


class Schedule:
    """Ordered collection of rooms, in the order the page lists them."""

    def __init__(self, rooms: Iterable[Room]):
        self._rooms: tuple[Room, ...] = tuple(rooms)

    @classmethod
    def from_records(
        cls,
        records: Iterable[tuple[str, Sequence[str | None]]],
        slot_minutes: int = DEFAULT_SLOT_MINUTES,
        label_pattern: re.Pattern | str | None = None,
        skip_invalid_labels: bool = True,
    ) -> "Schedule":
        """
        Build a Schedule from (room_label, raw_slot_refs) records.

        Args:
            records: One entry per room row on the page
            slot_minutes: Length of each slot
            label_pattern: Override for the room-label pattern
            skip_invalid_labels: Log and skip rooms whose label does not parse;
                if False the LabelParseError propagates

        Raises:
            LabelParseError: Only when skip_invalid_labels is False
        """
        rooms = []
        for label, refs in records:
            try:
                room = Room.from_label(label, label_pattern)
            except LabelParseError as exc:
                if not skip_invalid_labels:
                    raise
                logger.warning("Skipping room with unparseable label (%s)", exc)
                continue

            stored = sum(1 for ref in refs if room.add_slot(ref, slot_minutes))
            dropped = len(refs) - stored
            if dropped:
                logger.debug("Room %s: %d of %d slot refs dropped", room.room_number, dropped, len(refs))
            rooms.append(room)

        logger.info("Built schedule with %d rooms", len(rooms))
        return cls(rooms)

    @property
    def rooms(self) -> tuple[Room, ...]:
        return self._rooms

    def room(self, room_number: int) -> Room | None:
        """First room with the given number, or None."""
        for r in self._rooms:
            if r.room_number == room_number:
                return r
        return None

    def all_available_at_datetime(self, d: Date, t: Time) -> list[Room]:
        """Rooms free at date d, time t, in page order."""
        return [room for room in self._rooms if room.is_available(d, t)]

    def find_available_ranges(
        self,
        min_minutes: int,
        trailing: TrailingBlockPolicy = TrailingBlockPolicy.AS_OBSERVED,
    ) -> dict[int, list[TimeRange]]:
        """
        Merged free ranges per room number.

        Every room gets an entry, possibly empty. If two rooms share a number
        their ranges are concatenated in page order.

        Raises:
            RangeThresholdError: If min_minutes is outside [0, 120]
        """
        check_min_minutes(min_minutes)
        result: dict[int, list[TimeRange]] = {}
        for room in self._rooms:
            result.setdefault(room.room_number, []).extend(room.find_available_ranges(min_minutes, trailing))
        return result

    def __iter__(self) -> Iterator[Room]:
        return iter(self._rooms)

    def __len__(self) -> int:
        return len(self._rooms)
