"""
Schema Module — Pydantic models for serialized availability results.

These models define the shape of what the CLI emits with --json and what
library callers can hand to other systems. Ranges are expressed as
(start_hour, start_minute, end_hour, end_minute); end_hour may be 24 for a
range that runs to midnight.
"""

from typing import Literal

from pydantic import BaseModel, Field, computed_field, model_validator

from roomslots.availability import MAX_RANGE_MINUTES, Date, Room, Schedule, Time, TimeRange, TrailingBlockPolicy
from roomslots.availability.room import check_min_minutes

SCHEMA_VERSION = "1.0.0"


class RangeEntry(BaseModel):
    """One merged free range."""

    start_hour: int = Field(ge=0, le=23)
    start_minute: int = Field(ge=0, le=59)
    end_hour: int = Field(ge=0)
    end_minute: int = Field(ge=0, le=59)

    @model_validator(mode="after")
    def _end_not_before_start(self):
        if (self.end_hour, self.end_minute) < (self.start_hour, self.start_minute):
            raise ValueError("range ends before it starts")
        return self

    @computed_field
    @property
    def length_minutes(self) -> int:
        return (self.end_hour * 60 + self.end_minute) - (self.start_hour * 60 + self.start_minute)

    @classmethod
    def from_range(cls, r: TimeRange) -> "RangeEntry":
        sh, sm, eh, em = r.as_tuple()
        return cls(start_hour=sh, start_minute=sm, end_hour=eh, end_minute=em)


class RoomEntry(BaseModel):
    """Room handle: identity only, no availability detail."""

    room_number: int = Field(ge=0)
    person_capacity: int = Field(ge=0)
    room_kind: str = ""

    @classmethod
    def from_room(cls, room: Room) -> "RoomEntry":
        return cls(room_number=room.room_number, person_capacity=room.person_capacity, room_kind=room.room_kind)


class RoomRanges(BaseModel):
    room: RoomEntry
    ranges: list[RangeEntry] = Field(default_factory=list)


class RangesReport(BaseModel):
    """Answer to 'which blocks of at least N minutes are free, per room'."""

    schema_version: str = SCHEMA_VERSION
    min_minutes: int = Field(ge=0, le=MAX_RANGE_MINUTES)
    trailing_policy: Literal["as_observed", "strict"] = "as_observed"
    rooms: list[RoomRanges] = Field(default_factory=list)


class AvailabilityReport(BaseModel):
    """Answer to 'which rooms are free at this date and time'."""

    schema_version: str = SCHEMA_VERSION
    date: str
    time: str
    rooms: list[RoomEntry] = Field(default_factory=list)


def build_ranges_report(
    schedule: Schedule,
    min_minutes: int,
    trailing: TrailingBlockPolicy = TrailingBlockPolicy.AS_OBSERVED,
) -> RangesReport:
    """
    Raises:
        RangeThresholdError: If min_minutes is outside [0, 120]
    """
    check_min_minutes(min_minutes)
    rooms = [
        RoomRanges(
            room=RoomEntry.from_room(room),
            ranges=[RangeEntry.from_range(r) for r in room.find_available_ranges(min_minutes, trailing)],
        )
        for room in schedule
    ]
    return RangesReport(min_minutes=min_minutes, trailing_policy=trailing.value, rooms=rooms)


def build_availability_report(schedule: Schedule, d: Date, t: Time) -> AvailabilityReport:
    rooms = [RoomEntry.from_room(room) for room in schedule.all_available_at_datetime(d, t)]
    return AvailabilityReport(date=str(d), time=str(t), rooms=rooms)
