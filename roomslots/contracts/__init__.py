from .schema import (
    SCHEMA_VERSION,
    AvailabilityReport,
    RangeEntry,
    RangesReport,
    RoomEntry,
    RoomRanges,
    build_availability_report,
    build_ranges_report,
)

__all__ = [
    "SCHEMA_VERSION",
    "AvailabilityReport",
    "RangeEntry",
    "RangesReport",
    "RoomEntry",
    "RoomRanges",
    "build_availability_report",
    "build_ranges_report",
]
