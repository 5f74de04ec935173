"""
Base Collector - Template for booking-page collectors.
Every collector MUST:
1. Collect raw slot records from its source document
2. Transform records into a Schedule
"""

import logging
from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import NamedTuple

from ..availability import Schedule
from ..config import Settings


class SlotRecord(NamedTuple):
    """One room row: its label and the raw stamps of its free slots."""

    room_label: str
    slot_refs: list[str | None]


class BaseCollector(ABC):
    """Base class for all booking-page collectors."""

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or Settings()
        self.logger = logging.getLogger(self.__class__.__name__)
        self.last_sync: datetime | None = None

        self.metrics = {
            "rows": 0,
            "rooms": 0,
            "skipped_rows": 0,
        }

    @property
    @abstractmethod
    def source_name(self) -> str:
        """Unique identifier for this source."""
        pass

    @abstractmethod
    def collect(self, document: str) -> list[SlotRecord]:
        """
        Extract slot records from a source document.
        Returns one record per room row.
        """
        pass

    def transform(self, records: list[SlotRecord]) -> Schedule:
        """Build a Schedule from collected records."""
        return Schedule.from_records(
            records,
            slot_minutes=self.settings.slot_minutes,
            label_pattern=self.settings.room_label_pattern,
        )

    def sync(self, document: str) -> Schedule:
        """
        Full cycle: collect → transform.
        """
        self.logger.info(f"Collecting from {self.source_name}")
        records = self.collect(document)
        self.metrics["rows"] = len(records)

        schedule = self.transform(records)
        self.metrics["rooms"] = len(schedule)
        self.last_sync = datetime.now()

        self.logger.info(f"Transformed {len(records)} rows into {len(schedule)} rooms")
        return schedule

    def sync_file(self, path: str | Path) -> Schedule:
        """
        Read a saved page from disk and sync it.

        Raises:
            OSError: If the file cannot be read
        """
        text = Path(path).read_text(encoding="utf-8")
        return self.sync(text)
