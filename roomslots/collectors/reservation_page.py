"""
Reservation Page Collector - Reads the room-reservation grid.

Page structure:
- one <tr class="slots"> per room
- the room label is the text of <a class="resourceNameSelector"> in that row
- each free slot is an element with class "slot" and a ref="YYYYMMDDHHMM..."
  attribute
"""

from bs4 import BeautifulSoup

from .base import BaseCollector, SlotRecord

ROW_SELECTOR = "tr.slots"
LABEL_SELECTOR = "a.resourceNameSelector"
SLOT_SELECTOR = ".slot"
SLOT_REF_ATTR = "ref"


class ReservationPageCollector(BaseCollector):
    """Collects slot records from a reservation page's HTML."""

    @property
    def source_name(self) -> str:
        return "reservation_page"

    def collect(self, document: str) -> list[SlotRecord]:
        soup = BeautifulSoup(document, "html.parser")
        records = []
        skipped = 0

        for row in soup.select(ROW_SELECTOR):
            link = row.select_one(LABEL_SELECTOR)
            if link is None:
                skipped += 1
                self.logger.warning("Slot row without a room label, skipping")
                continue

            refs = [slot.get(SLOT_REF_ATTR) for slot in row.select(SLOT_SELECTOR)]
            records.append(SlotRecord(room_label=link.get_text(strip=True), slot_refs=refs))

        self.metrics["skipped_rows"] = skipped
        return records
