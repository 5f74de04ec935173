"""
Collectors - Ingestion layer.
Turns booking-page documents into slot records and Schedules.
"""

from .base import BaseCollector, SlotRecord
from .reservation_page import ReservationPageCollector

__all__ = [
    "BaseCollector",
    "SlotRecord",
    "ReservationPageCollector",
]
