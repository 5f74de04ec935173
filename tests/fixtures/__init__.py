"""
Test fixtures for deterministic testing.

This module provides:
- SAMPLE_PAGE_HTML: a pinned reservation page
- GOLDEN_* expectations derived from that page
"""

from .sample_page import (
    GOLDEN_RANGES_60,
    GOLDEN_RANGES_60_STRICT,
    GOLDEN_RECORD_COUNT,
    GOLDEN_ROOM_NUMBERS,
    SAMPLE_PAGE_HTML,
    write_sample_page,
)

__all__ = [
    "GOLDEN_RANGES_60",
    "GOLDEN_RANGES_60_STRICT",
    "GOLDEN_RECORD_COUNT",
    "GOLDEN_ROOM_NUMBERS",
    "SAMPLE_PAGE_HTML",
    "write_sample_page",
]
