"""
Observability module: structured logging.

Usage:
    from roomslots.observability import configure_logging

    configure_logging("DEBUG", json_format=False)
"""

from .logging import HumanFormatter, JSONFormatter, configure_logging

__all__ = [
    "HumanFormatter",
    "JSONFormatter",
    "configure_logging",
]
