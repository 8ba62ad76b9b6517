"""
Core module containing configuration, errors and utilities.
"""

from .config import settings, Settings
from .utils import get_timestamp, parse_content_range_total, remaining_spots

__all__ = [
    "settings",
    "Settings",
    "get_timestamp",
    "parse_content_range_total",
    "remaining_spots",
]
