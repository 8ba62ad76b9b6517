"""
Shared utility functions for the founding member spots API.

Contains helpers for timestamps, PostgREST header parsing and
the remaining-spots arithmetic.
"""

from datetime import datetime, timezone
from typing import Optional


def get_timestamp() -> str:
    """
    Get current UTC timestamp in ISO format.

    Returns:
        ISO-formatted UTC timestamp string
    """
    return datetime.now(timezone.utc).isoformat()


def parse_content_range_total(header: Optional[str]) -> Optional[int]:
    """
    Extract the total row count from a PostgREST Content-Range header.

    PostgREST answers count requests with headers such as "0-36/37"
    or "*/0". The total is "*" when the count was not computed.

    Args:
        header: Raw Content-Range header value (may be None)

    Returns:
        The total as an int, or None when absent or unknown

    Raises:
        ValueError: If the header is present but malformed
    """
    if not header:
        return None

    _, sep, total = header.strip().rpartition("/")
    if not sep:
        raise ValueError(f"Malformed Content-Range: {header!r}")
    if total == "*":
        return None

    count = int(total)
    if count < 0:
        raise ValueError(f"Negative count in Content-Range: {header!r}")
    return count


def remaining_spots(limit: int, taken: Optional[int]) -> int:
    """
    Number of spots left, never negative.

    A null count means nothing has been taken yet.
    """
    return max(0, limit - (taken or 0))


def truncate_string(s: str, max_length: int = 100) -> str:
    """
    Truncate a string to a maximum length for logging.

    Args:
        s: String to truncate
        max_length: Maximum allowed length

    Returns:
        Original string if short enough, otherwise truncated with ellipsis
    """
    if len(s) <= max_length:
        return s
    return s[:max_length - 3] + "..."
