"""
Datetime utilities
Provides timezone-aware datetime functions to replace deprecated datetime.utcnow()
"""
from datetime import datetime, timezone


def utc_now() -> datetime:
    """
    Get current UTC time

    Returns:
        datetime: Current UTC time with timezone awareness

    Example:
        >>> from portfolio.utils.datetime_utils import utc_now
        >>> now = utc_now()
        >>> print(now.tzinfo)
        UTC
    """
    return datetime.now(timezone.utc)
