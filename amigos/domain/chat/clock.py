"""
Service-side time source.

All timestamps the service assigns (registration, joins, message
persistence) come from a Clock so tests can substitute a fixed one.
Values are naive datetimes in UTC, matching the ``timestamp``
(without time zone) columns of the store.
"""

from datetime import datetime, timezone
from typing import Callable

Clock = Callable[[], datetime]


def utcnow() -> datetime:
    """Return the current UTC time as a naive datetime."""
    return datetime.now(timezone.utc).replace(tzinfo=None)
