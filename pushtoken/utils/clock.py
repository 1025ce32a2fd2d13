"""Clock capability and issued-at truncation helpers."""

from __future__ import annotations

import math
from collections.abc import Callable
from datetime import UTC, datetime

Clock = Callable[[], datetime]
IssuedAt = datetime | int | float

# 9999-12-31T23:59:59Z, the last second a datetime can represent.
MAX_EPOCH_SECONDS = 253_402_300_799


def system_clock() -> datetime:
    """Return the current wall-clock time in UTC."""
    return datetime.now(UTC)


def epoch_seconds(value: IssuedAt) -> int:
    """Return whole seconds since the epoch, truncated toward zero.

    Naive datetimes are interpreted as UTC. Raises ``TypeError`` for
    non-time values and ``ValueError`` for non-finite numbers or instants
    outside 1970-01-01 .. 9999-12-31 UTC.
    """
    if isinstance(value, bool):
        raise TypeError("issued-at must be a datetime or epoch seconds, not bool")
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        seconds = int(value.timestamp())
    elif isinstance(value, int | float):
        if isinstance(value, float) and not math.isfinite(value):
            raise ValueError(f"issued-at must be finite, got {value!r}")
        seconds = int(value)
    else:
        raise TypeError(f"issued-at must be a datetime or epoch seconds, not {type(value).__name__}")
    if not 0 <= seconds <= MAX_EPOCH_SECONDS:
        raise ValueError(f"issued-at {seconds} is outside 0..{MAX_EPOCH_SECONDS} epoch seconds")
    return seconds
