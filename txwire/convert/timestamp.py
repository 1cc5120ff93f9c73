"""WireTimestamp <-> timezone-aware datetime (UTC)."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from txwire.core.exceptions import TimestampError
from txwire.wire.models import WireTimestamp

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
NANOS_PER_SECOND = 1_000_000_000


def timestamp_to_datetime(ts: WireTimestamp) -> datetime:
    """
    Convert to an aware UTC datetime. Sub-microsecond nanos are truncated.

    Raises TimestampError when nanos is outside [0, 1e9) or the instant is
    outside datetime's range.
    """
    if not 0 <= ts.nanos < NANOS_PER_SECOND:
        raise TimestampError(f"timestamp nanos out of range: {ts.nanos}")
    try:
        return EPOCH + timedelta(seconds=ts.seconds, microseconds=ts.nanos // 1000)
    except OverflowError as e:
        raise TimestampError(f"timestamp not representable: seconds={ts.seconds}") from e


def datetime_to_timestamp(dt: datetime) -> WireTimestamp:
    """Convert a datetime; naive values are taken as UTC."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    delta = dt - EPOCH
    return WireTimestamp(
        seconds=delta.days * 86_400 + delta.seconds,
        nanos=delta.microseconds * 1000,
    )


def now_timestamp() -> WireTimestamp:
    return datetime_to_timestamp(datetime.now(timezone.utc))


def add_millis(ts: datetime, millis: int) -> datetime:
    """Return ``ts + millis`` ms. Raises TimestampError on overflow."""
    try:
        return ts + timedelta(milliseconds=millis)
    except OverflowError as e:
        raise TimestampError(f"expiry overflows datetime range: {ts} + {millis}ms") from e
