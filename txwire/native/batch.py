"""Native expiring batches: transactions with an absolute expiry instant."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from solders.transaction import VersionedTransaction

from txwire.core.exceptions import TimestampError
from txwire.native.sanitized import SanitizedTransaction


@dataclass(frozen=True)
class _ExpiringBatch:
    ts: datetime
    """Batch creation time (UTC)."""
    expires_at: datetime
    """Absolute expiry; always >= ts."""

    def __post_init__(self) -> None:
        if self.expires_at < self.ts:
            raise TimestampError(f"expires_at {self.expires_at} precedes ts {self.ts}")

    def is_expired(self, now: datetime) -> bool:
        return now >= self.expires_at


@dataclass(frozen=True)
class SanitizedExpiringBatch(_ExpiringBatch):
    transactions: list[SanitizedTransaction] = field(default_factory=list)


@dataclass(frozen=True)
class PacketExpiringBatch(_ExpiringBatch):
    transactions: list[VersionedTransaction] = field(default_factory=list)
