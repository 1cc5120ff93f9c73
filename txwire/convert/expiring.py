"""
Expiring batch mapper: wire batch (header + transactions + expiry_ms) to a
native batch with an absolute expiry.

Two inbound shapes are accepted: already-sanitized transactions and raw
packets. Conversion is all-or-nothing; the first failing element aborts the
batch and its error propagates unchanged.
"""

from __future__ import annotations

from datetime import datetime
from typing import Callable, Sequence, TypeVar

from txwire.convert.packet import wire_to_transaction
from txwire.convert.sanitized import sanitized_from_wire
from txwire.convert.timestamp import add_millis, timestamp_to_datetime
from txwire.core.exceptions import MissingBatchError, MissingHeaderError, TxWireError
from txwire.native.batch import PacketExpiringBatch, SanitizedExpiringBatch
from txwire.native.sanitized import (
    SanitizedTransactionConstructor,
    try_create_sanitized,
)
from txwire.txwire_logging import get_logger
from txwire.wire.models import (
    WireExpiringBatch,
    WireExpiringPacketBatch,
    WireExpiringSanitizedBatch,
    WireHeader,
    WireTimestamp,
)

logger = get_logger(__name__)

T = TypeVar("T")
U = TypeVar("U")


def _require_header_ts(header: WireHeader | None) -> WireTimestamp:
    if header is None or header.ts is None:
        raise MissingHeaderError("expiring batch has no header timestamp")
    return header.ts


def _instants(ts: WireTimestamp, expiry_ms: int) -> tuple[datetime, datetime]:
    start = timestamp_to_datetime(ts)
    return start, add_millis(start, expiry_ms)


def _convert_all(items: Sequence[T], convert: Callable[[T], U]) -> list[U]:
    out: list[U] = []
    for index, item in enumerate(items):
        try:
            out.append(convert(item))
        except TxWireError as e:
            logger.warning(
                "batch_element_failed",
                index=index,
                batch_size=len(items),
                error_code=e.code,
            )
            raise
    return out


def sanitized_batch_from_wire(
    wire: WireExpiringSanitizedBatch,
    constructor: SanitizedTransactionConstructor = try_create_sanitized,
) -> SanitizedExpiringBatch:
    header_ts = _require_header_ts(wire.header)
    if wire.batch is None:
        raise MissingBatchError("expiring batch has no transactions payload")
    ts, expires_at = _instants(header_ts, wire.expiry_ms)
    transactions = _convert_all(
        wire.batch.transactions,
        lambda item: sanitized_from_wire(item, constructor),
    )
    return SanitizedExpiringBatch(ts=ts, expires_at=expires_at, transactions=transactions)


def packet_batch_expiring_from_wire(wire: WireExpiringPacketBatch) -> PacketExpiringBatch:
    header_ts = _require_header_ts(wire.header)
    if wire.batch is None:
        raise MissingBatchError("expiring batch has no packets payload")
    ts, expires_at = _instants(header_ts, wire.expiry_ms)
    transactions = _convert_all(wire.batch.packets, wire_to_transaction)
    return PacketExpiringBatch(ts=ts, expires_at=expires_at, transactions=transactions)


def expiring_batch_from_wire(
    wire: WireExpiringBatch,
    constructor: SanitizedTransactionConstructor = try_create_sanitized,
) -> SanitizedExpiringBatch | PacketExpiringBatch:
    """
    Convert either wire variant. ``constructor`` applies to the sanitized
    variant only.

    Raises MissingHeaderError, MissingBatchError, TimestampError, or the
    first element's conversion error.
    """
    if isinstance(wire, WireExpiringSanitizedBatch):
        batch = sanitized_batch_from_wire(wire, constructor)
    elif isinstance(wire, WireExpiringPacketBatch):
        batch = packet_batch_expiring_from_wire(wire)
    else:
        raise TypeError(f"unsupported expiring batch type: {type(wire).__name__}")
    logger.debug(
        "expiring_batch_converted",
        variant=type(batch).__name__,
        num_transactions=len(batch.transactions),
        expires_at=batch.expires_at.isoformat(),
    )
    return batch
