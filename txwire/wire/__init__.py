"""
Wire schema: one pydantic model per transport message, plus transport helpers.
"""

from txwire.wire.models import (
    WireBundle,
    WireBundleUuid,
    WireExpiringBatch,
    WireExpiringPacketBatch,
    WireExpiringSanitizedBatch,
    WireHeader,
    WireMeta,
    WirePacket,
    WirePacketBatch,
    WirePacketFlags,
    WireSanitizedTransaction,
    WireSanitizedTransactionBatch,
    WireTimestamp,
)
from txwire.wire.transport import decode_wire, encode_wire

__all__ = [
    "WireBundle",
    "WireBundleUuid",
    "WireExpiringBatch",
    "WireExpiringPacketBatch",
    "WireExpiringSanitizedBatch",
    "WireHeader",
    "WireMeta",
    "WirePacket",
    "WirePacketBatch",
    "WirePacketFlags",
    "WireSanitizedTransaction",
    "WireSanitizedTransactionBatch",
    "WireTimestamp",
    "decode_wire",
    "encode_wire",
]
