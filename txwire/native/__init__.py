"""
Native in-memory types consumed by transaction-processing code.

Versioned transactions, hashes and pubkeys come from solders; packets,
resolved address tables, sanitized transactions and expiring batches are
defined here.
"""

from txwire.native.batch import PacketExpiringBatch, SanitizedExpiringBatch
from txwire.native.packet import (
    PACKET_DATA_SIZE,
    UNSPECIFIED_ADDR,
    Meta,
    Packet,
    PacketFlags,
    bounded_copy,
)
from txwire.native.sanitized import (
    HASH_BYTES,
    LoadedAddresses,
    SanitizedTransaction,
    SanitizedTransactionConstructor,
    VOTE_PROGRAM_ID,
    is_simple_vote_transaction,
    try_create_sanitized,
)

__all__ = [
    "HASH_BYTES",
    "PACKET_DATA_SIZE",
    "UNSPECIFIED_ADDR",
    "LoadedAddresses",
    "Meta",
    "Packet",
    "PacketExpiringBatch",
    "PacketFlags",
    "SanitizedExpiringBatch",
    "SanitizedTransaction",
    "SanitizedTransactionConstructor",
    "VOTE_PROGRAM_ID",
    "bounded_copy",
    "is_simple_vote_transaction",
    "try_create_sanitized",
]
