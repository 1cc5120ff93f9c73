"""
Wire <-> native conversions.

codec      — bincode for transactions and address tables
packet     — Packet <-> WirePacket, transaction <-> WirePacket
sanitized  — SanitizedTransaction <-> WireSanitizedTransaction
bundle     — bundle assembly and bundle id
expiring   — expiring batches
"""

from txwire.convert.bundle import build_bundle, build_bundle_uuid, derive_bundle_id
from txwire.convert.codec import (
    decode_loaded_addresses,
    decode_transaction,
    encode_loaded_addresses,
    encode_transaction,
)
from txwire.convert.expiring import expiring_batch_from_wire
from txwire.convert.packet import (
    packet_batch_from_wire,
    packet_batch_to_wire,
    packet_from_wire,
    packet_to_wire,
    transaction_to_wire,
    wire_to_transaction,
)
from txwire.convert.sanitized import sanitized_from_wire, sanitized_to_wire
from txwire.convert.timestamp import (
    datetime_to_timestamp,
    now_timestamp,
    timestamp_to_datetime,
)

__all__ = [
    "build_bundle",
    "build_bundle_uuid",
    "datetime_to_timestamp",
    "decode_loaded_addresses",
    "decode_transaction",
    "derive_bundle_id",
    "encode_loaded_addresses",
    "encode_transaction",
    "expiring_batch_from_wire",
    "now_timestamp",
    "packet_batch_from_wire",
    "packet_batch_to_wire",
    "packet_from_wire",
    "packet_to_wire",
    "sanitized_from_wire",
    "sanitized_to_wire",
    "timestamp_to_datetime",
    "transaction_to_wire",
    "wire_to_transaction",
]
