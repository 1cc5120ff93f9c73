"""
Binary codec adapter: bincode encoding of native transactions and of the
resolved address table.

VersionedTransaction bincode comes from solders. LoadedAddresses has no
solders binding, so its layout is written out here:
    u64 LE count | count * 32-byte pubkey   (writable)
    u64 LE count | count * 32-byte pubkey   (readonly)
"""

from __future__ import annotations

import struct

from solders.pubkey import Pubkey
from solders.transaction import VersionedTransaction

from txwire.core.exceptions import DecodeError, EncodeError
from txwire.native.sanitized import LoadedAddresses

PUBKEY_BYTES = 32
_LEN_PREFIX = struct.Struct("<Q")


def encode_transaction(tx: VersionedTransaction) -> bytes:
    """Serialize ``tx`` with bincode. Failure means a malformed in-memory value."""
    try:
        return bytes(tx)
    except Exception as e:
        raise EncodeError(f"failed to serialize versioned_transaction: {e}") from e


def decode_transaction(data: bytes) -> VersionedTransaction:
    """Inverse of encode_transaction. Raises DecodeError on malformed or truncated input."""
    if not data:
        raise DecodeError("failed to deserialize versioned_transaction: empty input")
    try:
        return VersionedTransaction.from_bytes(bytes(data))
    except Exception as e:
        raise DecodeError(f"failed to deserialize versioned_transaction: {e}") from e


def encode_loaded_addresses(addresses: LoadedAddresses) -> bytes:
    try:
        parts: list[bytes] = []
        for keys in (addresses.writable, addresses.readonly):
            parts.append(_LEN_PREFIX.pack(len(keys)))
            parts.extend(bytes(key) for key in keys)
    except (TypeError, struct.error) as e:
        raise EncodeError(f"failed to serialize loaded_addresses: {e}") from e
    return b"".join(parts)


def _read_keys(data: bytes, offset: int) -> tuple[list[Pubkey], int]:
    if len(data) - offset < _LEN_PREFIX.size:
        raise DecodeError("failed to deserialize loaded_addresses: truncated length prefix")
    (count,) = _LEN_PREFIX.unpack_from(data, offset)
    offset += _LEN_PREFIX.size
    # count must fit in the remaining input
    if count > (len(data) - offset) // PUBKEY_BYTES:
        raise DecodeError(
            f"failed to deserialize loaded_addresses: {count} keys exceed remaining input"
        )
    keys = []
    for _ in range(count):
        keys.append(Pubkey.from_bytes(data[offset : offset + PUBKEY_BYTES]))
        offset += PUBKEY_BYTES
    return keys, offset


def decode_loaded_addresses(data: bytes) -> LoadedAddresses:
    """Parse the bincode address table. Trailing bytes are an error."""
    data = bytes(data)
    writable, offset = _read_keys(data, 0)
    readonly, offset = _read_keys(data, offset)
    if offset != len(data):
        raise DecodeError(
            f"failed to deserialize loaded_addresses: {len(data) - offset} trailing bytes"
        )
    return LoadedAddresses(writable=tuple(writable), readonly=tuple(readonly))
