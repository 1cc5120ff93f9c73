"""
Sanitized-transaction mapper: SanitizedTransaction <-> WireSanitizedTransaction.

Import always goes through a validating constructor with the wire hash used
as a precomputed, trusted message hash; there is no unchecked path.
"""

from __future__ import annotations

from solders.hash import Hash

from txwire.convert.codec import (
    decode_loaded_addresses,
    decode_transaction,
    encode_loaded_addresses,
    encode_transaction,
)
from txwire.core.exceptions import (
    ConversionError,
    DecodeError,
    InvalidHashLengthError,
)
from txwire.native.sanitized import (
    HASH_BYTES,
    SanitizedTransaction,
    SanitizedTransactionConstructor,
    try_create_sanitized,
)
from txwire.txwire_logging import get_logger
from txwire.wire.models import WireSanitizedTransaction

logger = get_logger(__name__)


def sanitized_to_wire(tx: SanitizedTransaction) -> WireSanitizedTransaction:
    """Encode ``tx``. Raises EncodeError if either sub-encode fails."""
    return WireSanitizedTransaction(
        versioned_transaction=encode_transaction(tx.to_versioned_transaction()),
        message_hash=bytes(tx.message_hash),
        loaded_addresses=encode_loaded_addresses(tx.get_loaded_addresses()),
    )


def sanitized_from_wire(
    wire: WireSanitizedTransaction,
    constructor: SanitizedTransactionConstructor = try_create_sanitized,
) -> SanitizedTransaction:
    """
    Rebuild a SanitizedTransaction from ``wire``.

    Raises:
        InvalidHashLengthError: message_hash is not 32 bytes (checked first).
        ConversionError: a sub-decode failed or ``constructor`` rejected the
            transaction; the underlying error is chained.
    """
    if len(wire.message_hash) != HASH_BYTES:
        raise InvalidHashLengthError(len(wire.message_hash))
    message_hash = Hash(bytes(wire.message_hash))

    try:
        transaction = decode_transaction(wire.versioned_transaction)
    except DecodeError as e:
        raise ConversionError("failed to deserialize versioned_transaction") from e
    try:
        loaded_addresses = decode_loaded_addresses(wire.loaded_addresses)
    except DecodeError as e:
        raise ConversionError("failed to deserialize loaded_addresses") from e

    try:
        return constructor(transaction, message_hash, loaded_addresses)
    except Exception as e:
        logger.debug(
            "sanitized_transaction_rejected",
            signature=str(transaction.signatures[0]) if transaction.signatures else None,
            error=str(e),
        )
        raise ConversionError("failed to create SanitizedTransaction") from e
