"""
Conversion exceptions.

Every failure surfaced by txwire derives from TxWireError and carries a
stable ``code`` so transport layers can map errors to status codes or
metrics labels without matching on class names.
"""

from __future__ import annotations


class TxWireError(Exception):
    """Base class for all txwire conversion failures."""

    code = "txwire_error"

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.code)
        self.message = message or self.code


class EncodeError(TxWireError):
    """Native value could not be serialized to wire bytes."""

    code = "encode_error"


class DecodeError(TxWireError):
    """Wire bytes do not parse as the expected native structure."""

    code = "decode_error"


class DiscardedPacketError(TxWireError):
    """Packet is marked discarded and has no retrievable payload."""

    code = "discarded_packet"


class MissingHeaderError(TxWireError):
    """Wire batch has no header, or the header has no timestamp."""

    code = "missing_header"


class MissingBatchError(TxWireError):
    """Wire batch has no batch payload."""

    code = "missing_batch"


class InvalidHashLengthError(TxWireError):
    """Message hash is not exactly 32 bytes."""

    code = "invalid_hash_length"

    def __init__(self, length: int) -> None:
        super().__init__(f"message_hash must be 32 bytes, got {length}")
        self.length = length


class TimestampError(TxWireError):
    """Wire timestamp is invalid or not representable as a datetime."""

    code = "invalid_timestamp"


class ConversionError(TxWireError):
    """Reconstructed transaction was rejected or could not be rebuilt."""

    code = "conversion_error"


class SanitizeError(TxWireError):
    """Validating constructor rejected a transaction."""

    code = "sanitize_error"


class WireFormatError(TxWireError):
    """Transport payload is not a valid wire message."""

    code = "wire_format_error"
