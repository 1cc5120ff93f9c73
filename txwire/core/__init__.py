"""
Core cross-cutting pieces: the typed error hierarchy shared by every mapper.
"""

from txwire.core.exceptions import (
    ConversionError,
    DecodeError,
    DiscardedPacketError,
    EncodeError,
    InvalidHashLengthError,
    MissingBatchError,
    MissingHeaderError,
    SanitizeError,
    TimestampError,
    TxWireError,
    WireFormatError,
)

__all__ = [
    "ConversionError",
    "DecodeError",
    "DiscardedPacketError",
    "EncodeError",
    "InvalidHashLengthError",
    "MissingBatchError",
    "MissingHeaderError",
    "SanitizeError",
    "TimestampError",
    "TxWireError",
    "WireFormatError",
]
