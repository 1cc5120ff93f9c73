"""
Native network packet: fixed-size byte buffer plus metadata.

Mirrors the validator's in-memory packet. The buffer always holds exactly
PACKET_DATA_SIZE bytes, zero-padded past ``meta.size``; the payload is the
first ``meta.size`` bytes unless the packet is marked discarded.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import IntFlag
from ipaddress import IPv4Address, IPv6Address

from txwire.core.exceptions import EncodeError

# Max transaction bytes that fit in one packet: IPv6 min MTU (1280) - IPv6 header (40) - UDP header (8)
PACKET_DATA_SIZE = 1280 - 40 - 8  # 1232

# Unknown / unset source address
UNSPECIFIED_ADDR = IPv4Address("0.0.0.0")


class PacketFlags(IntFlag):
    """Packet metadata bit flags. Bit positions match the validator's layout."""

    DISCARD = 1 << 0
    FORWARDED = 1 << 1
    REPAIR = 1 << 2
    SIMPLE_VOTE_TX = 1 << 3
    TRACER_PACKET = 1 << 4
    ROUND_COMPUTE_UNIT_PRICE = 1 << 5
    FROM_STAKED_NODE = 1 << 6


def bounded_copy(dst: bytearray, src: bytes) -> int:
    """
    Copy ``src`` into the start of ``dst``, truncating to ``len(dst)``.

    Bytes of ``src`` beyond the capacity of ``dst`` are dropped without
    error; bytes of ``dst`` past the copied range are left untouched.
    Returns the number of bytes copied.
    """
    n = min(len(dst), len(src))
    dst[:n] = src[:n]
    return n


@dataclass
class Meta:
    """Packet metadata."""

    size: int = 0
    """Payload length in bytes."""
    addr: IPv4Address | IPv6Address = UNSPECIFIED_ADDR
    """Source IP address."""
    port: int = 0
    """Source UDP port."""
    flags: PacketFlags = PacketFlags(0)

    def set_flag(self, flag: PacketFlags, value: bool) -> None:
        if value:
            self.flags |= flag
        else:
            self.flags &= ~flag

    def discard(self) -> bool:
        return bool(self.flags & PacketFlags.DISCARD)

    def forwarded(self) -> bool:
        return bool(self.flags & PacketFlags.FORWARDED)

    def repair(self) -> bool:
        return bool(self.flags & PacketFlags.REPAIR)

    def is_simple_vote_tx(self) -> bool:
        return bool(self.flags & PacketFlags.SIMPLE_VOTE_TX)

    def is_tracer_packet(self) -> bool:
        return bool(self.flags & PacketFlags.TRACER_PACKET)

    def is_from_staked_node(self) -> bool:
        return bool(self.flags & PacketFlags.FROM_STAKED_NODE)


@dataclass
class Packet:
    """Fixed-capacity packet buffer with metadata."""

    buffer: bytearray = field(default_factory=lambda: bytearray(PACKET_DATA_SIZE))
    meta: Meta = field(default_factory=Meta)

    def __post_init__(self) -> None:
        if len(self.buffer) != PACKET_DATA_SIZE:
            raise ValueError(
                f"packet buffer must be {PACKET_DATA_SIZE} bytes, got {len(self.buffer)}"
            )

    @classmethod
    def from_data(cls, data: bytes, meta: Meta | None = None) -> "Packet":
        """
        Build a packet holding ``data``. The packet gets its own copy of
        ``meta`` with ``size = len(data)``; the caller's Meta is not modified.

        Unlike the lenient wire import path, an oversized payload here is an
        error: the caller is building a packet to send, and truncating would
        corrupt the transaction.
        """
        if len(data) > PACKET_DATA_SIZE:
            raise EncodeError(
                f"payload of {len(data)} bytes exceeds packet capacity {PACKET_DATA_SIZE}"
            )
        packet = cls(meta=replace(meta if meta is not None else Meta(), size=len(data)))
        bounded_copy(packet.buffer, data)
        return packet

    def data(self) -> bytes | None:
        """Return the payload bytes, or None when the packet is discarded."""
        if self.meta.discard():
            return None
        return bytes(self.buffer[: self.meta.size])
