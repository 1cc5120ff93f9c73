"""
Packet mapper: native Packet <-> WirePacket.

Export maps all six wire flags. Import restores only simple_vote_tx,
forwarded, tracer_packet and repair: discard and from_staked_node are not
set on inbound packets. Import is lenient in two places only: payloads
longer than PACKET_DATA_SIZE are truncated, and an unparseable address
becomes 0.0.0.0.
"""

from __future__ import annotations

from ipaddress import IPv4Address, IPv6Address, ip_address
from typing import Iterable

from solders.transaction import VersionedTransaction

from txwire.convert.codec import decode_transaction, encode_transaction
from txwire.core.exceptions import DiscardedPacketError, TxWireError
from txwire.native.packet import (
    UNSPECIFIED_ADDR,
    Meta,
    Packet,
    PacketFlags,
    bounded_copy,
)
from txwire.txwire_logging import get_logger
from txwire.wire.models import WireMeta, WirePacket, WirePacketBatch, WirePacketFlags

logger = get_logger(__name__)

# Wire flags restored on import; discard and from_staked_node are export-only
_INBOUND_FLAGS = (
    ("simple_vote_tx", PacketFlags.SIMPLE_VOTE_TX),
    ("forwarded", PacketFlags.FORWARDED),
    ("tracer_packet", PacketFlags.TRACER_PACKET),
    ("repair", PacketFlags.REPAIR),
)


def _flags_to_wire(meta: Meta) -> WirePacketFlags:
    return WirePacketFlags(
        discard=meta.discard(),
        forwarded=meta.forwarded(),
        repair=meta.repair(),
        simple_vote_tx=meta.is_simple_vote_tx(),
        tracer_packet=meta.is_tracer_packet(),
        from_staked_node=meta.is_from_staked_node(),
    )


def packet_to_wire(packet: Packet) -> WirePacket:
    """
    Export ``packet``. Raises DiscardedPacketError if it is marked discarded.
    Native-only flags (e.g. ROUND_COMPUTE_UNIT_PRICE) are dropped.
    """
    data = packet.data()
    if data is None:
        raise DiscardedPacketError("packet is discarded; no payload to export")
    meta = packet.meta
    return WirePacket(
        data=data,
        meta=WireMeta(
            size=meta.size,
            addr=str(meta.addr),
            port=meta.port,
            flags=_flags_to_wire(meta),
            sender_stake=0,
        ),
    )


def _parse_addr(addr: str) -> IPv4Address | IPv6Address:
    try:
        return ip_address(addr.strip())
    except ValueError:
        logger.debug("packet_addr_unparseable", addr=addr)
        return UNSPECIFIED_ADDR


def packet_from_wire(wire: WirePacket) -> Packet:
    """
    Import ``wire`` into a fixed-size packet. Never fails: oversize payloads
    are truncated to PACKET_DATA_SIZE and bad addresses become 0.0.0.0.
    Without meta, metadata stays at defaults (size 0).
    """
    packet = Packet()
    copied = bounded_copy(packet.buffer, wire.data)
    if copied < len(wire.data):
        logger.debug("packet_data_truncated", received=len(wire.data), kept=copied)
    if wire.meta is None:
        return packet

    meta = packet.meta
    meta.size = wire.meta.size
    meta.addr = _parse_addr(wire.meta.addr)
    # Native port is 16 bits
    meta.port = wire.meta.port & 0xFFFF
    if wire.meta.flags is not None:
        for name, flag in _INBOUND_FLAGS:
            if getattr(wire.meta.flags, name):
                meta.set_flag(flag, True)
    return packet


def transaction_to_wire(tx: VersionedTransaction) -> WirePacket:
    """Wrap ``tx`` in a default-metadata packet and export it. Raises EncodeError."""
    return packet_to_wire(Packet.from_data(encode_transaction(tx)))


def wire_to_transaction(wire: WirePacket) -> VersionedTransaction:
    """Import ``wire`` and decode its payload. Raises DecodeError."""
    packet = packet_from_wire(wire)
    # discard is never restored on import, so the payload is always readable
    return decode_transaction(bytes(packet.buffer[: packet.meta.size]))


def packet_batch_to_wire(packets: Iterable[Packet]) -> WirePacketBatch:
    """Export packets in order. Any discarded packet fails the whole batch."""
    out: list[WirePacket] = []
    for index, packet in enumerate(packets):
        try:
            out.append(packet_to_wire(packet))
        except TxWireError as e:
            logger.warning("batch_element_failed", index=index, error_code=e.code)
            raise
    return WirePacketBatch(packets=out)


def packet_batch_from_wire(batch: WirePacketBatch) -> list[Packet]:
    return [packet_from_wire(p) for p in batch.packets]
