"""
Tests for the packet mapper: native Packet <-> WirePacket, flags, truncation,
address fallback, and the transaction <-> WirePacket compositions.
"""

from __future__ import annotations

from ipaddress import IPv4Address, IPv6Address

import pytest
from solders.hash import Hash
from solders.instruction import Instruction
from solders.message import Message
from solders.pubkey import Pubkey
from solders.transaction import VersionedTransaction

from txwire.convert.codec import encode_transaction
from txwire.convert.packet import (
    packet_batch_from_wire,
    packet_batch_to_wire,
    packet_from_wire,
    packet_to_wire,
    transaction_to_wire,
    wire_to_transaction,
)
from txwire.core.exceptions import DecodeError, DiscardedPacketError, EncodeError
from txwire.native.packet import (
    PACKET_DATA_SIZE,
    UNSPECIFIED_ADDR,
    Meta,
    Packet,
    PacketFlags,
    bounded_copy,
)
from txwire.wire.models import WireMeta, WirePacket, WirePacketFlags

ALL_WIRE_FLAGS = WirePacketFlags(
    discard=True,
    forwarded=True,
    repair=True,
    simple_vote_tx=True,
    tracer_packet=True,
    from_staked_node=True,
)


def _packet(payload: bytes, flags: PacketFlags = PacketFlags(0)) -> Packet:
    return Packet.from_data(
        payload,
        Meta(addr=IPv4Address("10.1.2.3"), port=8001, flags=flags),
    )


def test_bounded_copy_exact_capacity():
    dst = bytearray(PACKET_DATA_SIZE)
    src = bytes(range(256)) * 5  # 1280 bytes
    assert bounded_copy(dst, src[:PACKET_DATA_SIZE]) == PACKET_DATA_SIZE
    assert bytes(dst) == src[:PACKET_DATA_SIZE]


def test_bounded_copy_truncates_one_past_capacity():
    dst = bytearray(PACKET_DATA_SIZE)
    src = b"\x07" * (PACKET_DATA_SIZE + 1)
    assert bounded_copy(dst, src) == PACKET_DATA_SIZE
    assert bytes(dst) == b"\x07" * PACKET_DATA_SIZE


def test_bounded_copy_short_source_leaves_tail():
    dst = bytearray(b"\xaa" * 8)
    assert bounded_copy(dst, b"\x01\x02") == 2
    assert bytes(dst) == b"\x01\x02" + b"\xaa" * 6


def test_to_wire_copies_payload_and_meta():
    packet = _packet(b"hello", PacketFlags.FORWARDED | PacketFlags.TRACER_PACKET)
    wire = packet_to_wire(packet)
    assert wire.data == b"hello"
    assert wire.meta is not None
    assert wire.meta.size == 5
    assert wire.meta.addr == "10.1.2.3"
    assert wire.meta.port == 8001
    assert wire.meta.sender_stake == 0
    assert wire.meta.flags == WirePacketFlags(forwarded=True, tracer_packet=True)


def test_to_wire_maps_every_flag():
    flags = (
        PacketFlags.FORWARDED
        | PacketFlags.REPAIR
        | PacketFlags.SIMPLE_VOTE_TX
        | PacketFlags.TRACER_PACKET
        | PacketFlags.FROM_STAKED_NODE
    )
    wire = packet_to_wire(_packet(b"x", flags))
    assert wire.meta.flags == WirePacketFlags(
        forwarded=True,
        repair=True,
        simple_vote_tx=True,
        tracer_packet=True,
        from_staked_node=True,
    )


def test_to_wire_drops_native_only_flags():
    wire = packet_to_wire(_packet(b"x", PacketFlags.ROUND_COMPUTE_UNIT_PRICE))
    assert wire.meta.flags == WirePacketFlags()


def test_to_wire_discarded_fails():
    with pytest.raises(DiscardedPacketError):
        packet_to_wire(_packet(b"payload", PacketFlags.DISCARD))


def test_from_wire_truncates_oversize_payload():
    """1600 zero bytes fill exactly the 1232-byte buffer; no error."""
    wire = WirePacket(data=b"\x00" * 1600, meta=WireMeta(size=1600, addr="1.1.1.1", port=1))
    packet = packet_from_wire(wire)
    assert len(packet.buffer) == PACKET_DATA_SIZE == 1232
    assert bytes(packet.buffer) == b"\x00" * 1232
    assert packet.meta.size == 1600


def test_from_wire_truncation_keeps_prefix():
    data = bytes(i % 251 for i in range(PACKET_DATA_SIZE + 100))
    packet = packet_from_wire(WirePacket(data=data, meta=WireMeta(size=len(data))))
    assert bytes(packet.buffer) == data[:PACKET_DATA_SIZE]


def test_from_wire_zero_pads():
    packet = packet_from_wire(WirePacket(data=b"\x01\x02\x03", meta=WireMeta(size=3)))
    assert bytes(packet.buffer[:3]) == b"\x01\x02\x03"
    assert bytes(packet.buffer[3:]) == b"\x00" * (PACKET_DATA_SIZE - 3)
    assert packet.data() == b"\x01\x02\x03"


def test_from_wire_unparseable_addr_falls_back():
    packet = packet_from_wire(WirePacket(data=b"x", meta=WireMeta(size=1, addr="not-an-ip")))
    assert packet.meta.addr == UNSPECIFIED_ADDR
    assert packet.meta.addr == IPv4Address("0.0.0.0")


def test_from_wire_empty_addr_falls_back():
    packet = packet_from_wire(WirePacket(data=b"x", meta=WireMeta(size=1, addr="")))
    assert packet.meta.addr == UNSPECIFIED_ADDR


def test_from_wire_ipv6_addr():
    packet = packet_from_wire(WirePacket(data=b"x", meta=WireMeta(size=1, addr="::1")))
    assert packet.meta.addr == IPv6Address("::1")


def test_from_wire_restores_only_inbound_flags():
    """discard and from_staked_node are not restored on import."""
    wire = WirePacket(data=b"x", meta=WireMeta(size=1, flags=ALL_WIRE_FLAGS))
    meta = packet_from_wire(wire).meta
    assert meta.forwarded()
    assert meta.repair()
    assert meta.is_simple_vote_tx()
    assert meta.is_tracer_packet()
    assert not meta.discard()
    assert not meta.is_from_staked_node()


def test_from_wire_without_meta_keeps_defaults():
    packet = packet_from_wire(WirePacket(data=b"abc"))
    assert packet.meta == Meta()
    assert bytes(packet.buffer[:3]) == b"abc"


def test_packet_round_trip_preserves_data_and_size():
    payload = bytes(range(200))
    packet = _packet(payload, PacketFlags.SIMPLE_VOTE_TX)
    back = packet_from_wire(packet_to_wire(packet))
    assert back.data() == payload
    assert back.meta.size == packet.meta.size
    assert back.meta.addr == packet.meta.addr
    assert back.meta.port == packet.meta.port
    assert back.meta.flags == PacketFlags.SIMPLE_VOTE_TX


def test_packet_round_trip_full_buffer():
    payload = b"\x5a" * PACKET_DATA_SIZE
    back = packet_from_wire(packet_to_wire(_packet(payload)))
    assert back.data() == payload


def test_transaction_to_wire_default_meta(make_legacy_tx):
    tx = make_legacy_tx()
    wire = transaction_to_wire(tx)
    encoded = encode_transaction(tx)
    assert wire.data == encoded
    assert wire.meta.size == len(encoded)
    assert wire.meta.addr == "0.0.0.0"
    assert wire.meta.port == 0
    assert wire.meta.flags == WirePacketFlags()


def test_transaction_wire_round_trip(make_legacy_tx, v0_tx):
    for tx in (make_legacy_tx(), v0_tx[0]):
        assert wire_to_transaction(transaction_to_wire(tx)) == tx


def test_transaction_to_wire_oversize_fails(payer):
    ix = Instruction(Pubkey.new_unique(), b"\x00" * (PACKET_DATA_SIZE + 10), [])
    message = Message.new_with_blockhash([ix], payer.pubkey(), Hash.new_unique())
    tx = VersionedTransaction(message, [payer])
    with pytest.raises(EncodeError):
        transaction_to_wire(tx)


def test_wire_to_transaction_garbage_fails():
    with pytest.raises(DecodeError):
        wire_to_transaction(WirePacket(data=b"\x01\x02\x03", meta=WireMeta(size=3)))


def test_wire_to_transaction_without_meta_fails(make_legacy_tx):
    """No meta means size 0: there is no payload to decode."""
    data = encode_transaction(make_legacy_tx())
    with pytest.raises(DecodeError):
        wire_to_transaction(WirePacket(data=data))


def test_packet_batch_round_trip_preserves_order():
    packets = [_packet(bytes([i]) * (i + 1)) for i in range(4)]
    batch = packet_batch_to_wire(packets)
    assert [p.data for p in batch.packets] == [bytes([i]) * (i + 1) for i in range(4)]
    assert [p.data() for p in packet_batch_from_wire(batch)] == [p.data() for p in packets]


def test_packet_batch_discarded_element_fails_whole_batch():
    packets = [_packet(b"ok"), _packet(b"bad", PacketFlags.DISCARD)]
    with pytest.raises(DiscardedPacketError):
        packet_batch_to_wire(packets)


def test_from_data_does_not_share_caller_meta():
    """Two packets built from one Meta keep their own sizes and payloads."""
    meta = Meta(addr=IPv4Address("10.0.0.1"), port=9000, flags=PacketFlags.FORWARDED)
    first = Packet.from_data(b"abc", meta)
    second = Packet.from_data(b"defgh", meta)
    assert first.meta is not meta
    assert first.meta is not second.meta
    assert meta.size == 0
    assert first.meta.size == 3
    assert first.data() == b"abc"
    assert second.data() == b"defgh"
    assert first.meta.addr == second.meta.addr == IPv4Address("10.0.0.1")
    assert first.meta.forwarded()
