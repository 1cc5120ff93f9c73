"""
Wire schema for inter-service transport of packets, sanitized transactions,
bundles and expiring batches.

Field names are the compatibility surface shared with other services: never
rename or repurpose a field, only add optional ones. Unknown fields on input
are ignored so older readers tolerate newer writers. Byte fields travel as
base64 in JSON.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

U32_MAX = 2**32 - 1
U64_MAX = 2**64 - 1
I32_MIN, I32_MAX = -(2**31), 2**31 - 1
I64_MIN, I64_MAX = -(2**63), 2**63 - 1


class WireModel(BaseModel):
    """Base for all wire messages."""

    model_config = ConfigDict(
        extra="ignore",
        ser_json_bytes="base64",
        val_json_bytes="base64",
    )


class WirePacketFlags(WireModel):
    discard: bool = False
    forwarded: bool = False
    repair: bool = False
    simple_vote_tx: bool = False
    tracer_packet: bool = False
    from_staked_node: bool = False
    """Added in a later schema revision; absent on input means False."""


class WireMeta(WireModel):
    size: int = Field(0, ge=0, le=U64_MAX, description="Payload length in bytes")
    addr: str = Field("", description="Source IP address, textual form")
    port: int = Field(0, ge=0, le=U32_MAX, description="Source port")
    flags: WirePacketFlags | None = None
    sender_stake: int = Field(0, ge=0, le=U64_MAX, description="Reserved; always 0 on output")


class WirePacket(WireModel):
    data: bytes = b""
    meta: WireMeta | None = None


class WirePacketBatch(WireModel):
    packets: list[WirePacket] = Field(default_factory=list)


class WireSanitizedTransaction(WireModel):
    versioned_transaction: bytes = Field(b"", description="bincode VersionedTransaction")
    message_hash: bytes = Field(b"", description="32-byte message hash")
    loaded_addresses: bytes = Field(b"", description="bincode LoadedAddresses")


class WireSanitizedTransactionBatch(WireModel):
    transactions: list[WireSanitizedTransaction] = Field(default_factory=list)


class WireTimestamp(WireModel):
    """Seconds + nanos since the Unix epoch (UTC)."""

    seconds: int = Field(0, ge=I64_MIN, le=I64_MAX)
    nanos: int = Field(0, ge=I32_MIN, le=I32_MAX)


class WireHeader(WireModel):
    ts: WireTimestamp | None = None


class WireBundle(WireModel):
    header: WireHeader | None = None
    packets: list[WirePacket] = Field(default_factory=list)


class WireBundleUuid(WireModel):
    bundle: WireBundle | None = None
    uuid: str = ""


class WireExpiringSanitizedBatch(WireModel):
    """Expiring batch carrying already-resolved transactions."""

    header: WireHeader | None = None
    batch: WireSanitizedTransactionBatch | None = None
    expiry_ms: int = Field(0, ge=0, le=U32_MAX)


class WireExpiringPacketBatch(WireModel):
    """Expiring batch carrying raw packets."""

    header: WireHeader | None = None
    batch: WirePacketBatch | None = None
    expiry_ms: int = Field(0, ge=0, le=U32_MAX)


WireExpiringBatch = WireExpiringSanitizedBatch | WireExpiringPacketBatch
