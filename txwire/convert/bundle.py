"""
Bundle assembler and identifier.

The bundle id is shared with other services and must be reproduced
bit-for-bit: SHA-256 over the base58 first signature of each transaction,
joined with "," in bundle order, rendered as lowercase hex.
"""

from __future__ import annotations

import hashlib
from datetime import datetime
from typing import Sequence

from solders.transaction import VersionedTransaction

from txwire.convert.packet import transaction_to_wire
from txwire.convert.timestamp import datetime_to_timestamp, now_timestamp
from txwire.core.exceptions import EncodeError
from txwire.txwire_logging import bind_bundle
from txwire.wire.models import WireBundle, WireBundleUuid, WireHeader

BUNDLE_ID_DELIMITER = ","


def derive_bundle_id(transactions: Sequence[VersionedTransaction]) -> str:
    """Order-sensitive content id. Empty input hashes the empty string."""
    first_signatures: list[str] = []
    for index, tx in enumerate(transactions):
        signatures = tx.signatures
        if not signatures:
            raise EncodeError(f"transaction {index} has no signatures")
        first_signatures.append(str(signatures[0]))
    joined = BUNDLE_ID_DELIMITER.join(first_signatures)
    return hashlib.sha256(joined.encode("utf-8")).hexdigest()


def build_bundle(
    transactions: Sequence[VersionedTransaction],
    now: datetime | None = None,
) -> WireBundle:
    """Packetize ``transactions`` in order and stamp the header with ``now`` (default: wall clock)."""
    ts = datetime_to_timestamp(now) if now is not None else now_timestamp()
    return WireBundle(
        header=WireHeader(ts=ts),
        packets=[transaction_to_wire(tx) for tx in transactions],
    )


def build_bundle_uuid(
    transactions: Sequence[VersionedTransaction],
    now: datetime | None = None,
) -> WireBundleUuid:
    bundle_id = derive_bundle_id(transactions)
    bundle = build_bundle(transactions, now=now)
    bind_bundle(bundle_id).debug("bundle_built", num_transactions=len(bundle.packets))
    return WireBundleUuid(bundle=bundle, uuid=bundle_id)
