"""
Pytest fixtures for txwire tests. Builds real signed solders transactions:
legacy transfers and a v0 transfer whose recipient comes from a lookup table.
"""

from __future__ import annotations

from typing import Callable

import pytest
from solders.address_lookup_table_account import AddressLookupTableAccount
from solders.hash import Hash
from solders.keypair import Keypair
from solders.message import Message, MessageV0
from solders.pubkey import Pubkey
from solders.system_program import TransferParams, transfer
from solders.transaction import VersionedTransaction

from txwire.native.sanitized import LoadedAddresses


@pytest.fixture
def payer() -> Keypair:
    return Keypair()


@pytest.fixture
def make_legacy_tx(payer: Keypair) -> Callable[..., VersionedTransaction]:
    """Factory: signed legacy SOL transfer; each call gets a fresh blockhash (distinct signature)."""

    def _make(lamports: int = 1_000, to: Pubkey | None = None) -> VersionedTransaction:
        ix = transfer(
            TransferParams(
                from_pubkey=payer.pubkey(),
                to_pubkey=to if to is not None else Pubkey.new_unique(),
                lamports=lamports,
            )
        )
        message = Message.new_with_blockhash([ix], payer.pubkey(), Hash.new_unique())
        return VersionedTransaction(message, [payer])

    return _make


@pytest.fixture
def v0_tx(payer: Keypair) -> tuple[VersionedTransaction, LoadedAddresses]:
    """Signed v0 transfer whose recipient is resolved through a lookup table."""
    recipient = Pubkey.new_unique()
    table = AddressLookupTableAccount(key=Pubkey.new_unique(), addresses=[recipient])
    ix = transfer(
        TransferParams(from_pubkey=payer.pubkey(), to_pubkey=recipient, lamports=5_000)
    )
    message = MessageV0.try_compile(payer.pubkey(), [ix], [table], Hash.new_unique())
    tx = VersionedTransaction(message, [payer])
    return tx, LoadedAddresses(writable=(recipient,), readonly=())
