"""
Sanitized transactions: versioned transaction + precomputed message hash +
resolved address-lookup-table addresses.

A SanitizedTransaction is only ever produced by a validating constructor
(SanitizedTransactionConstructor). try_create_sanitized is the default one;
callers embedding a full execution engine inject their own.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, Sequence

from solders.hash import Hash
from solders.message import Message, MessageV0
from solders.pubkey import Pubkey
from solders.signature import Signature
from solders.transaction import VersionedTransaction

from txwire.core.exceptions import SanitizeError

HASH_BYTES = 32

VOTE_PROGRAM_ID = Pubkey.from_string("Vote111111111111111111111111111111111111111")


@dataclass(frozen=True)
class LoadedAddresses:
    """Addresses resolved from address lookup tables, split by access mode."""

    writable: tuple[Pubkey, ...] = field(default_factory=tuple)
    readonly: tuple[Pubkey, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "writable", tuple(self.writable))
        object.__setattr__(self, "readonly", tuple(self.readonly))

    def __len__(self) -> int:
        return len(self.writable) + len(self.readonly)

    def is_empty(self) -> bool:
        return len(self) == 0


@dataclass(frozen=True)
class SanitizedTransaction:
    """Transaction ready for execution-engine validation."""

    transaction: VersionedTransaction
    message_hash: Hash
    loaded_addresses: LoadedAddresses
    is_simple_vote_tx: bool = False

    def to_versioned_transaction(self) -> VersionedTransaction:
        return self.transaction

    def get_loaded_addresses(self) -> LoadedAddresses:
        return self.loaded_addresses

    def signature(self) -> Signature:
        """First signature; the transaction id."""
        return self.transaction.signatures[0]


class SanitizedTransactionConstructor(Protocol):
    """Validating constructor for SanitizedTransaction.

    Implementations raise SanitizeError (or any TxWireError) on rejection.
    """

    def __call__(
        self,
        transaction: VersionedTransaction,
        message_hash: Hash,
        loaded_addresses: LoadedAddresses,
    ) -> SanitizedTransaction: ...


def _check_unique(keys: Sequence[Pubkey], what: str) -> None:
    seen: set[Pubkey] = set()
    for key in keys:
        if key in seen:
            raise SanitizeError(f"duplicate account key {key} in {what}")
        seen.add(key)


def is_simple_vote_transaction(transaction: VersionedTransaction) -> bool:
    """Legacy message, fewer than 3 signatures, exactly one instruction, targeting the vote program."""
    message = transaction.message
    if not isinstance(message, Message):
        return False
    if len(transaction.signatures) >= 3:
        return False
    instructions = message.instructions
    if len(instructions) != 1:
        return False
    index = instructions[0].program_id_index
    account_keys = message.account_keys
    return index < len(account_keys) and account_keys[index] == VOTE_PROGRAM_ID


def try_create_sanitized(
    transaction: VersionedTransaction,
    message_hash: Hash,
    loaded_addresses: LoadedAddresses,
    is_simple_vote_tx: bool | None = None,
) -> SanitizedTransaction:
    """
    Structurally validate ``transaction`` and wrap it with the trusted hash.

    The hash is taken as precomputed and never re-derived. Checks:
    - signature count equals the header's required signatures;
    - static account keys are unique and cover the signers;
    - legacy messages carry no loaded addresses;
    - v0 loaded address counts match the lookup-table index counts;
    - loaded addresses do not repeat static keys or each other.

    ``is_simple_vote_tx=None`` detects the flag from the transaction.

    Signatures themselves are not verified.
    """
    message = transaction.message
    header = message.header
    required = header.num_required_signatures
    signatures = transaction.signatures
    if len(signatures) != required:
        raise SanitizeError(
            f"transaction has {len(signatures)} signatures, header requires {required}"
        )
    if required == 0:
        raise SanitizeError("transaction has no signers")

    static_keys = list(message.account_keys)
    if required > len(static_keys):
        raise SanitizeError(
            f"header requires {required} signers but message has {len(static_keys)} account keys"
        )
    if header.num_readonly_signed_accounts >= required:
        raise SanitizeError("fee payer must be a writable signer")
    _check_unique(static_keys, "static account keys")

    if isinstance(message, MessageV0):
        lookups = message.address_table_lookups
        expected_writable = sum(len(lookup.writable_indexes) for lookup in lookups)
        expected_readonly = sum(len(lookup.readonly_indexes) for lookup in lookups)
        if len(loaded_addresses.writable) != expected_writable:
            raise SanitizeError(
                f"expected {expected_writable} writable loaded addresses, got {len(loaded_addresses.writable)}"
            )
        if len(loaded_addresses.readonly) != expected_readonly:
            raise SanitizeError(
                f"expected {expected_readonly} readonly loaded addresses, got {len(loaded_addresses.readonly)}"
            )
    elif not loaded_addresses.is_empty():
        raise SanitizeError("legacy message cannot carry loaded addresses")

    _check_unique(
        static_keys + list(loaded_addresses.writable) + list(loaded_addresses.readonly),
        "static and loaded account keys",
    )

    if is_simple_vote_tx is None:
        is_simple_vote_tx = is_simple_vote_transaction(transaction)

    return SanitizedTransaction(
        transaction=transaction,
        message_hash=message_hash,
        loaded_addresses=loaded_addresses,
        is_simple_vote_tx=is_simple_vote_tx,
    )
