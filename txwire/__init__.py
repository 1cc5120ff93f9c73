"""
txwire — wire/native conversion layer for Solana transactions.

Converts between the transport schema used by relayers and block engines
(packets, sanitized transactions, bundles, expiring batches) and the native
in-memory types consumed by transaction-processing code. Also derives the
deterministic bundle id shared with other services.
"""

__version__ = "0.1.0"
