"""Mini README: Error hierarchy raised by the balance store.

Callers distinguish failures by type rather than by message text:
    * InvalidAmount - input rejected before any storage access.
    * InsufficientFunds - debit larger than the current balance.
    * StorageReadError - the persisted record is missing or malformed.
"""

from __future__ import annotations

from decimal import Decimal


class LedgerError(Exception):
    """Base class for every failure raised by the ledger package."""


class InvalidAmount(LedgerError, ValueError):
    """Amount is non-numeric, non-finite, or not strictly positive."""

    def __init__(self, amount: object) -> None:
        super().__init__(f"Invalid amount: {amount!r}")
        self.amount = amount


class InsufficientFunds(LedgerError):
    """Debit would take the balance below zero."""

    def __init__(self, balance: Decimal, amount: Decimal) -> None:
        super().__init__(f"Insufficient funds: balance {balance} is less than {amount}")
        self.balance = balance
        self.amount = amount


class StorageReadError(LedgerError):
    """Persisted balance record could not be read or parsed."""
