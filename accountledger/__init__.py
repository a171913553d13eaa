"""Mini README: Core package initializer for the account ledger.

The package persists a single account balance and exposes credit and debit
operations through ``accountledger.ledger``. An interactive text menu that
drives those operations lives in ``accountledger.interface``.
"""

from .ledger import BalanceStore, InsufficientFunds, InvalidAmount, StorageReadError
from .logging_utils import get_logger

__all__ = [
    "BalanceStore",
    "InsufficientFunds",
    "InvalidAmount",
    "StorageReadError",
    "get_logger",
]
