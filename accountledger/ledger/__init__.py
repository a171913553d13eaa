"""Mini README: Balance persistence and arithmetic for the account ledger.

``BalanceStore`` owns the JSON record holding the single account balance and
performs validated credits and debits against it. Failures surface as the
typed exceptions defined in ``errors``.
"""

from .errors import InsufficientFunds, InvalidAmount, LedgerError, StorageReadError
from .store import BalanceRecord, BalanceStore, format_balance, round2

__all__ = [
    "BalanceRecord",
    "BalanceStore",
    "InsufficientFunds",
    "InvalidAmount",
    "LedgerError",
    "StorageReadError",
    "format_balance",
    "round2",
]
