"""
Ledger record models.

These are the shapes held in the in-memory stores. The API
shapes live in ledger_core.schemas.
"""

from ledger_core.models.enums import Direction
from ledger_core.models.account import Account
from ledger_core.models.transaction import Transaction, TransactionEntry

__all__ = [
    "Direction",
    "Account",
    "Transaction",
    "TransactionEntry",
]
