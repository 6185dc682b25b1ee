"""
Transaction and entry records.

A Transaction is only constructed once its proposal has passed
validation. After it is appended to the journal it is never
modified, which is why both models are frozen.
"""

from decimal import Decimal

from pydantic import BaseModel

from ledger_core.models.enums import Direction


class TransactionEntry(BaseModel):
    """One line of a transaction: an amount moved against one account."""

    model_config = {"frozen": True}

    account_id: str
    amount: Decimal
    direction: Direction


class Transaction(BaseModel):
    """
    An accepted, balanced set of entries.

    Entries keep the order they were submitted in so that
    the transaction reads back exactly as it was posted.
    """

    model_config = {"frozen": True}

    id: str
    name: str
    entries: tuple[TransactionEntry, ...]

    def __repr__(self) -> str:
        return f"<Transaction {self.id} ({len(self.entries)} entries)>"
