"""
Account record.

Accounts are owned by the LedgerService. The balance is stored
on the record and only ever changes when a transaction is applied.
The direction is fixed at creation.
"""

from decimal import Decimal

from pydantic import BaseModel

from ledger_core.models.enums import Direction


class Account(BaseModel):
    id: str
    name: str
    balance: Decimal
    direction: Direction

    def delta_for(self, entry) -> Decimal:
        """Signed change an entry makes to this account's balance."""
        if entry.direction == self.direction:
            return entry.amount
        return -entry.amount

    def __repr__(self) -> str:
        return f"<Account {self.id} {self.direction.value} {self.balance}>"
