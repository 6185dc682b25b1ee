"""
Pydantic schemas for transaction operations.

Amounts are not range-checked here. Non-positive amounts,
amounts beyond the fixed-point scale, too few entries and
imbalance are business rules, reported by the
TransactionService as ValidationError.
"""

from decimal import Decimal

from pydantic import BaseModel, Field

from ledger_core.models.enums import Direction


class TransactionEntryCreate(BaseModel):
    """A single credit or debit in a proposed transaction."""
    account_id: str
    amount: Decimal
    direction: Direction


class TransactionCreate(BaseModel):
    """
    A proposed transaction.

    The client may supply an id, which doubles as an idempotency
    key: a second proposal with the same id is rejected.
    """
    id: str | None = Field(default=None, max_length=100)
    name: str = Field(max_length=255)
    entries: list[TransactionEntryCreate]


class EntriesValidationRequest(BaseModel):
    """Entries to check without posting them."""
    entries: list[TransactionEntryCreate]


class EntriesValidationResponse(BaseModel):
    valid: bool


class TransactionEntryResponse(BaseModel):
    account_id: str
    amount: Decimal
    direction: Direction

    model_config = {"from_attributes": True}


class TransactionResponse(BaseModel):
    id: str
    name: str
    entries: list[TransactionEntryResponse]

    model_config = {"from_attributes": True}
