"""
Pydantic schemas for account operations.
"""

from decimal import Decimal

from pydantic import BaseModel, Field

from ledger_core.models.enums import Direction
from ledger_core.money import DECIMAL_PLACES, MAX_DIGITS


class AccountCreate(BaseModel):
    """Request to create a new account."""
    name: str = Field(min_length=1, max_length=100)
    balance: Decimal = Field(
        default=Decimal("0"),
        max_digits=MAX_DIGITS,
        decimal_places=DECIMAL_PLACES,
    )
    direction: Direction


class AccountUpdate(BaseModel):
    """
    Request to change an account.

    Only the name can change. Direction is fixed at creation and
    balance only moves through transactions, so any other field
    is rejected.
    """
    name: str | None = Field(default=None, min_length=1, max_length=100)

    model_config = {"extra": "forbid"}


class AccountResponse(BaseModel):
    id: str
    name: str
    balance: Decimal
    direction: Direction

    model_config = {"from_attributes": True}
