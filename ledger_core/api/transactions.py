"""
Transaction API endpoints.

The API layer is thin: it maps ValidationError to 400 and
NotFoundError to 404, and leaves every business rule to the
TransactionService.
"""

from fastapi import APIRouter, Depends, HTTPException

from ledger_core.dependencies import get_journal
from ledger_core.exceptions import NotFoundError, ValidationError
from ledger_core.services.transaction_service import TransactionService
from ledger_core.schemas.transaction import (
    EntriesValidationRequest,
    EntriesValidationResponse,
    TransactionCreate,
    TransactionResponse,
)

router = APIRouter(prefix="/transactions", tags=["Transactions"])


@router.post("", response_model=TransactionResponse, status_code=201)
def create_transaction(
    request: TransactionCreate,
    journal: TransactionService = Depends(get_journal),
):
    """
    Post a balanced transaction.

    The entries must reference at least two distinct existing
    accounts with positive amounts, and total credits must
    equal total debits. Reusing a transaction id is rejected.
    """
    try:
        return journal.create(request)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/validate", response_model=EntriesValidationResponse)
def validate_entries(
    request: EntriesValidationRequest,
    journal: TransactionService = Depends(get_journal),
):
    """Check entries without posting them. Accounts are not looked up."""
    try:
        journal.validate_entries(request.entries)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return EntriesValidationResponse(valid=True)


@router.get("", response_model=list[TransactionResponse])
def list_transactions(journal: TransactionService = Depends(get_journal)):
    """List every accepted transaction in commit order."""
    return journal.all()


@router.get("/{transaction_id}", response_model=TransactionResponse)
def get_transaction(
    transaction_id: str,
    journal: TransactionService = Depends(get_journal),
):
    """Get transaction details."""
    try:
        return journal.get(transaction_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
