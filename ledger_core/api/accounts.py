"""
Account API endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException

from ledger_core.dependencies import get_ledger
from ledger_core.exceptions import NotFoundError
from ledger_core.services.ledger_service import LedgerService
from ledger_core.schemas.account import (
    AccountCreate,
    AccountUpdate,
    AccountResponse,
)

router = APIRouter(prefix="/accounts", tags=["Accounts"])


@router.post("", response_model=AccountResponse, status_code=201)
def create_account(
    request: AccountCreate,
    ledger: LedgerService = Depends(get_ledger),
):
    """Create a new account with an opening balance."""
    return ledger.create(request)


@router.get("", response_model=list[AccountResponse])
def list_accounts(ledger: LedgerService = Depends(get_ledger)):
    """List every account."""
    return ledger.all()


@router.get("/{account_id}", response_model=AccountResponse)
def get_account(
    account_id: str,
    ledger: LedgerService = Depends(get_ledger),
):
    """Get account details, including the current balance."""
    try:
        return ledger.get(account_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.patch("/{account_id}", response_model=AccountResponse)
def update_account(
    account_id: str,
    request: AccountUpdate,
    ledger: LedgerService = Depends(get_ledger),
):
    """
    Rename an account.

    Direction and balance cannot be changed here; a body
    containing them is rejected with 422.
    """
    try:
        return ledger.update(account_id, request)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
