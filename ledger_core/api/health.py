"""
Health check endpoint.

Used by load balancers, monitoring systems, and humans
to verify the application is running and responsive.
"""

from fastapi import APIRouter, Depends

from ledger_core.dependencies import get_journal, get_ledger
from ledger_core.services.ledger_service import LedgerService
from ledger_core.services.transaction_service import TransactionService

router = APIRouter(tags=["Health"])


@router.get("/health")
def health_check(
    ledger: LedgerService = Depends(get_ledger),
    journal: TransactionService = Depends(get_journal),
):
    """Return application health status with store sizes."""
    return {
        "status": "healthy",
        "service": "ledger-core",
        "accounts": len(ledger.store),
        "transactions": len(journal.store),
    }
