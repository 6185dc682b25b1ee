"""Business logic services."""

from ledger_core.services.ledger_service import LedgerService
from ledger_core.services.transaction_service import TransactionService

__all__ = ["LedgerService", "TransactionService"]
