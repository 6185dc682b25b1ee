"""
FastAPI dependency providers.

The ledger and journal are created once per application and kept
on app.state. Tests swap them through app.dependency_overrides.
"""

from fastapi import Request

from ledger_core.services.ledger_service import LedgerService
from ledger_core.services.transaction_service import TransactionService


def get_ledger(request: Request) -> LedgerService:
    return request.app.state.ledger


def get_journal(request: Request) -> TransactionService:
    return request.app.state.journal
