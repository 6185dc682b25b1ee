"""
Shared test fixtures.

Every test gets its own ledger and journal, so no state is
shared between tests.
"""

import pytest
from fastapi.testclient import TestClient

from ledger_core.dependencies import get_journal, get_ledger
from ledger_core.main import app
from ledger_core.services.ledger_service import LedgerService
from ledger_core.services.transaction_service import TransactionService


@pytest.fixture
def ledger():
    """Provide an empty ledger."""
    return LedgerService()


@pytest.fixture
def journal(ledger):
    """Provide a journal bound to the ledger fixture."""
    return TransactionService(ledger)


@pytest.fixture
def demo_accounts(ledger):
    """
    Load account "1" (DEBIT, 100) and account "2" (CREDIT, 200).
    """
    return ledger.seed_demo_accounts()


@pytest.fixture
def client(ledger, journal):
    """
    Provide a test client wired to the ledger and journal fixtures.

    We override the dependency providers so the app uses this
    test's instances instead of the ones on app.state.
    """
    app.dependency_overrides[get_ledger] = lambda: ledger
    app.dependency_overrides[get_journal] = lambda: journal
    yield TestClient(app)
    app.dependency_overrides.clear()
