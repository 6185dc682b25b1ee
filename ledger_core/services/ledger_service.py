"""
Ledger service: owns accounts and their balances.

This service enforces the rules for balances:
1. Only applying a transaction changes a balance
2. An entry in the account's own direction adds to the balance,
   an entry in the other direction subtracts from it
3. A transaction is applied to all of its accounts or none

No other service writes balances. The TransactionService calls
apply_transaction only after a transaction has passed validation.
"""

import uuid
from decimal import Decimal

from ledger_core.exceptions import NotFoundError
from ledger_core.logging_config import get_logger
from ledger_core.models.account import Account
from ledger_core.models.enums import Direction
from ledger_core.models.transaction import Transaction
from ledger_core.money import exact_context
from ledger_core.schemas.account import AccountCreate, AccountUpdate
from ledger_core.store import InMemoryStore

logger = get_logger("ledger_core.ledger")


# Fixed-id accounts loaded when SEED_DEMO_DATA is enabled
DEMO_ACCOUNTS = [
    Account(
        id="1",
        name="Primary Account",
        balance=Decimal("100"),
        direction=Direction.DEBIT,
    ),
    Account(
        id="2",
        name="Secondary Account",
        balance=Decimal("200"),
        direction=Direction.CREDIT,
    ),
]


class LedgerService:
    """
    All balance changes pass through this service.

    The account store can be supplied by the caller. Its lock is
    the one the TransactionService joins, so the whole
    validate, apply and commit sequence runs under a single lock.
    """

    def __init__(self, store: InMemoryStore | None = None):
        self.store = store if store is not None else InMemoryStore()

    @property
    def lock(self):
        return self.store.lock

    def create(self, request: AccountCreate) -> Account:
        """Create an account with a freshly generated id."""
        account = Account(
            id=str(uuid.uuid4()),
            name=request.name,
            balance=request.balance,
            direction=request.direction,
        )
        self.store.put(account.id, account)
        logger.info(
            "Account created",
            extra={"account_id": account.id, "action": "account.create"},
        )
        return account

    def get(self, account_id: str) -> Account:
        """
        Return the account with the given id.

        Raises NotFoundError if it does not exist.
        """
        account = self.store.get(account_id)
        if account is None:
            raise NotFoundError(f"Account {account_id} not found")
        return account

    def all(self) -> list[Account]:
        """Return every account in creation order."""
        return self.store.all()

    def update(self, account_id: str, request: AccountUpdate) -> Account:
        """
        Merge the supplied fields into a stored account.

        Fields left out of the request are untouched.
        """
        with self.lock:
            account = self.get(account_id)
            changes = request.model_dump(exclude_unset=True, exclude_none=True)
            updated = account.model_copy(update=changes)
            self.store.put(account_id, updated)

        logger.info(
            "Account updated",
            extra={"account_id": account_id, "action": "account.update"},
        )
        return updated

    def apply_transaction(self, transaction: Transaction) -> list[Account]:
        """
        Apply every entry of a transaction to its account.

        All target accounts are resolved before any balance is
        written, so a missing account raises NotFoundError with
        nothing changed. If a write fails part way, the store is
        rolled back.

        Returns the updated accounts in entry order.
        """
        with self.store.atomic():
            touched: dict[str, Account] = {}
            for entry in transaction.entries:
                if entry.account_id not in touched:
                    touched[entry.account_id] = self.get(entry.account_id)

            affected = []
            for entry in transaction.entries:
                account = touched[entry.account_id]
                # A balance outgrowing the decimal precision raises, never rounds
                with exact_context():
                    balance = account.balance + account.delta_for(entry)
                account = account.model_copy(update={"balance": balance})
                touched[entry.account_id] = account
                affected.append(account)
                logger.debug(
                    "Applied %s %s to balance, now %s",
                    entry.direction.value,
                    entry.amount,
                    account.balance,
                    extra={
                        "account_id": account.id,
                        "transaction_id": transaction.id,
                        "action": "ledger.apply",
                    },
                )

            for account in touched.values():
                self.store.put(account.id, account)

        return affected

    def seed_demo_accounts(self) -> list[Account]:
        """Load the demo accounts, keeping their fixed ids."""
        for account in DEMO_ACCOUNTS:
            self.store.put(account.id, account)
        logger.info(
            "Seeded %d demo accounts", len(DEMO_ACCOUNTS),
            extra={"action": "account.seed"},
        )
        return [self.get(account.id) for account in DEMO_ACCOUNTS]
