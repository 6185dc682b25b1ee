"""
Transaction service: the journal of accepted transactions.

Posting a transaction goes through these steps, in order:
1. Idempotency: a supplied id must not already be in the journal
2. Entries: at least two, all amounts positive, no account twice,
   credits equal debits
3. Accounts: every referenced account exists in the ledger
4. Apply: the ledger updates the balances
5. Commit: the transaction is appended to the journal

Steps 1 to 3 never change anything. Steps 4 and 5 run as one
unit under the lock shared with the ledger: either both happen
or neither does.
"""

import decimal
import uuid
from decimal import Decimal
from typing import Iterable

from ledger_core.exceptions import (
    InternalError,
    NotFoundError,
    ValidationError,
)
from ledger_core.logging_config import get_logger
from ledger_core.models.enums import Direction
from ledger_core.models.transaction import Transaction, TransactionEntry
from ledger_core.money import DECIMAL_PLACES, MAX_DIGITS, exact_context, fits_scale
from ledger_core.schemas.transaction import TransactionCreate
from ledger_core.services.ledger_service import LedgerService
from ledger_core.store import InMemoryStore

logger = get_logger("ledger_core.journal")

MIN_ENTRIES = 2


class TransactionService:

    def __init__(self, ledger: LedgerService, store: InMemoryStore | None = None):
        self.ledger = ledger
        if store is None:
            store = InMemoryStore(lock=ledger.lock)
        elif store.lock is not ledger.lock:
            raise ValueError("Journal store must share the ledger's lock")
        self.store = store

    @property
    def lock(self):
        return self.store.lock

    def get(self, transaction_id: str) -> Transaction:
        """Get a transaction by ID."""
        transaction = self.store.get(transaction_id)
        if transaction is None:
            raise NotFoundError(f"Transaction {transaction_id} not found")
        return transaction

    def all(self) -> list[Transaction]:
        """Return every accepted transaction in commit order."""
        return self.store.all()

    def validate_entries(self, entries: Iterable) -> None:
        """
        Check the structure of a set of entries.

        Pure check, no account lookups. Amounts must be fixed-point
        (see ledger_core.money) and are summed without rounding.
        Raises ValidationError on the first broken rule.
        """
        entries = list(entries)

        if len(entries) < MIN_ENTRIES:
            raise ValidationError("Transaction must have at least two entries")

        for entry in entries:
            if not fits_scale(entry.amount):
                raise ValidationError(
                    f"Entry amounts must have at most {DECIMAL_PLACES} decimal "
                    f"places and {MAX_DIGITS} digits: "
                    f"{entry.account_id}={entry.amount}"
                )
            if entry.amount <= 0:
                raise ValidationError(
                    f"Entry amounts must be positive: "
                    f"{entry.account_id}={entry.amount}"
                )

        seen = set()
        for entry in entries:
            if entry.account_id in seen:
                raise ValidationError(
                    f"Duplicate account in transaction entries: {entry.account_id}"
                )
            seen.add(entry.account_id)

        try:
            with exact_context():
                total_credits = sum(
                    (e.amount for e in entries if e.direction == Direction.CREDIT),
                    Decimal("0"),
                )
                total_debits = sum(
                    (e.amount for e in entries if e.direction == Direction.DEBIT),
                    Decimal("0"),
                )
        except decimal.DecimalException as e:
            raise ValidationError(
                f"Transaction totals cannot be computed exactly: {e!r}"
            ) from e

        if total_credits != total_debits:
            raise ValidationError(
                f"Transaction does not balance: "
                f"credits={total_credits}, debits={total_debits}"
            )

    def validate(self, request: TransactionCreate) -> None:
        """
        Run every check that must pass before a transaction is posted.

        The order is fixed: idempotency, entries, then account
        existence, so that structural failures never reach the ledger.
        """
        if request.id and self.store.exists(request.id):
            raise ValidationError(
                f"Transaction with id '{request.id}' already exists"
            )

        self.validate_entries(request.entries)

        missing = []
        for entry in request.entries:
            try:
                self.ledger.get(entry.account_id)
            except NotFoundError:
                missing.append(entry.account_id)
        if missing:
            raise ValidationError(f"Accounts not found: {', '.join(missing)}")

    def create(self, request: TransactionCreate) -> Transaction:
        """
        Validate a proposal and post it.

        A generated id is assigned if the client did not supply
        one. Raises ValidationError if the proposal is rejected,
        InternalError if the ledger fails to apply it.
        """
        with self.lock:
            try:
                self.validate(request)
            except ValidationError as e:
                logger.warning(
                    "Transaction rejected: %s", e,
                    extra={"transaction_id": request.id, "action": "transaction.reject"},
                )
                raise

            transaction = Transaction(
                id=request.id or str(uuid.uuid4()),
                name=request.name,
                entries=tuple(
                    TransactionEntry(
                        account_id=entry.account_id,
                        amount=entry.amount,
                        direction=entry.direction,
                    )
                    for entry in request.entries
                ),
            )
            self._post(transaction)

        logger.info(
            "Transaction committed",
            extra={"transaction_id": transaction.id, "action": "transaction.commit"},
        )
        return transaction

    def _post(self, transaction: Transaction) -> None:
        """
        Apply a validated transaction to the ledger, then append it.

        Both steps run inside the ledger store's atomic block, so
        a failed append also rolls the balances back. The caller
        must hold the lock.
        """
        with self.ledger.store.atomic():
            try:
                self.ledger.apply_transaction(transaction)
            except Exception as e:
                logger.error(
                    "Failed to apply validated transaction",
                    exc_info=True,
                    extra={"transaction_id": transaction.id, "action": "ledger.apply"},
                )
                raise InternalError(
                    f"Failed to apply transaction {transaction.id}: {e}"
                ) from e
            self.store.put(transaction.id, transaction)
