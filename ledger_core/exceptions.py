"""
Error taxonomy for the ledger core.

Every failure the core can report is one of these kinds.
The transport layer maps them to responses:
ValidationError is caller-fixable, NotFoundError means the
referenced record does not exist, InternalError is a defect.
"""


class LedgerError(Exception):
    """Base class for all ledger core errors."""


class ValidationError(LedgerError):
    """A proposed transaction breaks a business rule. Nothing was changed."""


class NotFoundError(LedgerError):
    """An account or transaction with the given id does not exist."""


class InternalError(LedgerError):
    """
    Balance application failed after validation passed.

    This should be unreachable. If it is raised, the journal
    did not record the transaction and no balance changed.
    """
