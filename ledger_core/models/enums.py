"""
Shared enumerations for ledger records.
"""

import enum


class Direction(str, enum.Enum):
    """
    Polarity of an account, or of a single entry against an account.

    An entry whose direction matches the account's own direction
    increases the balance. Any other entry decreases it.
    """
    CREDIT = "credit"
    DEBIT = "debit"
