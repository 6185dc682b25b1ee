"""In-memory double-entry ledger: accounts, balances and a journal of transactions."""
