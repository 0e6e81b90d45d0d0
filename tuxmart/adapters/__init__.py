"""External adapters for the TuxMart store.

This package provides implementations of the core port interfaces.

Adapter Organization:

- payment/: Adapters for securing payment (credit line, always approve)
- inventory/: Adapters for stock keeping (in-memory stock ledger)
- financial/: Adapters for recording orders (stdout journal, markdown ledger)
- cli/: Reading order documents for the command-line entry point
"""
