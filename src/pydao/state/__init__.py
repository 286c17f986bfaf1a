"""State/store layer.

This package owns the ledger's single mutable state and the conversion
of that state into a flat external snapshot. Only the voting service is
expected to mutate it.
"""
