"""Domain models and types for ledgerline.

This package contains the functional core:
- Pure functions with no side effects
- No I/O operations
- Easy to test
- Ledger logic separated from the file store and the shell
"""

from ledgerline.domain.models import Amount, Description, Record, Vendor

__all__ = ["Amount", "Description", "Record", "Vendor"]
