"""Ledger store layer - provides persistence for the application.

This module re-exports the public store API for easy importing.
"""

from ledgerline.store.ledger import LedgerStore, LoadResult

__all__ = ["LedgerStore", "LoadResult"]
