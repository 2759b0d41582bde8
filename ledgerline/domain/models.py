"""Domain type definitions for ledgerline.

These types describe one ledger entry:
- Amount: Signed currency value (positive for deposits, negative for payments)
- Description: Free text describing the entry
- Vendor: Counterparty name
- Record: Immutable ledger entry
"""

from dataclasses import dataclass
from datetime import date, time
from typing import NewType

# Amounts are plain floats, serialized with two decimal places
Amount = NewType("Amount", float)

# Entry description text
Description = NewType("Description", str)

# Counterparty the money went to or came from
Vendor = NewType("Vendor", str)


@dataclass(frozen=True)
class Record:
    """Immutable ledger entry."""

    date: date
    time: time
    description: Description
    vendor: Vendor
    amount: Amount

    @property
    def is_deposit(self) -> bool:
        return self.amount > 0

    @property
    def is_payment(self) -> bool:
        return self.amount < 0
