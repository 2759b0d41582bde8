"""Pure functions for filtering and totalling ledger records.

This module contains the functional core for ledger queries:
- No I/O operations (no files, no console)
- No side effects
- Every filter returns a new list and preserves input order
- Easy to test
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import date

from ledgerline.domain.models import Amount, Record


@dataclass(frozen=True)
class CustomQuery:
    """Immutable multi-field search criteria.

    Blank strings and None values are ignored; supplied criteria are combined with AND.
    """

    start: date | None = None
    end: date | None = None
    description: str | None = None
    vendor: str | None = None
    amount: float | None = None


@dataclass(frozen=True)
class LedgerSummary:
    """Immutable totals for a set of records."""

    count: int
    deposits: Amount
    payments: Amount
    net: Amount


def _contains(text: str, needle: str) -> bool:
    return needle.lower() in text.lower()


def by_date_range(records: Iterable[Record], start: date | None, end: date | None) -> list[Record]:
    """Select records dated within an inclusive range.

    Args:
        records: Records to scan.
        start: First date to include, or None for no lower bound.
        end: Last date to include, or None for no upper bound.

    Returns:
        Records with start <= date <= end.
    """
    return [
        record
        for record in records
        if (start is None or record.date >= start) and (end is None or record.date <= end)
    ]


def by_vendor(records: Iterable[Record], name: str) -> list[Record]:
    """Select records whose vendor equals the given name, ignoring case.

    Args:
        records: Records to scan.
        name: Vendor name as entered; surrounding whitespace is ignored.

    Returns:
        Records with an exact case-insensitive vendor match.
    """
    wanted = name.strip().lower()
    return [record for record in records if record.vendor.strip().lower() == wanted]


def by_custom_query(records: Iterable[Record], query: CustomQuery) -> list[Record]:
    """Select records matching every supplied criterion of a custom search.

    Description and vendor use case-insensitive substring matching. The amount
    must compare equal as a float; there is no tolerance.

    Args:
        records: Records to scan.
        query: Search criteria.

    Returns:
        Matching records. An empty query returns every record.
    """
    description = (query.description or "").strip()
    vendor = (query.vendor or "").strip()

    matches = by_date_range(records, query.start, query.end)

    if description:
        matches = [record for record in matches if _contains(record.description, description)]

    if vendor:
        matches = [record for record in matches if _contains(record.vendor, vendor)]

    if query.amount is not None:
        matches = [record for record in matches if record.amount == query.amount]

    return matches


def deposits(records: Iterable[Record]) -> list[Record]:
    """Select records with a positive amount."""
    return [record for record in records if record.is_deposit]


def payments(records: Iterable[Record]) -> list[Record]:
    """Select records with a negative amount."""
    return [record for record in records if record.is_payment]


def newest_first(records: Sequence[Record]) -> list[Record]:
    """Return records in display order (most recently added first)."""
    return list(reversed(records))


def summarize(records: Iterable[Record]) -> LedgerSummary:
    """Total the deposits and payments in a set of records.

    Args:
        records: Records to total.

    Returns:
        LedgerSummary where payments is zero or negative and net is their sum.
    """
    count = 0
    deposit_total = 0.0
    payment_total = 0.0

    for record in records:
        count += 1
        if record.is_deposit:
            deposit_total += record.amount
        elif record.is_payment:
            payment_total += record.amount

    return LedgerSummary(
        count=count,
        deposits=Amount(deposit_total),
        payments=Amount(payment_total),
        net=Amount(deposit_total + payment_total),
    )
