"""Pure functions for ledger line encoding and record validation.

This module contains the functional core for record operations:
- No I/O operations (no files, no console)
- No side effects
- Pure data transformations
- Easy to test

Ledger lines look like ``yyyy-MM-dd|HH:mm:ss|description|vendor|amount``.
"""

import math
from datetime import datetime

from ledgerline.domain.models import Amount, Description, Record, Vendor

FIELD_SEPARATOR = "|"
FIELD_COUNT = 5
DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M:%S"


def format_amount(amount: float) -> str:
    """Format an amount the way it is written to the ledger file.

    Args:
        amount: Signed amount.

    Returns:
        Amount with exactly two decimal places (e.g., "-75.50").
    """
    return f"{amount:.2f}"


def format_record_line(record: Record) -> str:
    """Serialize a record into a single ledger line.

    Args:
        record: Record to serialize.

    Returns:
        Pipe-delimited line without a trailing newline.
    """
    return FIELD_SEPARATOR.join(
        [
            record.date.strftime(DATE_FORMAT),
            record.time.strftime(TIME_FORMAT),
            record.description,
            record.vendor,
            format_amount(record.amount),
        ]
    )


def parse_record_line(line: str) -> Record | None:
    """Parse a single ledger line into a record.

    Args:
        line: Raw line from the ledger file.

    Returns:
        Parsed Record, or None if the line does not have exactly five fields.

    Raises:
        ValueError: If the date, time, or amount field cannot be parsed.
    """
    parts = line.strip().split(FIELD_SEPARATOR)
    if len(parts) != FIELD_COUNT:
        return None

    raw_date, raw_time, description, vendor, raw_amount = parts

    amount = float(raw_amount)
    if "_" in raw_amount or not math.isfinite(amount):
        raise ValueError(f"Invalid amount: {raw_amount.strip()}")

    return Record(
        date=datetime.strptime(raw_date, DATE_FORMAT).date(),
        time=datetime.strptime(raw_time, TIME_FORMAT).time(),
        description=Description(description),
        vendor=Vendor(vendor),
        amount=Amount(amount),
    )


def validate_text_field(label: str, value: str) -> str | None:
    """Check that a free-text field can be stored in a ledger line.

    Args:
        label: Field name used in the error message.
        value: User-entered text.

    Returns:
        Error message, or None if the value is acceptable.
    """
    if FIELD_SEPARATOR in value:
        return f"{label} must not contain '{FIELD_SEPARATOR}'"
    if "\n" in value or "\r" in value:
        return f"{label} must be a single line"
    return None


def signed_amount(magnitude: float, is_payment: bool) -> tuple[Amount | None, str | None]:
    """Apply the deposit/payment sign to a user-entered magnitude.

    Args:
        magnitude: Amount as entered by the user.
        is_payment: Whether the entry is a payment (stored negative).

    Returns:
        Tuple of (amount, error). Exactly one of them is None.
    """
    if magnitude <= 0:
        return None, "Amount must be positive"

    if is_payment:
        return Amount(-abs(magnitude)), None
    return Amount(magnitude), None


def new_record(
    description: str,
    vendor: str,
    magnitude: float,
    is_payment: bool,
    now: datetime,
) -> tuple[Record | None, str | None]:
    """Build a record from user input, stamped with the given moment.

    Args:
        description: Entry description.
        vendor: Counterparty name.
        magnitude: Positive amount as entered.
        is_payment: Whether to store the amount as a payment.
        now: Timestamp for the entry (microseconds are dropped).

    Returns:
        Tuple of (record, error). Exactly one of them is None.
    """
    description = description.strip()
    vendor = vendor.strip()

    for label, value in (("Description", description), ("Vendor", vendor)):
        error = validate_text_field(label, value)
        if error:
            return None, error

    amount, error = signed_amount(magnitude, is_payment)
    if amount is None:
        return None, error

    record = Record(
        date=now.date(),
        time=now.time().replace(microsecond=0),
        description=Description(description),
        vendor=Vendor(vendor),
        amount=amount,
    )
    return record, None
