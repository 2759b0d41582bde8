"""Date utilities for ledgerline.

Pure functions for report period calculations and parsing user-entered values.
"""

import math
from datetime import date, timedelta

import pandas as pd


def month_to_date(today: date) -> tuple[date, date, str]:
    """Range from the first day of the current month through today.

    Args:
        today: Reference date.

    Returns:
        Tuple of (start, end, label), both dates inclusive.
    """
    start = today.replace(day=1)
    return start, today, f"{today.strftime('%B %Y')} to date"


def previous_month(today: date) -> tuple[date, date, str]:
    """Range covering the whole calendar month before today's month.

    Args:
        today: Reference date.

    Returns:
        Tuple of (start, end, label), both dates inclusive.
    """
    end = today.replace(day=1) - timedelta(days=1)
    start = end.replace(day=1)
    return start, end, end.strftime("%B %Y")


def year_to_date(today: date) -> tuple[date, date, str]:
    """Range from January 1st of the current year through today."""
    start = date(today.year, 1, 1)
    return start, today, f"{today.year} to date"


def previous_year(today: date) -> tuple[date, date, str]:
    """Range covering January 1st to December 31st of the previous year."""
    year = today.year - 1
    return date(year, 1, 1), date(year, 12, 31), str(year)


def parse_user_date(text: str) -> date | None:
    """Parse a date typed at a prompt.

    Args:
        text: User input, preferably YYYY-MM-DD.

    Returns:
        Parsed date, or None if the input is blank.

    Raises:
        ValueError: If the input is not a recognisable date.
    """
    text = text.strip()
    if not text:
        return None

    parsed = pd.to_datetime(text)
    if pd.isna(parsed):
        raise ValueError(f"Invalid date: {text}")
    return parsed.date()


def parse_user_amount(text: str) -> float | None:
    """Parse an amount typed at a prompt.

    Args:
        text: User input such as "75.50", "$1,200" or "-10".

    Returns:
        Parsed amount, or None if the input is blank.

    Raises:
        ValueError: If the input is not a finite number.
    """
    text = text.strip().replace("$", "").replace(",", "")
    if not text:
        return None

    amount = float(text)
    if not math.isfinite(amount):
        raise ValueError(f"Invalid amount: {text}")
    return amount
