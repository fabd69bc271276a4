"""Status Engine — derive a record's status from expiry date, quantity and now.

Invariants:
    - derive_status is PURE: same (expiry_date, quantity, now) → same label
    - Precedence: EXPIRED > NEAR EXPIRY > OUT OF STOCK > LOW STOCK > IN STOCK
    - An unparseable expiry date skips the expiry rules silently
    - Day count is the continuous difference to local midnight of the expiry
      date, compared unrounded against 0 and NEAR_EXPIRY_DAYS

Design Decisions:
    - now is a parameter, never read here: the store owns the clock, so a
      status is only as fresh as its last recomputation
    - Out-of-range month/day values roll over the way mktime normalizes them
      (2024-02-30 → 2024-03-01); unrepresentable years count as unparseable
"""

from datetime import datetime, timedelta

from medstock.core.compare_dates import parse_date_parts
from medstock.core.domain_types import (
    LOW_STOCK_THRESHOLD, NEAR_EXPIRY_DAYS, SECONDS_PER_DAY, RecordStatus,
)


def derive_status(expiry_date: str, quantity: int, now: datetime) -> RecordStatus:
    """Apply the status rules in precedence order. Pure, no IO."""
    days = days_until(expiry_date, now)
    if days is not None:
        if days < 0.0:
            return RecordStatus.EXPIRED
        if days <= NEAR_EXPIRY_DAYS:
            return RecordStatus.NEAR_EXPIRY
    return stock_status(quantity)


def stock_status(quantity: int) -> RecordStatus:
    if quantity <= 0:
        return RecordStatus.OUT_OF_STOCK
    if quantity <= LOW_STOCK_THRESHOLD:
        return RecordStatus.LOW_STOCK
    return RecordStatus.IN_STOCK


def days_until(expiry_date: str, now: datetime) -> float | None:
    """Fractional days from now to expiry midnight, or None if unparseable."""
    parts = parse_date_parts(expiry_date)
    if parts is None:
        return None
    expiry = _normalized_midnight(*parts)
    if expiry is None:
        return None
    return (expiry - now).total_seconds() / SECONDS_PER_DAY


def _normalized_midnight(year: int, month: int, day: int) -> datetime | None:
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    try:
        return datetime(year, month, 1) + timedelta(days=day - 1)
    except (ValueError, OverflowError):
        return None
