"""Domain Types — status labels, rule constants and wire-format limits.

Invariants:
    - RecordStatus values are the exact labels written to the store file
    - Field capacities are the single source of truth for codec truncation
      and boundary validation

Design Decisions:
    - str Enum for status: compares equal to the persisted label, so a raw
      string read from disk and a derived status are interchangeable
"""

from enum import Enum


# ─── Enums ───────────────────────────────────────────────────────

class RecordStatus(str, Enum):
    """Derived operational label. Order here is rule precedence."""
    EXPIRED = "EXPIRED"
    NEAR_EXPIRY = "NEAR EXPIRY"
    OUT_OF_STOCK = "OUT OF STOCK"
    LOW_STOCK = "LOW STOCK"
    IN_STOCK = "IN STOCK"


# ─── Status Rule Constants ───────────────────────────────────────

NEAR_EXPIRY_DAYS: int = 30
LOW_STOCK_THRESHOLD: int = 10
SECONDS_PER_DAY: float = 60.0 * 60.0 * 24.0


# ─── Wire Format ─────────────────────────────────────────────────

FIELD_DELIMITER: str = "|"
FIELD_COUNT: int = 8

# Max characters per string field (fixed buffer size minus terminator)
BATCH_ID_CAPACITY: int = 31
NAME_CAPACITY: int = 63
DATE_CAPACITY: int = 15
STATUS_CAPACITY: int = 23
