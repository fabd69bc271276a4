"""Inventory Stats — pure per-status counts over a sequence of records.

Invariants:
    - No IO; callers refresh statuses before counting
    - Every record lands in exactly one bucket, so the buckets sum to total
    - An unrecognized status folds into in_stock

Design Decisions:
    - Pure function, not a RecordStore method: the store owns freshness,
      counting is presentation
"""

from typing import Iterable

from medstock.core.domain_types import RecordStatus
from medstock.core.medicine_record import MedicineRecord

_BUCKETS: dict[RecordStatus, str] = {
    RecordStatus.EXPIRED: "expired",
    RecordStatus.NEAR_EXPIRY: "near_expiry",
    RecordStatus.OUT_OF_STOCK: "out_of_stock",
    RecordStatus.LOW_STOCK: "low_stock",
    RecordStatus.IN_STOCK: "in_stock",
}
_STATUS_BY_LABEL: dict[str, RecordStatus] = {s.value: s for s in RecordStatus}


def compute_inventory_stats(records: Iterable[MedicineRecord]) -> dict:
    """Count records per status bucket. Pure, no IO."""
    stats = {"total": 0, **{bucket: 0 for bucket in _BUCKETS.values()}}
    for record in records:
        stats["total"] += 1
        status = _STATUS_BY_LABEL.get(record.status, RecordStatus.IN_STOCK)
        stats[_BUCKETS[status]] += 1
    return stats
