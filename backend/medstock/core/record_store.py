"""Record Store — the owned, expiry-ordered collection of medicine records.

Invariants:
    - batch_id is unique across the store at all times
    - Iteration order is non-decreasing by expiry_date under compare_dates,
      immediately after every add, update and load
    - A record's status is recomputed on add, update, load and refresh; it is
      never observed stale relative to the last mutation or load
    - Every mutation ends with a full rewrite through the injected repository
    - A failed mutation (duplicate, not found, invalid quantity) leaves both
      memory and storage untouched

Design Decisions:
    - Plain list with linear sorted insertion: O(n) per add, O(n²) worst case
      for the full re-sort after update; sized for hundreds to low thousands
      of batches. No bisect: dates that fall back to byte comparison have no
      sortable key that preserves the tie policy below
    - Tie policy: add places a new record BEFORE existing equal-expiry records;
      re-sort (update, load) is stable, so equal-expiry records keep their
      relative order across restarts
    - Records are frozen; mutation is replace-and-swap, so references returned
      by find/list_all can never change store state
    - Persistence failures after an in-memory mutation propagate as
      PersistenceWriteError with the mutation kept (no rollback)
    - clock is injected so status derivation is testable at a fixed "now"
"""

import logging
from datetime import datetime
from typing import Callable, Iterator

from medstock.core.compare_dates import compare_dates
from medstock.core.derive_status import derive_status
from medstock.core.errors import (
    DuplicateBatchError, ErrorContext, RecordNotFoundError,
)
from medstock.core.inventory_stats import compute_inventory_stats
from medstock.core.medicine_record import MedicineRecord
from medstock.core.record_codec import decode_lines, encode_records
from medstock.core.repository_protocols import RecordRepository

logger = logging.getLogger(__name__)


class RecordStore:
    """Expiry-ordered medicine records with save-on-every-mutation."""

    def __init__(
        self,
        repository: RecordRepository,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self._repository = repository
        self._clock = clock
        self._records: list[MedicineRecord] = []

    # ─── Read-only views ─────────────────────────────────────────

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[MedicineRecord]:
        return iter(tuple(self._records))

    def __contains__(self, batch_id: object) -> bool:
        return isinstance(batch_id, str) and self._index_of(batch_id) is not None

    def list_all(self) -> tuple[MedicineRecord, ...]:
        """Current records in ascending expiry order."""
        return tuple(self._records)

    def find(self, batch_id: str) -> MedicineRecord | None:
        idx = self._index_of(batch_id)
        return None if idx is None else self._records[idx]

    # ─── Lifecycle ───────────────────────────────────────────────

    def load(self) -> int:
        """Replace contents with the persisted records, then rewrite storage.

        Decoding stops at the first malformed line (see decode_lines).
        Returns the number of records loaded.
        """
        decoded = decode_lines(self._repository.load_lines())
        now = self._clock()
        unique: list[MedicineRecord] = []
        seen: set[str] = set()
        for record in decoded:
            if record.batch_id in seen:
                logger.warning(
                    f"Dropping duplicate batch '{record.batch_id}' from storage",
                    extra={"batch_id": record.batch_id, "operation": "load"},
                )
                continue
            seen.add(record.batch_id)
            unique.append(_refreshed(record, now))

        self._records = _sorted_by_expiry(unique)
        logger.info(
            f"Loaded {len(self._records)} medicine record(s)",
            extra={"operation": "load", "record_count": len(self._records)},
        )
        self._persist("load")
        return len(self._records)

    def add(self, record: MedicineRecord) -> MedicineRecord:
        """Insert a new batch in expiry order. Raises DuplicateBatchError."""
        if self._index_of(record.batch_id) is not None:
            raise DuplicateBatchError(
                record.batch_id, ErrorContext(operation="add"),
            )
        stored = _refreshed(record, self._clock())
        idx = _insertion_index(self._records, stored.expiry_date, before_ties=True)
        self._records.insert(idx, stored)
        logger.info(
            f"Added batch '{stored.batch_id}' ({stored.status})",
            extra={
                "batch_id": stored.batch_id, "operation": "add",
                "record_count": len(self._records),
            },
        )
        self._persist("add")
        return stored

    def update(self, batch_id: str, quantity: int) -> MedicineRecord:
        """Set a batch's quantity. Raises RecordNotFoundError."""
        idx = self._require(batch_id, "update")
        updated = _refreshed(self._records[idx].with_quantity(quantity), self._clock())
        records = list(self._records)
        records[idx] = updated
        self._records = _sorted_by_expiry(records)
        logger.info(
            f"Updated batch '{batch_id}' quantity to {quantity} ({updated.status})",
            extra={
                "batch_id": batch_id, "operation": "update",
                "record_count": len(self._records),
            },
        )
        self._persist("update")
        return updated

    def delete(self, batch_id: str) -> MedicineRecord:
        """Remove a batch. Raises RecordNotFoundError."""
        idx = self._require(batch_id, "delete")
        removed = self._records.pop(idx)
        logger.info(
            f"Deleted batch '{batch_id}'",
            extra={
                "batch_id": batch_id, "operation": "delete",
                "record_count": len(self._records),
            },
        )
        self._persist("delete")
        return removed

    # ─── Status views ────────────────────────────────────────────

    def refresh_statuses(self) -> None:
        """Recompute every status against the clock and rewrite storage."""
        now = self._clock()
        self._records = [_refreshed(r, now) for r in self._records]
        self._persist("refresh")

    def expiry_report(self) -> tuple[MedicineRecord, ...]:
        """Freshly recomputed records in expiry order."""
        self.refresh_statuses()
        return self.list_all()

    def stats(self) -> dict:
        """Total and per-status counts after a refresh."""
        self.refresh_statuses()
        return compute_inventory_stats(self._records)

    # ─── Internals ───────────────────────────────────────────────

    def _index_of(self, batch_id: str) -> int | None:
        for idx, record in enumerate(self._records):
            if record.batch_id == batch_id:
                return idx
        return None

    def _require(self, batch_id: str, operation: str) -> int:
        idx = self._index_of(batch_id)
        if idx is None:
            raise RecordNotFoundError(batch_id, ErrorContext(operation=operation))
        return idx

    def _persist(self, operation: str) -> None:
        self._repository.save_lines(encode_records(self._records))
        logger.debug(
            f"Persisted {len(self._records)} record(s) after {operation}",
            extra={"operation": operation, "record_count": len(self._records)},
        )


def _refreshed(record: MedicineRecord, now: datetime) -> MedicineRecord:
    return record.with_status(derive_status(record.expiry_date, record.quantity, now))


def _insertion_index(
    records: list[MedicineRecord], expiry_date: str, *, before_ties: bool,
) -> int:
    """First position whose expiry is greater (or equal, with before_ties)."""
    for idx, record in enumerate(records):
        cmp = compare_dates(record.expiry_date, expiry_date)
        if cmp > 0 or (before_ties and cmp == 0):
            return idx
    return len(records)


def _sorted_by_expiry(records: list[MedicineRecord]) -> list[MedicineRecord]:
    """Stable rebuild by repeated sorted insertion."""
    ordered: list[MedicineRecord] = []
    for record in records:
        ordered.insert(_insertion_index(ordered, record.expiry_date, before_ties=False), record)
    return ordered
