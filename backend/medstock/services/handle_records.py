"""Record Handlers — add, update_quantity, delete, find, list, expiry_report, stats.

Invariants:
    - Every payload is validated by its schema before the store sees it
    - Store errors (duplicate, not found, persistence) propagate unchanged
    - Responses are built from the stored record, so status is the derived one

Design Decisions:
    - Two handler classes (commands / queries): no god object over the store
    - Handlers hold the store, not the repository: ordering and persistence
      stay the store's concern
"""

import logging

from medstock.core.record_store import RecordStore
from medstock.schemas.record import (
    InventoryStatsResponse, MedicineCreate, MedicineResponse, QuantityUpdate,
)

logger = logging.getLogger(__name__)


class RecordCommandHandlers:
    """Mutating operations: add, update_quantity, delete."""

    def __init__(self, store: RecordStore):
        self.store = store

    def add(self, payload: MedicineCreate) -> MedicineResponse:
        stored = self.store.add(payload.to_record())
        return MedicineResponse.from_record(stored)

    def update_quantity(self, payload: QuantityUpdate) -> MedicineResponse:
        updated = self.store.update(payload.batch_id, payload.quantity)
        return MedicineResponse.from_record(updated)

    def delete(self, batch_id: str) -> MedicineResponse:
        removed = self.store.delete(batch_id.strip())
        return MedicineResponse.from_record(removed)


class RecordQueryHandlers:
    """Read operations: find, list_all, expiry_report, stats."""

    def __init__(self, store: RecordStore):
        self.store = store

    def find(self, batch_id: str) -> MedicineResponse | None:
        record = self.store.find(batch_id.strip())
        return None if record is None else MedicineResponse.from_record(record)

    def list_all(self) -> list[MedicineResponse]:
        return [MedicineResponse.from_record(r) for r in self.store.list_all()]

    def expiry_report(self) -> list[MedicineResponse]:
        """Records in expiry order with statuses refreshed against the clock."""
        return [MedicineResponse.from_record(r) for r in self.store.expiry_report()]

    def stats(self) -> InventoryStatsResponse:
        stats = InventoryStatsResponse(**self.store.stats())
        logger.info(
            f"Inventory: {stats.total} batch(es), {stats.expired} expired, "
            f"{stats.near_expiry} near expiry",
            extra={"operation": "stats", "record_count": stats.total},
        )
        return stats
