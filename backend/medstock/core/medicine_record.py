"""Medicine Record — one inventory lot, immutable once constructed.

Invariants:
    - String fields are non-empty, within their field capacity, and contain
      neither the delimiter nor line breaks
    - quantity is any int (negative accepted, classified OUT OF STOCK)
    - status is derived; only the store and the codec ever supply it

Design Decisions:
    - Frozen dataclass: the store swaps records via dataclasses.replace, so a
      reference handed to a caller can never alter store state
    - Overlong values are rejected here, so a record accepted in memory is
      written and read back unchanged; the codec truncates before building
"""

from dataclasses import dataclass, fields, replace

from medstock.core.domain_types import (
    BATCH_ID_CAPACITY, DATE_CAPACITY, FIELD_DELIMITER, NAME_CAPACITY,
    STATUS_CAPACITY, RecordStatus,
)
from medstock.core.errors import RecordValidationError

# (field name, capacity) for every text field
_TEXT_FIELDS: tuple[tuple[str, int], ...] = (
    ("batch_id", BATCH_ID_CAPACITY),
    ("brand_name", NAME_CAPACITY),
    ("generic_name", NAME_CAPACITY),
    ("manufacturer", NAME_CAPACITY),
    ("manufactured_date", DATE_CAPACITY),
    ("expiry_date", DATE_CAPACITY),
    ("status", STATUS_CAPACITY),
)


@dataclass(frozen=True)
class MedicineRecord:
    batch_id: str
    brand_name: str
    generic_name: str
    manufacturer: str
    manufactured_date: str
    expiry_date: str
    quantity: int
    status: str = RecordStatus.IN_STOCK.value

    def __post_init__(self):
        for name, capacity in _TEXT_FIELDS:
            _check_text_field(name, getattr(self, name), capacity)
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise RecordValidationError(
                f"quantity must be an integer, got {self.quantity!r}", "quantity",
            )

    def with_quantity(self, quantity: int) -> "MedicineRecord":
        return replace(self, quantity=quantity)

    def with_status(self, status: RecordStatus) -> "MedicineRecord":
        return replace(self, status=status.value)

    def as_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}


def _check_text_field(name: str, value: object, capacity: int) -> None:
    if not isinstance(value, str):
        raise RecordValidationError(f"{name} must be a string", name)
    if not value:
        raise RecordValidationError(f"{name} cannot be empty", name)
    if len(value) > capacity:
        raise RecordValidationError(
            f"{name} exceeds {capacity} characters", name,
        )
    if FIELD_DELIMITER in value:
        raise RecordValidationError(
            f"{name} cannot contain '{FIELD_DELIMITER}'", name,
        )
    if "\n" in value or "\r" in value:
        raise RecordValidationError(f"{name} cannot contain line breaks", name)
