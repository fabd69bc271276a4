"""Record Schemas — Pydantic models for operator input and record display.

Invariants:
    - MedicineCreate text fields: stripped, non-empty, within capacity, no
      delimiter or line breaks (a valid create always round-trips the codec)
    - Dates must look like YYYY-MM-DD; calendar validity is not checked
    - MedicineCreate.quantity >= 0; QuantityUpdate accepts any integer

Design Decisions:
    - Capacities repeated here (MedicineRecord enforces them too) so operator
      input fails as a pydantic ValidationError listing every bad field
    - Consumed by services/handle_records.py, the operator shell's contract
    - field_validator for side-effect-free transforms (strip): keeps models pure
"""

from pydantic import BaseModel, Field, field_validator

from medstock.core.domain_types import (
    BATCH_ID_CAPACITY, DATE_CAPACITY, FIELD_DELIMITER, NAME_CAPACITY,
)
from medstock.core.medicine_record import MedicineRecord

_DATE_PATTERN = r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$"


class MedicineCreate(BaseModel):
    """New batch entered by an operator."""
    batch_id: str = Field(min_length=1, max_length=BATCH_ID_CAPACITY)
    brand_name: str = Field(min_length=1, max_length=NAME_CAPACITY)
    generic_name: str = Field(min_length=1, max_length=NAME_CAPACITY)
    manufacturer: str = Field(min_length=1, max_length=NAME_CAPACITY)
    manufactured_date: str = Field(max_length=DATE_CAPACITY, pattern=_DATE_PATTERN)
    expiry_date: str = Field(max_length=DATE_CAPACITY, pattern=_DATE_PATTERN)
    quantity: int = Field(ge=0)

    @field_validator(
        "batch_id", "brand_name", "generic_name", "manufacturer",
        "manufactured_date", "expiry_date",
        mode="before",
    )
    @classmethod
    def strip_text(cls, v: object) -> object:
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("batch_id", "brand_name", "generic_name", "manufacturer")
    @classmethod
    def reject_delimiters(cls, v: str) -> str:
        if FIELD_DELIMITER in v:
            raise ValueError(f"cannot contain '{FIELD_DELIMITER}'")
        if "\n" in v or "\r" in v:
            raise ValueError("cannot contain line breaks")
        return v

    def to_record(self) -> MedicineRecord:
        return MedicineRecord(**self.model_dump())


class QuantityUpdate(BaseModel):
    """Quantity change for an existing batch. Negative values are accepted."""
    batch_id: str = Field(min_length=1, max_length=BATCH_ID_CAPACITY)
    quantity: int

    @field_validator("batch_id", mode="before")
    @classmethod
    def strip_batch_id(cls, v: object) -> object:
        if isinstance(v, str):
            return v.strip()
        return v


class MedicineResponse(BaseModel):
    """Public projection of a stored record."""
    batch_id: str
    brand_name: str
    generic_name: str
    manufacturer: str
    manufactured_date: str
    expiry_date: str
    quantity: int
    status: str

    @classmethod
    def from_record(cls, record: MedicineRecord) -> "MedicineResponse":
        return cls(**record.as_dict())


class InventoryStatsResponse(BaseModel):
    """Counts returned by RecordStore.stats()."""
    total: int = Field(ge=0)
    expired: int = Field(ge=0)
    near_expiry: int = Field(ge=0)
    out_of_stock: int = Field(ge=0)
    low_stock: int = Field(ge=0)
    in_stock: int = Field(ge=0)
