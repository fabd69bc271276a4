"""Medicine Record — construction checks and replace-based mutation."""

import dataclasses

import pytest

from medstock.core.domain_types import RecordStatus
from medstock.core.errors import RecordValidationError
from tests.factories import make_record


def test_record_is_frozen():
    record = make_record()
    with pytest.raises(dataclasses.FrozenInstanceError):
        record.quantity = 3


def test_with_quantity_returns_new_record():
    record = make_record(quantity=5)
    updated = record.with_quantity(20)
    assert updated.quantity == 20
    assert record.quantity == 5
    assert updated.batch_id == record.batch_id


def test_with_status_stores_label():
    record = make_record().with_status(RecordStatus.NEAR_EXPIRY)
    assert record.status == "NEAR EXPIRY"


def test_negative_quantity_accepted():
    assert make_record(quantity=-1).quantity == -1


@pytest.mark.parametrize("field", ["batch_id", "brand_name", "manufacturer", "expiry_date"])
def test_empty_text_field_rejected(field):
    with pytest.raises(RecordValidationError) as exc_info:
        make_record(**{field: ""})
    assert exc_info.value.field == field


@pytest.mark.parametrize("value", ["A|B", "line\nbreak", "carriage\rreturn"])
def test_delimiter_and_line_breaks_rejected(value):
    with pytest.raises(RecordValidationError):
        make_record(generic_name=value)


@pytest.mark.parametrize("quantity", ["5", 2.5, True])
def test_non_integer_quantity_rejected(quantity):
    with pytest.raises(RecordValidationError) as exc_info:
        make_record(quantity=quantity)
    assert exc_info.value.field == "quantity"


@pytest.mark.parametrize("field, capacity", [
    ("batch_id", 31), ("brand_name", 63), ("manufacturer", 63),
    ("expiry_date", 15), ("status", 23),
])
def test_overlong_values_rejected(field, capacity):
    with pytest.raises(RecordValidationError) as exc_info:
        make_record(**{field: "9" * (capacity + 1)})
    assert exc_info.value.field == field


def test_values_at_capacity_accepted():
    record = make_record("L" * 31, brand_name="B" * 63)
    assert len(record.batch_id) == 31
    assert len(record.brand_name) == 63


def test_as_dict_lists_all_fields():
    assert list(make_record().as_dict()) == [
        "batch_id", "brand_name", "generic_name", "manufacturer",
        "manufactured_date", "expiry_date", "quantity", "status",
    ]
