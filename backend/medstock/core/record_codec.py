"""Record Codec — one MedicineRecord per pipe-delimited line.

Invariants:
    - Line layout: batch|brand|generic|manufacturer|mfg_date|expiry|quantity|status
    - decode requires exactly FIELD_COUNT fields, non-empty text fields and an
      integer quantity; anything else raises RecordDecodeError
    - Text fields longer than their capacity are truncated on read, never rejected
    - decode(encode(r)) == r for every record (records never exceed capacity)

Design Decisions:
    - Encoded lines carry no terminator: the repository owns line framing
    - decode_lines stops at the first malformed line and keeps what came before
      (a damaged tail truncates the load instead of failing it)
    - Persisted status is kept verbatim; the store recomputes it after loading
"""

import logging
import re
from typing import Iterable

from medstock.core.domain_types import (
    BATCH_ID_CAPACITY, DATE_CAPACITY, FIELD_COUNT, FIELD_DELIMITER,
    NAME_CAPACITY, STATUS_CAPACITY,
)
from medstock.core.errors import (
    ErrorContext, RecordDecodeError, RecordValidationError,
)
from medstock.core.medicine_record import MedicineRecord

logger = logging.getLogger(__name__)

_QUANTITY = re.compile(r"\s*[+-]?[0-9]+")

# (field name, capacity) in wire order; quantity sits between expiry and status
_TEXT_LAYOUT: tuple[tuple[str, int], ...] = (
    ("batch_id", BATCH_ID_CAPACITY),
    ("brand_name", NAME_CAPACITY),
    ("generic_name", NAME_CAPACITY),
    ("manufacturer", NAME_CAPACITY),
    ("manufactured_date", DATE_CAPACITY),
    ("expiry_date", DATE_CAPACITY),
)


def encode_record(record: MedicineRecord) -> str:
    """Serialize a record to one line (without terminator). Pure."""
    return FIELD_DELIMITER.join((
        record.batch_id,
        record.brand_name,
        record.generic_name,
        record.manufacturer,
        record.manufactured_date,
        record.expiry_date,
        str(record.quantity),
        record.status,
    ))


def encode_records(records: Iterable[MedicineRecord]) -> list[str]:
    return [encode_record(r) for r in records]


def decode_record(line: str, line_number: int | None = None) -> MedicineRecord:
    """Parse one persisted line. Raises RecordDecodeError on any mismatch."""
    parts = _strip_terminator(line).split(FIELD_DELIMITER)
    if len(parts) != FIELD_COUNT:
        raise _decode_error(
            f"expected {FIELD_COUNT} fields, got {len(parts)}", line, line_number,
        )

    values: dict[str, object] = {}
    for (name, capacity), raw in zip(_TEXT_LAYOUT, parts):
        values[name] = _text_field(name, raw, capacity, line, line_number)

    raw_quantity = parts[6]
    if not _QUANTITY.fullmatch(raw_quantity):
        raise _decode_error(
            f"quantity is not an integer: {raw_quantity!r}", line, line_number,
        )
    values["quantity"] = int(raw_quantity)
    values["status"] = _text_field(
        "status", parts[7], STATUS_CAPACITY, line, line_number,
    )

    try:
        return MedicineRecord(**values)
    except RecordValidationError as e:
        raise _decode_error(e.message, line, line_number) from e


def decode_lines(lines: Iterable[str]) -> list[MedicineRecord]:
    """Decode lines in order, stopping at the first malformed one.

    Blank lines are skipped. A decode failure is logged and ends the
    stream; records decoded before it are returned.
    """
    records: list[MedicineRecord] = []
    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            records.append(decode_record(line, line_number))
        except RecordDecodeError as e:
            logger.warning(
                f"Stopping decode at line {line_number}: {e.message}",
                extra={
                    "operation": "decode", "error_code": e.code,
                    "line_number": line_number, "record_count": len(records),
                    "raw": line,
                },
            )
            break
    return records


def _strip_terminator(line: str) -> str:
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        return line[:-1]
    return line


def _text_field(
    name: str, raw: str, capacity: int, line: str, line_number: int | None,
) -> str:
    if not raw:
        raise _decode_error(f"{name} is empty", line, line_number)
    return raw[:capacity]


def _decode_error(
    reason: str, line: str, line_number: int | None,
) -> RecordDecodeError:
    where = f"line {line_number}" if line_number is not None else "line"
    return RecordDecodeError(
        f"Malformed record on {where}: {reason}",
        line_number,
        ErrorContext(operation="decode", debug_info={"raw": line}),
    )
