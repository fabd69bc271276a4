"""Error Hierarchy — codes, categories and the response envelope."""

from medstock.core.errors import (
    DuplicateBatchError, ErrorCategory, ErrorContext, ErrorSeverity,
    MedStockError, PersistenceReadError, PersistenceWriteError,
    RecordNotFoundError,
)


def test_duplicate_batch_is_conflict():
    err = DuplicateBatchError("B1")
    assert err.code == "DUPLICATE_BATCH"
    assert err.category == ErrorCategory.CONFLICT
    assert err.context.batch_id == "B1"
    assert err.context.operation == "add"
    assert isinstance(err, MedStockError)


def test_not_found_keeps_operation_from_context():
    err = RecordNotFoundError("B9", ErrorContext(operation="delete"))
    assert err.code == "RECORD_NOT_FOUND"
    assert err.category == ErrorCategory.RESOURCE_NOT_FOUND
    assert err.context.operation == "delete"
    assert "B9" in str(err)


def test_persistence_errors_are_critical_storage_errors():
    write = PersistenceWriteError("disk full")
    read = PersistenceReadError("permission denied")
    assert write.operation == "write"
    assert read.operation == "read"
    assert write.code == "PERSISTENCE_WRITE_FAILED"
    assert read.code == "PERSISTENCE_READ_FAILED"
    for err in (write, read):
        assert err.category == ErrorCategory.STORAGE
        assert err.severity == ErrorSeverity.CRITICAL


def test_to_response_envelope():
    body = RecordNotFoundError("B2", ErrorContext(operation="update")).to_response()
    error = body["error"]
    assert error["code"] == "RECORD_NOT_FOUND"
    assert error["category"] == "resource_not_found"
    assert error["severity"] == "error"
    assert error["context"]["batch_id"] == "B2"
    assert error["context"]["operation"] == "update"
    assert "timestamp" in error
