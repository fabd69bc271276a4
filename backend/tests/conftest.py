"""Root conftest — shared store fixtures.

Invariants:
    - Core tests never touch the filesystem: InMemoryRecordRepository stands in
    - The store fixture runs against FIXED_NOW, never the wall clock
"""

import pytest

from medstock.core.record_store import RecordStore
from tests.factories import FIXED_NOW, InMemoryRecordRepository


@pytest.fixture
def repository() -> InMemoryRecordRepository:
    return InMemoryRecordRepository()


@pytest.fixture
def store(repository) -> RecordStore:
    return RecordStore(repository, clock=lambda: FIXED_NOW)
