"""MedStock entry point — production wiring of the record store and handlers.

Invariants:
    - Logging configured before the first load so decode warnings are captured
    - The returned store is loaded: statuses recomputed and storage rewritten
    - open_handlers shares one store between the command and query handlers

Design Decisions:
    - Factory functions over module-level singletons: callers own the store
      (no global import side effects)
"""

import logging

from medstock.config import Settings, get_settings
from medstock.core.record_store import RecordStore
from medstock.infrastructure.file_repository import FileRecordRepository
from medstock.infrastructure.observability import setup_logging
from medstock.services.handle_records import (
    RecordCommandHandlers, RecordQueryHandlers,
)

logger = logging.getLogger(__name__)


def open_store(settings: Settings | None = None) -> RecordStore:
    """Build a file-backed RecordStore from settings and load it."""
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_format)
    repository = FileRecordRepository(
        settings.store_path, encoding=settings.store_encoding,
    )
    store = RecordStore(repository)
    store.load()
    logger.info(
        f"MedStock store opened at {settings.store_path}",
        extra={"path": str(settings.store_path), "record_count": len(store)},
    )
    return store


def open_handlers(
    settings: Settings | None = None,
) -> tuple[RecordCommandHandlers, RecordQueryHandlers]:
    """Open the store and wrap it in the handlers the operator shell calls."""
    store = open_store(settings)
    return RecordCommandHandlers(store), RecordQueryHandlers(store)
