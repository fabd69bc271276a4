"""Entry point — open_store wires settings, logging and the file repository."""

import logging

import pytest

from medstock.config import Settings
from medstock.main import open_handlers, open_store
from medstock.schemas.record import QuantityUpdate
from tests.factories import make_record


@pytest.fixture(autouse=True)
def restore_root_logging():
    handlers = list(logging.root.handlers)
    level = logging.root.level
    yield
    logging.root.handlers = handlers
    logging.root.setLevel(level)


def test_open_store_creates_file_and_loads(tmp_path):
    path = tmp_path / "medicines.txt"
    store = open_store(Settings(store_path=path, log_format="text"))
    assert len(store) == 0
    assert path.exists()


def test_open_store_reloads_persisted_records(tmp_path):
    settings = Settings(store_path=tmp_path / "medicines.txt")
    first = open_store(settings)
    first.add(make_record("B1", "2099-01-01", 3))
    reopened = open_store(settings)
    assert [r.batch_id for r in reopened.list_all()] == ["B1"]


def test_settings_read_prefixed_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("MEDSTOCK_STORE_PATH", str(tmp_path / "stock.txt"))
    monkeypatch.setenv("MEDSTOCK_LOG_FORMAT", "TEXT")
    settings = Settings()
    assert settings.store_path == tmp_path / "stock.txt"
    assert settings.log_format == "text"


def test_settings_reject_unknown_log_format():
    with pytest.raises(ValueError):
        Settings(log_format="xml")


def test_open_handlers_share_one_loaded_store(tmp_path):
    settings = Settings(store_path=tmp_path / "medicines.txt")
    open_store(settings).add(make_record("B1", "2099-01-01", 30))
    commands, queries = open_handlers(settings)
    assert commands.store is queries.store
    commands.update_quantity(QuantityUpdate(batch_id="B1", quantity=2))
    assert queries.find("B1").status == "LOW STOCK"
