# tests/conftest.py

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from types import SimpleNamespace

import pytest

from shelf.catalog.product_service import ProductService
from shelf.cli.bootstrap import shutdown_state
from shelf.core.state import AppState
from shelf.tasks.task_manager import TaskManager

from .fakes import FakeApi, FakeClock, RecordingStore

PRODUCTS = [
    {"id": "1", "name": "Tea", "price": 3.5, "description": "Green tea"},
    {"id": "2", "name": "Coffee", "price": 4},
]


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="shelf-test",
        log_level="DEBUG",
        console_enabled=False,
        storage_backend="memory",
        data_dir=tmp_path,
        kv_db_path=tmp_path / "kv.sqlite3",
        api_base_url="http://test",
        products_path="/api/products",
        cache_ttl_ms=60_000,
        http_connect_timeout_seconds=1.0,
        http_read_timeout_seconds=1.0,
    )


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def store() -> RecordingStore:
    return RecordingStore()


@pytest.fixture()
def api() -> FakeApi:
    return FakeApi(
        routes={
            "/api/products": (200, PRODUCTS),
            "/api/products/1": (200, PRODUCTS[0]),
        }
    )


@pytest.fixture()
def state(settings: SimpleNamespace, store: RecordingStore, api: FakeApi, clock: FakeClock) -> Iterator[AppState]:
    """
    AppState wired with deterministic fakes.

    The real ProductService and TaskManager are used; only the store, the
    HTTP transport and the clock are fake.
    """
    http = api.client()
    st = AppState(
        settings=settings,
        store=store,
        http=http,
        tasks=TaskManager(),
        products=ProductService(store, http, clock=clock, cache_ttl_ms=settings.cache_ttl_ms),
    )
    yield st
    shutdown_state(st)
