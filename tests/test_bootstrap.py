# tests/test_bootstrap.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import httpx
import pytest

from shelf.catalog.http import create_http_client
from shelf.cli.bootstrap import create_initial_state, create_store, shutdown_state
from shelf.storage.kv_store import InMemoryKeyValueStore, SqliteKeyValueStore


def _with(settings: SimpleNamespace, **overrides) -> SimpleNamespace:
    return SimpleNamespace(**{**vars(settings), **overrides})


@pytest.mark.parametrize(
    ("backend", "store_type"),
    [("memory", InMemoryKeyValueStore), ("sqlite", SqliteKeyValueStore)],
)
def test_create_initial_state_wires_settings(
    settings: SimpleNamespace, tmp_path: Path, backend: str, store_type: type
) -> None:
    data_dir = tmp_path / "data"
    s = _with(
        settings,
        storage_backend=backend,
        data_dir=data_dir,
        kv_db_path=data_dir / "db" / "kv.sqlite3",
        api_base_url="http://catalog.local:9000",
        products_path="/v2/items",
        cache_ttl_ms=1234,
        http_connect_timeout_seconds=2.0,
        http_read_timeout_seconds=7.0,
    )

    state = create_initial_state(settings=s)
    try:
        assert data_dir.is_dir()
        assert (data_dir / "db").is_dir()
        assert isinstance(state.store, store_type)
        assert state.settings is s

        assert isinstance(state.http, httpx.AsyncClient)
        assert state.http.base_url.host == "catalog.local"
        assert state.http.base_url.port == 9000
        assert state.http.timeout == httpx.Timeout(connect=2.0, read=7.0, write=10.0, pool=2.0)

        assert state.products._cache_ttl_ms == 1234
        assert state.products._products_path == "/v2/items"
        assert state.products._store is state.store
        assert state.products._http is state.http
        assert len(state.tasks) == 0
    finally:
        shutdown_state(state)

    assert state.http.is_closed
    assert state.loop.is_closed()


def test_sqlite_store_file_is_created(settings: SimpleNamespace, tmp_path: Path) -> None:
    db = tmp_path / "kv.sqlite3"
    store = create_store(_with(settings, storage_backend="sqlite", kv_db_path=db))
    store.set_item("k", "v")
    assert db.exists()


def test_http_client_defaults_when_settings_are_sparse() -> None:
    client = create_http_client(SimpleNamespace())
    assert client.base_url.host == "localhost"
    assert client.base_url.port == 8000
    assert client.timeout == httpx.Timeout(connect=5.0, read=10.0, write=10.0, pool=5.0)
    assert client.headers["Accept"] == "application/json"
