# src/shelf/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires concrete implementations into AppState (store/http/tasks/products),
- closes them again on shutdown.
"""

from __future__ import annotations

import logging

from ..catalog.http import create_http_client
from ..catalog.product_service import ProductService
from ..config import get_settings
from ..core.ports import KeyValueStore
from ..core.state import AppState
from ..storage.kv_store import InMemoryKeyValueStore, SqliteKeyValueStore
from ..tasks.task_manager import TaskManager

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.kv_db_path.parent.mkdir(parents=True, exist_ok=True)


def create_store(settings) -> KeyValueStore:
    if settings.storage_backend == "memory":
        logger.info("Using in-memory key-value store (nothing survives a restart).")
        return InMemoryKeyValueStore()
    return SqliteKeyValueStore(settings.kv_db_path)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    store = create_store(settings)
    http = create_http_client(settings)

    return AppState(
        settings=settings,
        store=store,
        http=http,
        tasks=TaskManager(),
        products=ProductService(
            store,
            http,
            cache_ttl_ms=settings.cache_ttl_ms,
            products_path=settings.products_path,
        ),
    )


def shutdown_state(state: AppState) -> None:
    """Best-effort shutdown (no exceptions should escape)."""
    try:
        aclose = getattr(state.http, "aclose", None)
        if aclose is not None:
            state.run(aclose())
    except Exception:
        logger.exception("Failed to close HTTP client.")

    try:
        close = getattr(state.store, "close", None)
        if close is not None:
            close()
    except Exception:
        logger.debug("Store close failed.", exc_info=True)

    if not state.loop.is_closed():
        state.loop.close()
