# src/shelf/core/state.py

from __future__ import annotations

import asyncio
from collections.abc import Coroutine
from dataclasses import dataclass, field
from typing import Any, TypeVar

from ..catalog.product_service import ProductService
from ..tasks.task_manager import TaskManager
from .ports import HttpClient, KeyValueStore

T = TypeVar("T")


@dataclass
class AppState:
    # Settings are kept on the state so handlers can read them without globals.
    settings: Any

    store: KeyValueStore
    http: HttpClient
    tasks: TaskManager
    products: ProductService

    # One loop for the whole console session: the http client's connection
    # pool is bound to the loop that first used it.
    loop: asyncio.AbstractEventLoop = field(default_factory=asyncio.new_event_loop)

    def run(self, coro: Coroutine[Any, Any, T]) -> T:
        """Drive a service coroutine to completion from synchronous code."""
        return self.loop.run_until_complete(coro)
