# tests/fakes.py

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

import httpx

from shelf.storage.kv_store import InMemoryKeyValueStore


class FakeClock:
    """
    Deterministic millisecond clock.

    - Callable like shelf.core.clock.now_ms
    - advance() moves time forward for TTL tests
    """

    def __init__(self, start_ms: int = 1_700_000_000_000) -> None:
        self.now = start_ms

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


class RecordingStore(InMemoryKeyValueStore):
    """In-memory store that records every write for assertions."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        super().__init__(initial)
        self.writes: list[tuple[str, str]] = []

    def set_item(self, key: str, value: str) -> None:
        self.writes.append((key, value))
        super().set_item(key, value)


class UnusedHttp:
    """HttpClient for code paths that must not touch the network."""

    async def get(self, url: str):
        raise AssertionError(f"unexpected HTTP call: {url}")


@dataclass(slots=True)
class FakeApi:
    """
    Scripted product API behind httpx.MockTransport.

    routes maps a request path to (status, json body). Unknown paths -> 404.
    """

    routes: dict[str, tuple[int, object]] = field(default_factory=dict)
    requests: list[httpx.Request] = field(default_factory=list)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        status, body = self.routes.get(request.url.path, (404, {"detail": "not found"}))
        return httpx.Response(status, json=body)

    def client(self, handler: Callable[[httpx.Request], httpx.Response] | None = None) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            transport=httpx.MockTransport(handler or self.handler),
            base_url="http://test",
        )
