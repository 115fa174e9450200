# src/shelf/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the services.

Services depend on Protocols instead of concrete implementations.
This keeps storage and HTTP transports swappable and makes testing easier.
"""

from typing import Any, Awaitable, Callable, Protocol

Clock = Callable[[], int]
# Returns epoch milliseconds.


class KeyValueStore(Protocol):
    """
    Synchronous string-keyed storage (browser-localStorage style).

    Absent keys read as None, never raise.
    """

    def get_item(self, key: str) -> str | None: ...
    def set_item(self, key: str, value: str) -> None: ...
    def remove_item(self, key: str) -> None: ...


class HttpResponse(Protocol):
    status_code: int

    @property
    def is_success(self) -> bool: ...

    def json(self) -> Any: ...


class HttpClient(Protocol):
    """
    Async GET-only HTTP port.

    httpx.AsyncClient satisfies it as-is; relative URLs are resolved
    against the client's base_url.
    """

    def get(self, url: str) -> Awaitable[HttpResponse]: ...
