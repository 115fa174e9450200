# src/shelf/catalog/http.py

from __future__ import annotations

import logging

import httpx

logger = logging.getLogger(__name__)


def create_http_client(settings) -> httpx.AsyncClient:
    """
    Build the AsyncClient used by ProductService.

    Timeouts come from settings so a slow API does not hang the console forever.
    No retries: failures surface to the caller on the first attempt.
    """
    connect_s = float(getattr(settings, "http_connect_timeout_seconds", 5.0))
    read_s = float(getattr(settings, "http_read_timeout_seconds", 10.0))

    timeout = httpx.Timeout(
        connect=connect_s,
        read=read_s,
        write=10.0,
        pool=connect_s,
    )
    base_url = str(getattr(settings, "api_base_url", "http://localhost:8000"))

    logger.debug("Creating HTTP client base_url=%s connect=%s read=%s", base_url, connect_s, read_s)
    return httpx.AsyncClient(
        base_url=base_url,
        timeout=timeout,
        headers={"Accept": "application/json"},
    )
