# src/shelf/errors.py

from __future__ import annotations

"""
Error taxonomy.

Library code raises these and never swallows them; only the console front end
turns them into user-facing text.
"""


class ShelfError(Exception):
    """Base class for all shelf errors."""


class InvalidIndexError(ShelfError, IndexError):
    def __init__(self, index: int, length: int) -> None:
        super().__init__(f"Invalid task index: {index} (tasks: {length})")
        self.index = index
        self.length = length


class HttpError(ShelfError):
    """Non-success HTTP response from the product API."""

    def __init__(self, status: int) -> None:
        super().__init__(f"HTTP error! status: {status}")
        self.status = status


class StoredDataError(ShelfError, ValueError):
    """A value read from the key-value store is not valid JSON or has the wrong shape."""

    def __init__(self, key: str, raw: str, reason: str) -> None:
        super().__init__(f"Malformed stored value for {key!r}: {reason}")
        self.key = key
        self.raw = raw
        self.reason = reason


class ProductDecodeError(ShelfError, ValueError):
    pass
