# src/shelf/cli/commands.py

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from typing import Any

import httpx

from ..catalog.product_models import Product, products_from_payload
from ..core.state import AppState
from ..errors import HttpError, InvalidIndexError, ProductDecodeError, ShelfError, StoredDataError

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)


def friendly_error_message(exc: BaseException) -> str:
    if isinstance(exc, InvalidIndexError):
        if exc.length == 0:
            return "There are no tasks yet."
        return f"No task #{exc.index}. Valid indexes: 0..{exc.length - 1}."
    if isinstance(exc, HttpError):
        if exc.status == 404:
            return "Not found (HTTP 404)."
        return f"Product API returned HTTP {exc.status}."
    if isinstance(exc, StoredDataError):
        return f"Stored data under '{exc.key}' is corrupted: {exc.reason}."
    if isinstance(exc, httpx.TimeoutException):
        return "Product API timed out."
    if isinstance(exc, httpx.HTTPError):
        return f"Could not reach the product API ({exc.__class__.__name__})."
    return str(exc) or exc.__class__.__name__


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /tasks, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.

        Domain and transport errors become short replies; anything else propagates.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            return handler(state, args)
        except (ShelfError, httpx.HTTPError) as e:
            logger.info("Command /%s failed: %s", name, e)
            return friendly_error_message(e)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _format_product(product: Product, favorites: list[str]) -> str:
    star = "*" if product.id in favorites else " "
    line = f"{star} [{product.id}] {product.name} - {product.price:.2f}"
    if product.description:
        line += f"\n      {product.description}"
    return line


def _format_payload(payload: Any) -> str:
    return json.dumps(payload, ensure_ascii=False, indent=2)


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_status(state: AppState, args: list[str]) -> str:
    s = state.settings
    return (
        "Status:\n"
        f"  API: {s.api_base_url}{s.products_path}\n"
        f"  Storage: {s.storage_backend}\n"
        f"  Cache TTL: {s.cache_ttl_ms} ms\n"
        f"  Tasks: {len(state.tasks)}"
    )


def cmd_tasks(state: AppState, args: list[str]) -> str:
    labels = state.tasks.get_labels()
    if not labels:
        return "No tasks."
    return "\n".join(f"{i}. {label}" for i, label in enumerate(labels))


def cmd_add(state: AppState, args: list[str]) -> str:
    label = " ".join(args).strip()
    if not label:
        return "Usage: /add <task label>"
    state.tasks.add_task(label)
    return f"Added task #{len(state.tasks) - 1}: {label}"


def cmd_done(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        return "Usage: /done <index>"
    try:
        index = int(args[0])
    except ValueError:
        return "Usage: /done <index> (index must be a number)"
    state.tasks.mark_task_as_completed(index)
    return f"Task #{index} completed."


def cmd_clear(state: AppState, args: list[str]) -> str:
    before = len(state.tasks)
    state.tasks.clear_completed_tasks()
    return f"Removed {before - len(state.tasks)} completed task(s)."


def cmd_products(state: AppState, args: list[str]) -> str:
    payload = state.run(state.products.get_products())
    try:
        products = products_from_payload(payload)
    except ProductDecodeError as e:
        logger.debug("Products payload is not a product list: %s", e)
        return _format_payload(payload)
    if not products:
        return "No products."
    favorites = state.products.get_favorite_products()
    return "\n".join(_format_product(p, favorites) for p in products)


def cmd_product(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        return "Usage: /product <id>"
    payload = state.run(state.products.get_product_details(args[0]))
    try:
        product = Product.from_dict(payload)
    except ProductDecodeError:
        return _format_payload(payload)
    return _format_product(product, state.products.get_favorite_products())


def cmd_fav(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        return "Usage: /fav <product id>"
    state.products.add_product_to_favorites(args[0])
    return f"Product {args[0]} is in favorites."


def cmd_unfav(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        return "Usage: /unfav <product id>"
    state.products.remove_product_from_favorites(args[0])
    return f"Product {args[0]} is not in favorites."


def cmd_favs(state: AppState, args: list[str]) -> str:
    favorites = state.products.get_favorite_products()
    if not favorites:
        return "No favorite products."
    return "Favorites: " + ", ".join(favorites)


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show current settings (API/storage/TTL).")
registry.register("tasks", cmd_tasks, help_text="List tasks.", aliases=["ls"])
registry.register("add", cmd_add, help_text="Add a task: /add <label>.")
registry.register("done", cmd_done, help_text="Mark a task completed: /done <index>.")
registry.register("clear", cmd_clear, help_text="Remove completed tasks.")
registry.register("products", cmd_products, help_text="List products (cached).")
registry.register("product", cmd_product, help_text="Show product details: /product <id>.")
registry.register("fav", cmd_fav, help_text="Add a product to favorites: /fav <id>.")
registry.register("unfav", cmd_unfav, help_text="Remove a product from favorites: /unfav <id>.")
registry.register("favs", cmd_favs, help_text="List favorite product ids.")
