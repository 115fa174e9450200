"""
shelf: a task list manager and a cached product-catalog client.

Subpackages:
- tasks: in-memory ordered task list (TaskManager, Task)
- catalog: product API client with TTL cache and favorites (ProductService)
- storage: key-value store implementations (in-memory, SQLite)
- core: ports (Protocols) and the clock
- cli: composition root and console front end
"""

from .catalog.product_service import ProductService
from .errors import HttpError, InvalidIndexError, ShelfError, StoredDataError
from .tasks.task_manager import TaskManager

__all__ = [
    "HttpError",
    "InvalidIndexError",
    "ProductService",
    "ShelfError",
    "StoredDataError",
    "TaskManager",
]
