# src/shelf/catalog/product_models.py

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from ..errors import ProductDecodeError


@dataclass(frozen=True, slots=True)
class Product:
    id: str
    name: str
    price: float
    description: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> Product:
        if not isinstance(data, Mapping):
            raise ProductDecodeError(f"product must be an object, got {type(data).__name__}")

        pid = data.get("id")
        name = data.get("name")
        price = data.get("price")
        description = data.get("description")

        if not isinstance(pid, str) or not pid:
            raise ProductDecodeError(f"product id must be a non-empty string, got {pid!r}")
        if not isinstance(name, str):
            raise ProductDecodeError(f"product {pid}: name must be a string")
        # bool is an int subclass; reject it explicitly.
        if isinstance(price, bool) or not isinstance(price, (int, float)):
            raise ProductDecodeError(f"product {pid}: price must be a number")
        if description is not None and not isinstance(description, str):
            raise ProductDecodeError(f"product {pid}: description must be a string")

        return cls(id=pid, name=name, price=float(price), description=description)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"id": self.id, "name": self.name, "price": self.price}
        if self.description is not None:
            out["description"] = self.description
        return out


def products_from_payload(payload: Any) -> list[Product]:
    """Decode a products payload (JSON array of objects) into Product records."""
    if not isinstance(payload, list):
        raise ProductDecodeError(f"products payload must be an array, got {type(payload).__name__}")
    return [Product.from_dict(item) for item in payload]
