"""Product model."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Category:
    id: int
    name: str

    @classmethod
    def from_dict(cls, data: dict | None) -> Category | None:
        if not data:
            return None
        return cls(id=data.get("id"), name=data.get("name") or "")

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name}


@dataclass
class Product:
    """Snapshot of one catalog record as returned by the remote API."""

    id: int
    title: str
    price: int | float
    description: str = ""
    category: Category | None = None
    images: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Product:
        """Build a Product from the API's JSON representation.

        ``category`` and ``images`` may be missing or null.
        """
        return cls(
            id=data["id"],
            title=data.get("title") or "",
            price=data.get("price", 0),
            description=data.get("description") or "",
            category=Category.from_dict(data.get("category")),
            images=list(data.get("images") or []),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "price": self.price,
            "description": self.description,
            "category": self.category.to_dict() if self.category else None,
            "images": list(self.images),
        }

    @property
    def category_name(self) -> str | None:
        return self.category.name if self.category else None

    @property
    def category_id(self) -> int | None:
        return self.category.id if self.category else None

    def __repr__(self) -> str:
        return f"<Product id={self.id} title={self.title!r}>"
