"""Validation and serialization of the create/edit product forms."""
import logging
import math
from dataclasses import dataclass, field

from config import DEFAULT_IMAGE_URL

logger = logging.getLogger(__name__)

MISSING_FIELDS = "Please fill in all required fields (title and description)."
PRICE_NOT_POSITIVE = "Price must be a positive number."
INVALID_CATEGORY = "Category ID must be a positive whole number."


class ValidationError(Exception):
    """Raised when a product form violates a client-side constraint."""

    def __init__(self, message: str, field_name: str | None = None):
        super().__init__(message)
        self.message = message
        self.field_name = field_name


@dataclass
class ProductPayload:
    """Request body for POST/PUT against the catalog."""

    title: str
    price: float
    description: str
    category_id: int
    images: list[str] = field(default_factory=list)

    def to_json(self) -> dict:
        return {
            "title": self.title,
            "price": self.price,
            "description": self.description,
            "categoryId": self.category_id,
            "images": list(self.images),
        }


def _text(value) -> str:
    return str(value).strip() if value is not None else ""


def parse_price(value) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        try:
            number = float(_text(value))
        except ValueError:
            return None
    return number if math.isfinite(number) else None


def parse_category_id(value) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    try:
        return int(_text(value))
    except ValueError:
        return None


def parse_images(text) -> list[str]:
    """Split a comma-separated URL list; fall back to the default placeholder."""
    images = [part.strip() for part in _text(text).split(",")]
    images = [img for img in images if img]
    return images or [DEFAULT_IMAGE_URL]


def validate_product_form(values: dict) -> ProductPayload:
    """Validate raw form values and build the API payload.

    *values* holds ``title``, ``price``, ``description``, ``category_id``
    and ``images`` as entered in the form (strings, numbers or None).

    Raises
    ------
    ValidationError
        With the user-facing message of the first violated rule.
    """
    title = _text(values.get("title"))
    description = _text(values.get("description"))
    if not title or not description:
        raise ValidationError(MISSING_FIELDS, "title" if not title else "description")

    price = parse_price(values.get("price"))
    if price is None or price <= 0:
        raise ValidationError(PRICE_NOT_POSITIVE, "price")

    category_id = parse_category_id(values.get("category_id"))
    if category_id is None or category_id <= 0:
        raise ValidationError(INVALID_CATEGORY, "category_id")

    payload = ProductPayload(
        title=title,
        price=price,
        description=description,
        category_id=category_id,
        images=parse_images(values.get("images")),
    )
    logger.debug("Validated product form: %s", payload)
    return payload


def form_values_for(product) -> dict:
    """Values used to pre-fill the edit form for *product*."""
    return {
        "title": product.title,
        "price": product.price,
        "description": product.description,
        "category_id": product.category_id,
        "images": ", ".join(product.images),
    }


def empty_form_values() -> dict:
    return {
        "title": "",
        "price": None,
        "description": "",
        "category_id": None,
        "images": "",
    }


def category_options(products: list, ensure=None) -> dict[int, str]:
    """Category select options (``{id: "id - name"}``) seen in the snapshot.

    *ensure* is an optional Category that must be present even if no loaded
    product references it.
    """
    options: dict[int, str] = {}
    for product in products:
        if product.category and product.category.id is not None:
            options.setdefault(product.category.id, product.category.name)
    if ensure is not None and ensure.id is not None:
        options.setdefault(ensure.id, ensure.name or "Unknown")
    return {cid: f"{cid} - {name}" for cid, name in sorted(options.items())}
