"""Render model for the product table and the detail dialog.

Turns Product records into display-ready values so that the NiceGUI layer
only draws. Every user-supplied string that may end up in markup is escaped
here.
"""
from dataclasses import dataclass

from config import DETAIL_PLACEHOLDER, THUMBNAIL_PLACEHOLDER
from src.services.utils import escape_html, first_image, format_number, format_price

NOT_AVAILABLE = "N/A"


@dataclass
class ProductRow:
    id: int
    title_html: str
    price: str
    category: str
    thumbnail: str
    tooltip_html: str


@dataclass
class ProductDetail:
    id: int
    title_html: str
    price: str
    description_html: str
    category: str
    category_id: str
    image: str


def build_row(product) -> ProductRow:
    return ProductRow(
        id=product.id,
        title_html=escape_html(product.title),
        price=format_price(product.price),
        category=escape_html(product.category_name or NOT_AVAILABLE),
        thumbnail=first_image(product.images, THUMBNAIL_PLACEHOLDER),
        tooltip_html=(
            "<strong>Description:</strong><br>"
            f"{escape_html(product.description)}"
        ),
    )


def build_rows(products: list) -> list[ProductRow]:
    """Project one page of products into table rows."""
    return [build_row(p) for p in products]


def build_detail(product) -> ProductDetail:
    category_id = product.category_id
    return ProductDetail(
        id=product.id,
        title_html=escape_html(product.title),
        price=format_price(product.price),
        description_html=escape_html(product.description),
        category=escape_html(product.category_name or NOT_AVAILABLE),
        category_id=NOT_AVAILABLE if category_id is None else format_number(category_id),
        image=first_image(product.images, DETAIL_PLACEHOLDER),
    )


def image_html(src: str, fallback: str, css_class: str = "", alt: str = "Product") -> str:
    """An ``<img>`` tag that swaps to *fallback* when *src* fails to load."""
    return (
        f'<img src="{escape_html(src)}" alt="{escape_html(alt)}" class="{css_class}" '
        f"onerror=\"this.onerror=null;this.src='{escape_html(fallback)}'\">"
    )
