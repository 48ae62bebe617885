"""Catalog data models package."""
from src.models.product import Category, Product
from src.models.view_state import ViewState
from src.models.store import ProductStore

__all__ = [
    "Category",
    "Product",
    "ProductStore",
    "ViewState",
]
