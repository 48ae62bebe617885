"""
Shared test fixtures for the catalog console test suite.
"""

from typing import Any, Dict, List
from unittest.mock import MagicMock

import pytest

from src.models.product import Category, Product
from src.services.catalog_api import CatalogAPI
from src.services.catalog_controller import CatalogController


def make_product(pid: int, title: str = None, price=10, category=(1, "Clothes"), images=None,
                 description: str = "A product") -> Product:
    return Product(
        id=pid,
        title=title if title is not None else f"Product {pid}",
        price=price,
        description=description,
        category=Category(*category) if category else None,
        images=list(images) if images is not None else [f"https://img.example.com/{pid}.jpg"],
    )


def product_json(pid: int, **overrides) -> Dict[str, Any]:
    data = {
        "id": pid,
        "title": f"Product {pid}",
        "price": 10,
        "description": "A product",
        "category": {"id": 1, "name": "Clothes"},
        "images": [f"https://img.example.com/{pid}.jpg"],
    }
    data.update(overrides)
    return data


class FakeView:
    """Records every call the controller makes on its view."""

    def __init__(self):
        self.loading: List[bool] = []
        self.snapshots: List[Any] = []
        self.opened: List[tuple] = []
        self.hidden: List[str] = []
        self.cleared: List[str] = []
        self.notifications: List[tuple] = []
        self.downloads: List[tuple] = []

    @property
    def last(self):
        return self.snapshots[-1]

    def show_loading(self, visible: bool) -> None:
        self.loading.append(visible)

    def render(self, snapshot) -> None:
        self.snapshots.append(snapshot)

    def show_modal(self, name: str, data: Any = None) -> None:
        self.opened.append((name, data))

    def hide_modal(self, name: str) -> None:
        self.hidden.append(name)

    def clear_form(self, name: str) -> None:
        self.cleared.append(name)

    def notify(self, message: str, kind: str = "info", persistent: bool = False) -> None:
        self.notifications.append((message, kind, persistent))

    def download(self, content: bytes, filename: str, media_type: str) -> None:
        self.downloads.append((content, filename, media_type))


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def products() -> List[Product]:
    return [make_product(i, price=i * 3) for i in range(1, 26)]


@pytest.fixture
def fake_view() -> FakeView:
    return FakeView()


@pytest.fixture
def api(products) -> MagicMock:
    mock = MagicMock(spec=CatalogAPI)
    mock.list_products.return_value = list(products)
    return mock


@pytest.fixture
def controller(api, fake_view) -> CatalogController:
    return CatalogController(api, fake_view, items_per_page=10)


@pytest.fixture
def loaded_controller(controller, products) -> CatalogController:
    controller.store.load(products)
    controller.refresh()
    return controller
