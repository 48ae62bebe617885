"""Tests for the catalog controller driven through a fake view."""

import pytest

from config import DEFAULT_IMAGE_URL
from src.models.product import Product
from src.services.catalog_api import RequestError
from src.services.catalog_controller import (
    LOAD_FAILED, MODAL_CREATE, MODAL_DETAIL, MODAL_EDIT,
)
from src.services.filtering import ICON_ASC, ICON_DESC, ICON_UNSORTED
from src.services.form_validator import PRICE_NOT_POSITIVE

from tests.conftest import make_product, product_json


def _form(**overrides):
    values = {
        "title": "Desk Lamp",
        "price": "35",
        "description": "LED lamp",
        "category_id": 2,
        "images": "https://img/lamp.jpg",
    }
    values.update(overrides)
    return values


# ============================================================================
# Loading
# ============================================================================


@pytest.mark.asyncio
async def test_load_populates_store_and_renders(controller, api, fake_view, products):
    assert await controller.load()

    api.list_products.assert_called_once_with()
    assert controller.store.all_products == products
    assert fake_view.loading == [True, False]
    snapshot = fake_view.last
    assert [r.id for r in snapshot.rows] == list(range(1, 11))
    assert snapshot.total_products == 25
    assert snapshot.page.total_pages == 3
    assert snapshot.page.window == [1, 2, 3]


@pytest.mark.asyncio
async def test_load_failure_shows_persistent_error(controller, api, fake_view):
    api.list_products.side_effect = RequestError(500, "boom")

    assert not await controller.load()

    assert fake_view.loading == [True, False]
    assert fake_view.notifications == [(LOAD_FAILED, "negative", True)]
    assert fake_view.last.rows == []
    assert controller.store.total == 0
    api.list_products.assert_called_once_with()


# ============================================================================
# Search / sort / paging
# ============================================================================


def test_search_filters_and_resets_page(loaded_controller, fake_view):
    loaded_controller.on_page_change(3)
    loaded_controller.on_search("product 2")

    assert loaded_controller.state.current_page == 1
    ids = [r.id for r in fake_view.last.rows]
    assert ids == [2, 20, 21, 22, 23, 24, 25]
    assert fake_view.last.page.total_items == 7


def test_clearing_search_restores_full_list(loaded_controller, fake_view):
    loaded_controller.on_search("product 2")
    loaded_controller.on_search("")
    assert loaded_controller.store.filtered_products == loaded_controller.store.all_products


def test_sort_toggle_flips_and_keeps_page(loaded_controller, fake_view):
    loaded_controller.on_page_change(2)
    loaded_controller.on_sort_toggle("price")
    assert loaded_controller.state.current_page == 2
    assert fake_view.last.sort_icons == {
        "id": ICON_UNSORTED, "title": ICON_UNSORTED, "price": ICON_ASC,
    }
    assert [r.id for r in fake_view.last.rows] == list(range(11, 21))

    loaded_controller.on_sort_toggle("price")
    assert loaded_controller.state.sort_direction == "desc"
    assert fake_view.last.sort_icons["price"] == ICON_DESC
    assert [r.id for r in fake_view.last.rows] == list(range(15, 5, -1))


def test_search_keeps_active_sort(loaded_controller, fake_view):
    loaded_controller.on_sort_toggle("id")
    loaded_controller.on_sort_toggle("id")
    loaded_controller.on_search("product 1")
    assert [r.id for r in fake_view.last.rows] == [19, 18, 17, 16, 15, 14, 13, 12, 11, 10]


def test_unknown_sort_column_ignored(loaded_controller, fake_view):
    renders = len(fake_view.snapshots)
    loaded_controller.on_sort_toggle("description")
    assert loaded_controller.state.sort_column is None
    assert len(fake_view.snapshots) == renders


def test_previous_next_are_noops_at_edges(loaded_controller):
    loaded_controller.on_previous_page()
    assert loaded_controller.state.current_page == 1
    loaded_controller.on_next_page()
    loaded_controller.on_next_page()
    loaded_controller.on_next_page()
    assert loaded_controller.state.current_page == 3


def test_out_of_range_page_ignored(loaded_controller):
    loaded_controller.on_page_change(9)
    loaded_controller.on_page_change(0)
    assert loaded_controller.state.current_page == 1


def test_page_size_change_resets_page(loaded_controller, fake_view):
    loaded_controller.on_page_change(2)
    loaded_controller.on_page_size_change("5")
    assert loaded_controller.state.current_page == 1
    assert loaded_controller.state.items_per_page == 5
    assert fake_view.last.page.total_pages == 5
    assert len(fake_view.last.rows) == 5


def test_invalid_page_size_ignored(loaded_controller):
    loaded_controller.on_page_size_change(None)
    loaded_controller.on_page_size_change(0)
    assert loaded_controller.state.items_per_page == 10


def test_current_page_clamped_when_view_shrinks(loaded_controller, fake_view):
    loaded_controller.on_page_change(3)
    loaded_controller.store.refilter("product 1")
    loaded_controller.refresh()
    assert loaded_controller.state.current_page == 2
    assert fake_view.last.rows


# ============================================================================
# Detail and forms
# ============================================================================


def test_row_click_opens_detail(loaded_controller, fake_view):
    loaded_controller.on_row_click(4)
    assert loaded_controller.state.current_product_id == 4
    name, detail = fake_view.opened[-1]
    assert name == MODAL_DETAIL
    assert detail.id == 4


def test_row_click_unknown_id(loaded_controller, fake_view):
    loaded_controller.on_row_click(404)
    assert fake_view.opened == []


def test_edit_click_prefills_form(loaded_controller, fake_view):
    loaded_controller.on_row_click(4)
    loaded_controller.on_edit_click()
    assert fake_view.hidden == [MODAL_DETAIL]
    name, data = fake_view.opened[-1]
    assert name == MODAL_EDIT
    assert data["product_id"] == 4
    assert data["values"]["title"] == "Product 4"
    assert 1 in data["categories"]


def test_open_create_shows_blank_form(loaded_controller, fake_view):
    loaded_controller.on_open_create()
    name, data = fake_view.opened[-1]
    assert name == MODAL_CREATE
    assert data["values"]["title"] == ""


@pytest.mark.asyncio
async def test_create_with_negative_price_never_calls_api(loaded_controller, api, fake_view):
    before = list(loaded_controller.store.all_products)

    assert not await loaded_controller.on_submit_create(_form(price=-5))

    api.create_product.assert_not_called()
    assert loaded_controller.store.all_products == before
    assert fake_view.notifications[-1] == (PRICE_NOT_POSITIVE, "warning", False)
    assert MODAL_CREATE not in fake_view.hidden


@pytest.mark.asyncio
async def test_create_prepends_and_resets_page(loaded_controller, api, fake_view):
    created = Product.from_dict(product_json(300, title="Desk Lamp", price=35))
    api.create_product.return_value = created
    loaded_controller.on_page_change(3)

    assert await loaded_controller.on_submit_create(_form(images=""))

    sent = api.create_product.call_args.args[0]
    assert sent["images"] == [DEFAULT_IMAGE_URL]
    assert sent["categoryId"] == 2
    assert loaded_controller.store.all_products[0] is created
    assert loaded_controller.state.current_page == 1
    assert fake_view.last.rows[0].id == 300
    assert fake_view.last.total_products == 26
    assert fake_view.hidden == [MODAL_CREATE]
    assert fake_view.cleared == [MODAL_CREATE]
    assert fake_view.notifications[-1][1] == "positive"


@pytest.mark.asyncio
async def test_create_failure_leaves_store_and_modal(loaded_controller, api, fake_view):
    api.create_product.side_effect = RequestError(400, "bad category")
    before = list(loaded_controller.store.all_products)

    assert not await loaded_controller.on_submit_create(_form())

    assert loaded_controller.store.all_products == before
    assert fake_view.hidden == []
    assert fake_view.cleared == []
    message, kind, _ = fake_view.notifications[-1]
    assert kind == "negative"
    assert "bad category" in message


@pytest.mark.asyncio
async def test_update_replaces_entry_by_id(loaded_controller, api, fake_view):
    returned = Product.from_dict(product_json(7, title="Renamed", price=99))
    api.update_product.return_value = returned
    loaded_controller.on_page_change(2)
    loaded_controller.on_row_click(7)

    assert await loaded_controller.on_submit_edit(_form(product_id=7, title="Renamed", price="99"))

    api.update_product.assert_called_once()
    assert api.update_product.call_args.args[0] == 7
    matches = [p for p in loaded_controller.store.all_products if p.id == 7]
    assert matches == [returned]
    assert loaded_controller.store.all_products[6] is returned
    assert loaded_controller.store.filtered_products == loaded_controller.store.all_products
    assert loaded_controller.state.current_page == 2
    assert fake_view.hidden == [MODAL_EDIT]
    assert fake_view.cleared == []


@pytest.mark.asyncio
async def test_update_uses_current_product_when_form_has_no_id(loaded_controller, api):
    api.update_product.return_value = make_product(5, title="Five")
    loaded_controller.on_row_click(5)
    assert await loaded_controller.on_submit_edit(_form())
    assert api.update_product.call_args.args[0] == 5


@pytest.mark.asyncio
async def test_update_failure_leaves_store(loaded_controller, api, fake_view):
    api.update_product.side_effect = RequestError(None, "timed out")
    before = list(loaded_controller.store.all_products)
    loaded_controller.on_row_click(3)

    assert not await loaded_controller.on_submit_edit(_form(product_id=3))

    assert loaded_controller.store.all_products == before
    assert MODAL_EDIT not in fake_view.hidden


# ============================================================================
# Export
# ============================================================================


def test_csv_export_covers_visible_page_only(loaded_controller, fake_view):
    loaded_controller.on_page_change(3)
    loaded_controller.on_export_csv()

    content, filename, media_type = fake_view.downloads[-1]
    lines = content.decode("utf-8-sig").split("\n")
    assert len(lines) == 1 + 5
    assert lines[1].startswith("21,")
    assert filename.startswith("products_page_3_") and filename.endswith(".csv")
    assert media_type.startswith("text/csv")


def test_xlsx_export(loaded_controller, fake_view):
    loaded_controller.on_export_xlsx()
    content, filename, _ = fake_view.downloads[-1]
    assert content[:2] == b"PK"
    assert filename.endswith(".xlsx")
