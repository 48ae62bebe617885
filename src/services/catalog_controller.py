"""Catalog controller: owns the product snapshot and the table's view state.

The UI layer implements :class:`CatalogView` and binds its widgets to the
``on_*`` callbacks below. Nothing in this module depends on NiceGUI, so the
whole search/sort/paginate/edit flow can be driven from tests.
"""
import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Protocol

from config import DEFAULT_PAGE_SIZE
from src.models.store import ProductStore
from src.models.view_state import ViewState
from src.services.catalog_api import CatalogAPI, RequestError
from src.services.csv_exporter import CSV_MEDIA_TYPE, export_filename, export_page_csv
from src.services.excel_exporter import XLSX_MEDIA_TYPE, export_page_xlsx
from src.services.filtering import SORTABLE_COLUMNS, sort_icons, toggle_sort
from src.services.form_validator import (
    ValidationError, category_options, empty_form_values, form_values_for,
    validate_product_form,
)
from src.services.pagination import PageInfo, build_page_info, paginate
from src.services.table_model import ProductRow, build_detail, build_rows
from src.services.utils import format_price

logger = logging.getLogger(__name__)

MODAL_DETAIL = "detail"
MODAL_EDIT = "edit"
MODAL_CREATE = "create"

LOAD_FAILED = "Could not load products. Please reload the page to try again."
WRITE_HINTS = (
    "Check that the title is not empty, the price is positive, "
    "the category ID exists and the image URLs are valid."
)


class CatalogView(Protocol):
    """Capabilities the controller needs from whatever draws the console."""

    def show_loading(self, visible: bool) -> None: ...

    def render(self, snapshot: "TableSnapshot") -> None: ...

    def show_modal(self, name: str, data: Any = None) -> None: ...

    def hide_modal(self, name: str) -> None: ...

    def clear_form(self, name: str) -> None: ...

    def notify(self, message: str, kind: str = "info", persistent: bool = False) -> None: ...

    def download(self, content: bytes, filename: str, media_type: str) -> None: ...


@dataclass
class TableSnapshot:
    """One complete render of the table: rows, pager and header state."""

    rows: list[ProductRow]
    page: PageInfo
    sort_column: str | None
    sort_direction: str
    sort_icons: dict[str, str] = field(default_factory=dict)
    search_term: str = ""
    total_products: int = 0


class CatalogController:
    def __init__(
        self,
        api: CatalogAPI,
        view: CatalogView,
        items_per_page: int = DEFAULT_PAGE_SIZE,
    ):
        self.api = api
        self.view = view
        self.store = ProductStore()
        self.state = ViewState(items_per_page=items_per_page)

    # ------------------------------------------------------------------
    # Derived data
    # ------------------------------------------------------------------

    def page_info(self) -> PageInfo:
        return build_page_info(
            self.store.matching, self.state.current_page, self.state.items_per_page,
        )

    def visible_products(self) -> list:
        """Products on the current page of the filtered view."""
        return paginate(
            self.store.filtered_products,
            self.state.current_page,
            self.state.items_per_page,
        )

    def snapshot(self) -> TableSnapshot:
        self._clamp_page()
        return TableSnapshot(
            rows=build_rows(self.visible_products()),
            page=self.page_info(),
            sort_column=self.state.sort_column,
            sort_direction=self.state.sort_direction,
            sort_icons=sort_icons(self.state.sort_column, self.state.sort_direction),
            search_term=self.state.search_term,
            total_products=self.store.total,
        )

    def refresh(self) -> None:
        self.view.render(self.snapshot())

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    async def load(self) -> bool:
        """Fetch the whole catalog once. Failures are shown, never retried."""
        self.view.show_loading(True)
        try:
            products = await self._run(self.api.list_products)
        except RequestError as exc:
            logger.error("Error loading products: %s (%s)", exc, exc.body)
            self.store.load([])
            self.refresh()
            self.view.notify(LOAD_FAILED, "negative", persistent=True)
            return False
        finally:
            self.view.show_loading(False)

        self.store.load(products)
        self._rebuild()
        self.refresh()
        return True

    # ------------------------------------------------------------------
    # Table callbacks
    # ------------------------------------------------------------------

    def on_search(self, term: str | None) -> None:
        self.state.search_term = term or ""
        self.state.reset_page()
        self._rebuild()
        self.refresh()

    def on_sort_toggle(self, column: str) -> None:
        if column not in SORTABLE_COLUMNS:
            logger.warning("Ignoring sort on unsupported column %r", column)
            return
        self.state.sort_column, self.state.sort_direction = toggle_sort(
            self.state.sort_column, self.state.sort_direction, column,
        )
        self._rebuild()
        self.refresh()

    def on_page_change(self, page: int) -> None:
        """Jump to *page*; requests outside ``[1, total_pages]`` are ignored."""
        if not 1 <= page <= self.page_info().total_pages:
            return
        self.state.current_page = page
        self.refresh()

    def on_previous_page(self) -> None:
        self.on_page_change(self.state.current_page - 1)

    def on_next_page(self) -> None:
        self.on_page_change(self.state.current_page + 1)

    def on_page_size_change(self, size) -> None:
        try:
            size = int(size)
        except (TypeError, ValueError):
            return
        if size <= 0:
            return
        self.state.items_per_page = size
        self.state.reset_page()
        self.refresh()

    # ------------------------------------------------------------------
    # Detail / forms
    # ------------------------------------------------------------------

    def on_row_click(self, product_id: int) -> None:
        product = self.store.find(product_id)
        if product is None:
            return
        self.state.current_product_id = product.id
        self.view.show_modal(MODAL_DETAIL, build_detail(product))

    def on_edit_click(self) -> None:
        product = self.store.find(self.state.current_product_id)
        self.view.hide_modal(MODAL_DETAIL)
        if product is None:
            self.view.notify("The selected product is no longer available.", "warning")
            return
        logger.debug("Editing product %s", product.id)
        self.view.show_modal(MODAL_EDIT, {
            "product_id": product.id,
            "values": form_values_for(product),
            "categories": category_options(self.store.all_products, ensure=product.category),
        })

    def on_open_create(self) -> None:
        self.view.show_modal(MODAL_CREATE, {
            "values": empty_form_values(),
            "categories": category_options(self.store.all_products),
        })

    async def on_submit_create(self, values: dict) -> bool:
        try:
            payload = validate_product_form(values)
        except ValidationError as exc:
            self.view.notify(exc.message, "warning")
            return False

        logger.info("Creating product with data: %s", payload.to_json())
        try:
            created = await self._run(self.api.create_product, payload.to_json())
        except RequestError as exc:
            logger.error("Error creating product: %s", exc)
            self.view.notify(self._write_failure("create", exc), "negative")
            return False

        self.store.prepend(created)
        self.state.reset_page()
        self._rebuild()
        self.refresh()
        self.view.hide_modal(MODAL_CREATE)
        self.view.clear_form(MODAL_CREATE)
        self.view.notify(self._write_success("created", created), "positive")
        return True

    async def on_submit_edit(self, values: dict) -> bool:
        product_id = values.get("product_id") or self.state.current_product_id
        if product_id is None:
            self.view.notify("No product selected for editing.", "warning")
            return False
        try:
            payload = validate_product_form(values)
        except ValidationError as exc:
            self.view.notify(exc.message, "warning")
            return False

        logger.info("Updating product %s with data: %s", product_id, payload.to_json())
        try:
            updated = await self._run(self.api.update_product, product_id, payload.to_json())
        except RequestError as exc:
            logger.error("Error updating product %s: %s", product_id, exc)
            self.view.notify(self._write_failure("update", exc), "negative")
            return False

        self.store.replace(updated)
        self._rebuild()
        self.refresh()
        self.view.hide_modal(MODAL_EDIT)
        self.view.notify(self._write_success("updated", updated), "positive")
        return True

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def on_export_csv(self) -> None:
        content = export_page_csv(self.visible_products())
        self.view.download(
            content, export_filename(self.state.current_page, "csv"), CSV_MEDIA_TYPE,
        )

    def on_export_xlsx(self) -> None:
        content = export_page_xlsx(self.visible_products())
        self.view.download(
            content, export_filename(self.state.current_page, "xlsx"), XLSX_MEDIA_TYPE,
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _rebuild(self) -> None:
        self.store.refilter(
            self.state.search_term, self.state.sort_column, self.state.sort_direction,
        )

    def _clamp_page(self) -> None:
        pages = self.page_info().total_pages
        if self.state.current_page > pages:
            self.state.current_page = max(1, pages)
        elif self.state.current_page < 1:
            self.state.current_page = 1

    @staticmethod
    async def _run(func, *args):
        """Run a blocking API call off the event loop."""
        return await asyncio.get_event_loop().run_in_executor(None, func, *args)

    @staticmethod
    def _write_failure(action: str, exc: RequestError) -> str:
        message = f"Could not {action} the product. {WRITE_HINTS} Details: {exc}"
        if exc.body:
            message += f" ({exc.body[:200]})"
        return message

    @staticmethod
    def _write_success(action: str, product) -> str:
        return (
            f"Product {action}: ID {product.id}, {product.title}, "
            f"{format_price(product.price)}"
        )
