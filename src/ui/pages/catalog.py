"""Catalog page -- browse, search, edit and export remote products."""
import logging
from typing import Any

from nicegui import ui

from config import DEFAULT_PAGE_SIZE, PAGE_SIZE_OPTIONS
from src.services.catalog_api import CatalogAPI
from src.services.catalog_controller import (
    MODAL_CREATE, MODAL_DETAIL, MODAL_EDIT, CatalogController, TableSnapshot,
)
from src.ui.components.helpers import NOTIFY_TYPES, page_header
from src.ui.components.pagination_bar import PaginationBar
from src.ui.components.product_dialogs import DetailDialog, ProductFormDialog
from src.ui.components.product_table import ProductTable
from src.ui.components.stats_card import stats_card
from src.ui.layout import build_layout

logger = logging.getLogger(__name__)


class NiceGUIView:
    """CatalogView backed by NiceGUI widgets.

    Widgets are attached after construction because they need the
    controller's callbacks, and the controller needs this view.
    """

    def __init__(self):
        self.spinner: ui.spinner | None = None
        self.table: ProductTable | None = None
        self.pager: PaginationBar | None = None
        self.total_label: ui.label | None = None
        self.matching_label: ui.label | None = None
        self.page_label: ui.label | None = None
        self.dialogs: dict[str, Any] = {}

    def show_loading(self, visible: bool) -> None:
        if self.spinner is not None:
            self.spinner.set_visibility(visible)

    def render(self, snapshot: TableSnapshot) -> None:
        self.table.update(snapshot.rows, snapshot.sort_icons)
        self.pager.update(snapshot.page)
        self.total_label.text = str(snapshot.total_products)
        self.matching_label.text = str(snapshot.page.total_items)
        self.page_label.text = f"{snapshot.page.page} / {max(1, snapshot.page.total_pages)}"

    def show_modal(self, name: str, data: Any = None) -> None:
        self.dialogs[name].open(data)

    def hide_modal(self, name: str) -> None:
        self.dialogs[name].close()

    def clear_form(self, name: str) -> None:
        self.dialogs[name].clear()

    def notify(self, message: str, kind: str = "info", persistent: bool = False) -> None:
        kind = kind if kind in NOTIFY_TYPES else "info"
        if persistent:
            ui.notify(message, type=kind, timeout=0, close_button="OK", multi_line=True)
        else:
            ui.notify(message, type=kind, multi_line=True)

    def download(self, content: bytes, filename: str, media_type: str) -> None:
        ui.download.content(content, filename, media_type)


def catalog_page(api: CatalogAPI | None = None):
    """Render the catalog console and start loading products."""
    content = build_layout()
    view = NiceGUIView()
    controller = CatalogController(api or CatalogAPI(), view, items_per_page=DEFAULT_PAGE_SIZE)

    with content:
        page_header(
            "Products",
            subtitle="Search, sort, edit and export the remote product catalog.",
            icon="inventory_2",
        )

        with ui.row().classes("w-full gap-4"):
            view.total_label = stats_card("Total products", "0", icon="inventory_2")
            view.matching_label = stats_card("Matching search", "0", icon="filter_alt", color="accent")
            view.page_label = stats_card("Page", "1 / 1", icon="menu_book", color="secondary")

        # --- Toolbar ---
        with ui.row().classes("w-full items-center gap-4"):
            search_input = ui.input(
                label="Search products",
                placeholder="Type to filter by title...",
            ).props("clearable outlined dense").classes("flex-1")
            search_input.props('prepend-inner-icon="search"')
            search_input.on_value_change(lambda e: controller.on_search(e.value))

            page_size_select = ui.select(
                {size: f"{size} / page" for size in PAGE_SIZE_OPTIONS},
                value=DEFAULT_PAGE_SIZE,
                label="Per page",
            ).props("outlined dense").classes("w-36")
            page_size_select.on_value_change(lambda e: controller.on_page_size_change(e.value))

            ui.button(
                "Export CSV", icon="download", on_click=controller.on_export_csv,
            ).props("color=accent outline")
            ui.button(
                "Export Excel", icon="grid_on", on_click=controller.on_export_xlsx,
            ).props("color=accent outline")
            ui.button(
                "New Product", icon="add", on_click=controller.on_open_create,
            ).props("color=primary")

        view.spinner = ui.spinner("dots", size="lg").classes("self-center")
        view.spinner.set_visibility(False)

        view.table = ProductTable(
            on_sort=controller.on_sort_toggle,
            on_row_click=controller.on_row_click,
        )
        view.pager = PaginationBar(
            on_page=controller.on_page_change,
            on_previous=controller.on_previous_page,
            on_next=controller.on_next_page,
        )

        view.dialogs[MODAL_DETAIL] = DetailDialog(on_edit=controller.on_edit_click)
        view.dialogs[MODAL_EDIT] = ProductFormDialog(
            "Edit Product", "Save Changes", on_submit=controller.on_submit_edit,
        )
        view.dialogs[MODAL_CREATE] = ProductFormDialog(
            "New Product", "Create", on_submit=controller.on_submit_create,
        )

    controller.refresh()
    ui.timer(0.1, controller.load, once=True)
    return controller
