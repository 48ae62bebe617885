"""Product table: sortable header plus one clickable row per product."""
from nicegui import ui

from config import THUMBNAIL_PLACEHOLDER
from src.services.filtering import ICON_UNSORTED, SORTABLE_COLUMNS
from src.services.table_model import ProductRow, image_html
from src.ui.components.helpers import COLUMN_STYLES, HOVER_BG, THUMB_CLASSES, safe_html

_HEADERS = [
    ("id", "ID"),
    ("title", "Title"),
    ("price", "Price"),
    ("category", "Category"),
    ("image", "Image"),
]


class ProductTable:
    """Draws rows handed over by the controller; owns no catalog state."""

    def __init__(self, on_sort, on_row_click):
        self._on_sort = on_sort
        self._on_row_click = on_row_click
        self._sort_buttons: dict[str, ui.button] = {}

        with ui.card().classes("w-full p-0 gap-0"):
            with ui.row().classes(
                "w-full items-center gap-4 px-4 py-2 bg-grey-2 font-bold no-wrap"
            ):
                for key, label in _HEADERS:
                    with ui.row().classes("items-center gap-1 no-wrap").style(COLUMN_STYLES[key]):
                        ui.label(label).classes("text-body2")
                        if key in SORTABLE_COLUMNS:
                            self._sort_buttons[key] = ui.button(
                                icon=ICON_UNSORTED,
                                on_click=lambda _, col=key: self._on_sort(col),
                            ).props("flat dense round size=sm").tooltip(f"Sort by {label}")
            self.body = ui.column().classes("w-full gap-0")

    def update(self, rows: list[ProductRow], icons: dict[str, str]) -> None:
        for column, button in self._sort_buttons.items():
            button.props(f'icon="{icons.get(column, ICON_UNSORTED)}"')

        self.body.clear()
        with self.body:
            if not rows:
                ui.label("No products match your search.").classes(
                    "text-body2 text-secondary px-4 py-3"
                )
                return
            for row in rows:
                self._render_row(row)

    def _render_row(self, row: ProductRow) -> None:
        with ui.row().classes(
            f"w-full items-center gap-4 px-4 py-2 border-b cursor-pointer no-wrap {HOVER_BG}"
        ).on("click", lambda _, pid=row.id: self._on_row_click(pid)):
            ui.label(str(row.id)).classes("text-body2").style(COLUMN_STYLES["id"])
            safe_html(row.title_html).classes("text-body2 font-medium").style(
                COLUMN_STYLES["title"]
            )
            ui.label(row.price).classes("text-body2 text-positive").style(COLUMN_STYLES["price"])
            safe_html(row.category).classes("text-body2 text-secondary").style(
                COLUMN_STYLES["category"]
            )
            with ui.element("div").style(COLUMN_STYLES["image"]):
                safe_html(image_html(row.thumbnail, THUMBNAIL_PLACEHOLDER, THUMB_CLASSES))
            with ui.tooltip().props('anchor="center left" self="center right" max-width="320px"'):
                safe_html(row.tooltip_html)
