"""Pagination controls: previous/next plus a sliding window of page numbers."""
from nicegui import ui

from src.services.pagination import PageInfo


class PaginationBar:
    def __init__(self, on_page, on_previous, on_next):
        self._on_page = on_page
        with ui.row().classes("w-full items-center justify-between") as self.container:
            self.summary = ui.label("").classes("text-body2 text-secondary")
            with ui.row().classes("items-center gap-1"):
                self.prev_btn = ui.button("Previous", icon="chevron_left", on_click=on_previous).props(
                    "flat dense"
                )
                self.pages = ui.row().classes("items-center gap-1")
                self.next_btn = ui.button("Next", on_click=on_next).props(
                    'flat dense icon-right="chevron_right"'
                )

    def update(self, info: PageInfo) -> None:
        if info.total_items:
            self.summary.text = (
                f"Showing {info.first_item}-{info.last_item} of {info.total_items} products"
            )
        else:
            self.summary.text = "No products to show"

        self.pages.clear()
        visible = info.visible
        self.prev_btn.set_visibility(visible)
        self.next_btn.set_visibility(visible)
        if not visible:
            return

        self.prev_btn.set_enabled(info.has_previous)
        self.next_btn.set_enabled(info.has_next)
        with self.pages:
            for number in info.window:
                btn = ui.button(
                    str(number), on_click=lambda _, n=number: self._on_page(n),
                ).props("dense")
                if number == info.page:
                    btn.props("color=primary unelevated")
                else:
                    btn.props("flat color=primary")
