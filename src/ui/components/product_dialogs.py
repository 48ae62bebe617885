"""Modal dialogs: product detail and the shared create/edit form."""
from nicegui import ui

from config import DETAIL_PLACEHOLDER
from src.services.table_model import ProductDetail, image_html
from src.ui.components.helpers import (
    DETAIL_IMAGE_CLASSES, INPUT_PROPS, safe_html, section_header,
)


class DetailDialog:
    """Read-only view of one product with an Edit action."""

    def __init__(self, on_edit):
        with ui.dialog() as self.dialog, ui.card().classes("w-full").style("max-width: 760px"):
            with ui.row().classes("w-full items-center justify-between"):
                section_header("Product Details", icon="info")
                ui.button(icon="close", on_click=self.dialog.close).props("flat round dense")
            self.body = ui.column().classes("w-full")
            with ui.row().classes("w-full justify-end gap-2 mt-2"):
                ui.button("Close", on_click=self.dialog.close).props("flat")
                ui.button("Edit", icon="edit", on_click=on_edit).props("color=primary")

    def open(self, detail: ProductDetail) -> None:
        self.body.clear()
        with self.body:
            with ui.row().classes("w-full gap-6 no-wrap items-start"):
                with ui.element("div").classes("w-1/3"):
                    safe_html(image_html(detail.image, DETAIL_PLACEHOLDER, DETAIL_IMAGE_CLASSES))
                safe_html(
                    f'<h5 class="text-h6 q-my-none">{detail.title_html}</h5>'
                    f'<p class="text-grey-7">ID: {detail.id}</p>'
                    f'<p class="text-h6 text-primary">{detail.price}</p>'
                    "<hr>"
                    "<p><strong>Description:</strong></p>"
                    f'<p style="white-space: pre-line">{detail.description_html}</p>'
                    f"<p><strong>Category:</strong> {detail.category}</p>"
                    f"<p><strong>Category ID:</strong> {detail.category_id}</p>"
                ).classes("flex-1")
        self.dialog.open()

    def close(self) -> None:
        self.dialog.close()


class ProductFormDialog:
    """Create/edit form. Submission is delegated to the controller.

    The dialog stays open until the controller closes it, so a failed
    request leaves the entered values in place for correction.
    """

    def __init__(self, title: str, submit_label: str, on_submit):
        self._on_submit = on_submit
        self._product_id: int | None = None

        with ui.dialog() as self.dialog, ui.card().classes("w-full").style("max-width: 640px"):
            section_header(title, icon="edit_note")
            self.title_input = ui.input(label="Title *").props(INPUT_PROPS).classes("w-full")
            self.price_input = ui.number(
                label="Price *", min=0, step=0.01,
            ).props(INPUT_PROPS).classes("w-full")
            self.description_input = ui.textarea(label="Description *").props(
                INPUT_PROPS
            ).classes("w-full")
            self.category_select = ui.select(
                options={},
                label="Category ID *",
                with_input=True,
                new_value_mode="add-unique",
            ).props(INPUT_PROPS).classes("w-full")
            self.images_input = ui.input(
                label="Images",
                placeholder="https://example.com/a.jpg, https://example.com/b.jpg",
            ).props(INPUT_PROPS).classes("w-full")
            ui.label(
                "Comma-separated image URLs. Leave empty to use a placeholder image."
            ).classes("text-caption text-secondary")

            with ui.row().classes("w-full justify-end gap-2 mt-3"):
                ui.button("Cancel", on_click=self.dialog.close).props("flat")
                ui.button(
                    submit_label, icon="save", on_click=self._submit,
                ).props("color=primary")

    def open(self, data: dict) -> None:
        self._product_id = data.get("product_id")
        self.category_select.set_options(data.get("categories") or {})
        self.fill(data.get("values") or {})
        self.dialog.open()

    def fill(self, values: dict) -> None:
        self.title_input.value = values.get("title") or ""
        self.price_input.value = values.get("price")
        self.description_input.value = values.get("description") or ""
        self.category_select.value = values.get("category_id")
        self.images_input.value = values.get("images") or ""

    def clear(self) -> None:
        self._product_id = None
        self.fill({})

    def close(self) -> None:
        self.dialog.close()

    def values(self) -> dict:
        values = {
            "title": self.title_input.value,
            "price": self.price_input.value,
            "description": self.description_input.value,
            "category_id": self.category_select.value,
            "images": self.images_input.value,
        }
        if self._product_id is not None:
            values["product_id"] = self._product_id
        return values

    async def _submit(self) -> None:
        await self._on_submit(self.values())
