"""Shared UI helper functions and design tokens for the catalog console."""

from nicegui import ui


# ─── Design Tokens ────────────────────────────────────────────────────────────

INPUT_PROPS = "outlined dense"
HOVER_BG = "hover:bg-[#F5F0EB]"

# Table column widths (header and rows share them)
COLUMN_STYLES = {
    "id": "width: 70px",
    "title": "flex: 2; min-width: 200px",
    "price": "width: 110px",
    "category": "width: 160px",
    "image": "width: 70px",
}

# Thumbnail <img> classes
THUMB_CLASSES = "w-12 h-12 rounded object-cover"
DETAIL_IMAGE_CLASSES = "w-full rounded"

# Notification kinds accepted by ui.notify
NOTIFY_TYPES = {"positive", "negative", "warning", "info", "ongoing"}


def page_header(title: str, subtitle: str | None = None, icon: str | None = None):
    """Render a consistent page title with optional icon + subtitle."""
    with ui.row().classes("items-center gap-3"):
        if icon:
            ui.icon(icon, size="sm").classes("text-accent")
        ui.label(title).classes("text-h5 font-bold")
    if subtitle:
        ui.label(subtitle).classes("text-body2 text-secondary")


def section_header(title: str, icon: str | None = None, subtitle: str | None = None):
    """Render a consistent card section header with accent-colored icon."""
    with ui.row().classes("items-center gap-2 mb-2"):
        if icon:
            ui.icon(icon).classes("text-accent")
        ui.label(title).classes("text-subtitle1 font-bold")
    if subtitle:
        ui.label(subtitle).classes("text-caption text-secondary")


def safe_html(content: str, tag: str = "div"):
    """Insert markup built from already-escaped values."""
    return ui.html(content, sanitize=False, tag=tag)
