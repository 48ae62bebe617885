"""Product Catalog Admin - Main entry point."""
import logging

from nicegui import app, ui

from config import APP_HOST, APP_PORT, APP_TITLE, LOG_LEVEL
from src.ui.pages.catalog import catalog_page

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


@ui.page("/")
def index():
    catalog_page()


@app.get("/_health")
async def health_check():
    return {"status": "ok", "app": "catalog-console"}


ui.run(
    title=APP_TITLE,
    host=APP_HOST,
    port=APP_PORT,
    reload=False,
    dark=False,
)
