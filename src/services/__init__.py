"""Services package."""
from src.services.catalog_api import CatalogAPI, RequestError
from src.services.csv_exporter import export_filename, export_page_csv
from src.services.excel_exporter import ExcelExporter, export_page_xlsx
from src.services.filtering import filter_products, sort_products, toggle_sort
from src.services.form_validator import ValidationError, validate_product_form
from src.services.pagination import PageInfo, build_page_info, page_window, paginate
from src.services.table_model import build_detail, build_rows
from src.services.utils import escape_html, format_price

__all__ = [
    "CatalogAPI",
    "RequestError",
    "ExcelExporter",
    "export_filename",
    "export_page_csv",
    "export_page_xlsx",
    "filter_products",
    "sort_products",
    "toggle_sort",
    "ValidationError",
    "validate_product_form",
    "PageInfo",
    "build_page_info",
    "page_window",
    "paginate",
    "build_detail",
    "build_rows",
    "escape_html",
    "format_price",
]
