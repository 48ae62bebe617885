"""Reusable UI components."""
from src.ui.components.stats_card import stats_card
from src.ui.components.product_table import ProductTable
from src.ui.components.pagination_bar import PaginationBar
from src.ui.components.product_dialogs import DetailDialog, ProductFormDialog

__all__ = ["stats_card", "ProductTable", "PaginationBar", "DetailDialog", "ProductFormDialog"]
