"""Export the visible table page to an Excel workbook."""
import io
import logging
from typing import Any

from openpyxl import Workbook
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter

from src.services.csv_exporter import CSV_HEADERS
from src.services.table_model import NOT_AVAILABLE

logger = logging.getLogger(__name__)

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

# Style constants
_HEADER_FONT = Font(bold=True, size=11)
_HEADER_FILL = PatternFill(start_color="D9E1F2", end_color="D9E1F2", fill_type="solid")
_PRICE_FORMAT = "0.00##"


class ExcelExporter:
    """Write one page of products to a single-sheet .xlsx workbook."""

    sheet_title = "Products"

    def export(self, products: list) -> bytes:
        """Return the workbook for *products* as bytes ready for download."""
        wb = Workbook()
        ws = wb.active
        ws.title = self.sheet_title
        self._write_header_row(ws, CSV_HEADERS)

        for row_idx, p in enumerate(products, start=2):
            ws.cell(row=row_idx, column=1, value=p.id)
            ws.cell(row=row_idx, column=2, value=p.title)
            ws.cell(row=row_idx, column=3, value=p.price).number_format = _PRICE_FORMAT
            ws.cell(row=row_idx, column=4, value=p.category_name or NOT_AVAILABLE)
            desc = ws.cell(row=row_idx, column=5, value=p.description)
            desc.alignment = Alignment(wrap_text=True, vertical="top")
            ws.cell(row=row_idx, column=6, value=";".join(p.images))

        ws.freeze_panes = "A2"
        self._auto_column_width(ws)

        buffer = io.BytesIO()
        wb.save(buffer)
        logger.info("Exported %d products to Excel", len(products))
        return buffer.getvalue()

    # ------------------------------------------------------------------
    # Formatting helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _write_header_row(ws: Any, headers: list[str]) -> None:
        for col_idx, header in enumerate(headers, start=1):
            cell = ws.cell(row=1, column=col_idx, value=header)
            cell.font = _HEADER_FONT
            cell.fill = _HEADER_FILL
            cell.alignment = Alignment(horizontal="center")

    @staticmethod
    def _auto_column_width(ws: Any, min_width: int = 8, max_width: int = 60) -> None:
        for col_cells in ws.columns:
            max_len = min_width
            col_letter = get_column_letter(col_cells[0].column)
            for cell in col_cells:
                val = str(cell.value) if cell.value is not None else ""
                max_len = max(max_len, min(len(val) + 2, max_width))
            ws.column_dimensions[col_letter].width = max_len


def export_page_xlsx(products: list) -> bytes:
    return ExcelExporter().export(products)
