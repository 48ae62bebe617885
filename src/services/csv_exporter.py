"""Export the visible table page to CSV."""
import csv
import io
import logging
import time

from src.services.table_model import NOT_AVAILABLE

logger = logging.getLogger(__name__)

CSV_HEADERS = ["ID", "Title", "Price", "Category", "Description", "Images"]
CSV_MEDIA_TYPE = "text/csv;charset=utf-8"

# Byte-order mark so spreadsheet apps detect UTF-8
_BOM = "\ufeff"


def export_page_csv(products: list) -> bytes:
    """Serialize *products* (the current page only) as CSV bytes.

    IDs and prices are written bare; every text field is quoted with
    embedded quotes doubled. Image URLs share one field, joined by ``;``.
    """
    output = io.StringIO()
    output.write(",".join(CSV_HEADERS))
    output.write("\n")
    writer = csv.writer(output, quoting=csv.QUOTE_NONNUMERIC, lineterminator="\n")
    for p in products:
        writer.writerow([
            p.id,
            p.title,
            p.price,
            p.category_name or NOT_AVAILABLE,
            p.description,
            ";".join(p.images),
        ])
    content = output.getvalue().rstrip("\n")
    logger.info("Exported %d products to CSV", len(products))
    return (_BOM + content).encode("utf-8")


def export_filename(page: int, extension: str = "csv", timestamp_ms: int | None = None) -> str:
    """Download name like ``products_page_2_1718030000000.csv``."""
    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)
    return f"products_page_{page}_{timestamp_ms}.{extension}"
