"""Per-visit view state of the catalog table."""
from dataclasses import dataclass

from config import DEFAULT_PAGE_SIZE
from src.services.filtering import ASC


@dataclass
class ViewState:
    current_page: int = 1
    items_per_page: int = DEFAULT_PAGE_SIZE
    search_term: str = ""
    sort_column: str | None = None
    sort_direction: str = ASC
    # Product open in the detail dialog (read by the Edit button)
    current_product_id: int | None = None

    def reset_page(self) -> None:
        self.current_page = 1
