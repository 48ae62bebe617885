"""In-memory snapshot of the remote catalog and the filtered view over it."""
import logging

from src.models.product import Product
from src.services.filtering import filter_products, sort_products

logger = logging.getLogger(__name__)


class ProductStore:
    """Holds the full product snapshot and the currently filtered/sorted view.

    ``filtered_products`` is always rebuilt from ``all_products``; it is
    never patched in place.
    """

    def __init__(self, products: list[Product] | None = None):
        self.all_products: list[Product] = list(products or [])
        self.filtered_products: list[Product] = list(self.all_products)

    @property
    def total(self) -> int:
        return len(self.all_products)

    @property
    def matching(self) -> int:
        return len(self.filtered_products)

    def load(self, products: list[Product]) -> None:
        """Replace the snapshot with a freshly fetched product list."""
        self.all_products = list(products)
        self.filtered_products = list(self.all_products)
        logger.info("Loaded %d products into the store", len(self.all_products))

    def find(self, product_id: int | None) -> Product | None:
        for product in self.all_products:
            if product.id == product_id:
                return product
        return None

    def replace(self, product: Product) -> bool:
        """Swap the entry with the same id for *product*, keeping its position.

        Returns False when no entry with that id exists.
        """
        for idx, existing in enumerate(self.all_products):
            if existing.id == product.id:
                self.all_products[idx] = product
                return True
        logger.warning("Product %s not in store; update not applied locally", product.id)
        return False

    def prepend(self, product: Product) -> None:
        self.all_products.insert(0, product)

    def refilter(
        self,
        term: str = "",
        sort_column: str | None = None,
        sort_direction: str = "asc",
    ) -> list[Product]:
        """Recompute ``filtered_products`` from the full snapshot."""
        view = filter_products(self.all_products, term)
        if sort_column:
            view = sort_products(view, sort_column, sort_direction)
        self.filtered_products = view
        return view
