"""REST client for the remote product catalog."""
import logging

import requests

from config import API_URL, REQUEST_TIMEOUT
from src.models.product import Product

logger = logging.getLogger(__name__)


class RequestError(Exception):
    """Raised when a catalog request fails or returns a non-2xx status."""

    def __init__(self, status: int | None, body: str = "", message: str | None = None):
        self.status = status
        self.body = body
        if message is None:
            message = (
                f"Catalog request failed with status {status}"
                if status is not None
                else f"Catalog request failed: {body}"
            )
        super().__init__(message)


class CatalogAPI:
    """Thin wrapper over the catalog's list/create/update endpoints.

    This is the only place the console performs network I/O. The whole
    catalog is fetched at once; there is no server-side filtering or paging.
    """

    def __init__(
        self,
        base_url: str = API_URL,
        session: requests.Session | None = None,
        timeout: float | None = REQUEST_TIMEOUT,
    ):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/json"})
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def list_products(self) -> list[Product]:
        data = self._request("GET", self.base_url)
        if not isinstance(data, list):
            raise RequestError(None, repr(data), "Catalog returned an unexpected payload")
        return [self._to_product(item) for item in data]

    def create_product(self, payload: dict) -> Product:
        data = self._request("POST", self.base_url, json=payload)
        return self._to_product(data)

    def update_product(self, product_id: int, payload: dict) -> Product:
        data = self._request("PUT", f"{self.base_url}/{product_id}", json=payload)
        return self._to_product(data)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _request(self, method: str, url: str, json: dict | None = None):
        logger.info("%s %s", method, url)
        if json is not None:
            logger.debug("Request body: %s", json)
        try:
            resp = self.session.request(method, url, json=json, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.error("%s %s failed: %s", method, url, exc)
            raise RequestError(None, str(exc)) from exc

        logger.info("%s %s -> %s", method, url, resp.status_code)
        if not resp.ok:
            logger.error("Error response from %s %s: %s", method, url, resp.text)
            raise RequestError(resp.status_code, resp.text)

        try:
            return resp.json()
        except ValueError as exc:
            raise RequestError(
                resp.status_code, resp.text, "Catalog returned invalid JSON",
            ) from exc

    @staticmethod
    def _to_product(data) -> Product:
        if not isinstance(data, dict) or "id" not in data:
            raise RequestError(None, repr(data), "Catalog returned an unexpected payload")
        return Product.from_dict(data)
