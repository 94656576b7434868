# rocketshoes/api.py
from typing import List, Optional, Protocol

import httpx
from pydantic import TypeAdapter, ValidationError

from .config import API_TIMEOUT, API_URL, STOCK_LOOKUP_MODE
from .schemas import Product, Stock

_STOCK_LIST = TypeAdapter(List[Stock])


class ApiError(Exception):
    """Catalog or stock lookup failed."""


class NotFound(ApiError):
    pass


class TransportError(ApiError):
    pass


class MalformedResponse(ApiError):
    pass


class CatalogLookup(Protocol):
    async def get_product(self, product_id: int) -> Product: ...


class StockLookup(Protocol):
    async def get_stock(self, product_id: int) -> Stock: ...


class StorefrontApi:
    """
    HTTP client for the storefront API.

    Serves both lookups the cart needs: GET /products/{id} and the stock
    ceiling, either per product (GET /stock/{id}) or from the full list
    (GET /stock) depending on ``stock_mode``.
    """

    def __init__(
        self,
        base_url: str = API_URL,
        timeout: float = API_TIMEOUT,
        stock_mode: str = STOCK_LOOKUP_MODE,
        client: Optional[httpx.AsyncClient] = None,
    ):
        if stock_mode not in ("item", "list"):
            raise ValueError(f"unknown stock lookup mode: {stock_mode!r}")
        self.stock_mode = stock_mode
        self._client = client or httpx.AsyncClient(base_url=base_url, timeout=timeout)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _get_json(self, path: str):
        try:
            resp = await self._client.get(path)
        except httpx.RequestError as e:
            raise TransportError(f"GET {path}: {e!r}") from e
        if resp.status_code == 404:
            raise NotFound(f"GET {path}: not found")
        if resp.status_code != 200:
            raise TransportError(f"GET {path}: upstream status {resp.status_code}")
        try:
            return resp.json()
        except ValueError as e:
            raise MalformedResponse(f"GET {path}: body is not JSON") from e

    async def get_product(self, product_id: int) -> Product:
        data = await self._get_json(f"/products/{product_id}")
        try:
            product = Product.model_validate(data)
        except ValidationError as e:
            raise MalformedResponse(f"product {product_id}: {e}") from e
        if product.id != product_id:
            raise MalformedResponse(f"product {product_id}: catalog answered with id {product.id}")
        return product

    async def get_stock(self, product_id: int) -> Stock:
        if self.stock_mode == "list":
            return await self._get_stock_from_list(product_id)

        data = await self._get_json(f"/stock/{product_id}")
        try:
            return Stock.model_validate(data)
        except ValidationError as e:
            raise MalformedResponse(f"stock {product_id}: {e}") from e

    async def _get_stock_from_list(self, product_id: int) -> Stock:
        data = await self._get_json("/stock")
        try:
            records = _STOCK_LIST.validate_python(data)
        except ValidationError as e:
            raise MalformedResponse(f"stock list: {e}") from e
        for record in records:
            if record.id == product_id:
                return record
        raise NotFound(f"stock {product_id}: not in stock list")
