# rocketshoes/cart_manager.py
"""
Cart state for one shopper.

The cart lives in memory and is written through to the key-value store
after every successful change. Operations never raise for expected failures:
they notify the user once and return a ``CartResult`` carrying the error kind
and the untouched cart.

Async operations snapshot the cart when they start and replace it when they
finish, so two mutations racing across an ``await`` resolve last-write-wins.
"""

from typing import List, Optional

from pydantic import TypeAdapter, ValidationError

from .api import ApiError, CatalogLookup, MalformedResponse, StockLookup
from .config import CART_STORAGE_KEY
from .logging import get_logger
from .notifier import Notifier
from .schemas import CartError, CartItem, CartResult
from .storage import KeyValueStore

logger = get_logger(__name__)

_CART = TypeAdapter(List[CartItem])


def load_cart(raw: Optional[str]) -> List[CartItem]:
    """Parse a stored cart blob; anything absent or invalid is an empty cart."""
    if not raw:
        return []
    try:
        cart = _CART.validate_json(raw)
    except ValidationError as e:
        logger.warning("stored cart is not valid, starting empty: %s", e.errors()[:1])
        return []
    if len({item.id for item in cart}) != len(cart):
        logger.warning("stored cart has duplicate product ids, starting empty")
        return []
    return cart


def dump_cart(cart: List[CartItem]) -> str:
    return _CART.dump_json(cart).decode()


class CartManager:
    def __init__(
        self,
        catalog: CatalogLookup,
        stock: StockLookup,
        storage: KeyValueStore,
        notifier: Notifier,
        storage_key: str = CART_STORAGE_KEY,
    ):
        self._catalog = catalog
        self._stock = stock
        self._storage = storage
        self._notifier = notifier
        self.storage_key = storage_key
        self._cart: List[CartItem] = []
        self.initialize()

    def initialize(self) -> List[CartItem]:
        self._cart = load_cart(self._storage.get_item(self.storage_key))
        return self.cart

    @property
    def cart(self) -> List[CartItem]:
        return [item.model_copy() for item in self._cart]

    @property
    def cart_size(self) -> int:
        return len(self._cart)

    @property
    def total(self) -> float:
        total = 0.0
        for item in self._cart:
            price = getattr(item, "price", None)
            if price is None or isinstance(price, bool):
                continue
            try:
                total += float(price) * item.amount
            except (TypeError, ValueError):
                logger.debug("product %s has no usable price: %r", item.id, price)
        return round(total, 2)

    def _find(self, cart: List[CartItem], product_id: int) -> Optional[CartItem]:
        for item in cart:
            if item.id == product_id:
                return item
        return None

    def _commit(self, cart: List[CartItem]) -> CartResult:
        self._storage.set_item(self.storage_key, dump_cart(cart))
        self._cart = cart
        return CartResult(cart=self.cart)

    def _fail(self, error: CartError) -> CartResult:
        self._notifier.notify_error(error.message)
        return CartResult(cart=self.cart, error=error)

    async def add_product(self, product_id: int) -> CartResult:
        cart = self._cart
        try:
            existing = self._find(cart, product_id)
            stock = await self._stock.get_stock(product_id)
            in_cart = existing.amount if existing is not None else 0

            if in_cart + 1 > stock.amount:
                logger.info("product %s: %s in cart, %s in stock", product_id, in_cart, stock.amount)
                return self._fail(CartError.STOCK_EXCEEDED)

            if existing is not None:
                updated = [
                    item.model_copy(update={"amount": item.amount + 1}) if item.id == product_id else item
                    for item in cart
                ]
            else:
                product = await self._catalog.get_product(product_id)
                if product.id != product_id:
                    raise MalformedResponse(f"catalog answered product {product_id} with id {product.id}")
                updated = [*cart, CartItem(**{**product.model_dump(), "amount": 1})]
        except ApiError as e:
            logger.warning("add product %s failed: %s", product_id, e)
            return self._fail(CartError.ADD_FAILED)

        logger.debug("product %s added to cart", product_id)
        return self._commit(updated)

    def remove_product(self, product_id: int) -> CartResult:
        updated = [item for item in self._cart if item.id != product_id]
        if len(updated) == len(self._cart):
            return self._fail(CartError.PRODUCT_NOT_FOUND)

        logger.debug("product %s removed from cart", product_id)
        return self._commit(updated)

    async def update_product_amount(self, product_id: int, amount: int) -> CartResult:
        # deleting goes through remove_product
        if amount <= 0:
            return CartResult(cart=self.cart)

        cart = self._cart
        try:
            stock = await self._stock.get_stock(product_id)
        except ApiError as e:
            logger.warning("update amount of product %s failed: %s", product_id, e)
            return self._fail(CartError.UPDATE_FAILED)

        if amount > stock.amount:
            logger.info("product %s: %s requested, %s in stock", product_id, amount, stock.amount)
            return self._fail(CartError.STOCK_EXCEEDED)

        if self._find(cart, product_id) is None:
            # TODO: decide whether this should fail with PRODUCT_NOT_FOUND (kept as a successful no-op for now)
            logger.warning("update amount: product %s is not in the cart", product_id)

        updated = [
            item.model_copy(update={"amount": amount}) if item.id == product_id else item
            for item in cart
        ]
        return self._commit(updated)
