"""Pytest configuration and fixtures"""
import asyncio
import os
from typing import Dict, List, Optional

import pytest

os.environ.setdefault("STORAGE_BACKEND", "memory")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_LEVEL", "DEBUG")

from rocketshoes.api import NotFound  # noqa: E402
from rocketshoes.cart_manager import CartManager  # noqa: E402
from rocketshoes.config import CART_STORAGE_KEY  # noqa: E402
from rocketshoes.schemas import Product, Stock  # noqa: E402
from rocketshoes.storage import MemoryStorage  # noqa: E402


class FakeStorefront:
    """Catalog + stock lookups backed by dicts; ``fail_with`` makes every call raise."""

    def __init__(self, products: Dict[int, dict], stock: Dict[int, int]):
        self.products = products
        self.stock = stock
        self.fail_with: Optional[Exception] = None
        self.calls: List[tuple] = []

    async def get_product(self, product_id: int) -> Product:
        self.calls.append(("product", product_id))
        await asyncio.sleep(0)
        if self.fail_with is not None:
            raise self.fail_with
        if product_id not in self.products:
            raise NotFound(f"product {product_id}")
        return Product(**self.products[product_id])

    async def get_stock(self, product_id: int) -> Stock:
        self.calls.append(("stock", product_id))
        await asyncio.sleep(0)
        if self.fail_with is not None:
            raise self.fail_with
        if product_id not in self.stock:
            raise NotFound(f"stock {product_id}")
        return Stock(id=product_id, amount=self.stock[product_id])


class RecordingNotifier:
    def __init__(self):
        self.messages: List[str] = []

    def notify_error(self, message: str) -> None:
        self.messages.append(message)


@pytest.fixture
def sample_products():
    return {
        1: {"id": 1, "title": "Sneaker Vibrant Pack", "price": 179.9, "image": "tenis1.jpg"},
        2: {"id": 2, "title": "Sneaker Light Weight", "price": 139.9, "image": "tenis2.jpg"},
        3: {"id": 3, "title": "Sneaker Running Fast", "price": 219.9, "image": "tenis3.jpg"},
    }


@pytest.fixture
def storefront(sample_products):
    return FakeStorefront(sample_products, {1: 5, 2: 10, 3: 0})


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def make_manager(storefront, storage, notifier):
    """Build a CartManager, optionally seeding the store with a raw cart blob first."""

    def _make(stored: Optional[str] = None) -> CartManager:
        if stored is not None:
            storage.set_item(CART_STORAGE_KEY, stored)
        return CartManager(catalog=storefront, stock=storefront, storage=storage, notifier=notifier)

    return _make
