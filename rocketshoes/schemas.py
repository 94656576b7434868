# rocketshoes/schemas.py
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


# 🛍️ Catalog entry: id plus whatever the catalog sends (title, price, image...)
class Product(BaseModel):
    id: int

    class Config:
        extra = "allow"


# 📦 Stock record: maximum purchasable quantity
class Stock(BaseModel):
    id: int
    amount: int


# 🛒 Cart line: catalog attributes + amount
class CartItem(Product):
    amount: int = Field(ge=1)


class CartError(str, Enum):
    STOCK_EXCEEDED = "stock_exceeded"
    PRODUCT_NOT_FOUND = "product_not_found"
    ADD_FAILED = "add_failed"
    UPDATE_FAILED = "update_failed"

    @property
    def message(self) -> str:
        return ERROR_MESSAGES[self]


ERROR_MESSAGES = {
    CartError.STOCK_EXCEEDED: "Requested quantity out of stock",
    CartError.PRODUCT_NOT_FOUND: "Error removing product",
    CartError.ADD_FAILED: "Error adding product",
    CartError.UPDATE_FAILED: "Error changing product quantity",
}


class CartResult(BaseModel):
    """Outcome of a cart operation: the cart after the call and the failure kind, if any."""

    cart: List[CartItem]
    error: Optional[CartError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


# 📥 Payloads of the cart API
class CartAddRequest(BaseModel):
    product_id: int


class CartAmountUpdate(BaseModel):
    amount: int


# 📊 Cart summary (single response format of /api/cart)
class CartSummary(BaseModel):
    items: List[CartItem]
    count: int
    total: float
