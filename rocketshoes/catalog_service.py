# rocketshoes/catalog_service.py
"""In-memory catalog/stock API for local development and tests.

Run with: uvicorn rocketshoes.catalog_service:app --port 3333
"""

import copy
import os
from typing import Dict, List, Optional

from fastapi import APIRouter, FastAPI, HTTPException, Request
from pydantic import BaseModel

router = APIRouter()

PRODUCTS: Dict[int, dict] = {
    1: {"id": 1, "title": "Sneaker Vibrant Pack", "price": 179.9,
        "image": "https://rocketseat-cdn.s3-sa-east-1.amazonaws.com/modulo-redux/tenis1.jpg"},
    2: {"id": 2, "title": "Sneaker Light Weight", "price": 139.9,
        "image": "https://rocketseat-cdn.s3-sa-east-1.amazonaws.com/modulo-redux/tenis2.jpg"},
    3: {"id": 3, "title": "Sneaker Running Fast", "price": 219.9,
        "image": "https://rocketseat-cdn.s3-sa-east-1.amazonaws.com/modulo-redux/tenis3.jpg"},
    4: {"id": 4, "title": "Sneaker Street Basic", "price": 99.9,
        "image": "https://rocketseat-cdn.s3-sa-east-1.amazonaws.com/modulo-redux/tenis4.jpg"},
    5: {"id": 5, "title": "Sneaker Court Classic", "price": 229.9,
        "image": "https://rocketseat-cdn.s3-sa-east-1.amazonaws.com/modulo-redux/tenis5.jpg"},
    6: {"id": 6, "title": "Sneaker Trail Grip", "price": 259.9,
        "image": "https://rocketseat-cdn.s3-sa-east-1.amazonaws.com/modulo-redux/tenis6.jpg"},
}

# product_id -> amount available
STOCK: Dict[int, int] = {1: 3, 2: 5, 3: 2, 4: 1, 5: 5, 6: 10}


class StockReset(BaseModel):
    items: Dict[int, int]


@router.get("/products")
async def list_products(request: Request) -> List[dict]:
    return list(request.app.state.products.values())


@router.get("/products/{product_id}")
async def get_product(product_id: int, request: Request):
    product = request.app.state.products.get(product_id)
    if product is None:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


@router.get("/stock")
async def list_stock(request: Request) -> List[dict]:
    return [{"id": pid, "amount": amount} for pid, amount in request.app.state.stock.items()]


@router.get("/stock/{product_id}")
async def get_stock(product_id: int, request: Request):
    stock = request.app.state.stock
    if product_id not in stock:
        raise HTTPException(status_code=404, detail="Stock not found")
    return {"id": product_id, "amount": stock[product_id]}


@router.post("/stock/reset")
async def reset_stock(payload: StockReset, request: Request):
    # overwrites amounts so e2e runs start from a known stock
    if not request.app.state.allow_reset:
        raise HTTPException(status_code=403, detail="Stock reset is turned off")

    for amount in payload.items.values():
        if amount < 0:
            raise HTTPException(status_code=400, detail="Amount must be >= 0")
    request.app.state.stock.update(payload.items)
    return {"ok": True, "stock": request.app.state.stock}


def create_app(
    products: Optional[Dict[int, dict]] = None,
    stock: Optional[Dict[int, int]] = None,
    allow_reset: Optional[bool] = None,
) -> FastAPI:
    app = FastAPI(title="rocketshoes-catalog")
    if allow_reset is None:
        allow_reset = os.getenv("ALLOW_TEST_ENDPOINTS", "1") == "1"
    app.state.allow_reset = allow_reset
    app.state.products = copy.deepcopy(PRODUCTS if products is None else products)
    app.state.stock = dict(STOCK if stock is None else stock)
    app.include_router(router)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


app = create_app()
