# rocketshoes/cart.py
from fastapi import APIRouter, Depends, HTTPException, Request, status

from .cart_manager import CartManager
from .schemas import CartAddRequest, CartAmountUpdate, CartError, CartResult, CartSummary

router = APIRouter(prefix="/api/cart", tags=["cart"])

ERROR_STATUS = {
    CartError.STOCK_EXCEEDED: status.HTTP_409_CONFLICT,
    CartError.PRODUCT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    CartError.ADD_FAILED: status.HTTP_502_BAD_GATEWAY,
    CartError.UPDATE_FAILED: status.HTTP_502_BAD_GATEWAY,
}


def get_cart_manager(request: Request) -> CartManager:
    manager = getattr(request.app.state, "cart_manager", None)
    if manager is None:
        raise HTTPException(status_code=503, detail="Cart is not ready")
    return manager


def summarize(manager: CartManager, result: CartResult) -> CartSummary:
    if not result.ok:
        raise HTTPException(status_code=ERROR_STATUS[result.error], detail=result.error.message)
    return CartSummary(items=result.cart, count=manager.cart_size, total=manager.total)


@router.get("", response_model=CartSummary)
async def get_cart(manager: CartManager = Depends(get_cart_manager)):
    return CartSummary(items=manager.cart, count=manager.cart_size, total=manager.total)


@router.post("/add", response_model=CartSummary)
async def add_to_cart(payload: CartAddRequest, manager: CartManager = Depends(get_cart_manager)):
    result = await manager.add_product(payload.product_id)
    return summarize(manager, result)


@router.put("/{product_id}", response_model=CartSummary)
async def update_cart_item(
    product_id: int,
    payload: CartAmountUpdate,
    manager: CartManager = Depends(get_cart_manager),
):
    result = await manager.update_product_amount(product_id, payload.amount)
    return summarize(manager, result)


# plain def: runs in the threadpool, the store write must not hold the event loop
@router.delete("/{product_id}", response_model=CartSummary)
def remove_cart_item(product_id: int, manager: CartManager = Depends(get_cart_manager)):
    result = manager.remove_product(product_id)
    return summarize(manager, result)
