# rocketshoes/main.py
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import cart
from .api import StorefrontApi
from .cart_manager import CartManager
from .config import NOTIFICATIONS_URL, STORAGE_BACKEND
from .database import create_tables
from .logging import get_logger
from .notifier import HttpNotifier, LogNotifier
from .storage import MemoryStorage, SqlStorage

logger = get_logger(__name__)


def build_storage():
    if STORAGE_BACKEND == "memory":
        return MemoryStorage()
    create_tables()
    return SqlStorage()


def create_app(manager: Optional[CartManager] = None) -> FastAPI:
    app = FastAPI(
        title="RocketShoes cart",
        description="🛒 Cart state for the RocketShoes storefront",
        version="1.0.0",
    )

    # ✅ CORS: the storefront UI is served from another origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(cart.router)
    app.state.cart_manager = manager
    app.state.api = None
    app.state.notifier = None

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    @app.on_event("startup")
    async def on_startup():
        if app.state.cart_manager is not None:
            return
        app.state.api = StorefrontApi()
        app.state.notifier = HttpNotifier() if NOTIFICATIONS_URL else LogNotifier()
        app.state.cart_manager = CartManager(
            catalog=app.state.api,
            stock=app.state.api,
            storage=build_storage(),
            notifier=app.state.notifier,
        )
        logger.info("cart loaded with %s products", app.state.cart_manager.cart_size)

    @app.on_event("shutdown")
    async def on_shutdown():
        if app.state.api is not None:
            await app.state.api.aclose()
        if isinstance(app.state.notifier, HttpNotifier):
            app.state.notifier.close()

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run("rocketshoes.main:app", host="0.0.0.0", port=8000, reload=True)
