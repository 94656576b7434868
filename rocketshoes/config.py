# rocketshoes/config.py
import os

# Catalog / stock API (GET /products/:id, GET /stock/:id)
API_URL = os.getenv("STOREFRONT_API_URL", "http://localhost:3333")
API_TIMEOUT = float(os.getenv("API_TIMEOUT", "10.0"))
# "item" -> GET /stock/{id}, "list" -> GET /stock and filter locally
STOCK_LOOKUP_MODE = os.getenv("STOCK_LOOKUP_MODE", "item")

# "sql" (DATABASE_URL) or "memory"
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "sql")
CART_STORAGE_KEY = "@RocketShoes:cart"

# Empty -> errors only go to the log
NOTIFICATIONS_URL = os.getenv("NOTIFICATIONS_URL", "")
NOTIFY_TO = os.getenv("NOTIFY_TO", "customer@example.com")
