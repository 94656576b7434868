#!/usr/bin/env python3
"""Simple e2e script: drives the cart service and prints every response.

Needs `uvicorn rocketshoes.catalog_service:app --port 3333` and
`uvicorn rocketshoes.main:app --port 8000` running.
"""
import httpx

CART_URL = "http://localhost:8000/api/cart"


def show(label: str, r: httpx.Response) -> None:
    print(f"{label} -> {r.status_code} {r.text}")


def run():
    with httpx.Client(timeout=15.0) as client:
        show("cart", client.get(CART_URL))
        show("add 1", client.post(f"{CART_URL}/add", json={"product_id": 1}))
        show("add 1", client.post(f"{CART_URL}/add", json={"product_id": 1}))
        show("amount 1 = 3", client.put(f"{CART_URL}/1", json={"amount": 3}))
        show("amount 1 = 50", client.put(f"{CART_URL}/1", json={"amount": 50}))
        show("remove 1", client.delete(f"{CART_URL}/1"))
        show("remove 1", client.delete(f"{CART_URL}/1"))


if __name__ == "__main__":
    run()
