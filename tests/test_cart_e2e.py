"""Live check against a running cart service (uvicorn rocketshoes.main:app) and catalog service."""

import httpx
import pytest

CART_URL = "http://localhost:8000/api/cart"
CATALOG_URL = "http://localhost:3333"


def service_available(url: str) -> bool:
    try:
        httpx.get(url, timeout=2.0)
        return True
    except httpx.HTTPError:
        return False


live = pytest.mark.skipif(
    not (service_available(CART_URL) and service_available(f"{CATALOG_URL}/health")),
    reason="cart service on localhost:8000 or catalog service on localhost:3333 not reachable",
)


@live
def test_add_until_out_of_stock_then_remove():
    pid = 4
    r = httpx.post(f"{CATALOG_URL}/stock/reset", json={"items": {str(pid): 1}}, timeout=3.0)
    if r.status_code != 200:
        pytest.skip("Stock reset endpoint not available")

    # start from a cart without this product
    httpx.delete(f"{CART_URL}/{pid}", timeout=3.0)

    r1 = httpx.post(f"{CART_URL}/add", json={"product_id": pid}, timeout=15.0)
    assert r1.status_code == 200, f"unexpected status: {r1.status_code}, body: {r1.text}"
    assert any(i["id"] == pid and i["amount"] == 1 for i in r1.json()["items"])

    r2 = httpx.post(f"{CART_URL}/add", json={"product_id": pid}, timeout=15.0)
    assert r2.status_code == 409

    r3 = httpx.delete(f"{CART_URL}/{pid}", timeout=3.0)
    assert r3.status_code == 200
    assert all(i["id"] != pid for i in r3.json()["items"])
