"""Unit tests for the storefront HTTP client."""

import json

import httpx
import pytest

from services.wishlist import WishlistController
from ui.api_client import HttpWishlistStore, StorefrontClient

PRODUCT = {
    "id": "p-ear",
    "brand_id": "brand-nothing",
    "category_id": "cat-audio",
    "name": "Nothing Ear (a)",
    "slug": "nothing-ear-a",
    "price": 7999,
    "currency": "INR",
    "new_arrival": True,
    "brand": {"id": "brand-nothing", "name": "Nothing", "slug": "nothing"},
    "category": {"id": "cat-audio", "name": "Audio", "slug": "audio"},
}
CATEGORY = {"id": "cat-audio", "name": "Audio", "slug": "audio"}
BRAND = {"id": "brand-nothing", "name": "Nothing", "slug": "nothing"}


def make_handler(failing=(), wishlist=None, seen=None):
    wishlist = wishlist if wishlist is not None else ["p-ear"]

    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        path = request.url.path
        if path in failing:
            return httpx.Response(500, json={"detail": "boom"})
        if path == "/api/v1/products":
            return httpx.Response(200, json=[PRODUCT])
        if path == "/api/v1/categories":
            return httpx.Response(200, json=[CATEGORY])
        if path == "/api/v1/brands":
            return httpx.Response(200, json=[BRAND])
        if path == "/api/v1/wishlist" and request.method == "GET":
            return httpx.Response(200, json={"user_id": "user_test00001", "product_ids": wishlist})
        if path == "/api/v1/wishlist" and request.method == "POST":
            wishlist.append(json.loads(request.content)["product_id"])
            return httpx.Response(201, json={"user_id": "user_test00001", "product_ids": wishlist})
        if path.startswith("/api/v1/wishlist/") and request.method == "DELETE":
            product_id = path.rsplit("/", 1)[-1]
            removed = product_id in wishlist
            if removed:
                wishlist.remove(product_id)
            return httpx.Response(200, json={"product_id": product_id, "removed": removed})
        if path == "/api/v1/products/nothing-ear-a":
            return httpx.Response(200, json={"product": PRODUCT, "in_wishlist": True, "related": []})
        return httpx.Response(404, json={"detail": "Not found"})

    return handler


def make_client(handler) -> StorefrontClient:
    transport = httpx.MockTransport(handler)
    return StorefrontClient(
        user_id="user_test00001",
        base_url="http://store.test/",
        transport=transport,
        async_transport=transport,
    )


def test_client_strips_trailing_slash_and_sends_user_header():
    seen = []
    client = make_client(make_handler(seen=seen))

    client.list_wishlist()

    assert client.base_url == "http://store.test"
    assert seen[0].headers["X-User-Id"] == "user_test00001"


@pytest.mark.asyncio
async def test_fetch_catalog_returns_all_lists():
    client = make_client(make_handler())

    payload = await client.fetch_catalog()

    assert [p.id for p in payload.products] == ["p-ear"]
    assert payload.products[0].brand.name == "Nothing"
    assert [c.slug for c in payload.categories] == ["audio"]
    assert [b.slug for b in payload.brands] == ["nothing"]
    assert payload.wishlist_ids == ["p-ear"]


@pytest.mark.asyncio
async def test_fetch_catalog_failed_read_leaves_others_intact(caplog):
    client = make_client(make_handler(failing={"/api/v1/categories", "/api/v1/wishlist"}))

    payload = await client.fetch_catalog()

    assert [p.id for p in payload.products] == ["p-ear"]
    assert payload.categories == []
    assert [b.slug for b in payload.brands] == ["nothing"]
    assert payload.wishlist_ids == []
    assert "Error fetching categories" in caplog.text
    assert "Error fetching wishlist" in caplog.text


@pytest.mark.asyncio
async def test_fetch_catalog_survives_unreachable_backend():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    payload = await make_client(handler).fetch_catalog()

    assert payload.products == []
    assert payload.categories == []
    assert payload.brands == []
    assert payload.wishlist_ids == []


@pytest.mark.asyncio
async def test_fetch_catalog_ignores_malformed_payload():
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/api/v1/products":
            return httpx.Response(200, json=[{"id": "broken"}])
        return make_handler()(request)

    payload = await make_client(handler).fetch_catalog()

    assert payload.products == []
    assert [c.slug for c in payload.categories] == ["audio"]


def test_fetch_product_detail():
    detail = make_client(make_handler()).fetch_product_detail("nothing-ear-a")

    assert detail.product.id == "p-ear"
    assert detail.in_wishlist is True
    assert detail.related == []


def test_fetch_product_detail_unknown_slug():
    assert make_client(make_handler()).fetch_product_detail("missing") is None


def test_fetch_product_detail_server_error():
    client = make_client(make_handler(failing={"/api/v1/products/nothing-ear-a"}))

    assert client.fetch_product_detail("nothing-ear-a") is None


def test_wishlist_writes_go_through_api():
    saved = []
    client = make_client(make_handler(wishlist=saved))

    client.add_to_wishlist("p-ear")
    assert client.list_wishlist() == ["p-ear"]

    client.remove_from_wishlist("p-ear")
    assert client.list_wishlist() == []


def test_wishlist_write_failure_raises():
    client = make_client(make_handler(failing={"/api/v1/wishlist"}))

    with pytest.raises(httpx.HTTPStatusError):
        client.add_to_wishlist("p-ear")


def test_http_store_toggle_success():
    saved = []
    store = HttpWishlistStore(make_client(make_handler(wishlist=saved)))
    controller = WishlistController(store, "user_test00001")

    result = controller.toggle("p-ear")

    assert result.in_wishlist is True
    assert result.synced is True
    assert saved == ["p-ear"]
    assert store.contains("user_test00001", "p-ear") is True


def test_http_store_toggle_failure_keeps_optimistic_state():
    store = HttpWishlistStore(make_client(make_handler(failing={"/api/v1/wishlist"})))
    controller = WishlistController(store, "user_test00001")

    result = controller.toggle("p-ear")

    assert result.synced is False
    assert result.in_wishlist is True
    assert controller.contains("p-ear")
