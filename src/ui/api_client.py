"""
HTTP client the storefront UI uses to talk to the catalog API.

Read failures are logged and degrade to empty results; write failures raise so
the wishlist controller can report them.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from config import settings
from models.schemas import (
    BrandResponse,
    CategoryResponse,
    ProductDetailResponse,
    ProductResponse,
    WishlistResponse,
)

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


@dataclass
class CatalogPayload:
    products: List[ProductResponse] = field(default_factory=list)
    categories: List[CategoryResponse] = field(default_factory=list)
    brands: List[BrandResponse] = field(default_factory=list)
    wishlist_ids: List[str] = field(default_factory=list)


class StorefrontClient:
    def __init__(
        self,
        user_id: str,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
        async_transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.user_id = user_id
        self.base_url = (base_url or settings.resolved_api_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.api_timeout
        self.transport = transport
        self.async_transport = async_transport

    @property
    def headers(self) -> Dict[str, str]:
        return {"X-User-Id": self.user_id}

    def _client(self) -> httpx.Client:
        return httpx.Client(
            base_url=self.base_url,
            headers=self.headers,
            timeout=self.timeout,
            transport=self.transport,
        )

    def _async_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            headers=self.headers,
            timeout=self.timeout,
            transport=self.async_transport,
        )

    async def _get_json(self, client: httpx.AsyncClient, path: str) -> Any:
        response = await client.get(path)
        response.raise_for_status()
        return response.json()

    async def fetch_catalog(self) -> CatalogPayload:
        """
        Load products, categories, brands and wishlist ids concurrently.

        Each read fails independently: a failed read is logged and leaves its
        list empty while the others are still returned.
        """
        async with self._async_client() as client:
            results = await asyncio.gather(
                self._get_json(client, "/api/v1/products"),
                self._get_json(client, "/api/v1/categories"),
                self._get_json(client, "/api/v1/brands"),
                self._get_json(client, "/api/v1/wishlist"),
                return_exceptions=True,
            )

        products_raw, categories_raw, brands_raw, wishlist_raw = results
        wishlist = _parse_one(WishlistResponse, wishlist_raw, "wishlist")
        return CatalogPayload(
            products=_parse_many(ProductResponse, products_raw, "products"),
            categories=_parse_many(CategoryResponse, categories_raw, "categories"),
            brands=_parse_many(BrandResponse, brands_raw, "brands"),
            wishlist_ids=wishlist.product_ids if wishlist else [],
        )

    def fetch_product_detail(self, slug: str) -> Optional[ProductDetailResponse]:
        """Return the product page payload, or None when the slug is unknown or the read fails."""
        try:
            with self._client() as client:
                response = client.get(f"/api/v1/products/{slug}")
                if response.status_code == 404:
                    return None
                response.raise_for_status()
                return ProductDetailResponse.model_validate(response.json())
        except (httpx.HTTPError, ValidationError) as e:
            logger.error("Error fetching product %s: %s", slug, e)
            return None

    def list_wishlist(self) -> List[str]:
        with self._client() as client:
            response = client.get("/api/v1/wishlist")
            response.raise_for_status()
            return WishlistResponse.model_validate(response.json()).product_ids

    def add_to_wishlist(self, product_id: str) -> None:
        with self._client() as client:
            response = client.post("/api/v1/wishlist", json={"product_id": product_id})
            response.raise_for_status()

    def remove_from_wishlist(self, product_id: str) -> None:
        with self._client() as client:
            response = client.delete(f"/api/v1/wishlist/{product_id}")
            response.raise_for_status()


class HttpWishlistStore:
    """WishlistStore backed by the catalog API. The user is carried by the client."""

    def __init__(self, client: StorefrontClient):
        self.client = client

    def list_product_ids(self, user_id: str) -> List[str]:
        return self.client.list_wishlist()

    def contains(self, user_id: str, product_id: str) -> bool:
        return product_id in self.client.list_wishlist()

    def add(self, user_id: str, product_id: str) -> None:
        self.client.add_to_wishlist(product_id)

    def remove(self, user_id: str, product_id: str) -> None:
        self.client.remove_from_wishlist(product_id)


def _failed(raw: Any, label: str) -> bool:
    if isinstance(raw, Exception):
        logger.error("Error fetching %s: %s", label, raw)
        return True
    return False


def _parse_many(model: Type[M], raw: Any, label: str) -> List[M]:
    if _failed(raw, label):
        return []
    try:
        return [model.model_validate(item) for item in raw]
    except (TypeError, ValidationError) as e:
        logger.error("Invalid %s payload: %s", label, e)
        return []


def _parse_one(model: Type[M], raw: Any, label: str) -> Optional[M]:
    if _failed(raw, label):
        return None
    try:
        return model.model_validate(raw)
    except ValidationError as e:
        logger.error("Invalid %s payload: %s", label, e)
        return None
