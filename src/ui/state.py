import asyncio
from dataclasses import dataclass, field, replace
from typing import List, Optional

from models.schemas import BrandResponse, CategoryResponse, ProductResponse
from services.catalog_sections import wishlist_products
from services.filters import FilterCriteria, ProductKind, filter_products
from services.wishlist import ToggleResult, WishlistController
from ui.api_client import HttpWishlistStore, StorefrontClient


@dataclass
class StorefrontSession:
    """State owned by a single page view: fetched lists, wishlist and active filters."""

    user_id: str
    wishlist: WishlistController
    products: List[ProductResponse] = field(default_factory=list)
    categories: List[CategoryResponse] = field(default_factory=list)
    brands: List[BrandResponse] = field(default_factory=list)
    criteria: FilterCriteria = field(default_factory=FilterCriteria)

    @classmethod
    def load(cls, client: StorefrontClient) -> "StorefrontSession":
        payload = asyncio.run(client.fetch_catalog())
        controller = WishlistController(
            HttpWishlistStore(client),
            client.user_id,
            product_ids=payload.wishlist_ids,
        )
        return cls(
            user_id=client.user_id,
            wishlist=controller,
            products=payload.products,
            categories=payload.categories,
            brands=payload.brands,
        )

    def visible_products(self) -> List[ProductResponse]:
        return filter_products(self.products, self.criteria)

    def saved_products(self) -> List[ProductResponse]:
        return wishlist_products(self.products, self.wishlist.product_ids)

    def update_criteria(
        self,
        query: Optional[str] = None,
        category_id: Optional[str] = None,
        brand_id: Optional[str] = None,
        kind: Optional[ProductKind] = None,
    ) -> FilterCriteria:
        changes = {}
        if query is not None:
            changes["query"] = query
        if category_id is not None:
            changes["category_id"] = category_id or None
        if brand_id is not None:
            changes["brand_id"] = brand_id or None
        if kind is not None:
            changes["kind"] = kind
        self.criteria = replace(self.criteria, **changes)
        return self.criteria

    def clear_filters(self) -> None:
        self.criteria = FilterCriteria()

    def category_name(self, category_id: Optional[str]) -> Optional[str]:
        for category in self.categories:
            if category.id == category_id:
                return category.name
        return None

    def sync_membership(self, product_id: str, in_wishlist: bool) -> bool:
        """Adopt the backend's membership for a product. Returns True when local state changed."""
        if self.wishlist.contains(product_id) == in_wishlist:
            return False
        self.wishlist.set_membership(product_id, in_wishlist)
        return True

    def toggle_wishlist(self, product_id: str) -> ToggleResult:
        return self.wishlist.toggle(product_id)
