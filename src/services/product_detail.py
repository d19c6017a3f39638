from dataclasses import dataclass, field
from typing import List, Optional

from sqlalchemy.orm import Session

from models import Product
from services.catalog import fetch_product_by_slug, fetch_related_products
from services.wishlist import SqlWishlistStore


@dataclass
class ProductDetail:
    product: Product
    in_wishlist: bool
    related: List[Product] = field(default_factory=list)


def assemble_product_detail(
    db: Session,
    slug: str,
    user_id: str,
    related_limit: int = 5,
) -> Optional[ProductDetail]:
    """Resolve a product by slug with its wishlist flag and same-category products."""
    product = fetch_product_by_slug(db, slug)
    if product is None:
        return None

    in_wishlist = SqlWishlistStore(db).contains(user_id, product.id)
    related = fetch_related_products(db, product, limit=related_limit)
    return ProductDetail(product=product, in_wishlist=in_wishlist, related=related)
