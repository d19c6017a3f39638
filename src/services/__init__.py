from .catalog_sections import CatalogStats, catalog_stats, category_grid, category_rails, wishlist_products
from .filters import FilterCriteria, ProductKind, filter_products, matches_query
from .identity import generate_user_id, load_or_create_user_id
from .wishlist import SqlWishlistStore, ToggleResult, WishlistController, WishlistStore

__all__ = [
    "CatalogStats",
    "catalog_stats",
    "category_grid",
    "category_rails",
    "wishlist_products",
    "FilterCriteria",
    "ProductKind",
    "filter_products",
    "matches_query",
    "generate_user_id",
    "load_or_create_user_id",
    "SqlWishlistStore",
    "ToggleResult",
    "WishlistController",
    "WishlistStore",
]
