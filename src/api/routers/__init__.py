"""API routers."""

from api.routers import brands, categories, products, wishlist

__all__ = ["brands", "categories", "products", "wishlist"]
