from models.database import Base, get_db, init_db
from models.domain import Brand, Category, Product, WishlistEntry

__all__ = [
    "Base",
    "get_db",
    "init_db",
    "Brand",
    "Category",
    "Product",
    "WishlistEntry",
]
