"""Read access to products, categories and brands."""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from models import Brand, Category, Product


def _with_relations(stmt):
    return stmt.options(selectinload(Product.brand), selectinload(Product.category))


def fetch_products(db: Session, limit: int = 500) -> List[Product]:
    stmt = _with_relations(select(Product)).order_by(Product.created_at.desc(), Product.id).limit(limit)
    return list(db.scalars(stmt).all())


def fetch_categories(db: Session) -> List[Category]:
    return list(db.scalars(select(Category).order_by(Category.name)).all())


def fetch_brands(db: Session) -> List[Brand]:
    return list(db.scalars(select(Brand).order_by(Brand.name)).all())


def fetch_product_by_slug(db: Session, slug: str) -> Optional[Product]:
    stmt = _with_relations(select(Product)).where(Product.slug == slug)
    return db.scalars(stmt).one_or_none()


def fetch_related_products(db: Session, product: Product, limit: int = 5) -> List[Product]:
    stmt = (
        _with_relations(select(Product))
        .where(Product.category_id == product.category_id)
        .where(Product.id != product.id)
        .order_by(Product.created_at.desc(), Product.id)
        .limit(limit)
    )
    return list(db.scalars(stmt).all())
