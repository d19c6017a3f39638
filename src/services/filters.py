"""
Catalog filtering.

Narrows an already-fetched product list by free-text query, category, brand
and product kind. Works on anything exposing the product attributes, so ORM
rows and API response models go through the same code path.
"""

import enum
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Sequence, TypeVar

P = TypeVar("P")


class ProductKind(str, enum.Enum):
    ALL = "all"
    FEATURED = "featured"
    TRENDING = "trending"
    NEW = "new"


KIND_FLAGS = {
    ProductKind.FEATURED: "featured",
    ProductKind.TRENDING: "trending",
    ProductKind.NEW: "new_arrival",
}


@dataclass(frozen=True)
class FilterCriteria:
    query: str = ""
    category_id: Optional[str] = None
    brand_id: Optional[str] = None
    kind: ProductKind = ProductKind.ALL

    @property
    def is_empty(self) -> bool:
        return (
            not self.query
            and not self.category_id
            and not self.brand_id
            and self.kind == ProductKind.ALL
        )


def _contains(value: Any, needle: str) -> bool:
    if not isinstance(value, str):
        return False
    return needle in value.lower()


def _related_name(product: Any, relation: str) -> Optional[str]:
    related = getattr(product, relation, None)
    if related is None:
        return None
    return getattr(related, "name", None)


def matches_query(product: Any, query: str) -> bool:
    """Case-insensitive substring match on name, description, brand and category name."""
    needle = query.lower()
    fields: Iterable[Any] = (
        getattr(product, "name", None),
        getattr(product, "description", None),
        _related_name(product, "brand"),
        _related_name(product, "category"),
    )
    return any(_contains(value, needle) for value in fields)


def _has_flag(product: Any, kind: ProductKind) -> bool:
    flag = KIND_FLAGS.get(kind)
    if flag is None:
        return True
    return bool(getattr(product, flag, False))


def filter_products(products: Sequence[P], criteria: FilterCriteria) -> List[P]:
    """
    Return the products matching every active criterion, in input order.

    Args:
        products: Full product list, each item with brand/category attached
        criteria: Active query, category, brand and kind selection

    Returns:
        New list; equal to the input when no criterion is active
    """
    filtered = list(products)

    if criteria.query:
        filtered = [p for p in filtered if matches_query(p, criteria.query)]

    if criteria.category_id:
        filtered = [p for p in filtered if getattr(p, "category_id", None) == criteria.category_id]

    if criteria.brand_id:
        filtered = [p for p in filtered if getattr(p, "brand_id", None) == criteria.brand_id]

    if criteria.kind != ProductKind.ALL:
        filtered = [p for p in filtered if _has_flag(p, criteria.kind)]

    return filtered
