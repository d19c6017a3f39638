from collections import Counter
from dataclasses import dataclass
from typing import Any, Collection, Dict, List, Sequence, Tuple


@dataclass(frozen=True)
class CatalogStats:
    products: int
    categories: int
    brands: int


def category_product_counts(products: Sequence[Any]) -> Dict[str, int]:
    return dict(Counter(p.category_id for p in products))


def category_grid(
    categories: Sequence[Any],
    products: Sequence[Any],
    limit: int = 12,
) -> List[Tuple[Any, int]]:
    """Pair the first ``limit`` categories with their product counts, dropping empty ones."""
    counts = category_product_counts(products)
    grid = []
    for category in categories[:limit]:
        count = counts.get(category.id, 0)
        if count:
            grid.append((category, count))
    return grid


def category_rails(
    categories: Sequence[Any],
    products: Sequence[Any],
    per_category: int = 10,
) -> List[Tuple[Any, List[Any]]]:
    rails = []
    for category in categories:
        items = [p for p in products if p.category_id == category.id][:per_category]
        if items:
            rails.append((category, items))
    return rails


def wishlist_products(products: Sequence[Any], product_ids: Collection[str]) -> List[Any]:
    return [p for p in products if p.id in product_ids]


def catalog_stats(products: Sequence[Any], categories: Sequence[Any], brands: Sequence[Any]) -> CatalogStats:
    return CatalogStats(products=len(products), categories=len(categories), brands=len(brands))
