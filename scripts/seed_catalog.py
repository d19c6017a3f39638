"""Load brands, categories and products from a JSON file into the catalog database.

Rows are matched by slug, so running the script again updates existing rows
instead of duplicating them. Products reference their brand and category by
slug (``brand`` / ``category`` keys).
"""

import argparse
import json
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Type

from sqlalchemy import select
from sqlalchemy.orm import Session

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from config import settings  # noqa: E402
from models import Brand, Category, Product, init_db  # noqa: E402
from models.database import SessionLocal  # noqa: E402

logger = logging.getLogger(__name__)

BRAND_FIELDS = ("name", "description", "logo_url", "website_url", "founded_year", "tagline")
CATEGORY_FIELDS = ("name", "description", "icon")
PRODUCT_FIELDS = (
    "name",
    "description",
    "short_description",
    "price",
    "currency",
    "image_url",
    "images",
    "buy_url",
    "featured",
    "trending",
    "new_arrival",
)


@dataclass
class SeedSummary:
    brands: int = 0
    categories: int = 0
    products: int = 0
    skipped_products: int = 0


def _upsert(session: Session, model: Type, data: Dict[str, Any], fields) -> Any:
    slug = data["slug"]
    row = session.scalars(select(model).where(model.slug == slug)).one_or_none()
    if row is None:
        row = model(slug=slug)
        session.add(row)
    for name in fields:
        if name in data:
            setattr(row, name, data[name])
    return row


def _by_slug(session: Session, model: Type, slug: Optional[str]) -> Any:
    if not slug:
        return None
    return session.scalars(select(model).where(model.slug == slug)).one_or_none()


def seed_catalog(session: Session, payload: Dict[str, Any]) -> SeedSummary:
    summary = SeedSummary()

    brands = {}
    for item in payload.get("brands", []):
        brands[item["slug"]] = _upsert(session, Brand, item, BRAND_FIELDS)
        summary.brands += 1

    categories = {}
    for item in payload.get("categories", []):
        categories[item["slug"]] = _upsert(session, Category, item, CATEGORY_FIELDS)
        summary.categories += 1

    session.flush()

    for item in payload.get("products", []):
        brand = brands.get(item.get("brand")) or _by_slug(session, Brand, item.get("brand"))
        category = categories.get(item.get("category")) or _by_slug(
            session, Category, item.get("category")
        )
        if brand is None or category is None:
            logger.warning(
                "Skipping product %s: unknown brand %r or category %r",
                item.get("slug"),
                item.get("brand"),
                item.get("category"),
            )
            summary.skipped_products += 1
            continue
        product = _upsert(session, Product, item, PRODUCT_FIELDS)
        product.brand_id = brand.id
        product.category_id = category.id
        summary.products += 1

    session.commit()
    return summary


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed the D2C Store catalog from JSON")
    parser.add_argument("path", type=Path, help="JSON file with brands, categories and products")
    args = parser.parse_args()

    logging.basicConfig(level=settings.log_level.upper())

    payload = json.loads(args.path.read_text(encoding="utf-8"))
    init_db()
    session = SessionLocal()
    try:
        summary = seed_catalog(session, payload)
    except Exception:
        session.rollback()
        logger.exception("✗ Seeding failed")
        raise
    finally:
        session.close()

    logger.info(
        "✓ Seeded %d brands, %d categories, %d products (%d skipped)",
        summary.brands,
        summary.categories,
        summary.products,
        summary.skipped_products,
    )


if __name__ == "__main__":
    main()
