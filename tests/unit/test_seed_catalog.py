import json
from pathlib import Path

from sqlalchemy import func, select

from models import Brand, Category, Product
from scripts.seed_catalog import seed_catalog

SAMPLE = Path(__file__).resolve().parents[2] / "data" / "sample_catalog.json"

PAYLOAD = {
    "brands": [{"slug": "nothing", "name": "Nothing", "tagline": "Tech that's fun again"}],
    "categories": [{"slug": "smartphones", "name": "Smartphones", "icon": "📱"}],
    "products": [
        {
            "slug": "nothing-phone-2a",
            "name": "Nothing Phone (2a)",
            "brand": "nothing",
            "category": "smartphones",
            "price": 23999,
            "featured": True,
        },
        {
            "slug": "mystery-gadget",
            "name": "Mystery Gadget",
            "brand": "unknown-brand",
            "category": "smartphones",
            "price": 10,
        },
    ],
}


def count(session, model):
    return session.scalar(select(func.count()).select_from(model))


def test_seed_catalog_links_products_to_brand_and_category(db_session):
    summary = seed_catalog(db_session, PAYLOAD)

    assert summary.brands == 1
    assert summary.categories == 1
    assert summary.products == 1
    assert summary.skipped_products == 1

    product = db_session.scalars(select(Product)).one()
    assert product.slug == "nothing-phone-2a"
    assert product.brand.name == "Nothing"
    assert product.category.slug == "smartphones"
    assert product.featured is True
    assert product.currency == "INR"


def test_seed_catalog_is_idempotent_and_updates_rows(db_session):
    seed_catalog(db_session, PAYLOAD)

    updated = json.loads(json.dumps(PAYLOAD))
    updated["products"][0]["price"] = 21999
    seed_catalog(db_session, updated)

    assert count(db_session, Brand) == 1
    assert count(db_session, Category) == 1
    assert count(db_session, Product) == 1
    assert db_session.scalars(select(Product)).one().price == 21999


def test_seed_catalog_resolves_existing_brand_by_slug(db_session):
    seed_catalog(db_session, PAYLOAD)

    summary = seed_catalog(
        db_session,
        {
            "products": [
                {
                    "slug": "cmf-phone-1",
                    "name": "CMF Phone 1",
                    "brand": "nothing",
                    "category": "smartphones",
                    "price": 15999,
                }
            ]
        },
    )

    assert summary.products == 1
    assert count(db_session, Product) == 2


def test_sample_catalog_seeds_without_skips(db_session):
    payload = json.loads(SAMPLE.read_text(encoding="utf-8"))

    summary = seed_catalog(db_session, payload)

    assert summary.skipped_products == 0
    assert summary.products == len(payload["products"])
