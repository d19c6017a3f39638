"""Test fixtures for API tests."""

from contextlib import asynccontextmanager
from datetime import datetime, timedelta, timezone
from typing import AsyncGenerator
import os
import sys
from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool


def ensure_src_on_path() -> None:
    root = Path(__file__).resolve().parent.parent
    src_path = root / "src"
    if str(src_path) not in sys.path:
        sys.path.append(str(src_path))


ensure_src_on_path()

os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

from api.errors import register_exception_handlers
from api.routers import brands, categories, products, wishlist
from models import Base, Brand, Category, Product, get_db

BASE_TIME = datetime(2025, 1, 1, tzinfo=timezone.utc)


@pytest.fixture(scope="function")
def db_engine():
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db_session(db_engine):
    connection = db_engine.connect()
    transaction = connection.begin()
    session = Session(bind=connection)

    yield session

    session.close()
    transaction.rollback()
    connection.close()


@pytest.fixture(scope="function")
def catalog(db_session: Session):
    """Two brands, three categories and five products with distinct creation times."""
    nothing = Brand(id="brand-nothing", name="Nothing", slug="nothing")
    boat = Brand(id="brand-boat", name="boAt", slug="boat", tagline="Plug into Nirvana")
    phones = Category(id="cat-phones", name="Smartphones", slug="smartphones")
    audio = Category(id="cat-audio", name="Audio", slug="audio")
    tvs = Category(id="cat-tv", name="Televisions", slug="televisions")
    db_session.add_all([nothing, boat, phones, audio, tvs])
    db_session.flush()

    rows = [
        dict(id="p-phone", slug="nothing-phone-2a", name="Nothing Phone (2a)", brand_id=nothing.id,
             category_id=phones.id, price=23999, description="Glyph smartphone", featured=True, trending=True),
        dict(id="p-ear", slug="nothing-ear-a", name="Nothing Ear (a)", brand_id=nothing.id,
             category_id=audio.id, price=7999, description="Wireless earbuds", new_arrival=True),
        dict(id="p-airdopes", slug="boat-airdopes-141", name="Airdopes 141", brand_id=boat.id,
             category_id=audio.id, price=1299, description=None, featured=True),
        dict(id="p-rockerz", slug="boat-rockerz-450", name="Rockerz 450", brand_id=boat.id,
             category_id=audio.id, price=1499, description="On-ear headphones", trending=True),
        dict(id="p-cmf", slug="cmf-phone-1", name="CMF Phone 1", brand_id=nothing.id,
             category_id=phones.id, price=15999, description="Budget phone", new_arrival=True),
    ]
    created = []
    for index, data in enumerate(rows):
        product = Product(
            currency="INR",
            buy_url=f"https://shop.example.com/{data['slug']}",
            created_at=BASE_TIME + timedelta(minutes=index),
            **data,
        )
        db_session.add(product)
        created.append(product)
    db_session.commit()
    return {p.id: p for p in created}


@pytest.fixture(scope="function")
def test_app():
    @asynccontextmanager
    async def test_lifespan(app: FastAPI) -> AsyncGenerator:
        yield

    app = FastAPI(
        title="D2C Store Test",
        description="Direct-to-Consumer product marketplace storefront",
        version="0.1.0",
        lifespan=test_lifespan,
    )
    register_exception_handlers(app)

    app.include_router(products.router, prefix="/api/v1/products", tags=["products"])
    app.include_router(categories.router, prefix="/api/v1/categories", tags=["categories"])
    app.include_router(brands.router, prefix="/api/v1/brands", tags=["brands"])
    app.include_router(wishlist.router, prefix="/api/v1/wishlist", tags=["wishlist"])

    @app.get("/")
    async def root():
        return {
            "name": "D2C Store",
            "version": "0.1.0",
            "status": "running",
        }

    @app.get("/health")
    async def health():
        return {"status": "healthy"}

    return app


@pytest.fixture(scope="function")
def client(db_session: Session, test_app: FastAPI):
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    test_app.dependency_overrides[get_db] = override_get_db
    with TestClient(test_app) as test_client:
        yield test_client
    test_app.dependency_overrides.clear()
