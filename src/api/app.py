import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.errors import register_exception_handlers
from api.routers import brands, categories, products, wishlist
from config import settings
from models import init_db

logger = logging.getLogger(__name__)

API_VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    init_db()
    logger.info("Catalog backend ready at %s", settings.database_url.split("@")[-1])
    yield


app = FastAPI(
    title=settings.app_name,
    description="Direct-to-Consumer product marketplace storefront",
    version=API_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(products.router, prefix="/api/v1/products", tags=["products"])
app.include_router(categories.router, prefix="/api/v1/categories", tags=["categories"])
app.include_router(brands.router, prefix="/api/v1/brands", tags=["brands"])
app.include_router(wishlist.router, prefix="/api/v1/wishlist", tags=["wishlist"])


@app.get("/")
async def root():
    return {
        "name": settings.app_name,
        "version": API_VERSION,
        "status": "running",
    }


@app.get("/health")
async def health():
    return {"status": "healthy"}
