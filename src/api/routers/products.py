"""API router for the product catalog."""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from api.deps import get_user_id
from config import settings
from models import Product, get_db
from models.schemas import ProductDetailResponse, ProductResponse
from services.catalog import fetch_products
from services.filters import FilterCriteria, ProductKind, filter_products
from services.product_detail import assemble_product_detail

router = APIRouter()


@router.get("", response_model=List[ProductResponse])
async def list_products(
    q: str = "",
    category_id: Optional[str] = None,
    brand_id: Optional[str] = None,
    kind: ProductKind = ProductKind.ALL,
    limit: Optional[int] = Query(default=None, ge=1),
    db: Session = Depends(get_db),
) -> List[Product]:
    """
    List products with brand and category attached, newest first.

    Args:
        q: Free-text query matched against name, description, brand and category
        category_id: Only products in this category
        brand_id: Only products of this brand
        kind: all, featured, trending or new
        limit: Maximum number of products fetched before filtering
        db: Database session

    Returns:
        Matching products in catalog order
    """
    fetch_limit = min(limit or settings.product_fetch_limit, settings.product_fetch_limit)
    products = fetch_products(db, limit=fetch_limit)
    criteria = FilterCriteria(query=q, category_id=category_id, brand_id=brand_id, kind=kind)
    return filter_products(products, criteria)


@router.get("/{slug}", response_model=ProductDetailResponse)
async def get_product(
    slug: str,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_user_id),
) -> ProductDetailResponse:
    """
    Get a product by slug with the caller's wishlist flag and related products.

    Raises:
        HTTPException: If no product has this slug
    """
    detail = assemble_product_detail(
        db,
        slug,
        user_id,
        related_limit=settings.related_products_limit,
    )
    if detail is None:
        raise HTTPException(status_code=404, detail=f"Product '{slug}' not found")

    return ProductDetailResponse(
        product=ProductResponse.model_validate(detail.product),
        in_wishlist=detail.in_wishlist,
        related=[ProductResponse.model_validate(p) for p in detail.related],
    )
