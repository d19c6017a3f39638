"""API router for the anonymous user's wishlist."""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from api.deps import get_user_id
from models import get_db
from models.schemas import (
    WishlistAdd,
    WishlistRemoveResponse,
    WishlistResponse,
    WishlistToggleResponse,
)
from services.wishlist import SqlWishlistStore, WishlistController

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=WishlistResponse)
async def get_wishlist(
    db: Session = Depends(get_db),
    user_id: str = Depends(get_user_id),
) -> WishlistResponse:
    """Return the product ids saved by the caller."""
    product_ids = SqlWishlistStore(db).list_product_ids(user_id)
    return WishlistResponse(user_id=user_id, product_ids=product_ids)


@router.post("", response_model=WishlistResponse, status_code=201)
async def add_to_wishlist(
    entry: WishlistAdd,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_user_id),
) -> WishlistResponse:
    """
    Save a product for the caller.

    Adding a product that is already saved leaves a single entry.

    Args:
        entry: Product to save
        db: Database session
        user_id: Anonymous user id

    Returns:
        The caller's wishlist after the insert
    """
    store = SqlWishlistStore(db)
    store.add(user_id, entry.product_id)
    return WishlistResponse(user_id=user_id, product_ids=store.list_product_ids(user_id))


@router.delete("/{product_id}", response_model=WishlistRemoveResponse)
async def remove_from_wishlist(
    product_id: str,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_user_id),
) -> WishlistRemoveResponse:
    store = SqlWishlistStore(db)
    existed = store.contains(user_id, product_id)
    store.remove(user_id, product_id)
    return WishlistRemoveResponse(product_id=product_id, removed=existed)


@router.post("/{product_id}/toggle", response_model=WishlistToggleResponse)
async def toggle_wishlist(
    product_id: str,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_user_id),
) -> WishlistToggleResponse:
    """
    Flip the caller's membership for a product.

    Returns:
        New membership and whether the change reached the database
    """
    controller = WishlistController(SqlWishlistStore(db), user_id)
    controller.load()
    result = controller.toggle(product_id)
    if not result.synced:
        logger.error("Wishlist toggle not persisted for %s: %s", product_id, result.error)
    return WishlistToggleResponse(
        product_id=result.product_id,
        in_wishlist=result.in_wishlist,
        synced=result.synced,
    )
