"""API router for product categories."""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from models import Category, get_db
from models.schemas import CategoryResponse
from services.catalog import fetch_categories

router = APIRouter()


@router.get("", response_model=List[CategoryResponse])
async def list_categories(db: Session = Depends(get_db)) -> List[Category]:
    """List all categories ordered by name."""
    return fetch_categories(db)
