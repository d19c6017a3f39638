"""API router for brands."""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from models import Brand, get_db
from models.schemas import BrandResponse
from services.catalog import fetch_brands

router = APIRouter()


@router.get("", response_model=List[BrandResponse])
async def list_brands(db: Session = Depends(get_db)) -> List[Brand]:
    return fetch_brands(db)
