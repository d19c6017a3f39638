from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class BrandResponse(BaseModel):
    id: str
    name: str
    slug: str
    description: Optional[str] = None
    logo_url: Optional[str] = None
    website_url: Optional[str] = None
    founded_year: Optional[int] = None
    tagline: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class CategoryResponse(BaseModel):
    id: str
    name: str
    slug: str
    description: Optional[str] = None
    icon: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class ProductResponse(BaseModel):
    id: str
    brand_id: str
    category_id: str
    name: str
    slug: str
    description: Optional[str] = None
    short_description: Optional[str] = None
    price: float
    currency: str = "INR"
    image_url: Optional[str] = None
    images: List[str] = Field(default_factory=list)
    buy_url: Optional[str] = None
    featured: bool = False
    trending: bool = False
    new_arrival: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    brand: Optional[BrandResponse] = None
    category: Optional[CategoryResponse] = None

    model_config = {"from_attributes": True}


class ProductDetailResponse(BaseModel):
    product: ProductResponse
    in_wishlist: bool
    related: List[ProductResponse]


class WishlistAdd(BaseModel):
    product_id: str = Field(..., min_length=1)


class WishlistResponse(BaseModel):
    user_id: str
    product_ids: List[str]


class WishlistToggleResponse(BaseModel):
    product_id: str
    in_wishlist: bool
    synced: bool


class WishlistRemoveResponse(BaseModel):
    product_id: str
    removed: bool
