from pydantic import Field, field_validator
from typing import Optional
from datetime import datetime
from decimal import Decimal

from marketplace.schemas.base import CamelModel


# 👇 What the seller sends to create or update a listing
class ProductRequest(CamelModel):
    title: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=500)
    category: str = Field(..., min_length=1, max_length=50)
    price: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)
    quantity: int = Field(1, gt=0)
    condition_type: Optional[str] = Field(None, max_length=20)
    brand: Optional[str] = Field(None, max_length=50)
    model: Optional[str] = Field(None, max_length=50)
    year_manufactured: Optional[int] = None
    dimensions: Optional[str] = Field(None, max_length=100)
    weight: Optional[Decimal] = Field(None, ge=0, max_digits=8, decimal_places=2)
    material: Optional[str] = Field(None, max_length=50)
    color: Optional[str] = Field(None, max_length=30)
    original_packaging: bool = False
    manual_included: bool = False
    working_condition: Optional[str] = Field(None, max_length=200)
    image_url: Optional[str] = None

    @field_validator("title", "category", "description", mode="before")
    @classmethod
    def strip_whitespace(cls, value):
        return value.strip() if isinstance(value, str) else value


# 👇 Seller summary embedded in every product
class SellerInfo(CamelModel):
    id: int
    display_name: str
    email: str
    profile_image_url: Optional[str] = None


# 👇 This is what the API returns when fetching products
class ProductOut(CamelModel):
    id: int
    title: str
    description: Optional[str] = None
    category: str
    price: float
    quantity: int
    condition_type: Optional[str] = None
    brand: Optional[str] = None
    model: Optional[str] = None
    year_manufactured: Optional[int] = None
    dimensions: Optional[str] = None
    weight: Optional[float] = None
    material: Optional[str] = None
    color: Optional[str] = None
    original_packaging: Optional[bool] = None
    manual_included: Optional[bool] = None
    working_condition: Optional[str] = None
    image_url: Optional[str] = None
    is_active: bool
    is_sold: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    seller: SellerInfo
