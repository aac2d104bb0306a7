from pydantic import Field
from typing import Optional
from datetime import datetime

from marketplace.models.models import CartItem
from marketplace.schemas.base import CamelModel


class CartItemCreate(CamelModel):
    product_id: int
    quantity: int = Field(1, gt=0)


class CartItemOut(CamelModel):
    id: int
    product_id: int
    product_title: str
    product_description: Optional[str] = None
    product_category: str
    product_price: float
    product_image_url: Optional[str] = None
    quantity: int
    added_at: Optional[datetime] = None

    @classmethod
    def from_cart_item(cls, item: CartItem) -> "CartItemOut":
        product = item.product
        return cls(
            id=item.id,
            product_id=product.id,
            product_title=product.title,
            product_description=product.description,
            product_category=product.category,
            product_price=float(product.price),
            product_image_url=product.image_url,
            quantity=item.quantity,
            added_at=item.added_at,
        )
