from typing import List, Optional
from datetime import datetime

from marketplace.models.purchase import Purchase, PurchaseItem
from marketplace.schemas.base import CamelModel


class PurchaseItemOut(CamelModel):
    id: int
    product_id: int
    product_title: str
    product_description: Optional[str] = None
    product_category: str
    product_image_url: Optional[str] = None
    quantity: int
    price_at_purchase: float

    @classmethod
    def from_purchase_item(cls, item: PurchaseItem) -> "PurchaseItemOut":
        product = item.product
        return cls(
            id=item.id,
            product_id=product.id,
            product_title=product.title,
            product_description=product.description,
            product_category=product.category,
            product_image_url=product.image_url,
            quantity=item.quantity,
            price_at_purchase=float(item.price_at_purchase),
        )


class PurchaseOut(CamelModel):
    id: int
    total_amount: float
    purchase_date: datetime
    status: str
    items: List[PurchaseItemOut]

    @classmethod
    def from_purchase(cls, purchase: Purchase) -> "PurchaseOut":
        return cls(
            id=purchase.id,
            total_amount=float(purchase.total_amount),
            purchase_date=purchase.purchase_date,
            status=purchase.status,
            items=[PurchaseItemOut.from_purchase_item(item) for item in purchase.items],
        )
