from decimal import Decimal
from typing import List, Optional
from sqlalchemy.orm import Session, selectinload
from marketplace.models.product import Product
from marketplace.models.purchase import Purchase, PurchaseItem, PurchaseStatus


def create_purchase(db: Session, user_id: int, total_amount: Decimal) -> Purchase:
    purchase = Purchase(
        user_id=user_id,
        total_amount=total_amount,
        status=PurchaseStatus.completed.value,
    )
    db.add(purchase)
    db.flush()  # flush so purchase.id is available
    return purchase


def add_purchase_item(
    db: Session,
    purchase: Purchase,
    product: Product,
    quantity: int,
) -> PurchaseItem:
    item = PurchaseItem(
        purchase=purchase,
        product=product,
        quantity=quantity,
        price_at_purchase=product.price,
    )
    db.add(item)
    db.flush()
    return item


def get_purchase_by_id(db: Session, purchase_id: int) -> Optional[Purchase]:
    return (
        db.query(Purchase)
        .options(selectinload(Purchase.items).joinedload(PurchaseItem.product))
        .filter(Purchase.id == purchase_id)
        .first()
    )


def get_purchases_for_user(db: Session, user_id: int) -> List[Purchase]:
    return (
        db.query(Purchase)
        .options(selectinload(Purchase.items).joinedload(PurchaseItem.product))
        .filter(Purchase.user_id == user_id)
        .order_by(Purchase.purchase_date.desc(), Purchase.id.desc())
        .all()
    )
