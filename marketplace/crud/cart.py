from typing import List, Optional
from sqlalchemy.orm import Session, joinedload, selectinload
from marketplace.models.models import CartItem


def get_cart_item(db: Session, cart_item_id: int) -> Optional[CartItem]:
    return db.query(CartItem).filter(CartItem.id == cart_item_id).first()


def get_cart_item_for_product(db: Session, user_id: int, product_id: int) -> Optional[CartItem]:
    return (
        db.query(CartItem)
        .filter(CartItem.user_id == user_id, CartItem.product_id == product_id)
        .first()
    )


def get_cart_items(db: Session, user_id: int) -> List[CartItem]:
    return (
        db.query(CartItem)
        .options(joinedload(CartItem.product))
        .filter(CartItem.user_id == user_id)
        .order_by(CartItem.added_at.desc(), CartItem.id.desc())
        .all()
    )


def get_cart_items_for_update(db: Session, user_id: int) -> List[CartItem]:
    """Cart lines locked for the rest of the transaction (no-op on SQLite)"""
    # selectinload: FOR UPDATE cannot be combined with the outer join
    return (
        db.query(CartItem)
        .options(selectinload(CartItem.product))
        .filter(CartItem.user_id == user_id)
        .order_by(CartItem.id)
        .with_for_update()
        .all()
    )


def add_cart_item(db: Session, user_id: int, product_id: int, quantity: int) -> CartItem:
    item = CartItem(user_id=user_id, product_id=product_id, quantity=quantity)
    db.add(item)
    db.flush()
    return item


def delete_cart_item(db: Session, item: CartItem) -> None:
    db.delete(item)
    db.flush()


def delete_cart_items_for_user(db: Session, user_id: int) -> int:
    deleted = (
        db.query(CartItem)
        .filter(CartItem.user_id == user_id)
        .delete(synchronize_session="fetch")
    )
    db.flush()
    return deleted


def count_cart_items(db: Session, user_id: int) -> int:
    return db.query(CartItem).filter(CartItem.user_id == user_id).count()
