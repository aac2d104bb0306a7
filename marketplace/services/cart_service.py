# marketplace/services/cart_service.py
"""
Cart Service
One cart line per (user, product); adding the same product again merges quantities.
"""

from typing import List, Optional
from sqlalchemy.orm import Session
import logging

from marketplace.core.exceptions import NotFoundError, UnauthorizedError, ValidationError
from marketplace.crud import cart as crud_cart
from marketplace.crud import product as crud_product
from marketplace.crud import user as crud_user
from marketplace.models.models import CartItem

logger = logging.getLogger(__name__)


class CartService:

    @staticmethod
    def _require_user(db: Session, user_id: int):
        user = crud_user.get_user_by_id(db, user_id)
        if not user:
            raise NotFoundError("User not found")
        return user

    @staticmethod
    def _require_owned_item(db: Session, user_id: int, cart_item_id: int) -> CartItem:
        CartService._require_user(db, user_id)
        item = crud_cart.get_cart_item(db, cart_item_id)
        if not item:
            raise NotFoundError("Cart item not found")
        if item.user_id != user_id:
            logger.warning(f"User {user_id} tried to access cart item {cart_item_id}")
            raise UnauthorizedError("Unauthorized access to cart item")
        return item

    @staticmethod
    def add_to_cart(db: Session, user_id: int, product_id: int, quantity: int = 1) -> CartItem:
        if quantity <= 0:
            raise ValidationError("Quantity must be a positive number")

        CartService._require_user(db, user_id)
        product = crud_product.get_product_by_id(db, product_id)
        if not product or not product.is_listed:
            raise NotFoundError("Product not found")

        try:
            item = crud_cart.get_cart_item_for_product(db, user_id, product_id)
            if item:
                item.quantity += quantity
            else:
                item = crud_cart.add_cart_item(db, user_id, product_id, quantity)
            db.commit()
            db.refresh(item)
        except Exception:
            db.rollback()
            raise

        logger.info(f"User {user_id} cart: product {product_id} now x{item.quantity}")
        return item

    @staticmethod
    def get_cart_items(db: Session, user_id: int) -> List[CartItem]:
        CartService._require_user(db, user_id)
        return crud_cart.get_cart_items(db, user_id)

    @staticmethod
    def update_quantity(db: Session, user_id: int, cart_item_id: int, quantity: int) -> Optional[CartItem]:
        """Overwrite the quantity; zero or less removes the line and returns None"""
        item = CartService._require_owned_item(db, user_id, cart_item_id)
        try:
            if quantity <= 0:
                crud_cart.delete_cart_item(db, item)
                db.commit()
                logger.info(f"User {user_id} removed cart item {cart_item_id}")
                return None

            item.quantity = quantity
            db.commit()
            db.refresh(item)
        except Exception:
            db.rollback()
            raise

        logger.info(f"User {user_id} set cart item {cart_item_id} to x{quantity}")
        return item

    @staticmethod
    def remove_from_cart(db: Session, user_id: int, cart_item_id: int) -> None:
        item = CartService._require_owned_item(db, user_id, cart_item_id)
        try:
            crud_cart.delete_cart_item(db, item)
            db.commit()
        except Exception:
            db.rollback()
            raise

        logger.info(f"User {user_id} removed cart item {cart_item_id}")

    @staticmethod
    def clear_cart(db: Session, user_id: int) -> int:
        CartService._require_user(db, user_id)
        try:
            deleted = crud_cart.delete_cart_items_for_user(db, user_id)
            db.commit()
        except Exception:
            db.rollback()
            raise

        logger.info(f"User {user_id} cleared {deleted} cart item(s)")
        return deleted

    @staticmethod
    def count_items(db: Session, user_id: int) -> int:
        CartService._require_user(db, user_id)
        return crud_cart.count_cart_items(db, user_id)
