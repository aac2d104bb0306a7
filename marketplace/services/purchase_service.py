# marketplace/services/purchase_service.py
"""
Purchase Service
Turns a user's cart into an immutable purchase record.

Checkout runs as a single transaction: the purchase, its line items, the stock
updates and the cart clean-up are committed together or not at all.
"""

from decimal import Decimal
from typing import List
from sqlalchemy.orm import Session
import logging

from marketplace.core.exceptions import EmptyCartError, NotFoundError, UnauthorizedError
from marketplace.crud import cart as crud_cart
from marketplace.crud import product as crud_product
from marketplace.crud import purchase as crud_purchase
from marketplace.crud import user as crud_user
from marketplace.models.purchase import Purchase

logger = logging.getLogger(__name__)


class PurchaseService:

    @staticmethod
    def _require_user(db: Session, user_id: int):
        user = crud_user.get_user_by_id(db, user_id)
        if not user:
            raise NotFoundError("User not found")
        return user

    @staticmethod
    def checkout(db: Session, user_id: int) -> Purchase:
        """
        Create a purchase from everything in the user's cart.

        Prices are read from the products at checkout time and copied onto each
        purchase item. Stock is reduced, never below zero, and a product whose
        stock runs out is marked sold. Availability is not re-checked here.
        """
        PurchaseService._require_user(db, user_id)

        try:
            # Locks the cart lines so two checkouts of the same cart serialise
            cart_items = crud_cart.get_cart_items_for_update(db, user_id)
            if not cart_items:
                raise EmptyCartError("Cart is empty")

            # Locks the products so concurrent buyers cannot lose stock updates
            crud_product.get_products_for_update(db, [item.product_id for item in cart_items])

            total_amount = sum(
                (Decimal(item.product.price) * item.quantity for item in cart_items),
                Decimal("0.00"),
            )
            purchase = crud_purchase.create_purchase(db, user_id, total_amount)

            for item in cart_items:
                product = item.product
                crud_purchase.add_purchase_item(db, purchase, product, item.quantity)
                crud_product.decrement_stock(db, product, item.quantity)

            crud_cart.delete_cart_items_for_user(db, user_id)
            db.commit()
        except Exception:
            db.rollback()
            raise

        db.refresh(purchase)
        logger.info(
            f"User {user_id} checked out purchase {purchase.id}: "
            f"{len(purchase.items)} item(s), total {purchase.total_amount}"
        )
        return purchase

    @staticmethod
    def get_purchase_history(db: Session, user_id: int) -> List[Purchase]:
        PurchaseService._require_user(db, user_id)
        return crud_purchase.get_purchases_for_user(db, user_id)

    @staticmethod
    def get_purchase(db: Session, user_id: int, purchase_id: int) -> Purchase:
        PurchaseService._require_user(db, user_id)
        purchase = crud_purchase.get_purchase_by_id(db, purchase_id)
        if not purchase:
            raise NotFoundError("Purchase not found")
        if purchase.user_id != user_id:
            logger.warning(f"User {user_id} tried to access purchase {purchase_id}")
            raise UnauthorizedError("Unauthorized access to purchase")
        return purchase
