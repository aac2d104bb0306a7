# marketplace/services/product_service.py
"""
Product Service
Listing management for sellers and catalog queries for buyers.
Only active, unsold products are visible in the catalog.
"""

from typing import List, Optional
from sqlalchemy.orm import Session
import logging

from marketplace.core.exceptions import NotFoundError
from marketplace.crud import product as crud_product
from marketplace.crud import user as crud_user
from marketplace.models.product import Product
from marketplace.schemas.product import ProductRequest

logger = logging.getLogger(__name__)

CATEGORIES = [
    "Electronics", "Clothing", "Furniture", "Books", "Sports",
    "Home & Garden", "Toys", "Automotive", "Beauty", "Other",
]

CONDITION_TYPES = ["New", "Like New", "Good", "Fair", "Poor"]


class ProductService:

    @staticmethod
    def _require_seller(db: Session, seller_id: int):
        seller = crud_user.get_user_by_id(db, seller_id)
        if not seller:
            raise NotFoundError("Seller not found")
        return seller

    @staticmethod
    def _require_owned_product(db: Session, product_id: int, seller_id: int, action: str) -> Product:
        ProductService._require_seller(db, seller_id)
        product = crud_product.get_product_by_id_and_seller(db, product_id, seller_id)
        if not product:
            raise NotFoundError(f"Product not found or you don't have permission to {action} it")
        return product

    @staticmethod
    def create_product(db: Session, data: ProductRequest, seller_id: int) -> Product:
        ProductService._require_seller(db, seller_id)
        try:
            product = crud_product.create_product(db, seller_id, data)
            db.commit()
            db.refresh(product)
        except Exception:
            db.rollback()
            raise

        logger.info(f"Seller {seller_id} listed product {product.id}")
        return product

    @staticmethod
    def list_products(db: Session) -> List[Product]:
        return crud_product.get_listed_products(db)

    @staticmethod
    def list_by_category(db: Session, category: str) -> List[Product]:
        return crud_product.get_listed_products_by_category(db, category)

    @staticmethod
    def search(db: Session, keyword: Optional[str] = None, category: Optional[str] = None) -> List[Product]:
        """
        Title search with an optional category filter.
        A blank keyword falls back to the category listing, or the full catalog.
        """
        keyword = keyword.strip() if keyword else ""
        category = category.strip() if category else ""

        if keyword:
            return crud_product.search_products(db, keyword, category or None)
        if category:
            return crud_product.get_listed_products_by_category(db, category)
        return crud_product.get_listed_products(db)

    @staticmethod
    def get_product(db: Session, product_id: int) -> Product:
        product = crud_product.get_active_product_by_id(db, product_id)
        if not product:
            raise NotFoundError("Product not found")
        return product

    @staticmethod
    def get_seller_products(db: Session, seller_id: int) -> List[Product]:
        ProductService._require_seller(db, seller_id)
        return crud_product.get_products_by_seller(db, seller_id)

    @staticmethod
    def update_product(db: Session, product_id: int, data: ProductRequest, seller_id: int) -> Product:
        product = ProductService._require_owned_product(db, product_id, seller_id, "edit")
        try:
            crud_product.update_product(db, product, data)
            db.commit()
            db.refresh(product)
        except Exception:
            db.rollback()
            raise

        logger.info(f"Seller {seller_id} updated product {product_id}")
        return product

    @staticmethod
    def delete_product(db: Session, product_id: int, seller_id: int) -> None:
        """Soft delete: the row stays so purchase history can still show it"""
        product = ProductService._require_owned_product(db, product_id, seller_id, "delete")
        try:
            crud_product.soft_delete_product(db, product)
            db.commit()
        except Exception:
            db.rollback()
            raise

        logger.info(f"Seller {seller_id} deleted product {product_id}")

    @staticmethod
    def get_categories() -> List[str]:
        return list(CATEGORIES)

    @staticmethod
    def get_condition_types() -> List[str]:
        return list(CONDITION_TYPES)
