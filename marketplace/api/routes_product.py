from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from marketplace.db.deps import ensure_same_user, get_db, get_token_user_id
from marketplace.models.product import Product
from marketplace.schemas.product import ProductOut, ProductRequest
from marketplace.services.product_service import ProductService

router = APIRouter()


def _product_list(products: List[Product]) -> dict:
    return {
        "success": True,
        "products": [ProductOut.model_validate(p) for p in products],
        "count": len(products),
    }


@router.get("/health")
def health():
    return {"success": True, "message": "Product service is running"}


@router.get("")
def get_all_products(db: Session = Depends(get_db)):
    return _product_list(ProductService.list_products(db))


@router.get("/categories")
def get_categories():
    return {"success": True, "categories": ProductService.get_categories()}


@router.get("/conditions")
def get_condition_types():
    return {"success": True, "conditions": ProductService.get_condition_types()}


@router.get("/search")
def search_products(
    keyword: Optional[str] = None,
    category: Optional[str] = None,
    db: Session = Depends(get_db),
):
    return _product_list(ProductService.search(db, keyword, category))


@router.get("/category/{category}")
def get_products_by_category(category: str, db: Session = Depends(get_db)):
    return _product_list(ProductService.list_by_category(db, category))


@router.get("/user/{seller_id}")
def get_user_products(seller_id: int, db: Session = Depends(get_db)):
    return _product_list(ProductService.get_seller_products(db, seller_id))


@router.get("/{product_id}")
def get_product(product_id: int, db: Session = Depends(get_db)):
    product = ProductService.get_product(db, product_id)
    return {"success": True, "product": ProductOut.model_validate(product)}


@router.post("", status_code=status.HTTP_201_CREATED)
def create_product(
    data: ProductRequest,
    seller_id: int = Query(..., alias="sellerId"),
    db: Session = Depends(get_db),
    token_user_id: Optional[int] = Depends(get_token_user_id),
):
    ensure_same_user(token_user_id, seller_id)
    product = ProductService.create_product(db, data, seller_id)
    return {
        "success": True,
        "message": "Product created successfully",
        "product": ProductOut.model_validate(product),
    }


@router.put("/{product_id}")
def update_product(
    product_id: int,
    data: ProductRequest,
    seller_id: int = Query(..., alias="sellerId"),
    db: Session = Depends(get_db),
    token_user_id: Optional[int] = Depends(get_token_user_id),
):
    ensure_same_user(token_user_id, seller_id)
    product = ProductService.update_product(db, product_id, data, seller_id)
    return {
        "success": True,
        "message": "Product updated successfully",
        "product": ProductOut.model_validate(product),
    }


@router.delete("/{product_id}")
def delete_product(
    product_id: int,
    seller_id: int = Query(..., alias="sellerId"),
    db: Session = Depends(get_db),
    token_user_id: Optional[int] = Depends(get_token_user_id),
):
    ensure_same_user(token_user_id, seller_id)
    ProductService.delete_product(db, product_id, seller_id)
    return {"success": True, "message": "Product deleted successfully"}
