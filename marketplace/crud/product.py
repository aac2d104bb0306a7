from typing import List, Optional
from sqlalchemy.orm import Session, joinedload
from marketplace.models.product import Product
from marketplace.schemas.product import ProductRequest


def _listed(db: Session):
    """Products visible in the public catalog"""
    return (
        db.query(Product)
        .options(joinedload(Product.seller))
        .filter(Product.is_active.is_(True), Product.is_sold.is_(False))
    )


def _newest_first(query):
    return query.order_by(Product.created_at.desc(), Product.id.desc())


#  Create a product for a seller
def create_product(db: Session, seller_id: int, data: ProductRequest) -> Product:
    product = Product(seller_id=seller_id, **data.model_dump())
    db.add(product)
    db.flush()  # flush so product.id is available
    return product


#  Get one product, whatever its flags
def get_product_by_id(db: Session, product_id: int) -> Optional[Product]:
    return db.query(Product).filter(Product.id == product_id).first()


#  Get one product that has not been deleted
def get_active_product_by_id(db: Session, product_id: int) -> Optional[Product]:
    return (
        db.query(Product)
        .options(joinedload(Product.seller))
        .filter(Product.id == product_id, Product.is_active.is_(True))
        .first()
    )


#  Ownership lookup used by update and delete
def get_product_by_id_and_seller(db: Session, product_id: int, seller_id: int) -> Optional[Product]:
    return (
        db.query(Product)
        .filter(Product.id == product_id, Product.seller_id == seller_id)
        .first()
    )


#  Lock products for a stock update, in id order; refreshes rows already in the session
def get_products_for_update(db: Session, product_ids: List[int]) -> List[Product]:
    return (
        db.query(Product)
        .filter(Product.id.in_(product_ids))
        .order_by(Product.id)
        .with_for_update()
        .populate_existing()
        .all()
    )


#  Take sold units off the shelf; stock never goes below zero
def decrement_stock(db: Session, product: Product, quantity: int) -> Product:
    product.quantity = max(product.quantity - quantity, 0)
    if product.quantity == 0:
        product.is_sold = True
    db.flush()
    return product


#  Catalog listing
def get_listed_products(db: Session) -> List[Product]:
    return _newest_first(_listed(db)).all()


def get_listed_products_by_category(db: Session, category: str) -> List[Product]:
    return _newest_first(_listed(db).filter(Product.category == category)).all()


def search_products(db: Session, keyword: str, category: Optional[str] = None) -> List[Product]:
    query = _listed(db).filter(Product.title.ilike(f"%{keyword}%"))
    if category:
        query = query.filter(Product.category == category)
    return _newest_first(query).all()


#  All products by seller, including deleted and sold ones
def get_products_by_seller(db: Session, seller_id: int) -> List[Product]:
    query = (
        db.query(Product)
        .options(joinedload(Product.seller))
        .filter(Product.seller_id == seller_id)
    )
    return _newest_first(query).all()


#  Update product
def update_product(db: Session, product: Product, data: ProductRequest) -> Product:
    for key, value in data.model_dump().items():
        setattr(product, key, value)
    # Restocking puts a sold-out listing back on sale
    if product.quantity > 0:
        product.is_sold = False
    db.flush()
    return product


#  Delete product (soft)
def soft_delete_product(db: Session, product: Product) -> Product:
    product.is_active = False
    db.flush()
    return product
