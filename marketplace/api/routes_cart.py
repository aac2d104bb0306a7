from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from marketplace.db.deps import ensure_same_user, get_db, get_token_user_id
from marketplace.schemas.cart import CartItemCreate, CartItemOut
from marketplace.services.cart_service import CartService

router = APIRouter()


@router.post("/add")
def add_to_cart(
    data: CartItemCreate,
    user_id: int = Query(..., alias="userId"),
    db: Session = Depends(get_db),
    token_user_id: Optional[int] = Depends(get_token_user_id),
):
    ensure_same_user(token_user_id, user_id)
    item = CartService.add_to_cart(db, user_id, data.product_id, data.quantity)
    return {
        "success": True,
        "message": "Item added to cart successfully",
        "cartItem": CartItemOut.from_cart_item(item),
    }


@router.get("/items/{user_id}")
def get_cart_items(
    user_id: int,
    db: Session = Depends(get_db),
    token_user_id: Optional[int] = Depends(get_token_user_id),
):
    ensure_same_user(token_user_id, user_id)
    items = CartService.get_cart_items(db, user_id)
    cart_items = [CartItemOut.from_cart_item(item) for item in items]
    return {
        "success": True,
        "cartItems": cart_items,
        "count": len(cart_items),
        "totalAmount": float(sum(item.line_total for item in items)),
    }


@router.put("/update/{cart_item_id}")
def update_cart_item_quantity(
    cart_item_id: int,
    user_id: int = Query(..., alias="userId"),
    quantity: int = Query(...),
    db: Session = Depends(get_db),
    token_user_id: Optional[int] = Depends(get_token_user_id),
):
    ensure_same_user(token_user_id, user_id)
    item = CartService.update_quantity(db, user_id, cart_item_id, quantity)
    if item is None:
        return {"success": True, "message": "Item removed from cart", "cartItem": None}
    return {
        "success": True,
        "message": "Cart item updated successfully",
        "cartItem": CartItemOut.from_cart_item(item),
    }


@router.delete("/remove/{cart_item_id}")
def remove_from_cart(
    cart_item_id: int,
    user_id: int = Query(..., alias="userId"),
    db: Session = Depends(get_db),
    token_user_id: Optional[int] = Depends(get_token_user_id),
):
    ensure_same_user(token_user_id, user_id)
    CartService.remove_from_cart(db, user_id, cart_item_id)
    return {"success": True, "message": "Item removed from cart successfully"}


@router.delete("/clear/{user_id}")
def clear_cart(
    user_id: int,
    db: Session = Depends(get_db),
    token_user_id: Optional[int] = Depends(get_token_user_id),
):
    ensure_same_user(token_user_id, user_id)
    CartService.clear_cart(db, user_id)
    return {"success": True, "message": "Cart cleared successfully"}


@router.get("/count/{user_id}")
def get_cart_item_count(
    user_id: int,
    db: Session = Depends(get_db),
    token_user_id: Optional[int] = Depends(get_token_user_id),
):
    ensure_same_user(token_user_id, user_id)
    return {"success": True, "count": CartService.count_items(db, user_id)}
