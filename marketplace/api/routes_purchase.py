from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from marketplace.db.deps import ensure_same_user, get_db, get_token_user_id
from marketplace.schemas.purchase import PurchaseOut
from marketplace.services.purchase_service import PurchaseService

router = APIRouter()


@router.post("/checkout/{user_id}")
def checkout(
    user_id: int,
    db: Session = Depends(get_db),
    token_user_id: Optional[int] = Depends(get_token_user_id),
):
    ensure_same_user(token_user_id, user_id)
    purchase = PurchaseService.checkout(db, user_id)
    return {
        "success": True,
        "message": "Purchase completed successfully",
        "purchase": PurchaseOut.from_purchase(purchase),
    }


@router.get("/history/{user_id}")
def get_purchase_history(
    user_id: int,
    db: Session = Depends(get_db),
    token_user_id: Optional[int] = Depends(get_token_user_id),
):
    ensure_same_user(token_user_id, user_id)
    purchases = [PurchaseOut.from_purchase(p) for p in PurchaseService.get_purchase_history(db, user_id)]
    return {"success": True, "purchases": purchases, "count": len(purchases)}


@router.get("/{purchase_id}")
def get_purchase(
    purchase_id: int,
    user_id: int = Query(..., alias="userId"),
    db: Session = Depends(get_db),
    token_user_id: Optional[int] = Depends(get_token_user_id),
):
    ensure_same_user(token_user_id, user_id)
    purchase = PurchaseService.get_purchase(db, user_id, purchase_id)
    return {"success": True, "purchase": PurchaseOut.from_purchase(purchase)}
