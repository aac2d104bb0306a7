# marketplace/api/routes_dashboard.py

from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from marketplace.db.deps import ensure_same_user, get_db, get_token_user_id
from marketplace.schemas.user import ProfileUpdate, UserInfo
from marketplace.services.dashboard_service import DashboardService

router = APIRouter()


@router.get("/profile")
def get_profile(
    user_id: int = Query(..., alias="userId"),
    db: Session = Depends(get_db),
    token_user_id: Optional[int] = Depends(get_token_user_id),
):
    ensure_same_user(token_user_id, user_id)
    user = DashboardService.get_profile(db, user_id)
    return {
        "success": True,
        "message": "Profile retrieved successfully",
        "user": UserInfo.model_validate(user),
    }


@router.put("/profile")
def update_profile(
    data: ProfileUpdate,
    db: Session = Depends(get_db),
    token_user_id: Optional[int] = Depends(get_token_user_id),
):
    ensure_same_user(token_user_id, data.user_id)
    user = DashboardService.update_profile(db, data)
    return {
        "success": True,
        "message": "Profile updated successfully",
        "user": UserInfo.model_validate(user),
    }


@router.get("/health")
def health():
    return {"success": True, "message": "Dashboard service is running"}
