from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from marketplace.db.deps import get_db
from marketplace.schemas.user import UserInfo
from marketplace.services.auth_service import AuthService

router = APIRouter()


@router.get("/health")
def health():
    return {"success": True, "message": "User service is running"}


@router.get("/{user_id}")
def get_user(user_id: int, db: Session = Depends(get_db)):
    user = AuthService.get_user(db, user_id)
    return {
        "success": True,
        "message": "User retrieved successfully",
        "user": UserInfo.model_validate(user),
    }
