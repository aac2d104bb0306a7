# marketplace/api/routes_auth.py

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from marketplace.db.deps import get_db
from marketplace.schemas.user import LoginRequest, RegisterRequest, UserInfo
from marketplace.services.auth_service import AuthService

router = APIRouter()


@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(data: RegisterRequest, db: Session = Depends(get_db)):
    user = AuthService.register(db, data)
    return {
        "success": True,
        "message": "Account created successfully!",
        "user": UserInfo.model_validate(user),
    }


@router.post("/login")
def login(data: LoginRequest, db: Session = Depends(get_db)):
    user, token = AuthService.login(db, data)
    return {
        "success": True,
        "message": "Login successful!",
        "token": token,
        "tokenType": "bearer",
        "user": UserInfo.model_validate(user),
    }


@router.get("/health")
def health():
    return {"success": True, "message": "Auth service is running"}
