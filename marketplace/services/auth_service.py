# marketplace/services/auth_service.py
"""
Auth Service
Registration, login and public user lookups
"""

from typing import Tuple
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
import logging

from marketplace.core.exceptions import ConflictError, NotFoundError, UnauthorizedError
from marketplace.core.security import create_access_token, hash_password, verify_password
from marketplace.crud import user as crud_user
from marketplace.models.models import User
from marketplace.schemas.user import LoginRequest, RegisterRequest

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email/username or password."


class AuthService:
    """Account creation and credential checks"""

    @staticmethod
    def register(db: Session, data: RegisterRequest) -> User:
        """
        Create a new account.
        Email and display name must both be unused, including by deactivated accounts.
        """
        email = data.email.lower()

        if crud_user.email_exists(db, email):
            raise ConflictError("Email already exists. Please use a different email.")
        if crud_user.display_name_exists(db, data.display_name):
            raise ConflictError("Display name already exists. Please choose a different name.")

        try:
            user = crud_user.create_user(
                db,
                display_name=data.display_name,
                email=email,
                password_hash=hash_password(data.password),
                profile_image_url=data.profile_image_url,
            )
            db.commit()
            db.refresh(user)
        except IntegrityError:
            # Lost a race with a concurrent registration
            db.rollback()
            raise ConflictError("Email or display name already exists.")
        except Exception:
            db.rollback()
            raise

        logger.info(f"User {user.id} registered")
        return user

    @staticmethod
    def login(db: Session, data: LoginRequest) -> Tuple[User, str]:
        """Check credentials and issue a signed session token"""
        user = crud_user.get_user_by_email_or_display_name(db, data.identifier)
        if not user:
            logger.info("Login failed: unknown identifier")
            raise UnauthorizedError(INVALID_CREDENTIALS)

        if not user.is_active:
            logger.info(f"Login refused for deactivated user {user.id}")
            raise UnauthorizedError("Account is deactivated. Please contact support.")

        if not verify_password(data.password, user.password_hash):
            logger.info(f"Login failed for user {user.id}: wrong password")
            raise UnauthorizedError(INVALID_CREDENTIALS)

        token = create_access_token(user.id)
        logger.info(f"User {user.id} logged in")
        return user, token

    @staticmethod
    def get_user(db: Session, user_id: int) -> User:
        user = crud_user.get_user_by_id(db, user_id)
        if not user:
            raise NotFoundError("User not found")
        return user
