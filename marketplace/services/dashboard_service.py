# marketplace/services/dashboard_service.py
"""
Dashboard Service
Profile read and edit for the signed-in user
"""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
import logging

from marketplace.core.exceptions import ConflictError, NotFoundError
from marketplace.crud import user as crud_user
from marketplace.models.models import User
from marketplace.schemas.user import ProfileUpdate

logger = logging.getLogger(__name__)


class DashboardService:

    @staticmethod
    def get_profile(db: Session, user_id: int) -> User:
        user = crud_user.get_user_by_id(db, user_id)
        if not user:
            raise NotFoundError("User not found")
        return user

    @staticmethod
    def update_profile(db: Session, data: ProfileUpdate) -> User:
        """
        Apply the supplied profile fields.
        A blank profile image URL keeps the current image.
        """
        user = crud_user.get_user_by_id(db, data.user_id)
        if not user:
            raise NotFoundError("User not found")

        email = data.email.lower() if data.email is not None else None
        if email is not None and email != user.email and crud_user.email_exists(db, email):
            raise ConflictError("Email already exists. Please use a different email.")

        display_name = data.display_name
        if (
            display_name is not None
            and display_name != user.display_name
            and crud_user.display_name_exists(db, display_name)
        ):
            raise ConflictError("Display name already exists. Please choose a different name.")

        if email is not None:
            user.email = email
        if display_name is not None:
            user.display_name = display_name
        if data.profile_image_url is not None and data.profile_image_url.strip():
            user.profile_image_url = data.profile_image_url.strip()

        try:
            db.commit()
            db.refresh(user)
        except IntegrityError:
            db.rollback()
            raise ConflictError("Email or display name already exists.")
        except Exception:
            db.rollback()
            raise

        # Log the id only, never the submitted fields
        logger.info(f"Profile updated for user {user.id}")
        return user
