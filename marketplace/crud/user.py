from typing import Optional
from sqlalchemy import or_
from sqlalchemy.orm import Session
from marketplace.models.models import User


# ✅ Get user by id
def get_user_by_id(db: Session, user_id: int) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()


# ✅ Get user by email
def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email).first()


# ✅ Login accepts either the email or the display name
def get_user_by_email_or_display_name(db: Session, identifier: str) -> Optional[User]:
    return (
        db.query(User)
        .filter(or_(User.email == identifier.lower(), User.display_name == identifier))
        .first()
    )


# ✅ Uniqueness checks cover active and inactive accounts
def email_exists(db: Session, email: str) -> bool:
    return db.query(User.id).filter(User.email == email).first() is not None


def display_name_exists(db: Session, display_name: str) -> bool:
    return db.query(User.id).filter(User.display_name == display_name).first() is not None


# ✅ Create user
def create_user(
    db: Session,
    display_name: str,
    email: str,
    password_hash: str,
    profile_image_url: Optional[str] = None,
) -> User:
    user = User(
        display_name=display_name,
        email=email,
        password_hash=password_hash,
        profile_image_url=profile_image_url,
        is_active=True,
    )
    db.add(user)
    db.flush()  # flush so user.id is available
    return user
