from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError
from marketplace.core.config import settings
from marketplace.core.exceptions import UnauthorizedError
from marketplace.core.security import decode_access_token
from marketplace.db.session import SessionLocal
import logging

logger = logging.getLogger(__name__)

# Tokens are optional unless REQUIRE_AUTH is set
bearer_scheme = HTTPBearer(auto_error=False)


# Dependency to get DB
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# Dependency to get the user id carried by the session token, if any
def get_token_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[int]:
    if credentials is None:
        if settings.REQUIRE_AUTH:
            raise UnauthorizedError("Authentication required")
        return None

    try:
        payload = decode_access_token(credentials.credentials)
        subject = payload.get("sub")
        if subject is None:
            raise UnauthorizedError("Invalid session token")
        return int(subject)
    except (JWTError, ValueError):
        logger.warning("Rejected invalid or expired session token")
        raise UnauthorizedError("Invalid or expired session token")


def ensure_same_user(token_user_id: Optional[int], claimed_user_id: int) -> None:
    """Reject requests whose token belongs to someone other than the claimed user"""
    if token_user_id is not None and token_user_id != claimed_user_id:
        raise UnauthorizedError("Session token does not match the requested user")
