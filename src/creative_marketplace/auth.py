"""
Session cookie handling and request authentication

Sessions are HS256 JWTs carried in an HTTP-only cookie. Each request
resolves the cookie to a user row, syncing the user from the identity
provider the first time an unknown open id is seen.
"""
import logging
import time
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from fastapi import Depends, Request
from jose import JWTError, jwt
from sqlalchemy.orm import Session

from .config import config
from .db.engine import get_db
from .db.models import User
from .exceptions import ForbiddenError, UnauthenticatedError, NOT_ADMIN_ERR_MSG
from .services.oauth_service import OAuthService, get_oauth_service
from .services.user_service import get_user_by_open_id, upsert_user

logger = logging.getLogger(__name__)

COOKIE_NAME = "app_session_id"
ONE_YEAR_MS = 1000 * 60 * 60 * 24 * 365
ALGORITHM = "HS256"


@dataclass
class SessionPayload:
    open_id: str
    app_id: str
    name: str


def get_secret_key() -> str:
    """Get the session signing secret from config"""
    return config.JWT_SECRET


def _is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and len(value) > 0


def create_session_token(open_id: str, name: str = "", expires_in_ms: int = ONE_YEAR_MS) -> str:
    """
    Create a signed session token

    Args:
        open_id: Identity-provider user id
        name: Display name carried in the token
        expires_in_ms: Lifetime in milliseconds (default one year)

    Returns:
        Encoded JWT string
    """
    issued_at_ms = int(time.time() * 1000)
    expiration_seconds = (issued_at_ms + expires_in_ms) // 1000

    to_encode: Dict[str, Any] = {
        "openId": open_id,
        "appId": config.APP_ID,
        "name": name or "",
        "exp": expiration_seconds,
    }
    return jwt.encode(to_encode, get_secret_key(), algorithm=ALGORITHM)


def verify_session(token: Optional[str]) -> Optional[SessionPayload]:
    """Verify a session token; returns None instead of raising"""
    if not token:
        logger.warning("[Auth] Missing session cookie")
        return None

    try:
        payload = jwt.decode(token, get_secret_key(), algorithms=[ALGORITHM])
    except JWTError as e:
        logger.warning(f"[Auth] Session verification failed: {type(e).__name__} - {str(e)}")
        return None

    open_id = payload.get("openId")
    app_id = payload.get("appId")
    name = payload.get("name")
    if not (_is_non_empty_string(open_id) and _is_non_empty_string(app_id) and _is_non_empty_string(name)):
        logger.warning("[Auth] Session payload missing required fields")
        return None

    return SessionPayload(open_id=open_id, app_id=app_id, name=name)


def is_secure_request(request: Request) -> bool:
    if request.url.scheme == "https":
        return True

    forwarded_proto = request.headers.get("x-forwarded-proto")
    if not forwarded_proto:
        return False
    return any(proto.strip().lower() == "https" for proto in forwarded_proto.split(","))


def get_session_cookie_options(request: Request) -> Dict[str, Any]:
    """Cookie attributes shared by login and logout"""
    return {
        "httponly": True,
        "path": "/",
        "samesite": "none",
        "secure": is_secure_request(request),
    }


def authenticate_request(request: Request, db: Optional[Session], oauth_service: OAuthService) -> User:
    """
    Resolve the session cookie to a user row.

    Raises:
        ForbiddenError: cookie invalid, user could not be synced, or not found
    """
    session_cookie = request.cookies.get(COOKIE_NAME)
    session = verify_session(session_cookie)
    if session is None:
        raise ForbiddenError("Invalid session cookie")

    signed_in_at = datetime.utcnow()
    user = get_user_by_open_id(db, session.open_id)

    if user is None:
        try:
            user_info = oauth_service.get_user_info_with_jwt(session_cookie or "")
            upsert_user(
                db,
                user_info.open_id,
                name=user_info.name or None,
                email=user_info.email,
                login_method=user_info.login_method,
                last_signed_in=signed_in_at,
            )
            user = get_user_by_open_id(db, user_info.open_id)
        except Exception as e:
            logger.error(f"[Auth] Failed to sync user from OAuth: {e}")
            raise ForbiddenError("Failed to sync user info")

    if user is None:
        raise ForbiddenError("User not found")

    return upsert_user(db, user.open_id, last_signed_in=signed_in_at) or user


def get_optional_user(
    request: Request,
    db: Optional[Session] = Depends(get_db),
    oauth_service: OAuthService = Depends(get_oauth_service),
) -> Optional[User]:
    """Current user for public procedures; None when the caller is anonymous"""
    try:
        return authenticate_request(request, db, oauth_service)
    except ForbiddenError:
        return None
    except Exception as e:
        logger.warning(f"[Auth] Request authentication failed: {type(e).__name__} - {str(e)}")
        return None


def get_current_user(user: Optional[User] = Depends(get_optional_user)) -> User:
    """Current user for protected procedures"""
    if user is None:
        raise UnauthenticatedError()
    return user


def get_admin_user(user: Optional[User] = Depends(get_optional_user)) -> User:
    """Current user for admin procedures"""
    if user is None or not user.is_admin:
        raise ForbiddenError(NOT_ADMIN_ERR_MSG)
    return user
