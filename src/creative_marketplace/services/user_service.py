"""
User persistence: upsert on sign-in and lookup by identity-provider open id
"""
import logging
from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session

from ..config import config
from ..db.models import User, UserRole

logger = logging.getLogger(__name__)

_UNSET = object()


def get_user_by_open_id(db: Optional[Session], open_id: str) -> Optional[User]:
    if db is None:
        logger.warning("[Database] Cannot get user: database not available")
        return None
    return db.query(User).filter(User.open_id == open_id).first()


def upsert_user(
    db: Optional[Session],
    open_id: str,
    name=_UNSET,
    email=_UNSET,
    login_method=_UNSET,
    last_signed_in=_UNSET,
    role=_UNSET,
) -> Optional[User]:
    """
    Insert a user or update the fields that were passed explicitly.

    Fields left out keep their stored value; passing None clears them. When no
    role is given, the configured owner open id is promoted to admin.
    """
    if not open_id:
        raise ValueError("User openId is required for upsert")

    if db is None:
        logger.warning("[Database] Cannot upsert user: database not available")
        return None

    updates = {}
    for field, value in (("name", name), ("email", email), ("login_method", login_method)):
        if value is not _UNSET:
            updates[field] = value

    if last_signed_in is not _UNSET:
        updates["last_signed_in"] = last_signed_in
    if role is not _UNSET:
        updates["role"] = role
    elif config.OWNER_OPEN_ID and open_id == config.OWNER_OPEN_ID:
        updates["role"] = UserRole.ADMIN.value

    if not updates:
        updates["last_signed_in"] = datetime.utcnow()

    try:
        user = db.query(User).filter(User.open_id == open_id).first()
        if user is None:
            user = User(open_id=open_id, **updates)
            if user.last_signed_in is None:
                user.last_signed_in = datetime.utcnow()
            db.add(user)
        else:
            for field, value in updates.items():
                setattr(user, field, value)
        db.commit()
        db.refresh(user)
        return user
    except Exception as e:
        logger.error(f"[Database] Failed to upsert user: {e}")
        db.rollback()
        raise
