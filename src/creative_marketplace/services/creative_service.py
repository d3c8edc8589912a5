"""
Creative profile service: lookup, upsert and marketplace search
"""
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from ..db.models import CreativeProfile
from ..exceptions import DatabaseUnavailableError

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 20


class CreativeService:
    """Service for creative profiles"""

    def __init__(self, db: Optional[Session]):
        self.db = db

    def get_profile_for_user(self, user_id: int) -> Optional[CreativeProfile]:
        if self.db is None:
            return None
        return self.db.query(CreativeProfile).filter(CreativeProfile.user_id == user_id).first()

    def get_by_id(self, creative_id: int) -> Optional[CreativeProfile]:
        if self.db is None:
            return None
        return self.db.query(CreativeProfile).filter(CreativeProfile.id == creative_id).first()

    def update_profile(self, user_id: int, changes: Dict[str, Any]) -> Optional[CreativeProfile]:
        """
        Apply the provided fields to the user's profile, creating it if absent

        Args:
            user_id: Owner of the profile
            changes: Only the fields the caller supplied
        """
        if self.db is None:
            raise DatabaseUnavailableError()

        profile = self.get_profile_for_user(user_id)
        if profile:
            for field, value in changes.items():
                setattr(profile, field, value)
            profile.updated_at = datetime.utcnow()
        else:
            profile = CreativeProfile(user_id=user_id, **changes)
            self.db.add(profile)
            logger.info(f"Creating creative profile for user {user_id}")

        self.db.commit()
        return self.get_profile_for_user(user_id)

    def search(
        self,
        category: Optional[str] = None,
        location: Optional[str] = None,
        min_rating: Optional[float] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> List[CreativeProfile]:
        """Active profiles matching the optional filters, paginated"""
        if self.db is None:
            return []

        query = self.db.query(CreativeProfile).filter(CreativeProfile.is_active.is_(True))

        if category:
            query = query.filter(CreativeProfile.categories.contains(category))
        if location:
            query = query.filter(func.lower(CreativeProfile.location).contains(location.lower()))

        query = query.order_by(CreativeProfile.id)

        # average_rating is stored as text, so the rating filter runs in Python
        if min_rating is not None:
            matches = [p for p in query.all() if _rating_value(p.average_rating) >= min_rating]
            start = offset or 0
            return matches[start:start + (limit or DEFAULT_PAGE_SIZE)]

        return query.limit(limit or DEFAULT_PAGE_SIZE).offset(offset or 0).all()


def _rating_value(raw: Optional[str]) -> float:
    try:
        return float(raw) if raw else 0.0
    except ValueError:
        return 0.0
