"""
Availability service - calendar slots offered by creatives
"""
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from ..db.models import Availability
from ..exceptions import DatabaseUnavailableError, NotFoundError
from ..schemas import AvailabilityCreate
from .creative_service import CreativeService

logger = logging.getLogger(__name__)


class AvailabilityService:

    def __init__(self, db: Optional[Session]):
        self.db = db

    def list_for_creative(self, creative_id: int) -> List[Availability]:
        if self.db is None:
            return []
        return self.db.query(Availability).filter(Availability.creative_id == creative_id).all()

    def add_slot(self, user_id: int, data: AvailabilityCreate) -> Availability:
        """Add a slot to the caller's calendar; overlapping slots are allowed"""
        if self.db is None:
            raise DatabaseUnavailableError()

        profile = CreativeService(self.db).get_profile_for_user(user_id)
        if profile is None:
            raise NotFoundError("Creative profile not found")

        slot = Availability(
            creative_id=profile.id,
            date=data.date,
            start_time=data.start_time,
            end_time=data.end_time,
            is_booked=False,
        )
        self.db.add(slot)
        self.db.commit()
        self.db.refresh(slot)
        return slot
