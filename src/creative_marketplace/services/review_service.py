"""
Review service - ratings left by clients after a booking
"""
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from ..db.models import CreativeProfile, Review
from ..exceptions import DatabaseUnavailableError, ForbiddenError
from ..schemas import ReviewCreate
from .booking_service import BookingService

logger = logging.getLogger(__name__)


def average_of(ratings: List[int]) -> float:
    if not ratings:
        return 0
    return sum(ratings) / len(ratings)


class ReviewService:

    def __init__(self, db: Optional[Session]):
        self.db = db

    def list_for_creative(self, creative_id: int) -> List[Review]:
        if self.db is None:
            return []
        return self.db.query(Review).filter(Review.creative_id == creative_id).all()

    def average_rating(self, creative_id: int) -> float:
        """Arithmetic mean of every rating for the creative; 0 when there are none"""
        return average_of([r.rating for r in self.list_for_creative(creative_id)])

    def create_review(self, user_id: int, data: ReviewCreate) -> Review:
        """
        Store a review from the booking's client

        Raises:
            ForbiddenError: booking missing or caller is not its client
        """
        if self.db is None:
            raise DatabaseUnavailableError()

        booking = BookingService(self.db).get_by_id(data.booking_id)
        if booking is None or booking.client_id != user_id:
            raise ForbiddenError("Unauthorized")

        review = Review(
            booking_id=data.booking_id,
            reviewer_id=user_id,
            creative_id=data.creative_id,
            rating=data.rating,
            title=data.title,
            comment=data.comment,
            is_verified=True,
        )
        self.db.add(review)
        self.db.flush()
        self._refresh_profile_rating(data.creative_id)
        self.db.commit()
        self.db.refresh(review)
        return review

    def _refresh_profile_rating(self, creative_id: int) -> None:
        """Recompute the denormalized rating on the profile by full scan"""
        profile = self.db.query(CreativeProfile).filter(CreativeProfile.id == creative_id).first()
        if profile is None:
            return
        ratings = [r.rating for r in self.list_for_creative(creative_id)]
        profile.average_rating = f"{average_of(ratings):.2f}"
        profile.total_reviews = len(ratings)
