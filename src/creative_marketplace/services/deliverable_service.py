"""
Deliverable service - files a creative hands over for a booking
"""
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from ..db.models import Deliverable
from ..exceptions import DatabaseUnavailableError, ForbiddenError, NotFoundError
from ..schemas import DeliverableUpload
from .booking_service import BookingService

logger = logging.getLogger(__name__)


class DeliverableService:

    def __init__(self, db: Optional[Session]):
        self.db = db

    def list_for_booking(self, booking_id: int) -> List[Deliverable]:
        if self.db is None:
            return []
        return self.db.query(Deliverable).filter(Deliverable.booking_id == booking_id).all()

    def upload(self, user_id: int, data: DeliverableUpload) -> Deliverable:
        """
        Record a deliverable file for a booking

        Raises:
            NotFoundError: booking does not exist
            ForbiddenError: caller is not the booking's creative
        """
        if self.db is None:
            raise DatabaseUnavailableError()

        booking = BookingService(self.db).get_by_id(data.booking_id)
        if booking is None:
            raise NotFoundError("Booking not found")

        if booking.creative_id != user_id:
            raise ForbiddenError("Unauthorized")

        deliverable = Deliverable(
            booking_id=data.booking_id,
            creative_id=user_id,
            client_id=booking.client_id,
            title=data.title,
            description=data.description,
            file_url=data.file_url,
            file_type=data.file_type,
            file_size=data.file_size,
        )
        self.db.add(deliverable)
        self.db.commit()
        self.db.refresh(deliverable)

        logger.info(f"Deliverable {deliverable.id} uploaded for booking {data.booking_id}")
        return deliverable
